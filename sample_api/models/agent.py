"""Agent ORM: read-only sales agents."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from sample_api.db.base import Base


class Agent(Base):
    __tablename__ = "agents"

    agent_code: Mapped[str] = mapped_column(String(6), primary_key=True)
    agent_name: Mapped[str | None] = mapped_column(String(40), nullable=True)
    working_area: Mapped[str | None] = mapped_column(String(35), nullable=True)
    commission: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    phone_no: Mapped[str | None] = mapped_column(String(15), nullable=True)
    country: Mapped[str | None] = mapped_column(String(25), nullable=True)

"""Customer ORM: read-only customers, each served by one agent.

Invariants:
    - agent_code references agents.agent_code
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from sample_api.db.base import Base


class Customer(Base):
    __tablename__ = "customer"

    cust_code: Mapped[str] = mapped_column(String(6), primary_key=True)
    cust_name: Mapped[str] = mapped_column(String(40), nullable=False)
    cust_city: Mapped[str | None] = mapped_column(String(35), nullable=True)
    working_area: Mapped[str] = mapped_column(String(35), nullable=False)
    cust_country: Mapped[str] = mapped_column(String(20), nullable=False)
    grade: Mapped[int | None] = mapped_column(nullable=True)
    opening_amt: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    receive_amt: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    payment_amt: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    outstanding_amt: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    phone_no: Mapped[str] = mapped_column(String(17), nullable=False)
    agent_code: Mapped[str] = mapped_column(
        String(6), ForeignKey("agents.agent_code"), nullable=False,
    )

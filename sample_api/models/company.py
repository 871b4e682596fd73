"""Company ORM: the only mutable entity of the sample dataset.

Invariants:
    - company_id is an integer primary key assigned by the store, never changed
    - company_name and company_city are non-nullable and stored HTML-escaped
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sample_api.db.base import Base


class Company(Base):
    """Company row: created, replaced, patched and deleted through the API."""
    __tablename__ = "company"

    company_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    company_name: Mapped[str] = mapped_column(String(255), nullable=False)
    company_city: Mapped[str] = mapped_column(String(255), nullable=False)

"""Initial schema: agents, company, customer.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "agents",
        sa.Column("agent_code", sa.String(6), primary_key=True),
        sa.Column("agent_name", sa.String(40), nullable=True),
        sa.Column("working_area", sa.String(35), nullable=True),
        sa.Column("commission", sa.Numeric(10, 2), nullable=True),
        sa.Column("phone_no", sa.String(15), nullable=True),
        sa.Column("country", sa.String(25), nullable=True),
    )

    op.create_table(
        "company",
        sa.Column("company_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("company_city", sa.String(255), nullable=False),
    )

    op.create_table(
        "customer",
        sa.Column("cust_code", sa.String(6), primary_key=True),
        sa.Column("cust_name", sa.String(40), nullable=False),
        sa.Column("cust_city", sa.String(35), nullable=True),
        sa.Column("working_area", sa.String(35), nullable=False),
        sa.Column("cust_country", sa.String(20), nullable=False),
        sa.Column("grade", sa.Integer, nullable=True),
        sa.Column("opening_amt", sa.Numeric(12, 2), nullable=False),
        sa.Column("receive_amt", sa.Numeric(12, 2), nullable=False),
        sa.Column("payment_amt", sa.Numeric(12, 2), nullable=False),
        sa.Column("outstanding_amt", sa.Numeric(12, 2), nullable=False),
        sa.Column("phone_no", sa.String(17), nullable=False),
        sa.Column(
            "agent_code", sa.String(6),
            sa.ForeignKey("agents.agent_code"), nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("customer")
    op.drop_table("company")
    op.drop_table("agents")

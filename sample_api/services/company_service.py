"""Company Service: lookup, creation and conditional mutation of company rows.

Invariants:
    - Every mutation of an existing company runs its existence check and the
      mutation inside ONE transaction; the check locks the row (SELECT ... FOR UPDATE)
    - A missing row raises ResourceNotFoundError and no mutation is issued
    - patch_company with no updates performs the existence check only

Design Decisions:
    - Check and act stay two visible statements; the row lock closes the gap between them
    - Identifiers that cannot name a row (non-numeric, out of column range) resolve
      to "no rows" on lookup before reaching the driver
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.core.company_ids import parse_company_id
from sample_api.core.errors import ResourceNotFoundError
from sample_api.models.company import Company

logger = logging.getLogger(__name__)


async def get_company_rows(db: AsyncSession, company_id: str) -> list[dict]:
    """Rows matching the identifier; empty when it is absent or not a valid key."""
    key = parse_company_id(company_id)
    if key is None:
        return []
    table = Company.__table__
    result = await db.execute(
        select(table).where(table.c.company_id == key),
    )
    return [dict(row) for row in result.mappings().all()]


async def create_company(db: AsyncSession, name: str, city: str) -> int:
    """Insert a company and return its store-assigned id."""
    async with db.begin():
        company = Company(company_name=name, company_city=city)
        db.add(company)
        await db.flush()
        company_id = company.company_id
    logger.info(f"Created company {company_id}", extra={"company_id": company_id})
    return company_id


async def _lock_existing(db: AsyncSession, company_id: int) -> None:
    """Existence check; holds the row lock until the transaction ends."""
    result = await db.execute(
        select(Company.company_id)
        .where(Company.company_id == company_id)
        .with_for_update(),
    )
    if result.scalar_one_or_none() is None:
        raise ResourceNotFoundError("Company", str(company_id))


async def replace_company(
    db: AsyncSession, company_id: int, name: str, city: str,
) -> None:
    """Overwrite both columns of an existing company."""
    async with db.begin():
        await _lock_existing(db, company_id)
        await db.execute(
            update(Company)
            .where(Company.company_id == company_id)
            .values(company_name=name, company_city=city),
        )
    logger.info(f"Replaced company {company_id}", extra={"company_id": company_id})


async def patch_company(
    db: AsyncSession, company_id: int, updates: dict[str, str],
) -> None:
    """Update only the supplied columns of an existing company."""
    async with db.begin():
        await _lock_existing(db, company_id)
        if not updates:
            logger.info(
                f"Patch of company {company_id} supplied no fields",
                extra={"company_id": company_id},
            )
            return
        await db.execute(
            update(Company.__table__)
            .where(Company.__table__.c.company_id == company_id)
            .values(**updates),
        )
    logger.info(
        f"Patched company {company_id}: {sorted(updates)}",
        extra={"company_id": company_id},
    )


async def delete_company(db: AsyncSession, company_id: int) -> None:
    """Delete an existing company."""
    async with db.begin():
        await _lock_existing(db, company_id)
        await db.execute(
            delete(Company).where(Company.company_id == company_id),
        )
    logger.info(f"Deleted company {company_id}", extra={"company_id": company_id})

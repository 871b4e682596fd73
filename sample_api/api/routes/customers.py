"""Customer Routes: read-only listing of the customer table."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.api.routes.caching import set_cache_control
from sample_api.infrastructure.database import get_db
from sample_api.models.customer import Customer
from sample_api.services.listing import list_table_rows

router = APIRouter(prefix="/customers", tags=["customer"])


@router.get("")
async def list_customers(
    response: Response, db: AsyncSession = Depends(get_db),
) -> list[dict]:
    """Returns all customers."""
    rows = await list_table_rows(db, Customer.__table__)
    set_cache_control(response)
    return rows

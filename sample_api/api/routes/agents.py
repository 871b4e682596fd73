"""Agent Routes: read-only listing of the agents table."""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.api.routes.caching import set_cache_control
from sample_api.infrastructure.database import get_db
from sample_api.models.agent import Agent
from sample_api.services.listing import list_table_rows

router = APIRouter(prefix="/agents", tags=["agent"])


@router.get("")
async def list_agents(
    response: Response, db: AsyncSession = Depends(get_db),
) -> list[dict]:
    """Returns all agents."""
    rows = await list_table_rows(db, Agent.__table__)
    set_cache_control(response)
    return rows

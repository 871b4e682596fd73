"""Company Routes: CRUD over the company table.

Invariants:
    - Bodies are validated and sanitized by schemas/company.py before the store is touched
    - PUT/PATCH/DELETE take an integer id within the key column range; GET by id
      accepts any string
    - Missing company → ResourceNotFoundError → 404 with no body (api/error_handlers.py)
    - Successful GETs carry the advisory Cache-Control header; mutations do not
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.api.routes.caching import set_cache_control
from sample_api.core.company_ids import COMPANY_ID_MAX, COMPANY_ID_MIN
from sample_api.core.company_updates import build_company_updates
from sample_api.core.errors import ResourceNotFoundError
from sample_api.infrastructure.database import get_db
from sample_api.models.company import Company
from sample_api.schemas.company import CompanyCreate, CompanyPatch, CompanyReplace
from sample_api.services import company_service
from sample_api.services.listing import list_table_rows

router = APIRouter(prefix="/companies", tags=["company"])

_NOT_FOUND = {404: {"description": "No company found with given company id."}}

CompanyId = Annotated[int, Path(ge=COMPANY_ID_MIN, le=COMPANY_ID_MAX)]


@router.get("")
async def list_companies(
    response: Response, db: AsyncSession = Depends(get_db),
) -> list[dict]:
    """Returns all companies."""
    rows = await list_table_rows(db, Company.__table__)
    set_cache_control(response)
    return rows


@router.get("/{company_id}", responses=_NOT_FOUND)
async def get_company(
    company_id: str, response: Response, db: AsyncSession = Depends(get_db),
) -> list[dict]:
    """Returns company with given id."""
    rows = await company_service.get_company_rows(db, company_id)
    if not rows:
        raise ResourceNotFoundError("Company", company_id)
    set_cache_control(response)
    return rows


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"description": "Location header points to the new company URI."}},
)
async def create_company(
    body: CompanyCreate, db: AsyncSession = Depends(get_db),
):
    """Adds new company."""
    company_id = await company_service.create_company(db, body.name, body.city)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"/companies/{company_id}"},
    )


@router.put("/{company_id}", responses=_NOT_FOUND)
async def replace_company(
    company_id: CompanyId, body: CompanyReplace, db: AsyncSession = Depends(get_db),
):
    """Replaces the company with the given company id."""
    await company_service.replace_company(db, company_id, body.name, body.city)
    return Response(status_code=status.HTTP_200_OK)


@router.patch("/{company_id}", responses=_NOT_FOUND)
async def patch_company(
    company_id: CompanyId,
    body: CompanyPatch | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Modifies the supplied fields of the company with the given company id."""
    body = body or CompanyPatch()
    updates = build_company_updates(body.name, body.city)
    await company_service.patch_company(db, company_id, updates)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{company_id}", responses=_NOT_FOUND)
async def delete_company(
    company_id: CompanyId, db: AsyncSession = Depends(get_db),
):
    """Deletes the company with the given company id."""
    await company_service.delete_company(db, company_id)
    return Response(status_code=status.HTTP_200_OK)

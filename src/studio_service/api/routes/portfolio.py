"""
Portfolio API Routes

Public portfolio listing and admin CRUD for portfolio items.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from studio_service.api.dependencies import get_store, require_admin
from studio_service.core.errors import NotFoundError
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.models import (
    AdminUser,
    PortfolioItem,
    PortfolioItemCreate,
    PortfolioItemUpdate,
    SuccessResponse,
)

router = APIRouter(tags=["portfolio"])
logger = logging.getLogger(__name__)


@router.get(
    "/api/portfolio",
    response_model=List[PortfolioItem],
    summary="List Published Portfolio",
    description="""
Returns published portfolio items ordered by orderIndex (ties in creation order).

**Authorization**: None required (public endpoint)
    """,
)
async def list_published_portfolio(store: StudioStore = Depends(get_store)) -> List[PortfolioItem]:
    """Published portfolio items"""
    return await store.get_published_portfolio_items()


@router.get(
    "/api/admin/portfolio",
    response_model=List[PortfolioItem],
    summary="List All Portfolio Items",
    description="""
Returns every portfolio item, published or not, in display order.

**Authorization**: Requires an active admin session
    """,
    responses={401: {"description": "No active admin session"}},
)
async def list_all_portfolio(
    admin: AdminUser = Depends(require_admin),
    store: StudioStore = Depends(get_store),
) -> List[PortfolioItem]:
    """All portfolio items"""
    return await store.get_portfolio_items()


@router.post(
    "/api/admin/portfolio",
    response_model=PortfolioItem,
    summary="Create Portfolio Item",
    description="""
Creates a portfolio item. isPublished defaults to true, orderIndex to 0.

**Authorization**: Requires an active admin session
    """,
    responses={
        400: {"description": "Invalid item fields"},
        401: {"description": "No active admin session"},
    },
)
async def create_portfolio_item(
    item: PortfolioItemCreate,
    admin: AdminUser = Depends(require_admin),
    store: StudioStore = Depends(get_store),
) -> PortfolioItem:
    """Create portfolio item"""
    created = await store.create_portfolio_item(item)
    logger.info(f"Admin {admin.username} created portfolio item {created.id}")
    return created


@router.put(
    "/api/admin/portfolio/{item_id}",
    response_model=PortfolioItem,
    summary="Update Portfolio Item",
    description="""
Applies a partial update: only the fields present in the body change,
updatedAt is always refreshed.

**Authorization**: Requires an active admin session
    """,
    responses={
        400: {"description": "Invalid item fields"},
        401: {"description": "No active admin session"},
        404: {"description": "Portfolio item not found"},
    },
)
async def update_portfolio_item(
    item_id: int,
    changes: PortfolioItemUpdate,
    admin: AdminUser = Depends(require_admin),
    store: StudioStore = Depends(get_store),
) -> PortfolioItem:
    """Update portfolio item"""
    try:
        updated = await store.update_portfolio_item(item_id, changes)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Елемент портфоліо не знайдено")

    logger.info(f"Admin {admin.username} updated portfolio item {item_id}")
    return updated


@router.delete(
    "/api/admin/portfolio/{item_id}",
    response_model=SuccessResponse,
    summary="Delete Portfolio Item",
    description="""
Permanently deletes a portfolio item. Deleting an unknown id also succeeds.

**Authorization**: Requires an active admin session
    """,
    responses={401: {"description": "No active admin session"}},
)
async def delete_portfolio_item(
    item_id: int,
    admin: AdminUser = Depends(require_admin),
    store: StudioStore = Depends(get_store),
) -> SuccessResponse:
    """Delete portfolio item"""
    await store.delete_portfolio_item(item_id)
    logger.info(f"Admin {admin.username} deleted portfolio item {item_id}")
    return SuccessResponse()

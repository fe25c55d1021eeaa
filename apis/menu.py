from fastapi import APIRouter, HTTPException, Query, status
from menus.registry import registry
from models.exceptions import MenuError, MenuNotFoundError
from settings import logger
from .schemas.menu import MenuItemResponse, MenuResponse, MenuListResponse

# Registers the application menus
import menus.navigation  # noqa: F401

router = APIRouter(prefix="/menu", tags=["menu"])


@router.get("/")
async def list_menus() -> MenuListResponse:
    """List the names of all registered menus."""

    names = registry.names()

    return MenuListResponse(
        menus=names,
        total_count=len(names)
    )


@router.get("/{menu_name}", response_model=MenuResponse, response_model_exclude_unset=True)
async def get_menu(
    menu_name: str,
    path: str = Query("/", description="Request path used to compute active items")
) -> MenuResponse:
    """Build a registered menu for the given request path."""

    try:
        menu = registry.build(menu_name, path)
    except MenuNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Menu not found"
        )
    except MenuError as e:
        logger.error("Menu build failed", extra={
            "menu": menu_name,
            "path": path,
            "error": str(e)
        })
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    items = menu.to_array()

    return MenuResponse(
        name=menu.get_name(),
        path=menu.get_request().path,
        items=[MenuItemResponse.model_validate(item) for item in items],
        total_count=len(items)
    )

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class MenuItemResponse(BaseModel):
    """Schema for a menu item and its children."""
    name: str = Field(..., description="Display name for menu item")
    route: str = Field(..., description="Route pattern matched against the request path")
    active: bool = Field(..., description="Whether the route matches the request path")
    children: Optional[List["MenuItemResponse"]] = Field(default=None, description="Child items, omitted when empty")

    # Custom attributes (icon, order, ...) are passed through as extra fields
    model_config = ConfigDict(extra="allow")


class MenuResponse(BaseModel):
    """Schema for a menu built for a request path."""
    name: str = Field(..., description="Menu name")
    path: str = Field(..., description="Normalized request path the menu was built for")
    items: List[MenuItemResponse]
    total_count: int


class MenuListResponse(BaseModel):
    """Schema for registered menu names."""
    menus: List[str]
    total_count: int


MenuItemResponse.model_rebuild()

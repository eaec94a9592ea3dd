"""Data Transfer Objects for Order Use Cases"""

from typing import Optional
from pydantic import BaseModel, Field


class PlaceOrderCommandDTO(BaseModel):
    product_type: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    is_admin_panel: bool = False
    user_id: Optional[str] = None
    apply_discount: bool = False

from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Optional


class AssetCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    asset_tag: Optional[str] = None
    serial_number: Optional[str] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None


class AssetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    asset_tag: Optional[str] = None
    serial_number: Optional[str] = None
    assigned_to: Optional[str] = None
    notes: Optional[str] = None
    created_at: str

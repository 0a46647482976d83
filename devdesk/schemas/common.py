from __future__ import annotations
from pydantic import BaseModel


class CreatedOut(BaseModel):
    id: int
    changes: int


class OkOut(BaseModel):
    ok: bool = True

from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from typing import Optional


class ArticleCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[str] = None


class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    tags: Optional[str] = None
    created_at: str

from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..models.article import Article
from ._common import clean_fields, require_fields, utc_timestamp
from .search import article_filters

LOGGER = logging.getLogger(__name__)

ARTICLE_FIELDS = ("title", "content", "tags")
REQUIRED_ARTICLE_FIELDS = ("title", "content")


def list_articles(db: Session, q: str | None = None) -> list[Article]:
    stmt = select(Article).where(*article_filters(q)).order_by(desc(Article.id))
    return list(db.execute(stmt).scalars().all())


def create_article(db: Session, payload: Mapping[str, Any]) -> Article:
    """Publish a knowledge-base article; ``tags`` may be left blank."""
    data = clean_fields(payload, ARTICLE_FIELDS)
    require_fields(data, REQUIRED_ARTICLE_FIELDS)

    obj = Article(**data, created_at=utc_timestamp())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    LOGGER.info("article.created", extra={"extra_data": {"article_id": obj.id}})
    return obj

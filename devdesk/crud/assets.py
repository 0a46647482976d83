from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from ..models.asset import Asset
from ._common import clean_fields, require_fields, utc_timestamp
from .search import asset_filters

LOGGER = logging.getLogger(__name__)

ASSET_FIELDS = ("name", "asset_tag", "serial_number", "assigned_to", "notes")
REQUIRED_ASSET_FIELDS = ("name",)


def list_assets(db: Session, q: str | None = None) -> list[Asset]:
    """
    Return assets whose text columns contain ``q``, ordered by id (desc).
    """
    stmt = select(Asset).where(*asset_filters(q)).order_by(desc(Asset.id))
    return list(db.execute(stmt).scalars().all())


def create_asset(db: Session, payload: Mapping[str, Any]) -> Asset:
    """
    Create and persist an asset record. Only ``name`` is mandatory.
    """
    data = clean_fields(payload, ASSET_FIELDS)
    require_fields(data, REQUIRED_ASSET_FIELDS)

    obj = Asset(**data, created_at=utc_timestamp())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    LOGGER.info(
        "asset.created",
        extra={"extra_data": {"asset_id": obj.id, "asset_tag": obj.asset_tag}},
    )
    return obj

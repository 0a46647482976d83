from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..core.errors import StorageFault
from ..db.session import get_db
from ..schemas.asset import AssetCreate, AssetOut
from ..schemas.common import CreatedOut
from ..crud.assets import create_asset, list_assets
from ..services.csv_export import ASSET_COLUMNS, ASSETS_FILENAME, attachment_headers, to_csv

router = APIRouter(prefix="/api", tags=["assets"])


@router.get("/assets.csv", response_class=Response)
def api_export_csv(db: Session = Depends(get_db)):
    try:
        rows = list_assets(db)
    except SQLAlchemyError as exc:
        raise StorageFault(f"CSV export failed: {exc}") from exc
    return Response(
        content=to_csv(rows, ASSET_COLUMNS),
        media_type="text/csv; charset=utf-8",
        headers=attachment_headers(ASSETS_FILENAME),
    )


@router.get("/assets", response_model=list[AssetOut])
def api_list(q: str | None = Query(default=None), db: Session = Depends(get_db)):
    return list_assets(db, q=q)


@router.post("/assets", response_model=CreatedOut, status_code=201)
def api_create(payload: AssetCreate, db: Session = Depends(get_db)):
    try:
        asset = create_asset(db, payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CreatedOut(id=asset.id, changes=1)

"""Knowledge-base endpoints: search, publish and CSV export."""


from __future__ import annotations
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from ..core.errors import StorageFault
from ..db.session import get_db
from ..schemas.article import ArticleCreate, ArticleOut
from ..schemas.common import CreatedOut
from ..crud.articles import create_article, list_articles
from ..services.csv_export import ARTICLE_COLUMNS, ARTICLES_FILENAME, attachment_headers, to_csv

router = APIRouter(prefix="/api", tags=["knowledge-base"])


@router.get("/kb.csv", response_class=Response)
def api_export_csv(db: Session = Depends(get_db)):
    try:
        rows = list_articles(db)
    except SQLAlchemyError as exc:
        raise StorageFault(f"CSV export failed: {exc}") from exc
    return Response(
        content=to_csv(rows, ARTICLE_COLUMNS),
        media_type="text/csv; charset=utf-8",
        headers=attachment_headers(ARTICLES_FILENAME),
    )


@router.get("/kb", response_model=list[ArticleOut])
def api_list(q: str | None = Query(default=None), db: Session = Depends(get_db)):
    return list_articles(db, q=q)


@router.post("/kb", response_model=CreatedOut, status_code=201)
def api_create(payload: ArticleCreate, db: Session = Depends(get_db)):
    try:
        article = create_article(db, payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CreatedOut(id=article.id, changes=1)

"""Beginner-friendly overview for this module.

WHAT: The ``kb_articles`` table backing the knowledge base.
WHEN: Imported by ``init_db`` and by the article record operations.
WHY: Articles are write-once; there is no update path.
HOW: Plain SQLAlchemy declarative columns; ``tags`` is a free-text list.

File: devdesk/models/article.py
"""


from __future__ import annotations
from sqlalchemy import Column, Integer, Text
from ..db.session import Base


class Article(Base):
    __tablename__ = "kb_articles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    tags = Column(Text, nullable=True, default="")
    created_at = Column(Text, nullable=False)

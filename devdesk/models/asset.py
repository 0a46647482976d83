from __future__ import annotations
from sqlalchemy import Column, Integer, Text
from ..db.session import Base


class Asset(Base):
    __tablename__ = "assets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    asset_tag = Column(Text, nullable=True, default="")
    serial_number = Column(Text, nullable=True, default="")
    assigned_to = Column(Text, nullable=True, default="")
    notes = Column(Text, nullable=True, default="")
    created_at = Column(Text, nullable=False)

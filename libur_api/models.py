"""
SQLAlchemy models
"""
from sqlalchemy import Column, Integer, String, Text, Float
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class HolidayCacheEntry(Base):
    """Cached holiday records of one year, keyed by (namespace, year)"""
    __tablename__ = "holiday_cache"

    namespace = Column(String(32), primary_key=True)
    year = Column(Integer, primary_key=True)
    # JSON list of {"date", "title", "type"}
    payload = Column(Text, nullable=False)
    # Unix epoch seconds
    expires_at = Column(Float, nullable=False)

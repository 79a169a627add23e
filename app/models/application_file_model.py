from sqlalchemy import Column, Integer, BigInteger, String, Text, TIMESTAMP, ForeignKey
from sqlalchemy.sql import func
from app.models.base import Base


class ApplicationFile(Base):
    __tablename__ = "application_files"

    id = Column(String(36), primary_key=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    path = Column(Text, nullable=False)
    size = Column(BigInteger, nullable=False)
    mime_type = Column(Text, nullable=False)
    hash = Column(String(64), nullable=False)
    uploaded_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

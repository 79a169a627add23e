from sqlalchemy import Column, Integer, Text
from app.models.base import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    status = Column(Text, nullable=False)

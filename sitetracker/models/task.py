from sqlalchemy import Column, DateTime, Integer, Numeric, Text, func, text

from sitetracker.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    status = Column(Text, server_default=text("'todo'"))
    amount = Column(Numeric(12, 2), server_default=text("0"))
    created_at = Column(DateTime(timezone=True), server_default=func.now())

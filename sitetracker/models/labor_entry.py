from sqlalchemy import Column, Computed, DateTime, Integer, Numeric, Text, func

from sitetracker.database import Base


class LaborEntry(Base):
    __tablename__ = "labor"

    id = Column(Integer, primary_key=True)
    worker_name = Column(Text, nullable=False)
    role = Column(Text, nullable=True)
    hours = Column(Numeric(6, 2), nullable=False)
    rate = Column(Numeric(12, 2), nullable=False)

    # Maintained by the database; never written by the application.
    total = Column(Numeric(12, 2), Computed("hours * rate", persisted=True))

    created_at = Column(DateTime(timezone=True), server_default=func.now())

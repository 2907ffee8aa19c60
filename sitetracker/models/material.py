from sqlalchemy import Column, Computed, DateTime, Integer, Numeric, Text, func

from sitetracker.database import Base


class Material(Base):
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True)
    item_name = Column(Text, nullable=False)
    category = Column(Text, nullable=True)
    quantity = Column(Numeric(10, 2), nullable=False)
    unit_cost = Column(Numeric(12, 2), nullable=False)
    total = Column(Numeric(12, 2), Computed("quantity * unit_cost", persisted=True))

    # Public link to an externally hosted image; alternative to material_images rows.
    image_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

from sqlalchemy import Column, DateTime, ForeignKey, Integer, LargeBinary, Text, func

from sitetracker.database import Base


class MaterialImage(Base):
    __tablename__ = "material_images"

    id = Column(Integer, primary_key=True)
    material_id = Column(
        Integer,
        ForeignKey("materials.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    mime_type = Column(Text, nullable=False)
    data = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.core.database import Base
import datetime

class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    competitor_id = Column(Integer, ForeignKey("competitors.id"), index=True)
    area_id = Column(Integer, ForeignKey("areas.id"), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    call_id = Column(Integer, ForeignKey("calls.id"), nullable=True)
    enrollment_date = Column(DateTime, default=datetime.datetime.utcnow)
    status = Column(String, nullable=True)  # e.g., "Pending", "Approved", "Rejected"; read as "Pending" when empty
    status_date = Column(DateTime, nullable=True)

    competitor = relationship("Competitor", back_populates="enrollments")
    area = relationship("Area")
    category = relationship("Category")
    call = relationship("Call")
    tutor_enrollments = relationship(
        "TutorEnrollment", back_populates="enrollment", order_by="TutorEnrollment.id"
    )

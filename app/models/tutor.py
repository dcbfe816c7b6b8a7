from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean
from sqlalchemy.orm import relationship
from app.core.database import Base

class Tutor(Base):
    __tablename__ = "tutors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True)

    user = relationship("User", back_populates="tutor")
    tutor_enrollments = relationship("TutorEnrollment", back_populates="tutor")

class TutorEnrollment(Base):
    __tablename__ = "tutor_enrollments"

    id = Column(Integer, primary_key=True, index=True)
    enrollment_id = Column(Integer, ForeignKey("enrollments.id"), index=True)
    tutor_id = Column(Integer, ForeignKey("tutors.id"))
    approved = Column(Boolean, nullable=True)  # None until the tutor decides
    approval_date = Column(DateTime, nullable=True)
    # Rejection reasons are a static table (app.services.rejection_reason_service), not a relation
    rejection_reason_id = Column(Integer, nullable=True)
    rejection_description = Column(String, nullable=True)

    enrollment = relationship("Enrollment", back_populates="tutor_enrollments")
    tutor = relationship("Tutor", back_populates="tutor_enrollments")

from sqlalchemy import Column, Integer, String, ForeignKey, Date
from sqlalchemy.orm import relationship
from app.core.database import Base

class Competitor(Base):
    __tablename__ = "competitors"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, index=True)
    national_id = Column(String, unique=True, index=True)
    birth_date = Column(Date)
    school_id = Column(Integer, ForeignKey("schools.id"))
    province_id = Column(Integer, ForeignKey("provinces.id"))

    user = relationship("User", back_populates="competitor")
    school = relationship("School", back_populates="competitors")
    province = relationship("Province", back_populates="competitors")
    enrollments = relationship("Enrollment", back_populates="competitor")

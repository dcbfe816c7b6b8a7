from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base

class Area(Base):
    __tablename__ = "areas"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)  # e.g., "Mathematics", "Physics"

class Level(Base):
    __tablename__ = "levels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)  # e.g., "Primary", "Secondary"

    grades = relationship("Grade", back_populates="level")

class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    level_id = Column(Integer, ForeignKey("levels.id"))

    level = relationship("Level", back_populates="grades")

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    min_grade_id = Column(Integer, ForeignKey("grades.id"))

    min_grade = relationship("Grade")

class Call(Base):
    """A competition edition that enrollments are submitted under."""
    __tablename__ = "calls"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)

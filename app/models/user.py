from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.core.database import Base

class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True)  # e.g., "Admin", "Competitor", "Tutor"

    users = relationship("User", back_populates="role")

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    surname = Column(String)
    email = Column(String, unique=True, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"))
    password = Column(String)

    role = relationship("Role", back_populates="users")
    competitor = relationship("Competitor", back_populates="user", uselist=False)
    tutor = relationship("Tutor", back_populates="user", uselist=False)

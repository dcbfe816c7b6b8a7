from app.core.database import Base

# Import all models here to ensure they are registered with Base
from .user import Role, User
from .location import Department, Province, School
from .competitor import Competitor
from .catalog import Area, Level, Grade, Category, Call
from .enrollment import Enrollment
from .tutor import Tutor, TutorEnrollment

# Tables are created by app.core.database.init_db, called on application startup.

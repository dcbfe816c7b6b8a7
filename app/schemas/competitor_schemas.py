from datetime import date
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from app.core.config import settings
from .user_schemas import UserRead

def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """
    Returns the age in whole years on `today` (defaults to the current date).
    One year is subtracted when the birthday has not been reached yet this year.
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age

class CompetitorCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=50)
    surname: str = Field(..., min_length=2, max_length=50)
    email: str
    national_id: str = Field(..., min_length=5, max_length=20)
    birth_date: date
    # Strict so booleans, floats and numeric strings are not coerced into ids
    school_id: int = Field(..., strict=True)
    province_id: int = Field(..., strict=True)

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Validated but stored exactly as submitted, without normalization
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise PydanticCustomError("email", "value is not a valid email address: {reason}", {"reason": str(e)})
        return value

    @field_validator("birth_date", mode="before")
    @classmethod
    def check_iso_string(cls, value):
        # Only ISO date strings are accepted, not timestamps or date objects
        if not isinstance(value, str):
            raise PydanticCustomError("iso_date", "Birth date must be an ISO date string")
        return value

    @field_validator("birth_date")
    @classmethod
    def check_age_restriction(cls, value: date, info: ValidationInfo) -> date:
        # A "today" date may be passed through the validation context to pin the reference date
        today = (info.context or {}).get("today")
        age = calculate_age(value, today)
        if age > settings.MAX_COMPETITOR_AGE:
            raise PydanticCustomError(
                "age_restriction",
                "Competitor must not be older than {max_age}",
                {"max_age": settings.MAX_COMPETITOR_AGE},
            )
        if age < settings.MIN_COMPETITOR_AGE:
            raise PydanticCustomError(
                "age_restriction",
                "Competitor must be at least {min_age} years old to compete",
                {"min_age": settings.MIN_COMPETITOR_AGE},
            )
        return value

class DepartmentRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class ProvinceRead(BaseModel):
    id: int
    name: str
    department: Optional[DepartmentRead] = None

    class Config:
        from_attributes = True

class SchoolRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True

class CompetitorRead(BaseModel):
    id: int
    user_id: int
    national_id: str
    birth_date: date
    school_id: int
    province_id: int
    school: Optional[SchoolRead] = None
    province: Optional[ProvinceRead] = None
    user: UserRead

    class Config:
        from_attributes = True

class Credentials(BaseModel):
    email: str
    password: str

class RegistrationResult(BaseModel):
    competitor: CompetitorRead
    credentials: Credentials

from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class TutorApproval(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    approved: Optional[bool] = None
    approval_date: Optional[datetime] = None

class SubmissionGroup(BaseModel):
    enrollment_id: int
    date: Optional[datetime] = None
    status: Optional[str] = None
    tutors: List[TutorApproval] = []

class EnrollmentView(BaseModel):
    id: int
    area: str
    category: str
    grade: str
    level: str
    call: str
    enrollment_date: Optional[datetime] = None
    status: str
    status_date: Optional[datetime] = None
    rejection_reason: Optional[str] = None

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.services import competitor_service
from app.schemas import competitor_schemas, enrollment_schemas
from app.api.dependencies import get_db

router = APIRouter()

@router.post("/", response_model=competitor_schemas.RegistrationResult, status_code=status.HTTP_201_CREATED)
async def register_competitor_endpoint(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    # The raw body is validated by the service so every caller gets the same error messages.
    # ValidationError and DuplicateError are turned into responses by the handlers in app.main.
    return competitor_service.register_competitor(db=db, data=data)

@router.get("/{user_id}/submissions", response_model=List[enrollment_schemas.SubmissionGroup])
async def get_competitor_submissions_endpoint(
    user_id: int,
    db: Session = Depends(get_db),
):
    return competitor_service.get_competitor_submissions(db=db, user_id=user_id)

@router.get("/{user_id}/enrollments", response_model=List[enrollment_schemas.EnrollmentView])
async def get_competitor_enrollments_endpoint(
    user_id: int,
    db: Session = Depends(get_db),
):
    return competitor_service.get_competitor_enrollments(db=db, user_id=user_id)

from typing import List, Optional

from fastapi import APIRouter

from app.services import rejection_reason_service
from app.schemas import rejection_reason_schemas

router = APIRouter()

@router.get("/", response_model=List[rejection_reason_schemas.RejectionReasonRead])
async def list_rejection_reasons():
    return rejection_reason_service.get_rejection_reasons()

@router.get("/{reason_id}", response_model=rejection_reason_schemas.RejectionReasonRead)
async def describe_rejection_reason_endpoint(reason_id: int, custom_text: Optional[str] = None):
    # Unknown ids answer with a null message rather than 404, matching describe_rejection_reason
    message = rejection_reason_service.describe_rejection_reason(reason_id, custom_text)
    return rejection_reason_schemas.RejectionReasonRead(id=reason_id, message=message)

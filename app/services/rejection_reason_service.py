from typing import List, Optional

from app.schemas.rejection_reason_schemas import RejectionReasonRead

OTHER_REASON_ID = 7
OTHER_REASON_MESSAGE = "Other reason"
UNSPECIFIED_REASON_MESSAGE = "Reason unspecified"

# Id 3 was retired; the remaining ids are stored on tutor enrollments and must not be renumbered.
REJECTION_REASONS = {
    1: "Request sent by mistake",
    2: "The student's data is incorrect",
    4: "I do not recognize this student",
    5: "The student selected the wrong tutor",
    6: "I do not authorize their participation",
    OTHER_REASON_ID: OTHER_REASON_MESSAGE,
}

def describe_rejection_reason(reason_id: Optional[int], custom_text: Optional[str] = None) -> Optional[str]:
    if reason_id == OTHER_REASON_ID:
        return custom_text or OTHER_REASON_MESSAGE
    return REJECTION_REASONS.get(reason_id)

def get_rejection_reasons() -> List[RejectionReasonRead]:
    return [
        RejectionReasonRead(id=reason_id, message=message)
        for reason_id, message in sorted(REJECTION_REASONS.items())
    ]

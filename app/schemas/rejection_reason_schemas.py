from pydantic import BaseModel
from typing import Optional

class RejectionReasonRead(BaseModel):
    id: int
    message: Optional[str] = None

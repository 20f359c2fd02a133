from pydantic import BaseModel
from typing import Optional

class SubmitResult(BaseModel):
    success: bool
    storage_id: Optional[str] = None
    error: Optional[str] = None

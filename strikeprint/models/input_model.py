from pydantic import BaseModel
from typing import Literal, Optional

class RecordingInput(BaseModel):
    name: str = ""
    performer: str = ""
    stance: Literal["orthodox", "southpaw"] = "orthodox"
    height_cm: Optional[int] = None

    # Inclusive trim range over the captured frames (None = clip edge)
    trim_start: Optional[int] = None
    trim_end: Optional[int] = None

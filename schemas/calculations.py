from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


# ✅ input: "Calculate" button (selected examiner + clicked subject)
class CalculationRequest(BaseModel):
    examiner_id: Optional[int] = None
    subject_id: Optional[int] = None

    @field_validator("examiner_id", "subject_id", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        # the examiner select posts "" when nothing is chosen
        if isinstance(v, str) and not v.strip():
            return None
        return v


# ✅ output
class Calculation(BaseModel):
    id: int
    examiner_id: int
    subject_id: Optional[int] = None
    subject_code: str
    subject_title: str
    set: str
    exam_duration: int
    base_remuneration: int
    multiplier: float
    total_remuneration: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

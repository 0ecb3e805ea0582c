from pydantic import BaseModel, ConfigDict, Field, field_validator

from schemas.examiners import required_text

# keeps base * 1.5 well inside a 64-bit INTEGER column
MAX_DURATION = 24 * 60
MAX_REMUNERATION = 10 ** 9


# ✅ input: subject form submission (lengths follow models/subjects.py)
class SubjectCreate(BaseModel):
    subject_code: required_text(30)                                  # subject code
    subject_title: required_text(200)                                # subject title
    set: required_text(10)                                           # question paper set
    exam_duration: int = Field(..., gt=0, le=MAX_DURATION)           # minutes
    base_remuneration: int = Field(..., gt=0, le=MAX_REMUNERATION)   # base pay

    @field_validator("exam_duration", "base_remuneration", mode="before")
    @classmethod
    def _reject_bool(cls, v):
        # JSON true/false would otherwise pass as 1/0
        if isinstance(v, bool):
            raise ValueError("must be a whole number")
        return v


# ✅ output
class Subject(BaseModel):
    id: int
    subject_code: str
    subject_title: str
    set: str
    exam_duration: int
    base_remuneration: int

    model_config = ConfigDict(from_attributes=True)

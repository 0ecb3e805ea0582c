from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints

from schemas.calculations import Calculation


def required_text(max_length: int):
    """Trimmed, non-blank text no longer than its column."""
    return Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=max_length)]


# ✅ input: examiner form submission (lengths follow models/examiners.py)
class ExaminerCreate(BaseModel):
    panel_chairman: required_text(120)            # panel chairman name
    paper_setter: required_text(120)              # paper setter name
    pattern: required_text(50)                    # exam pattern
    class_name: required_text(50) = Field(        # class, sent as "class" by the form
        validation_alias=AliasChoices("class", "class_name"),
        serialization_alias="class",
    )
    subject: required_text(120)                   # subject
    sem: required_text(20)                        # semester
    mail_id: required_text(120)                   # email
    contact_number: required_text(20)             # contact number
    bank_account_no: required_text(40)            # bank account number
    ifsc: required_text(20)                       # IFSC code


# ✅ output: examiner with its calculation history
class Examiner(BaseModel):
    id: int
    panel_chairman: str
    paper_setter: str
    pattern: str
    class_name: str = Field(
        validation_alias=AliasChoices("class_name", "class"),
        serialization_alias="class",
    )
    subject: str
    sem: str
    mail_id: str
    contact_number: str
    bank_account_no: str
    ifsc: str
    label: str                                    # "<paper setter> - <subject>"
    created_at: Optional[datetime] = None
    calculations: List[Calculation] = []

    model_config = ConfigDict(from_attributes=True)

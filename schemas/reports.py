from typing import List

from pydantic import BaseModel

from schemas.examiners import Examiner


# ==========================================================
# [report rows]
# ==========================================================
class ExaminerRemuneration(BaseModel):
    examiner: Examiner
    total_remuneration: int                  # sum of the examiner's calculations
    remuneration_details: List[str]          # "<code> (Set <set>): ₹<total>" per calculation


# ==========================================================
# [whole report]
# ==========================================================
class RemunerationReport(BaseModel):
    rows: List[ExaminerRemuneration]
    system_total: int                        # sum over all examiners

    @property
    def is_empty(self) -> bool:
        return not self.rows

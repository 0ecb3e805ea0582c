from typing import List

from config.settings import settings
from database.store import RemunerationStore
from models.calculations import Calculation as CalculationModel
from models.examiners import Examiner as ExaminerModel
from schemas.examiners import Examiner
from schemas.reports import ExaminerRemuneration, RemunerationReport

NO_CALCULATIONS = "No calculations yet"


def format_detail(calculation: CalculationModel) -> str:
    """'<code> (Set <set>): ₹<total>'"""
    return (
        f"{calculation.subject_code} (Set {calculation.set}): "
        f"{settings.CURRENCY_SYMBOL}{calculation.total_remuneration}"
    )


def examiner_total(examiner: ExaminerModel) -> int:
    return sum(c.total_remuneration for c in examiner.calculations)


class ReportAggregator:
    """Per-examiner and system-wide totals, recomputed from the store on every call."""

    def __init__(self, store: RemunerationStore):
        self.store = store

    def build_report(self) -> RemunerationReport:
        rows: List[ExaminerRemuneration] = []
        for examiner in self.store.list_examiners():
            rows.append(ExaminerRemuneration(
                examiner=Examiner.model_validate(examiner),
                total_remuneration=examiner_total(examiner),
                remuneration_details=[format_detail(c) for c in examiner.calculations],
            ))

        return RemunerationReport(
            rows=rows,
            system_total=sum(r.total_remuneration for r in rows),
        )

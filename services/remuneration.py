import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from config.settings import settings
from database.store import RemunerationStore
from models.calculations import Calculation as CalculationModel
from services.errors import SelectionMissing

logger = logging.getLogger(__name__)

# (minimum duration in minutes, multiplier), checked top-down
DURATION_TIERS = (
    (180, Decimal("1.5")),  # 3+ hours
    (120, Decimal("1.3")),  # 2-3 hours
    (60, Decimal("1.1")),   # 1-2 hours
)
BASE_MULTIPLIER = Decimal("1.0")


def duration_multiplier(duration: int) -> Decimal:
    """Multiplier for an exam of `duration` minutes (highest matching tier wins)."""
    for threshold, multiplier in DURATION_TIERS:
        if duration >= threshold:
            return multiplier
    return BASE_MULTIPLIER


def remuneration_total(base: int, duration: int) -> int:
    """round(base * multiplier), halves rounded away from zero."""
    amount = Decimal(base) * duration_multiplier(duration)
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_calculation(subject_code: str, subject_title: str, set: str, exam_duration: int,
                      base_remuneration: int, subject_id: Optional[int] = None) -> CalculationModel:
    """Snapshot a subject's fields into an (unsaved) Calculation row."""
    return CalculationModel(
        subject_id=subject_id,
        subject_code=subject_code,
        subject_title=subject_title,
        set=set,
        exam_duration=exam_duration,
        base_remuneration=base_remuneration,
        multiplier=float(duration_multiplier(exam_duration)),
        total_remuneration=remuneration_total(base_remuneration, exam_duration),
    )


class RemunerationCalculator:
    """Turns (examiner, subject) into an appended Calculation."""

    def __init__(self, store: RemunerationStore):
        self.store = store

    def calculate(self, examiner_id: Optional[int], subject_id: Optional[int]) -> CalculationModel:
        if examiner_id is None:
            logger.warning("calculation rejected: no examiner selected")
            raise SelectionMissing("Please select an examiner first", status_code=400)

        examiner = self.store.get_examiner(examiner_id)
        if examiner is None:
            logger.warning("calculation rejected: examiner_id=%s not found", examiner_id)
            raise SelectionMissing("Selected examiner no longer exists")

        subject = self.store.get_subject(subject_id) if subject_id is not None else None
        if subject is None:
            logger.warning("calculation rejected: subject_id=%s not found", subject_id)
            raise SelectionMissing("Selected subject no longer exists")

        calculation = build_calculation(
            subject_code=subject.subject_code,
            subject_title=subject.subject_title,
            set=subject.set,
            exam_duration=subject.exam_duration,
            base_remuneration=subject.base_remuneration,
            subject_id=subject.id,
        )

        self.store.add_calculation(examiner, calculation)
        self.store.commit()

        logger.info(
            "calculated examiner_id=%s subject=%s set=%s total=%s",
            examiner.id, subject.subject_code, subject.set, calculation.total_remuneration,
        )
        return calculation

    @staticmethod
    def success_message(calculation: CalculationModel) -> str:
        return f"Remuneration calculated: {settings.CURRENCY_SYMBOL}{calculation.total_remuneration}"

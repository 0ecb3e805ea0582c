"""
database/store.py

RemunerationStore: the single repository over the persisted collections
(examiners, subjects, calculations, patterns). The calculator, the report
aggregator and the import scripts all go through it, never through raw
session queries.

- load boundary: every read hits the session
- save boundary: commit() / rollback(); nothing is committed implicitly
"""

from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from models.calculations import Calculation as CalculationModel
from models.examiners import Examiner as ExaminerModel
from models.patterns import Pattern as PatternModel
from models.subjects import Subject as SubjectModel
from schemas.examiners import ExaminerCreate
from schemas.subjects import SubjectCreate


class RemunerationStore:
    def __init__(self, session: Session):
        self.session = session

    # ==========================================================
    # Examiners
    # ==========================================================
    def add_examiner(self, data: ExaminerCreate) -> ExaminerModel:
        """Add an examiner plus its pattern side record; ids are assigned on flush."""
        examiner = ExaminerModel(**data.model_dump())
        self.session.add(examiner)
        self.session.flush()

        self.session.add(PatternModel(
            examiner_id=examiner.id,
            pattern=examiner.pattern,
            class_name=examiner.class_name,
            subject=examiner.subject,
            sem=examiner.sem,
        ))
        return examiner

    def list_examiners(self) -> List[ExaminerModel]:
        return (
            self.session.query(ExaminerModel)
            .options(selectinload(ExaminerModel.calculations))
            .order_by(ExaminerModel.id)
            .all()
        )

    def get_examiner(self, examiner_id: int) -> Optional[ExaminerModel]:
        return self.session.get(ExaminerModel, examiner_id)

    # ==========================================================
    # Subjects
    # ==========================================================
    def add_subject(self, data: SubjectCreate) -> SubjectModel:
        subject = SubjectModel(**data.model_dump())
        self.session.add(subject)
        self.session.flush()
        return subject

    def list_subjects(self) -> List[SubjectModel]:
        return self.session.query(SubjectModel).order_by(SubjectModel.id).all()

    def get_subject(self, subject_id: int) -> Optional[SubjectModel]:
        return self.session.get(SubjectModel, subject_id)

    # ==========================================================
    # Calculations
    # ==========================================================
    def add_calculation(self, examiner: ExaminerModel, calculation: CalculationModel) -> CalculationModel:
        """Append to the examiner's history; the same row is the global list entry."""
        examiner.calculations.append(calculation)
        self.session.flush()
        return calculation

    def list_calculations(self) -> List[CalculationModel]:
        return self.session.query(CalculationModel).order_by(CalculationModel.id).all()

    # ==========================================================
    # save boundary
    # ==========================================================
    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()

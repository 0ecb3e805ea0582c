import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from database.store import RemunerationStore
from models.examiners import Examiner as ExaminerModel
from models.subjects import Subject as SubjectModel
from schemas.examiners import ExaminerCreate
from schemas.subjects import SubjectCreate
from services.errors import ValidationFailed

logger = logging.getLogger(__name__)

EXAMINER_INVALID = "Please fill all required fields"
SUBJECT_INVALID = "Please fill all subject fields with valid values"


def parse_examiner(payload: Union[ExaminerCreate, Dict[str, Any]]) -> ExaminerCreate:
    # already-parsed models (FastAPI request bodies) are returned unchanged
    try:
        return ExaminerCreate.model_validate(payload)
    except ValidationError as e:
        logger.warning("examiner rejected: %s", _fields(e))
        raise ValidationFailed(EXAMINER_INVALID) from e


def parse_subject(payload: Union[SubjectCreate, Dict[str, Any]]) -> SubjectCreate:
    try:
        return SubjectCreate.model_validate(payload)
    except ValidationError as e:
        logger.warning("subject rejected: %s", _fields(e))
        raise ValidationFailed(SUBJECT_INVALID) from e


def create_examiner(store: RemunerationStore, payload: Union[ExaminerCreate, Dict[str, Any]]) -> ExaminerModel:
    """Validate and persist an examiner (and its pattern record) in one commit."""
    data = parse_examiner(payload)
    examiner = store.add_examiner(data)
    store.commit()
    logger.info("examiner added id=%s paper_setter=%s", examiner.id, examiner.paper_setter)
    return examiner


def create_subject(store: RemunerationStore, payload: Union[SubjectCreate, Dict[str, Any]]) -> SubjectModel:
    data = parse_subject(payload)
    subject = store.add_subject(data)
    store.commit()
    logger.info("subject added id=%s code=%s set=%s", subject.id, subject.subject_code, subject.set)
    return subject


def _fields(e: ValidationError) -> str:
    return ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())

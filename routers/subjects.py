from fastapi import APIRouter, Depends

from database.store import RemunerationStore
from dependencies.store import get_store
from schemas.subjects import Subject, SubjectCreate
from services import records
from services.errors import SelectionMissing

router = APIRouter(prefix="/subjects", tags=["Subjects"])


# ✅ [CREATE] add subject (subject form)
@router.post("/", status_code=201)
def create_subject(payload: SubjectCreate, store: RemunerationStore = Depends(get_store)):
    subject = records.create_subject(store, payload)
    return {
        "success": True,
        "data": Subject.model_validate(subject).model_dump(),
        "message": "Subject added successfully"
    }


# ✅ [READ] all subjects
@router.get("/")
def read_subjects(store: RemunerationStore = Depends(get_store)):
    subjects = store.list_subjects()
    return {
        "success": True,
        "data": [Subject.model_validate(s).model_dump() for s in subjects],
        "message": "Subject list loaded" if subjects else "No subjects available. Please add subjects first."
    }


# ✅ [READ] single subject
@router.get("/{subject_id}")
def read_subject(subject_id: int, store: RemunerationStore = Depends(get_store)):
    subject = store.get_subject(subject_id)
    if subject is None:
        raise SelectionMissing("Subject not found")
    return {
        "success": True,
        "data": Subject.model_validate(subject).model_dump(),
        "message": "Subject loaded"
    }

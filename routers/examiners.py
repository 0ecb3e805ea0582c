from fastapi import APIRouter, Depends

from database.store import RemunerationStore
from dependencies.store import get_store
from schemas.calculations import Calculation
from schemas.examiners import Examiner, ExaminerCreate
from services import records
from services.errors import SelectionMissing
from services.report_service import examiner_total

router = APIRouter(prefix="/examiners", tags=["Examiners"])


def _examiner_data(examiner) -> dict:
    data = Examiner.model_validate(examiner).model_dump(mode="json", by_alias=True)
    data["total_remuneration"] = examiner_total(examiner)
    return data


# ✅ [CREATE] add examiner (examiner form)
@router.post("/", status_code=201)
def create_examiner(payload: ExaminerCreate, store: RemunerationStore = Depends(get_store)):
    examiner = records.create_examiner(store, payload)
    return {
        "success": True,
        "data": _examiner_data(examiner),
        "message": "Examiner details added successfully"
    }


# ✅ [READ] all examiners (examiner select box)
@router.get("/")
def read_examiners(store: RemunerationStore = Depends(get_store)):
    return {
        "success": True,
        "data": [_examiner_data(e) for e in store.list_examiners()],
        "message": "Examiner list loaded"
    }


# ✅ [READ] single examiner with calculation history
@router.get("/{examiner_id}")
def read_examiner(examiner_id: int, store: RemunerationStore = Depends(get_store)):
    examiner = store.get_examiner(examiner_id)
    if examiner is None:
        raise SelectionMissing("Examiner not found")
    return {
        "success": True,
        "data": _examiner_data(examiner),
        "message": "Examiner loaded"
    }


# ✅ [READ] one examiner's calculations only
@router.get("/{examiner_id}/calculations")
def read_examiner_calculations(examiner_id: int, store: RemunerationStore = Depends(get_store)):
    examiner = store.get_examiner(examiner_id)
    if examiner is None:
        raise SelectionMissing("Examiner not found")
    return {
        "success": True,
        "data": [Calculation.model_validate(c).model_dump(mode="json") for c in examiner.calculations],
        "message": "Examiner calculations loaded"
    }

from fastapi import APIRouter, Depends

from database.store import RemunerationStore
from dependencies.store import get_store
from schemas.calculations import Calculation, CalculationRequest
from services.remuneration import RemunerationCalculator

router = APIRouter(prefix="/calculations", tags=["Remuneration"])


# ✅ [CALCULATE] selected examiner x subject -> new calculation (history is append-only)
@router.post("/", status_code=201)
def calculate_remuneration(request: CalculationRequest, store: RemunerationStore = Depends(get_store)):
    calculator = RemunerationCalculator(store)
    calculation = calculator.calculate(request.examiner_id, request.subject_id)
    return {
        "success": True,
        "data": Calculation.model_validate(calculation).model_dump(mode="json"),
        "message": calculator.success_message(calculation)
    }


# ✅ [READ] every calculation, oldest first
@router.get("/")
def read_calculations(store: RemunerationStore = Depends(get_store)):
    return {
        "success": True,
        "data": [Calculation.model_validate(c).model_dump(mode="json") for c in store.list_calculations()],
        "message": "Calculation list loaded"
    }

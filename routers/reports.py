from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from database.store import RemunerationStore
from dependencies.store import get_store
from services.export_service import build_csv, export_filename
from services.pdf_service import PDFService
from services.report_service import ReportAggregator

router = APIRouter(prefix="/reports", tags=["Remuneration reports"])

pdf_service = PDFService()


# ==========================================================
# [1] summary (report tab)
# ==========================================================
@router.get("/summary")
def report_summary(store: RemunerationStore = Depends(get_store)):
    report = ReportAggregator(store).build_report()
    return {
        "success": True,
        "data": report.model_dump(mode="json", by_alias=True),
        "message": (
            "No examiner data available. Please add examiners first."
            if report.is_empty else "Remuneration summary generated"
        )
    }


# ==========================================================
# [2] export / print
# ==========================================================
@router.get("/export/csv")
def export_csv(store: RemunerationStore = Depends(get_store)):
    content = build_csv(ReportAggregator(store).build_report())
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"}
    )


@router.get("/print", response_class=HTMLResponse)
def print_report(store: RemunerationStore = Depends(get_store)):
    html = pdf_service.render_report_html(ReportAggregator(store).build_report())
    return HTMLResponse(content=html)


@router.get("/print/pdf")
def print_report_pdf(store: RemunerationStore = Depends(get_store)):
    pdf_content = pdf_service.generate_report_pdf(ReportAggregator(store).build_report())
    return Response(
        content=pdf_content,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=remuneration_summary.pdf"}
    )

import csv
import io
from datetime import date, datetime, timezone
from typing import Optional

from config.settings import settings
from schemas.reports import RemunerationReport
from services.errors import EmptyReport
from services.report_service import NO_CALCULATIONS

CSV_HEADERS = [
    "Panel Chairman",
    "Paper Setter",
    "Pattern",
    "Class",
    "Subject",
    "Semester",
    "Email ID",
    "Contact Number",
    "Bank Account No",
    "IFSC Code",
    "Total Remuneration",
    "Remuneration Details",
]

DETAIL_SEPARATOR = "; "
TOTAL_LABEL = "Total System Remuneration"


def build_csv(report: RemunerationReport) -> str:
    """
    Render the report as CSV text.
    - header unquoted, every data field double-quoted
    - blank line, then the system total row
    """
    if report.is_empty:
        raise EmptyReport("No examiner data available to export")

    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(CSV_HEADERS)

    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in report.rows:
        e = row.examiner
        writer.writerow([
            e.panel_chairman,
            e.paper_setter,
            e.pattern,
            e.class_name,
            e.subject,
            e.sem,
            e.mail_id,
            e.contact_number,
            e.bank_account_no,
            e.ifsc,
            row.total_remuneration,
            DETAIL_SEPARATOR.join(row.remuneration_details) or NO_CALCULATIONS,
        ])

    buf.write("\n")
    writer.writerow([TOTAL_LABEL] + [""] * 9 + [report.system_total, ""])
    return buf.getvalue()


def export_filename(day: Optional[date] = None) -> str:
    day = day or datetime.now(timezone.utc).date()
    return f"{settings.EXPORT_FILENAME_PREFIX}_{day.isoformat()}.csv"

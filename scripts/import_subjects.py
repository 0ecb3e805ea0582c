import csv
import logging
import sys

from database.db import SessionLocal, init_db
from database.store import RemunerationStore
from services import records
from services.errors import ValidationFailed

logger = logging.getLogger(__name__)

CSV_PATH = "data/subjects.csv"  # subject_code,subject_title,set,exam_duration,base_remuneration


def import_subjects(store: RemunerationStore, csv_path: str = CSV_PATH) -> int:
    """Load subjects from CSV through the normal form validation; bad rows are skipped."""
    added = 0
    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            try:
                data = records.parse_subject(row)
            except ValidationFailed:
                logger.warning("%s:%d skipped (invalid subject row)", csv_path, line_no)
                continue
            store.add_subject(data)
            added += 1

    store.commit()
    return added


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        count = import_subjects(RemunerationStore(db), sys.argv[1] if len(sys.argv) > 1 else CSV_PATH)
    finally:
        db.close()
    print(f"✅ subjects CSV -> DB: {count} rows imported")

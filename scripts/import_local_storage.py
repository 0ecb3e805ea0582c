"""
scripts/import_local_storage.py

Migrates a JSON dump of the browser app's localStorage into the database.

Expected input (values may also be the raw JSON strings localStorage holds):
    {
      "examiners": [{"id": 1712..., "panelChairman": ..., "remunerations": [...]}, ...],
      "subjects":  [{"id": 1712..., "subjectCode": ..., "examDuration": 150, ...}, ...]
    }

The "patterns" key is ignored; pattern records are rebuilt from the examiners.
Calculation totals are recomputed from duration and base, so imported history
obeys the same multiplier rule as new calculations.
"""

import json
import logging
import sys
from typing import Any, Dict, List

from database.db import SessionLocal, init_db
from database.store import RemunerationStore
from services import records
from services.errors import ValidationFailed
from services.remuneration import build_calculation

logger = logging.getLogger(__name__)

EXAMINER_FIELDS = {
    "panelChairman": "panel_chairman",
    "paperSetter": "paper_setter",
    "pattern": "pattern",
    "class": "class",
    "subject": "subject",
    "sem": "sem",
    "mailId": "mail_id",
    "contactNumber": "contact_number",
    "bankAccountNo": "bank_account_no",
    "ifsc": "ifsc",
}

SUBJECT_FIELDS = {
    "subjectCode": "subject_code",
    "subjectTitle": "subject_title",
    "set": "set",
    "examDuration": "exam_duration",
    "baseRemuneration": "base_remuneration",
}


def _entries(dump: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    value = dump.get(key) or []
    if isinstance(value, str):
        value = json.loads(value)
    return value


def _rename(item: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, Any]:
    return {new: item.get(old, "") for old, new in mapping.items()}


def import_local_storage(store: RemunerationStore, dump: Dict[str, Any]) -> Dict[str, int]:
    counts = {"subjects": 0, "examiners": 0, "calculations": 0, "skipped": 0}

    # ==========================================================
    # [1] subjects
    # ==========================================================
    subject_ids = {}  # (code, set) -> new subject id
    for item in _entries(dump, "subjects"):
        try:
            data = records.parse_subject(_rename(item, SUBJECT_FIELDS))
        except ValidationFailed:
            logger.warning("subject %s skipped (invalid)", item.get("id"))
            counts["skipped"] += 1
            continue
        subject = store.add_subject(data)
        subject_ids.setdefault((subject.subject_code, subject.set), subject.id)
        counts["subjects"] += 1

    # ==========================================================
    # [2] examiners + their remuneration history
    # ==========================================================
    for item in _entries(dump, "examiners"):
        try:
            data = records.parse_examiner(_rename(item, EXAMINER_FIELDS))
        except ValidationFailed:
            logger.warning("examiner %s skipped (invalid)", item.get("id"))
            counts["skipped"] += 1
            continue
        examiner = store.add_examiner(data)
        counts["examiners"] += 1

        for rem in item.get("remunerations") or []:
            calculation = build_calculation(
                subject_code=str(rem["subjectCode"]),
                subject_title=str(rem.get("subjectTitle", "")),
                set=str(rem["set"]),
                exam_duration=int(rem["examDuration"]),
                base_remuneration=int(rem["baseRemuneration"]),
                subject_id=subject_ids.get((str(rem["subjectCode"]), str(rem["set"]))),
            )
            if calculation.total_remuneration != rem.get("totalRemuneration"):
                logger.warning(
                    "examiner %s: stored total %s for %s replaced by %s",
                    item.get("id"), rem.get("totalRemuneration"),
                    calculation.subject_code, calculation.total_remuneration,
                )
            store.add_calculation(examiner, calculation)
            counts["calculations"] += 1

    store.commit()
    return counts


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    if len(sys.argv) != 2:
        sys.exit("usage: python -m scripts.import_local_storage <localStorage.json>")

    with open(sys.argv[1], encoding="utf-8") as f:
        dump = json.load(f)

    init_db()
    db = SessionLocal()
    store = RemunerationStore(db)
    try:
        counts = import_local_storage(store, dump)
    except Exception:
        store.rollback()
        raise
    finally:
        db.close()
    print(f"✅ localStorage -> DB migration complete: {counts}")

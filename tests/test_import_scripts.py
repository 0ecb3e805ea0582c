import json

from scripts.import_local_storage import import_local_storage
from scripts.import_subjects import import_subjects
from services.report_service import ReportAggregator


def test_import_subjects_skips_invalid_rows(store, tmp_path):
    path = tmp_path / "subjects.csv"
    path.write_text(
        "subject_code,subject_title,set,exam_duration,base_remuneration\n"
        "CS201,Data Structures,A,150,1000\n"
        "CS202,Networks,B,0,800\n"
        "CS203,,A,60,700\n"
        "CS204,Databases,C,180,1200\n",
        encoding="utf-8",
    )

    assert import_subjects(store, str(path)) == 2
    assert [s.subject_code for s in store.list_subjects()] == ["CS201", "CS204"]


def test_import_local_storage_dump(store):
    examiners = [{
        "id": 1712000000000,
        "panelChairman": "Dr. R. Kulkarni",
        "paperSetter": "Prof. A. Deshmukh",
        "pattern": "2019",
        "class": "SE",
        "subject": "Data Structures",
        "sem": "III",
        "mailId": "a.deshmukh@example.edu",
        "contactNumber": "9876543210",
        "bankAccountNo": "123456789012",
        "ifsc": "SBIN0001234",
        "remunerations": [{
            "examinerId": "1712000000000",
            "subjectCode": "CS201",
            "subjectTitle": "Data Structures",
            "set": "A",
            "examDuration": 150,
            "baseRemuneration": 1000,
            "multiplier": 1.3,
            "totalRemuneration": 1300,
        }],
        "createdAt": "2024-04-01T10:00:00.000Z",
    }, {"id": 1712000000001, "panelChairman": ""}]
    subjects = [{
        "id": 1712000000100,
        "subjectCode": "CS201",
        "subjectTitle": "Data Structures",
        "set": "A",
        "examDuration": 150,
        "baseRemuneration": 1000,
    }]
    # localStorage holds JSON strings
    dump = {"examiners": json.dumps(examiners), "subjects": subjects, "patterns": "[]"}

    counts = import_local_storage(store, dump)

    assert counts == {"subjects": 1, "examiners": 1, "calculations": 1, "skipped": 1}
    calc = store.list_calculations()[0]
    assert calc.subject_id == store.list_subjects()[0].id
    assert ReportAggregator(store).build_report().system_total == 1300

from datetime import date

import pytest

from services import records
from services.errors import EmptyReport
from services.export_service import CSV_HEADERS, build_csv, export_filename
from services.remuneration import RemunerationCalculator
from services.report_service import ReportAggregator
from factories import examiner_form, subject_form


def _seed_two_examiners(store):
    first = records.create_examiner(store, examiner_form())
    second = records.create_examiner(store, examiner_form(paper_setter="Dr. S. Patil", subject="Logic"))
    subject_a = records.create_subject(store, subject_form())
    subject_b = records.create_subject(store, subject_form(
        subject_code="CS105", subject_title="Logic", set="B", exam_duration=45, base_remuneration=500,
    ))
    calculator = RemunerationCalculator(store)
    calculator.calculate(first.id, subject_a.id)
    calculator.calculate(second.id, subject_b.id)


def test_csv_layout(store):
    _seed_two_examiners(store)

    lines = build_csv(ReportAggregator(store).build_report()).split("\n")

    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == (
        '"Dr. R. Kulkarni","Prof. A. Deshmukh","2019","SE","Data Structures","III",'
        '"a.deshmukh@example.edu","9876543210","123456789012","SBIN0001234","1300","CS201 (Set A): ₹1300"'
    )
    assert lines[2].startswith('"Dr. R. Kulkarni","Dr. S. Patil"')
    assert lines[2].endswith('"500","CS105 (Set B): ₹500"')
    assert lines[3] == ""
    assert lines[4] == '"Total System Remuneration","","","","","","","","","","1800",""'
    assert lines[5] == ""


def test_csv_is_reproducible(store):
    _seed_two_examiners(store)
    aggregator = ReportAggregator(store)

    assert build_csv(aggregator.build_report()) == build_csv(aggregator.build_report())


def test_csv_details_joined_and_placeholder(store):
    examiner = records.create_examiner(store, examiner_form())
    records.create_examiner(store, examiner_form(paper_setter='Prof. "Jr" Rao'))
    subject = records.create_subject(store, subject_form())
    calculator = RemunerationCalculator(store)
    calculator.calculate(examiner.id, subject.id)
    calculator.calculate(examiner.id, subject.id)

    lines = build_csv(ReportAggregator(store).build_report()).split("\n")

    assert lines[1].endswith('"2600","CS201 (Set A): ₹1300; CS201 (Set A): ₹1300"')
    assert '"Prof. ""Jr"" Rao"' in lines[2]
    assert lines[2].endswith('"0","No calculations yet"')


def test_export_without_examiners(store):
    with pytest.raises(EmptyReport) as exc:
        build_csv(ReportAggregator(store).build_report())

    assert exc.value.message == "No examiner data available to export"


def test_export_filename():
    assert export_filename(date(2024, 3, 9)) == "remuneration_summary_2024-03-09.csv"

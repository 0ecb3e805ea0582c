import pytest

from models.patterns import Pattern
from services import records
from services.remuneration import RemunerationCalculator
from services.errors import ValidationFailed
from factories import examiner_form, subject_form


def test_create_examiner_trims_and_writes_pattern(store, session):
    examiner = records.create_examiner(store, examiner_form(paper_setter="  Prof. A. Deshmukh  "))

    assert examiner.id is not None
    assert examiner.paper_setter == "Prof. A. Deshmukh"
    assert examiner.class_name == "SE"
    assert examiner.label == "Prof. A. Deshmukh - Data Structures"
    assert session.query(Pattern).count() == 1


def test_examiner_ids_unique(store):
    ids = {records.create_examiner(store, examiner_form()).id for _ in range(5)}
    assert len(ids) == 5


@pytest.mark.parametrize("field", ["panel_chairman", "class", "ifsc"])
def test_blank_examiner_field_rejected(store, session, field):
    with pytest.raises(ValidationFailed) as exc:
        records.create_examiner(store, examiner_form(**{field: "   "}))

    assert exc.value.message == "Please fill all required fields"
    assert store.list_examiners() == []
    assert session.query(Pattern).count() == 0


def test_missing_examiner_field_rejected(store):
    form = examiner_form()
    del form["mail_id"]

    with pytest.raises(ValidationFailed):
        records.create_examiner(store, form)


def test_create_subject_parses_numbers(store):
    subject = records.create_subject(store, subject_form(exam_duration="90", base_remuneration="750"))

    assert subject.exam_duration == 90
    assert subject.base_remuneration == 750
    assert store.list_subjects() == [subject]


@pytest.mark.parametrize("overrides", [
    {"subject_code": ""},
    {"set": "  "},
    {"exam_duration": 0},
    {"exam_duration": -30},
    {"base_remuneration": 0},
    {"base_remuneration": "abc"},
    {"base_remuneration": 10 ** 20},
    {"base_remuneration": 7 * 10 ** 18},
    {"exam_duration": 24 * 60 + 1},
    {"exam_duration": True},
    {"base_remuneration": False},
    {"subject_code": "X" * 31},
])
def test_invalid_subject_rejected(store, overrides):
    with pytest.raises(ValidationFailed) as exc:
        records.create_subject(store, subject_form(**overrides))

    assert exc.value.message == "Please fill all subject fields with valid values"
    assert store.list_subjects() == []


def test_largest_subject_still_calculates(store):
    examiner = records.create_examiner(store, examiner_form())
    subject = records.create_subject(store, subject_form(exam_duration=24 * 60, base_remuneration=10 ** 9))

    calc = RemunerationCalculator(store).calculate(examiner.id, subject.id)

    assert calc.total_remuneration == 1_500_000_000


@pytest.mark.parametrize("field, length", [("ifsc", 21), ("sem", 21), ("panel_chairman", 121)])
def test_overlong_examiner_field_rejected(store, field, length):
    with pytest.raises(ValidationFailed):
        records.create_examiner(store, examiner_form(**{field: "x" * length}))

    assert store.list_examiners() == []

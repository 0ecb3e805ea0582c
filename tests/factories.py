"""Form payloads as the browser forms submit them."""


def examiner_form(**overrides):
    form = {
        "panel_chairman": "Dr. R. Kulkarni",
        "paper_setter": "Prof. A. Deshmukh",
        "pattern": "2019",
        "class": "SE",
        "subject": "Data Structures",
        "sem": "III",
        "mail_id": "a.deshmukh@example.edu",
        "contact_number": "9876543210",
        "bank_account_no": "123456789012",
        "ifsc": "SBIN0001234",
    }
    form.update(overrides)
    return form


def subject_form(**overrides):
    form = {
        "subject_code": "CS201",
        "subject_title": "Data Structures",
        "set": "A",
        "exam_duration": 150,
        "base_remuneration": 1000,
    }
    form.update(overrides)
    return form

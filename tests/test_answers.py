"""Tests for answer synthesis."""

from vcompass.answers import synthesize
from vcompass.index import Document


def _doc(doc_type, payload, text="raw text"):
    return Document(id=0, type=doc_type, title="t", text=text, payload=payload)


class TestSynthesize:
    def test_professor(self, jane_record):
        doc = _doc("professor", jane_record["payload"])
        assert synthesize(doc) == "Dr Jane Smith | Cabin: 204 | Department: Computer Science | Email: jane@x.edu"

    def test_professor_cabin_number_alias(self):
        doc = _doc("professor", {"name": "Dr Ravi Kumar", "cabinNumber": "B-112"})
        assert synthesize(doc) == "Dr Ravi Kumar | Cabin: B-112"

    def test_office(self):
        doc = _doc("office", {"name": "Admissions", "location": "Main Block", "floor": 1, "room": "G-05"})
        assert synthesize(doc) == "Admissions | Location: Main Block | Floor: 1 | Room: G-05"

    def test_department(self):
        doc = _doc("department", {"name": "Placement Cell", "email": "p@x.edu", "phone": "123", "location": "Tower"})
        assert synthesize(doc) == "Placement Cell | Email: p@x.edu | Phone: 123 | Location: Tower"

    def test_response_is_authoritative(self):
        doc = _doc("professor", {"name": "Dr X", "response": "  Ask at the front desk.  "})
        assert synthesize(doc) == "Ask at the front desk."

    def test_blank_response_is_ignored(self):
        doc = _doc("office", {"name": "Library", "response": "   "})
        assert synthesize(doc) == "Library"

    def test_unknown_type_uses_text(self):
        doc = _doc("entry", {"key": "Library hours", "value": "8am"}, text="Library hours 8am")
        assert synthesize(doc) == "Library hours 8am"

    def test_no_fields_falls_back_to_text(self):
        doc = _doc("department", {"head": "someone"}, text="Physics department")
        assert synthesize(doc) == "Physics department"

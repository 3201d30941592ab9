"""Shared fixtures for V-Compass tests."""

import json

import pytest

JANE_RECORD = {
    "type": "professor",
    "title": "Dr Jane Smith",
    "text": "Dr Jane Smith Computer Science cabin 204 jane@x.edu",
    "payload": {
        "name": "Dr Jane Smith",
        "department": "Computer Science",
        "cabin": "204",
        "email": "jane@x.edu",
    },
}

PLACEMENT_RECORD = {
    "type": "placement_training",
    "title": "Placement contact",
    "text": "Contact the placement cell at placement@x.edu.",
    "payload": {
        "keywords": "placement cell, jobs",
        "response": "Contact the placement cell at placement@x.edu.",
    },
}

CAMPUS_DATA = {
    "professors": [
        {"name": "Dr Jane Smith", "department": "Computer Science", "cabin": "204", "email": "jane@x.edu"},
        {"name": "Dr Ravi Kumar", "department": "Mechanical Engineering", "cabinNumber": "B-112"},
    ],
    "offices": [
        {"name": "Admissions Office", "location": "Main Block", "floor": "Ground", "room": "G-05"},
        {
            "question": "Where is the examination cell?",
            "keywords": "exam cell, coe, results",
            "response": "The examination cell is in the Admin Block, room 101.",
        },
    ],
    "departments": [
        {"name": "Placement Cell", "email": "placement@x.edu", "phone": "12345", "location": "Tech Tower"},
    ],
    "placement_training": [
        {
            "question": "How do I register for campus placements?",
            "keywords": "placement registration, jobs, recruitment",
            "response": "Register on the placement portal before July.",
        },
    ],
    "entries": [
        {"key": "Library hours", "value": "The central library is open 8am to 10pm."},
    ],
    "hostel": [
        {"question": "What are the hostel curfew timings?", "response": "Hostel gates close at 9:30pm."},
        {"name": "Block A"},
    ],
}


class StubRefiner:
    is_configured = True
    available = True

    def __init__(self, reply="Refined answer."):
        self.reply = reply
        self.prompts = []

    async def refine(self, prompt):
        self.prompts.append(prompt)
        return self.reply


class FailingRefiner(StubRefiner):
    async def refine(self, prompt):
        self.prompts.append(prompt)
        raise RuntimeError("gemini exploded")


@pytest.fixture
def jane_record():
    return dict(JANE_RECORD)


@pytest.fixture
def placement_record():
    return dict(PLACEMENT_RECORD)


@pytest.fixture
def campus_data():
    return json.loads(json.dumps(CAMPUS_DATA))


@pytest.fixture
def campus_file(tmp_path, campus_data):
    path = tmp_path / "campus_data.json"
    path.write_text(json.dumps(campus_data), encoding="utf-8")
    return path

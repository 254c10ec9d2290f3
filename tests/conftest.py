"""
Pytest configuration and shared fixtures for all tests.

Each test gets its own ``Database.json`` under ``tmp_path``; the
application is built with ``create_app(store=...)`` so nothing touches
the working directory.
"""

import json

import pytest
from fastapi.testclient import TestClient

from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.main import create_app


# Id 0 marks an invalid entry (skipped by search only) and id 2 appears
# twice on purpose.
SAMPLE_ALUMNI = [
    {"ID": 1, "Name": "Asha Rao", "Department": "CSE", "Year": 2024, "Email": "asha@example.com",
     "Phone": "9000000001", "Address": "Bengaluru", "Job": "Engineer", "Company": "Infosys", "CGPA": 8.7},
    {"ID": 2, "Name": "Vikram Iyer", "Department": "ECE", "Year": 2023, "Email": "vikram@example.com",
     "Phone": "9000000002", "Address": "Chennai", "Job": "Analyst", "Company": "TCS", "CGPA": 7.9},
    {"ID": 3, "Name": "Meera Nair", "Department": "CSE", "Year": 2024, "Email": "meera@example.com",
     "Phone": "9000000003", "Address": "Kochi", "Job": "Researcher", "Company": "", "CGPA": 9.1},
    {"ID": 0, "Name": "Ghost Entry", "Department": "Mechanical", "Year": 2022, "Email": "",
     "Phone": "", "Address": "Bengaluru", "Job": "", "Company": "Infosys", "CGPA": 6.5},
    {"ID": 2, "Name": "Priya Sen", "Department": "ECE", "Year": 2021, "Email": "priya@example.com",
     "Phone": "9000000005", "Address": "", "Job": "Designer", "Company": "Wipro", "CGPA": 8.2},
    {"ID": 5, "Name": "Rahul Das", "Department": "EEE", "Year": 2025, "Email": "rahul@example.com",
     "Phone": "9000000006", "Address": "Bengaluru", "Job": "Manager", "Company": "Infosys", "CGPA": 7.4},
]


def write_database(path, entries) -> None:
    path.write_text(json.dumps(entries, indent=2), encoding="utf-8")


def read_database(path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "Database.json"


@pytest.fixture
def store(db_path):
    """A store over a file that does not exist yet."""
    return AlumniStore(db_path)


@pytest.fixture
def seeded_store(db_path):
    write_database(db_path, SAMPLE_ALUMNI)
    return AlumniStore(db_path)


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def seeded_client(seeded_store):
    return TestClient(create_app(store=seeded_store))

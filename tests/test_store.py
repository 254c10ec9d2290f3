"""Tests for the JSON file store."""

import json

import pytest
from pydantic import ValidationError

from alumni_search_api.app.core.store import AlumniStore, StoreError
from alumni_search_api.app.schemas.alumni import AlumniRecord

from conftest import SAMPLE_ALUMNI, read_database, write_database


def test_missing_file_is_empty_collection(store):
    assert store.load() == []


def test_load_keeps_file_order(seeded_store):
    records = seeded_store.load()
    assert [r.name for r in records] == [a["Name"] for a in SAMPLE_ALUMNI]
    assert records[0] == AlumniRecord(
        id=1, name="Asha Rao", department="CSE", year=2024, email="asha@example.com",
        phone="9000000001", address="Bengaluru", job="Engineer", company="Infosys", cgpa=8.7,
    )


def test_missing_and_null_fields_default_to_zero_values(db_path):
    write_database(db_path, [{"ID": 4, "Name": "Only Name"}, {"ID": 5, "Email": None, "Year": None}])
    first, second = AlumniStore(db_path).load()
    assert first.department == ""
    assert first.year == 0
    assert first.cgpa == 0.0
    assert second.name == ""
    assert second.email == ""
    assert second.year == 0


def test_missing_id_defaults_to_zero(db_path):
    write_database(db_path, [{"Name": "No Id"}])
    assert AlumniStore(db_path).load()[0].id == 0


def test_numeric_text_fields_are_read_as_strings(db_path):
    write_database(db_path, [{"ID": 1, "Phone": 5550100}])
    assert AlumniStore(db_path).load()[0].phone == "5550100"


def test_save_writes_title_case_pretty_array(store, db_path):
    store.save([AlumniRecord(id=1, name="Zoë Park", year=2020, cgpa=9.0)])
    text = db_path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert "Zoë Park" in text
    assert read_database(db_path) == [{
        "ID": 1, "Name": "Zoë Park", "Department": "", "Year": 2020, "Email": "", "Phone": "",
        "Address": "", "Job": "", "Company": "", "CGPA": 9.0,
    }]


def test_save_overwrites_whole_file(seeded_store, db_path):
    seeded_store.save([AlumniRecord(id=1, name="Solo")])
    assert [entry["Name"] for entry in read_database(db_path)] == ["Solo"]


def test_saved_records_load_back_unchanged(seeded_store):
    records = seeded_store.load()
    seeded_store.save(records)
    assert seeded_store.load() == records


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"ID": 1}),
        json.dumps([{"ID": 1}, "oops"]),
        json.dumps([{"ID": 1, "Year": "last year"}]),
        '[{"ID": 1, "CGPA": NaN}]',
    ],
)
def test_unreadable_content_raises_store_error(db_path, content):
    db_path.write_text(content, encoding="utf-8")
    with pytest.raises(StoreError):
        AlumniStore(db_path).load()


def test_write_failure_raises_store_error(tmp_path):
    store = AlumniStore(tmp_path / "missing-dir" / "Database.json")
    with pytest.raises(StoreError):
        store.save([AlumniRecord(id=1)])


def test_transaction_saves_on_exit(seeded_store, db_path):
    with seeded_store.transaction() as records:
        records.append(AlumniRecord(id=7, name="New"))
    assert read_database(db_path)[-1]["Name"] == "New"
    assert len(read_database(db_path)) == len(SAMPLE_ALUMNI) + 1


def test_transaction_writes_nothing_when_block_fails(seeded_store, db_path):
    before = db_path.read_text(encoding="utf-8")
    with pytest.raises(RuntimeError):
        with seeded_store.transaction() as records:
            records.clear()
            raise RuntimeError("boom")
    assert db_path.read_text(encoding="utf-8") == before


def test_relative_database_path_resolves_against_cwd(tmp_path, monkeypatch):
    from alumni_search_api.app.core import store as store_module

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(store_module.settings, "database_path", "Database.json")
    assert AlumniStore().path == (tmp_path / "Database.json").resolve()


@pytest.mark.parametrize("content", ["", "  \n\t"])
def test_empty_file_is_empty_collection(db_path, content):
    db_path.write_text(content, encoding="utf-8")
    assert AlumniStore(db_path).load() == []


def test_non_finite_cgpa_cannot_reach_the_file():
    with pytest.raises(ValidationError):
        AlumniRecord(id=1, cgpa=float("nan"))

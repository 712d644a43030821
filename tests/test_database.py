import sqlite3

import pytest

from config import settings
from database import insert_submission, get_recent_submissions, list_ngos, get_ngo, DatabaseError
from models.submission import FoodSubmissionCreate

def add_ngo(db_path, ngo_id, name):
    conn = sqlite3.connect(db_path)
    conn.execute(
        "INSERT INTO ngos (id, name, address, latitude, longitude) VALUES (?, ?, ?, ?, ?)",
        (ngo_id, name, f"{name} street", 10.0, 20.0)
    )
    conn.commit()
    conn.close()

def make_submission(food_type="Cooked Meals", **overrides):
    data = {"food_type": food_type, "quantity": 5, "location": "Hall A"}
    data.update(overrides)
    return FoodSubmissionCreate(**data)

def test_insert_submission_defaults(db_path):
    created = insert_submission(make_submission(notes="Contains dairy"))

    assert created.id
    assert created.status == "available"
    assert created.unit == "kg"
    assert created.event_type is None
    assert created.notes == "Contains dairy"
    assert created.created_at.tzinfo is not None

def test_recent_submissions_newest_first(db_path):
    for index in range(3):
        insert_submission(make_submission(food_type=f"Batch {index}"))

    recent = get_recent_submissions()

    assert [s.food_type for s in recent] == ["Batch 2", "Batch 1", "Batch 0"]

def test_recent_submissions_limited_to_ten(db_path):
    for index in range(12):
        insert_submission(make_submission(food_type=f"Batch {index}"))

    recent = get_recent_submissions()

    assert len(recent) == 10
    assert recent[0].food_type == "Batch 11"
    assert get_recent_submissions(limit=3)[-1].food_type == "Batch 9"

def test_list_ngos_sorted_by_name(db_path):
    add_ngo(db_path, "b", "Zero Hunger Collective")
    add_ngo(db_path, "a", "Annapurna Kitchen")
    add_ngo(db_path, "c", "Meals on Wheels")

    names = [ngo.name for ngo in list_ngos()]

    assert names == ["Annapurna Kitchen", "Meals on Wheels", "Zero Hunger Collective"]

def test_get_ngo(db_path):
    add_ngo(db_path, "a", "Annapurna Kitchen")

    assert get_ngo("a").name == "Annapurna Kitchen"
    assert get_ngo("missing") is None

def test_missing_database_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DB_PATH", str(tmp_path / "absent.db"))

    with pytest.raises(DatabaseError):
        get_recent_submissions()

def test_list_ngos_ignores_case(db_path):
    add_ngo(db_path, "a", "Zeta Foundation")
    add_ngo(db_path, "b", "apple orchard pantry")
    add_ngo(db_path, "c", "Mango Trust")

    names = [ngo.name for ngo in list_ngos()]

    assert names == ["apple orchard pantry", "Mango Trust", "Zeta Foundation"]

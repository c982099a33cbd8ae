import json

import pytest

from ball_tracker.errors import UserIdTakenError
from ball_tracker.ledger import Ledger
from ball_tracker.models import AttemptResult
from ball_tracker.storage import JsonStore


def test_claim_rejects_taken_id(store):
    store.claim(7)
    assert store.exists(7)
    with pytest.raises(UserIdTakenError, match='ID "7" is already taken.'):
        store.claim(7)


def test_claim_persists_across_instances(store):
    store.claim(1001)
    assert JsonStore(store.path).exists(1001)
    assert not JsonStore(store.path).exists(1002)


def test_history_round_trips_in_order(store):
    store.claim(5)
    ledger = Ledger.open(store, 5)
    written = [
        AttemptResult(1, 2.5, True),
        AttemptResult(2, 4.1, False),
        AttemptResult(2, 1.75, True),
        AttemptResult(3, 0.9, False),
    ]
    for r in written:
        ledger.append(r)
    reopened = Ledger.open(JsonStore(store.path), 5)
    assert reopened.history == written


def test_history_stored_with_original_keys(store):
    store.claim(5)
    Ledger.open(store, 5).append(AttemptResult(1, 2.5, True))
    with open(store.path) as f:
        data = json.load(f)
    assert data["users"]["5"]["history"] == [{"level": 1, "time": 2.5, "wasCompleted": True}]


def test_personal_best_only_increases(ledger):
    seen = []
    for level in [1, 3, 2, 3, 5, 4, 1]:
        ledger.update_best_if_higher(level)
        seen.append(ledger.personal_best)
    assert seen == [1, 3, 3, 3, 5, 5, 5]
    assert Ledger.open(JsonStore(ledger.store.path), ledger.user_id).personal_best == 5


def test_update_best_reports_change(ledger):
    assert ledger.update_best_if_higher(2) is True
    assert ledger.update_best_if_higher(2) is False
    assert ledger.update_best_if_higher(1) is False


def test_append_does_not_deduplicate(ledger):
    r = AttemptResult(1, 1.0, True)
    ledger.append(r)
    ledger.append(r)
    assert ledger.history == [r, r]


def test_malformed_history_falls_back_to_empty(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"users": {
        "3": {"personalBest": 4, "history": [{"level": 1, "oops": True}]},
        "4": {"personalBest": 2, "history": [{"level": 2, "time": 1.5, "wasCompleted": False}]},
    }}))
    store = JsonStore(str(path))
    broken = store.load_profile(3)
    assert broken.history == []
    assert broken.personal_best == 4
    assert store.load_profile(4).history == [AttemptResult(2, 1.5, False)]


def test_unreadable_file_starts_empty(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text("{not json")
    store = JsonStore(str(path))
    assert store.data == {"users": {}}
    assert store.load_profile(1) is None


def test_open_unknown_user_gives_empty_profile(store):
    ledger = Ledger.open(store, 99)
    assert ledger.history == []
    assert ledger.personal_best == 0


def test_save_creates_missing_folder(tmp_path):
    store = JsonStore(str(tmp_path / "nested" / "dir" / "profiles.json"))
    store.claim(8)
    assert (tmp_path / "nested" / "dir" / "profiles.json").exists()


@pytest.mark.parametrize("item", [
    {"level": 1, "time": 2.0, "wasCompleted": "false"},
    {"level": 1.7, "time": 2.0, "wasCompleted": True},
    {"level": "2", "time": 2.0, "wasCompleted": True},
    {"level": 1, "time": "2.0", "wasCompleted": False},
    {"level": True, "time": 2.0, "wasCompleted": False},
])
def test_wrongly_typed_entry_is_rejected(item):
    with pytest.raises(ValueError):
        AttemptResult.from_dict(item)


def test_wrongly_typed_history_falls_back_to_empty(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"users": {
        "3": {"personalBest": 1, "history": [{"level": 1, "time": 2.0, "wasCompleted": "false"}]},
    }}))
    assert JsonStore(str(path)).load_profile(3).history == []


@pytest.mark.parametrize("record", [[1, 2], "oops", 7])
def test_record_that_is_not_an_object(tmp_path, record):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps({"users": {"3": record}}))
    store = JsonStore(str(path))
    profile = store.load_profile(3)
    assert profile.history == []
    assert profile.personal_best == 0
    ledger = Ledger(store, profile)
    ledger.append(AttemptResult(1, 1.0, True))
    assert JsonStore(str(path)).load_profile(3).history == [AttemptResult(1, 1.0, True)]

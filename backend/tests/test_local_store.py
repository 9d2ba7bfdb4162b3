"""Tests for the local fallback storage"""
import json
from app.client.local_store import LocalRecordStore, LocalStorage, legacy_note

KEY = "planner-2024-03-05"


def test_note_round_trip(local_store):
    note = {"text": "Pray", "color": "red", "emoji": "none", "checklist": [], "image": None, "time": 6, "reminder": None}
    local_store.save_note(KEY, note)
    assert local_store.load_note(KEY) == note
    assert local_store.storage.get_item(KEY) is not None


def test_empty_note_is_removed(local_store):
    local_store.save_note(KEY, {"text": "x", "time": None})
    local_store.save_note(KEY, {"text": "", "color": "none", "emoji": "none", "checklist": [], "time": None})
    assert local_store.load_note(KEY) is None
    assert local_store.storage.get_item(KEY) is None


def test_legacy_plain_text_note_is_reconstructed(local_store):
    local_store.storage.set_item(KEY, "Remember the milk")
    assert local_store.load_note(KEY) == legacy_note("Remember the milk")


def test_non_object_json_note_is_treated_as_legacy(local_store):
    local_store.storage.set_item(KEY, "42")
    assert local_store.load_note(KEY)["text"] == "42"


def test_note_without_time_gets_null_time(local_store):
    local_store.storage.set_item(KEY, json.dumps({"text": "old"}))
    assert local_store.load_note(KEY) == {"text": "old", "time": None}


def test_plans_use_prefixed_key(local_store):
    local_store.save_plan(KEY, {"hourlyPlans": {"9": "Standup"}, "tasks": [], "notes": ""})
    assert local_store.storage.get_item(f"plan-{KEY}") is not None
    assert local_store.storage.get_item(KEY) is None
    assert local_store.load_plan(KEY)["hourlyPlans"] == {"9": "Standup"}


def test_corrupt_plan_reads_as_none(local_store):
    local_store.storage.set_item(f"plan-{KEY}", "{broken")
    assert local_store.load_plan(KEY) is None


def test_delete_is_idempotent(local_store):
    local_store.save_plan(KEY, {"notes": "x"})
    local_store.delete_plan(KEY)
    local_store.delete_plan(KEY)
    local_store.delete_note(KEY)
    assert local_store.load_plan(KEY) is None


def test_load_all_notes_skips_plans_and_other_keys(local_store):
    local_store.save_note(KEY, {"text": "a", "time": None})
    local_store.save_plan(KEY, {"notes": "b"})
    local_store.storage.set_item("darkMode", "true")
    assert list(local_store.load_all_notes()) == [KEY]


def test_preferences_merge(local_store):
    local_store.save_preferences({"darkMode": True})
    local_store.save_preferences({"theme": "forest"})
    assert local_store.load_preferences() == {"darkMode": True, "theme": "forest"}


def test_file_backed_storage_persists(tmp_path):
    path = tmp_path / "local_storage.json"
    store = LocalRecordStore(LocalStorage(path))
    store.save_note(KEY, {"text": "persisted", "time": None})

    reopened = LocalRecordStore(LocalStorage(path))
    assert reopened.load_note(KEY)["text"] == "persisted"


def test_corrupt_note_fields_are_recovered(local_store):
    local_store.storage.set_item(KEY, json.dumps({"text": "x", "checklist": None}))
    assert local_store.load_note(KEY) == legacy_note("x")


def test_corrupt_note_without_text_string_recovers_empty(local_store):
    local_store.storage.set_item(KEY, json.dumps({"text": 7, "time": "noon"}))
    assert local_store.load_note(KEY) == legacy_note("")


def test_corrupt_plan_fields_read_as_none(local_store):
    local_store.storage.set_item(f"plan-{KEY}", json.dumps({"tasks": "not a list"}))
    assert local_store.load_plan(KEY) is None


def test_offline_load_of_corrupt_note_does_not_raise(offline_data_access, local_store):
    local_store.storage.set_item(KEY, json.dumps({"text": "x", "checklist": None}))
    note = offline_data_access.load_note(KEY)
    assert note.text == "x"
    assert note.checklist == []

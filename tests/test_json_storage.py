from __future__ import annotations

import json

import pytest

from portal.repositories.base import StorageReadError
from portal.repositories.json_storage import JsonUserRepository


def test_initialize_creates_empty_array_once(data_file):
    repo = JsonUserRepository(data_file)
    repo.initialize()
    assert json.loads(data_file.read_text(encoding="utf-8")) == []

    data_file.write_text('[{"id": 1}]', encoding="utf-8")
    repo.initialize()
    assert repo.load_all() == [{"id": 1}]


def test_missing_file_is_empty(data_file):
    assert JsonUserRepository(data_file).load_all() == []


@pytest.mark.parametrize("content", ["{ broken", '{"users": []}', ""])
def test_unreadable_file_raises(data_file, content):
    data_file.write_text(content, encoding="utf-8")

    with pytest.raises(StorageReadError):
        JsonUserRepository(data_file).load_all()


def test_save_overwrites_whole_collection_in_order(data_file):
    repo = JsonUserRepository(data_file)
    records = [{"id": 2, "location": "Jodhpur"}, {"id": 1, "location": "Udaipur"}]

    assert repo.save_all(records) is True
    assert repo.save_all(records[:1]) is True

    text = data_file.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "id": 2')
    assert repo.load_all() == records[:1]
    assert not data_file.with_name("users.json.tmp").exists()


def test_non_ascii_text_is_kept_readable(data_file):
    repo = JsonUserRepository(data_file)
    repo.save_all([{"name": "आशा", "location": "जयपुर"}])

    assert "जयपुर" in data_file.read_text(encoding="utf-8")
    assert repo.load_all()[0]["name"] == "आशा"


def test_save_failure_returns_false(tmp_path):
    repo = JsonUserRepository(tmp_path / "missing-dir" / "users.json")

    assert repo.save_all([{"id": 1}]) is False


def test_non_object_entries_are_refused_instead_of_dropped(data_file):
    original = '[{"id": 1, "email": "a@example.com"}, "legacy-entry"]'
    data_file.write_text(original, encoding="utf-8")

    with pytest.raises(StorageReadError):
        JsonUserRepository(data_file).load_all()
    assert data_file.read_text(encoding="utf-8") == original

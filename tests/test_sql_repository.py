"""
Smoke tests for the SQL-backed store against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from portal.app import create_app
from portal.core import config as core_config
from portal.db import dispose_engines
from portal.repositories import build_repository
from portal.repositories.sql_repository import SQLUserRepository
from portal.services.user_service import UserNotFoundError, UserService

from helpers import citizen, make_settings


@pytest.fixture()
def db_url(tmp_path, monkeypatch):
    """SQLite URL passed explicitly; DATABASE_URL stays unset so nothing reads the env."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()

    yield f"sqlite:///{tmp_path / 'test.db'}"

    # release pooled connections so the file is not left locked on Windows
    dispose_engines()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def repo(db_url) -> SQLUserRepository:
    repository = SQLUserRepository(db_url)
    repository.initialize()
    return repository


def _record(email, record_id, location="Jaipur"):
    record = citizen(email, location=location)
    record.update(id=record_id, registeredAt="2024-05-01T10:20:30.123Z")
    return record


def test_initialize_then_empty(repo):
    assert repo.load_all() == []


def test_url_is_required(db_url):
    with pytest.raises(RuntimeError):
        SQLUserRepository("")
    with pytest.raises(RuntimeError):
        build_repository(make_settings(storage_backend="sql", database_url=""))


def test_save_all_replaces_collection_and_keeps_order(repo):
    records = [_record("c@example.com", 30), _record("a@example.com", 10), _record("b@example.com", 20)]

    assert repo.save_all(records) is True
    assert repo.load_all() == records

    assert repo.save_all(records[1:]) is True
    assert [r["email"] for r in repo.load_all()] == ["a@example.com", "b@example.com"]


def test_failed_save_leaves_previous_rows(repo):
    repo.save_all([_record("a@example.com", 1)])

    # duplicate e-mail violates the unique constraint
    assert repo.save_all([_record("x@example.com", 2), _record("x@example.com", 3)]) is False
    assert [r["email"] for r in repo.load_all()] == ["a@example.com"]


def test_stores_with_different_urls_are_independent(tmp_path, repo):
    other = SQLUserRepository(f"sqlite:///{tmp_path / 'other.db'}")
    other.initialize()

    repo.save_all([_record("a@example.com", 1)])

    assert other.load_all() == []


def test_service_over_sql_store(repo):
    svc = UserService(repo)

    svc.register(citizen("a@example.com", location="Jaipur"))
    svc.register(citizen("b@example.com", location="Delhi"))
    svc.delete_user("a@example.com")

    assert [u["email"] for u in svc.list_users()] == ["b@example.com"]
    assert svc.stats()["locationWiseUsers"] == {"Delhi": 1}
    with pytest.raises(UserNotFoundError):
        svc.get_user("a@example.com")


def test_app_uses_injected_database_url(db_url):
    settings = make_settings(storage_backend="sql", database_url=db_url)

    with TestClient(create_app(settings)) as client:
        created = client.post("/api/register", json=citizen("sql@example.com"))
        listed = client.get("/api/users").json()

    assert created.status_code == 200
    assert listed["count"] == 1
    assert SQLUserRepository(db_url).load_all()[0]["email"] == "sql@example.com"

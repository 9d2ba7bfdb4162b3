"""Shared fixtures: a temp document store, the API app wired to it, and data access layers"""
import pytest
import requests
from unittest.mock import Mock
from fastapi.testclient import TestClient
from app.client.data_access import PlannerDataAccess
from app.client.local_store import LocalRecordStore, LocalStorage
from app.client.remote import RemotePlannerAPI
from app.database import get_document_store
from app.main import app
from app.services.document_store import DocumentStore


@pytest.fixture
def document_store(tmp_path):
    store = DocumentStore(tmp_path / "data" / "database.json")
    store.initialize()
    return store


@pytest.fixture
def api_app(document_store):
    app.dependency_overrides[get_document_store] = lambda: document_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(api_app):
    return TestClient(api_app)


@pytest.fixture
def local_store():
    return LocalRecordStore(LocalStorage())


@pytest.fixture
def remote(test_client):
    return RemotePlannerAPI(base_url="http://testserver", session=test_client)


@pytest.fixture
def data_access(remote, local_store):
    """Data access layer whose remote is the in-process API"""
    return PlannerDataAccess(remote=remote, local=local_store)


@pytest.fixture
def offline_session():
    session = Mock()
    session.request.side_effect = requests.exceptions.ConnectionError("connection refused")
    return session


@pytest.fixture
def offline_data_access(offline_session, local_store):
    """Data access layer whose remote is unreachable"""
    remote = RemotePlannerAPI(base_url="http://planner.invalid", session=offline_session)
    return PlannerDataAccess(remote=remote, local=local_store)

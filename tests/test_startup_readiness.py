from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.main import _check_workspace_root, _initialize_generator_settings, app
from infrastructure.settings_store import SettingsStore
from services.orchestrator import Orchestrator


def test_health_reports_initializing_before_startup() -> None:
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "initializing"


def test_initialize_generator_settings_stores_defaults() -> None:
    orchestrator = Orchestrator(SettingsStore())

    _initialize_generator_settings(FastAPI(), orchestrator)

    assert orchestrator.settings_store.snapshot() == {
        "packageName": "com.example.stepdefinitions",
        "className": "StepDefinitions",
    }


def test_check_workspace_root_accepts_missing_and_existing(tmp_path) -> None:
    fastapi_app = FastAPI()
    fastapi_app.state.workspace_root = None
    _check_workspace_root(fastapi_app, SimpleNamespace())

    fastapi_app.state.workspace_root = str(tmp_path)
    _check_workspace_root(fastapi_app, SimpleNamespace())


def test_check_workspace_root_fails_for_unknown_directory(tmp_path) -> None:
    fastapi_app = FastAPI()
    fastapi_app.state.workspace_root = str(tmp_path / "missing")

    with pytest.raises(RuntimeError):
        _check_workspace_root(fastapi_app, SimpleNamespace())

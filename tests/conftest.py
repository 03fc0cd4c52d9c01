from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
import sse_starlette.sse
from fastapi.testclient import TestClient

from services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    # sse-starlette keeps an exit event bound to the first event loop it saw
    app_status = getattr(sse_starlette.sse, "AppStatus", None)
    if app_status is not None and hasattr(app_status, "should_exit_event"):
        app_status.should_exit_event = None

    from main import app

    with TestClient(app) as test_client:
        yield test_client

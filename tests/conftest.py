"""Root conftest for tests."""

import os

import pytest

if os.getenv("APP_ENV", "").strip().lower() == "prod":
    raise RuntimeError("Refusing to run tests with APP_ENV=prod")

os.environ["APP_ENV"] = "local"
os.environ.setdefault("SERVER_PORT", "3003")
os.environ.setdefault("METRICS_TOKEN", "test-metrics-token")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    dir_marker_map = {
        "unit": pytest.mark.unit,
        "smoke": pytest.mark.smoke,
    }
    for item in items:
        test_path = str(item.fspath)
        for dir_name, marker in dir_marker_map.items():
            if f"/{dir_name}/" in test_path or f"\\{dir_name}\\" in test_path:
                item.add_marker(marker)
                break


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point every store at a fresh temporary data directory."""
    from learning_patterns.core.config import reload_settings
    from learning_patterns.core.storage import reset_storage

    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
    reload_settings()
    reset_storage()
    yield tmp_path
    monkeypatch.delenv("STORAGE_DATA_DIR", raising=False)
    reload_settings()
    reset_storage()


@pytest.fixture
def storage(data_dir):
    from learning_patterns.core.storage import get_storage

    return get_storage()


@pytest.fixture
def fixed_now():
    from datetime import UTC, datetime

    return datetime(2026, 3, 14, 9, 30, 0, tzinfo=UTC)


@pytest.fixture
def sample_answers():
    """Raw questionnaire answers as a client would post them."""
    return [
        {"questionId": 1, "pattern": "visual", "weight": 2, "responseTime": 5000},
        {"questionId": 2, "pattern": "visual", "weight": 1, "responseTime": 6000},
        {"questionId": 3, "pattern": "auditory", "weight": 1, "responseTime": 4000},
        {"questionId": 4, "pattern": "kinesthetic", "weight": 1, "responseTime": 8000},
        {"questionId": 5, "pattern": "visual", "weight": 1, "responseTime": 7000},
    ]

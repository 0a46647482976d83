import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from devdesk.core.config import AppSettings


def test_defaults_point_at_sqlite_file_in_data_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DB_URL", raising=False)

    settings = AppSettings(_env_file=None, DATA_DIR=tmp_path)

    assert settings.DB_URL == f"sqlite:///{tmp_path / 'devdesk.db'}"
    assert settings.uses_file_database
    assert settings.STATIC_DIR.name == "static"
    assert (settings.STATIC_DIR / "index.html").is_file()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://desk.example.com, http://localhost:5173 ,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.DB_URL == "sqlite://"
    assert not settings.uses_file_database
    assert settings.ALLOWED_ORIGINS == ["https://desk.example.com", "http://localhost:5173"]
    assert settings.LOG_LEVEL == "DEBUG"

# infra/path.py
from __future__ import annotations
import os
import sys
from pathlib import Path

APP_NAME = "FactoryTaskTracker"
COMPANY_NAME = "FactoryOps"


def user_data_dir() -> Path:
    """
    Returns a per-user data directory, e.g.:

    Windows:
        C:\\Users\\<User>\\AppData\\Roaming\\FactoryOps\\FactoryTaskTracker

    macOS:
        ~/Library/Application Support/FactoryOps/FactoryTaskTracker

    Linux:
        ~/.local/share/FactoryOps/FactoryTaskTracker

    FTT_DATA_DIR overrides all of the above.
    """
    override = os.getenv("FTT_DATA_DIR", "").strip()
    if override:
        path = Path(override).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path

    try:
        if sys.platform.startswith("win"):
            base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        elif sys.platform == "darwin":
            base = Path.home() / "Library" / "Application Support"
        else:
            base = Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))

        path = base / COMPANY_NAME / APP_NAME
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError:
        fallback = Path.home() / f".{APP_NAME}"
        fallback.mkdir(parents=True, exist_ok=True)
        return fallback


def default_db_path() -> Path:
    return user_data_dir() / "factory_tasks.db"


def default_db_url() -> str:
    override = os.getenv("FTT_DB_URL", "").strip()
    if override:
        return override
    return f"sqlite:///{default_db_path().as_posix()}"

from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any

USER_CONFIG_PATH = Path.home() / ".taskpane_config.yaml"
DEFAULT_DATA_DIR = Path.home() / ".taskpane"


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _save_config(data: Dict[str, Any]) -> None:
    if not data:
        if USER_CONFIG_PATH.exists():
            USER_CONFIG_PATH.unlink()
        return
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    USER_CONFIG_PATH.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


def _set_value(key: str, value: str) -> None:
    data = _load_config()
    value = (value or "").strip()
    if value:
        data[key] = value
    else:
        data.pop(key, None)
    _save_config(data)


def get_db_path() -> Path:
    env_path = os.getenv("TASKPANE_DB")
    if env_path:
        return Path(env_path).expanduser()
    configured = str(_load_config().get("db_path", "") or "").strip()
    if configured:
        return Path(configured).expanduser()
    return DEFAULT_DATA_DIR / "local.db"


def get_log_dir() -> Path:
    configured = str(_load_config().get("log_dir", "") or "").strip()
    return Path(configured).expanduser() if configured else DEFAULT_DATA_DIR / "logs"


def get_user_theme() -> str:
    return str(_load_config().get("theme", "") or "").strip()


def set_user_theme(value: str) -> None:
    _set_value("theme", value)


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()


def set_user_lang(value: str) -> None:
    _set_value("lang", value)

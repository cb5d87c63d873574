"""Runtime settings resolved from Streamlit secrets, env vars, or an env file."""
from __future__ import annotations

import os
from pathlib import Path

from retorno.core.utils import get_config_value, load_env_file

DEFAULT_ENV_FILE = Path("secrets/retorno.env")
DEFAULT_INPUT_PATH = Path("uploads/base_no_compradores.xlsx")
DEFAULT_CURSOR_PATH = Path("output/.retorno_cursor.json")
DEFAULT_SHEET_NAME = "retorno"
DEFAULT_GREETING = "Hola {name}!"
DEFAULT_EXPORT_FILENAME = "resultados.xlsx"

_ENV_LOADED = False


def _ensure_env() -> None:
    """Populate unset env vars from secrets/retorno.env once per process."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True

    env_path = Path(os.getenv("RETORNO_ENV_FILE", DEFAULT_ENV_FILE))
    load_env_file(env_path)


def input_path() -> Path:
    _ensure_env()
    return Path(get_config_value("RETORNO_INPUT_PATH", str(DEFAULT_INPUT_PATH)))


def sheet_name() -> str:
    _ensure_env()
    return get_config_value("RETORNO_SHEET_NAME", DEFAULT_SHEET_NAME) or DEFAULT_SHEET_NAME


def cursor_path() -> Path:
    _ensure_env()
    return Path(get_config_value("RETORNO_CURSOR_PATH", str(DEFAULT_CURSOR_PATH)))


def greeting_template() -> str:
    """Message template for the WhatsApp greeting; ``{name}`` is the customer."""

    _ensure_env()
    return get_config_value("RETORNO_GREETING", DEFAULT_GREETING) or DEFAULT_GREETING


def open_browser_enabled() -> bool:
    _ensure_env()
    return get_config_value("RETORNO_OPEN_BROWSER", "1") == "1"

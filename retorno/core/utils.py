"""Lookup helpers behind the ``RETORNO_*`` settings."""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: str = "") -> str:
    """Return a ``RETORNO_*`` setting.

    A deployed dashboard reads ``st.secrets``; the CLI and a local dashboard
    read the process environment, which ``load_env_file`` may have filled.
    """
    try:
        import streamlit as st

        if key in st.secrets:
            return str(st.secrets[key])
    except (ImportError, FileNotFoundError, KeyError):
        pass

    return os.getenv(key, default)


def load_env_file(path: Path) -> None:
    """Copy ``KEY=value`` lines from ``secrets/retorno.env`` into ``os.environ``.

    Blank lines and ``#`` comments are skipped, surrounding quotes are
    removed, and variables already exported in the shell are left alone.
    """
    if not path.is_file():
        logger.debug("No env file at %s", path)
        return

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.warning("Could not read env file %s: %s", path, exc)
        return

    for line in lines:
        key, sep, value = line.strip().partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#") or key in os.environ:
            continue
        os.environ[key] = value.strip().strip('"').strip("'")

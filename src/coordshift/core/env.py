"""
`.env` discovery and loading.

The CLI can be launched from anywhere (shell, cron, another project's venv), so the
`.env` file is looked up from the working directory upwards instead of assuming CWD.

This module provides:
- `find_env_file()`: locate the `.env` to use (explicit `COORDSHIFT_ENV_FILE` first)
- `load_dotenv_if_present()`: load it once; never overrides already-set env vars
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


def _iter_parents(start: Path) -> list[Path]:
    start = start.resolve()
    return [start, *list(start.parents)]


def find_env_file() -> Path | None:
    """Return the `.env` path to load, or None when there is none."""
    explicit = os.getenv("COORDSHIFT_ENV_FILE")
    if explicit:
        p = Path(explicit).expanduser().resolve()
        return p if p.is_file() else None

    for candidate in _iter_parents(Path.cwd()):
        env_path = candidate / ".env"
        if env_path.is_file():
            return env_path
        # Stop at the repo boundary.
        if (candidate / ".git").exists():
            break
    return None


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None)."""
    env_path = find_env_file()
    if env_path is None:
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path

"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def load_secret_file_variables() -> List[str]:
    """
    Resolve environment variables that follow Docker secret conventions.

    For every KEY_FILE entry, read the referenced file and expose its
    contents via KEY unless KEY is already set (e.g. PROMETHEUS_URL_FILE
    for a backend URL that embeds credentials). Unreadable files are
    logged and skipped.

    Returns:
        The names of the variables that were populated.
    """

    loaded: List[str] = []
    for key, file_path in list(os.environ.items()):
        if not key.endswith("_FILE") or not file_path:
            continue
        target_key = key[: -len("_FILE")]
        if os.environ.get(target_key):
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        loaded.append(target_key)
    return loaded


# Resolve secrets as soon as the settings module imports this one
load_secret_file_variables()

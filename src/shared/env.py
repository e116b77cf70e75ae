"""Resolve Docker-style ``*_FILE`` secrets into plain environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def load_secret_file_variables() -> None:
    """
    Expose the contents of every ``KEY_FILE`` variable as ``KEY``.

    Used for ``IOBROKER_PASSWORD_FILE`` and friends. A value already present
    in ``KEY`` wins. Unreadable files are logged and skipped.
    """

    for key, file_path in list(os.environ.items()):
        if not key.endswith("_FILE") or key == "LOG_FILE":
            continue
        target_key = key[: -len("_FILE")]
        if os.environ.get(target_key) or not file_path:
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )


load_secret_file_variables()

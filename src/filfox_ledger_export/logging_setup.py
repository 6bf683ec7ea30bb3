from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def setup_logging(level: int | str | None = "INFO") -> None:
    """
    Configure the root logger once for CLI usage.
    Library modules only call logging.getLogger(__name__).
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(_parse_level(level))
    else:
        logging.basicConfig(level=_parse_level(level), format=_FORMAT, stream=sys.stderr)

    # keep per-request httpx chatter out of INFO output
    logging.getLogger("httpx").setLevel(logging.WARNING)

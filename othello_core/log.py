from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def _truthy(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'on')


def configure_logging(level: Optional[str] = None) -> int:
    """
    Configures root logging for the CLI and the Flask app.
    Level comes from the argument, else OTHELLO_LOG_LEVEL (default WARNING);
    OTHELLO_DEBUG=1 forces DEBUG.
    """
    name = level or os.getenv('OTHELLO_LOG_LEVEL', 'WARNING')
    resolved = logging.getLevelName(name.strip().upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    if _truthy(os.getenv('OTHELLO_DEBUG')):
        resolved = logging.DEBUG
    logging.basicConfig(level=resolved, format=_FORMAT)
    logging.getLogger().setLevel(resolved)
    return resolved

from __future__ import annotations

import logging
import os
import sys

_TRUTHY = ('1', 'true', 'yes', 'on')
_configured = False


def debug_enabled() -> bool:
    """Set TRIPEAKS_DEBUG=1 to get search and parsing traces on stderr."""
    return os.getenv('TRIPEAKS_DEBUG', '0').lower() in _TRUTHY


def configure(debug: bool = False) -> None:
    """Installs a stderr handler on the package logger, once."""
    global _configured
    logger = logging.getLogger('tripeaks_core')
    logger.setLevel(logging.DEBUG if (debug or debug_enabled()) else logging.WARNING)
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('[%(name)s] %(levelname)s: %(message)s'))
    logger.addHandler(handler)
    _configured = True

"""Logger factory shared by calculations, registry and input parsing."""

from __future__ import annotations

import logging

from loan_interest.config import LOG_LEVEL

_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
_ROOT_NAME = 'loan_interest'
_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    level = logging.getLevelName(LOG_LEVEL)
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace, configuring it on first use."""
    _configure_root()
    if name == _ROOT_NAME or name.startswith(f'{_ROOT_NAME}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{_ROOT_NAME}.{name}')

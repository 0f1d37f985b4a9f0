from __future__ import annotations

import contextvars
from typing import Any, Dict

_run_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("dns_check_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_run_context.get())


class context(object):
    """Temporarily bind run fields (hostname, selector, server) to every record."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token = None

    def __enter__(self):
        current = get_context()
        current.update({k: v for k, v in self._values.items() if v is not None})
        self._token = _run_context.set(current)
        return current

    def __exit__(self, exc_type, exc, tb):
        if self._token is not None:
            _run_context.reset(self._token)
        return False

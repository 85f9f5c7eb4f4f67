from __future__ import annotations

import uuid
from contextvars import ContextVar, Token
from typing import Optional

MAX_REQUEST_ID_LENGTH = 128

_request_id_ctx_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def _is_usable(candidate: str) -> bool:
    if not candidate or len(candidate) > MAX_REQUEST_ID_LENGTH:
        return False
    return all(33 <= ord(ch) <= 126 for ch in candidate)


def set_request_id(request_id: Optional[str] = None) -> Token:
    """Bind the id for the current request, falling back to a fresh UUID4.

    Client supplied ids are only trusted when they are short runs of visible ASCII,
    so they can be echoed into headers and log records unchanged.
    """
    value = request_id.strip() if request_id else ""
    if not _is_usable(value):
        value = str(uuid.uuid4())
    return _request_id_ctx_var.set(value)


def get_request_id() -> Optional[str]:
    return _request_id_ctx_var.get()


def reset_request_id(token: Token) -> None:
    _request_id_ctx_var.reset(token)

from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from slisp.config import check_scoping, get_scoping as _configured_scoping

# Active scoping mode. Interpreters install their own mode only for the
# duration of an eval, so sessions never see each other's choice.
_scoping: ContextVar[Optional[str]] = ContextVar("slisp_scoping", default=None)


def set_scoping(mode: str | None) -> None:
    """Select 'dynamic' or 'lexical' scoping; None falls back to the configured mode."""
    _scoping.set(check_scoping(mode) if mode is not None else None)


def get_scoping() -> str:
    mode = _scoping.get()
    if mode is None:
        return _configured_scoping()
    return mode


@contextmanager
def scoping(mode: str) -> Iterator[None]:
    """Run the enclosed block under `mode`, restoring the previous one after."""
    token = _scoping.set(check_scoping(mode))
    try:
        yield
    finally:
        _scoping.reset(token)

"""Scoped fields for structured logging.

Fields pushed here (request id, profile id, language) are injected into
every log record emitted inside the scope by ContextualFilter. Storage is a
ContextVar, so concurrent scoring calls in threads or tasks never see each
other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("jobboard_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active fields."""
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge fields into the active context.

    Returns:
        Token for pop_log_context()

    Example:
        >>> token = push_log_context(profile_id="p-42", lang="uz")
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop all fields (used by tests)."""
    LogContextVar.set({})


class log_context:
    """Context manager pushing fields for the duration of a block.

    Example:
        >>> with log_context(profile_id="p-42"):
        ...     scorer.rank(profile, jobs)  # records carry profile_id
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False

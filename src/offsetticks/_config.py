# src/offsetticks/_config.py
from __future__ import annotations

from contextlib import ContextDecorator
from dataclasses import dataclass
from typing import Any, Dict

_BASE_TOKENS: Dict[str, Any] = {
    "trim_zeros": True,
    "warn": True,
    "grouping": False,
    "group_sep": ",",
    "group_size": 3,
}


def _validate(tokens: Dict[str, Any]) -> None:
    for key in ("trim_zeros", "warn", "grouping"):
        if key in tokens and not isinstance(tokens[key], bool):
            raise ValueError(f"Config token '{key}' must be a bool, got {tokens[key]!r}.")
    if "group_sep" in tokens:
        sep = tokens["group_sep"]
        if not isinstance(sep, str):
            raise ValueError(f"Config token 'group_sep' must be a string, got {sep!r}.")
        # '.' is the decimal point of every %-conversion; digits would merge into the number.
        if "." in sep or any(c.isdigit() for c in sep):
            raise ValueError(f"Config token 'group_sep' cannot contain '.' or digits, got {sep!r}.")
    if "group_size" in tokens:
        size = tokens["group_size"]
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Config token 'group_size' must be a positive int, got {size!r}.")


@dataclass
class _ConfigManager:
    tokens: Dict[str, Any]

    def __post_init__(self) -> None:
        self._stack: list[Dict[str, Any]] = []

    def update(self, **tokens: Any) -> None:
        unknown = sorted(set(tokens) - set(_BASE_TOKENS))
        if unknown:
            raise ValueError(
                f"Unknown config tokens: {', '.join(unknown)}. Available: {', '.join(sorted(_BASE_TOKENS))}."
            )
        _validate(tokens)
        self.tokens.update(tokens)

    def reset(self) -> None:
        self.tokens = dict(_BASE_TOKENS)
        self._stack.clear()

    def push(self, overrides: Dict[str, Any]) -> None:
        self._stack.append(dict(self.tokens))
        try:
            self.update(**overrides)
        except ValueError:
            self.tokens = self._stack.pop()
            raise

    def pop(self) -> None:
        if not self._stack:
            return
        self.tokens = self._stack.pop()

    def get(self, key: str) -> Any:
        return self.tokens[key]


class temp(ContextDecorator):
    """Temporarily override config tokens inside a ``with`` block or decorated call."""

    def __init__(self, **tokens: Any):
        self._tokens = tokens

    def __enter__(self):
        _MANAGER.push(self._tokens)
        return self

    def __exit__(self, *exc):
        _MANAGER.pop()
        return False


_MANAGER = _ConfigManager(tokens=dict(_BASE_TOKENS))


def update(**tokens: Any) -> None:
    _MANAGER.update(**tokens)


def get(token: str) -> Any:
    return _MANAGER.get(token)


def reset() -> None:
    _MANAGER.reset()


def validate(**tokens: Any) -> None:
    """Check token values without applying them; raises ValueError."""
    _validate(tokens)


def resolve(token: str, value: Any = None) -> Any:
    """Return ``value`` unless it is None, else the current config token."""
    if value is None:
        return _MANAGER.get(token)
    return value


__all__ = ["update", "get", "reset", "resolve", "validate", "temp"]

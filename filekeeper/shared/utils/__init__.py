"""Shared utilities: datetime."""

from filekeeper.shared.utils.datetime import current_millis, ensure_utc

__all__ = [
    "current_millis",
    "ensure_utc",
]

"""Shared telemetry: logging setup."""

from filekeeper.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]

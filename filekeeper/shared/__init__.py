"""Shared: logging setup and utilities used across layers."""

"""Exceptions raised by the build pipeline."""

from __future__ import annotations


class BuildDataError(RuntimeError):
    """Fatal input problem: the build cannot produce a resources file."""

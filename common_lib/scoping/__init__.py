"""Scoped resource acquisition helpers."""

from .scope import Scope, ScopeTwr, run_scoped

__all__ = ["Scope", "ScopeTwr", "run_scoped"]

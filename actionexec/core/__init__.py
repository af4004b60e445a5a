"""Per-run execution state and the pure matching helpers.

Kept free of dispatch concerns so both the action interpreter and the step
chain share one notion of "current user" and one match predicate.
"""
from __future__ import annotations

from actionexec.core.context import ContextFSM, ExecContext
from actionexec.core.matching import MISSING, matches, user_field

__all__ = ["MISSING", "ContextFSM", "ExecContext", "matches", "user_field"]

"""A small interpreter for read/match/log/noop action programs."""
from __future__ import annotations

from actionexec.actions import (
    Action,
    ActionType,
    LogAction,
    MatchAction,
    NoopAction,
    ReadAction,
    dump_actions,
    parse_action,
    parse_actions,
)
from actionexec.config import ExecOptions, stdout_sink
from actionexec.errors import ActionTreeTooDeep, ExecError, MissingUserError, UnknownActionType
from actionexec.exec import Exec, run_actions
from actionexec.models import ReadParams, User

__all__ = [
    "Action",
    "ActionTreeTooDeep",
    "ActionType",
    "Exec",
    "ExecError",
    "ExecOptions",
    "LogAction",
    "MatchAction",
    "MissingUserError",
    "NoopAction",
    "ReadAction",
    "ReadParams",
    "UnknownActionType",
    "User",
    "dump_actions",
    "parse_action",
    "parse_actions",
    "run_actions",
    "stdout_sink",
]

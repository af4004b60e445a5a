from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from actionexec.models import ReadParams, User

Reader = Callable[[ReadParams], User]
Sink = Callable[[Any], None]


def stdout_sink(value: Any) -> None:
    print(value)


@dataclass(frozen=True, slots=True)
class ExecOptions:
    """Collaborators for an interpreter.

    `reader` is mandatory; `logger` defaults to printing on stdout.
    """

    reader: Reader
    logger: Sink = field(default=stdout_sink)


@dataclass(frozen=True, slots=True)
class DemoSettings:
    user_id: int
    user_name: str
    user_age: int
    log_level: str
    actions_file: Path | None


def settings_from_env() -> DemoSettings:
    actions_file = os.environ.get("ACTIONEXEC_ACTIONS_FILE", "").strip()
    return DemoSettings(
        user_id=int(os.environ.get("ACTIONEXEC_USER_ID", "15")),
        user_name=os.environ.get("ACTIONEXEC_USER_NAME", "marcus"),
        user_age=int(os.environ.get("ACTIONEXEC_USER_AGE", "42")),
        log_level=os.environ.get("ACTIONEXEC_LOG_LEVEL", "WARNING").strip().upper(),
        actions_file=Path(actions_file) if actions_file else None,
    )

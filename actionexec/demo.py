"""Runnable example: `python -m actionexec.demo`.

Reads one stub user and logs their age if the name matches. Set
ACTIONEXEC_ACTIONS_FILE to run a JSON list of actions instead.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from actionexec.config import DemoSettings, ExecOptions, Reader, settings_from_env
from actionexec.exec import Exec
from actionexec.models import ReadParams, User

logger = logging.getLogger(__name__)


def default_actions(*, user_id: int) -> list[dict[str, Any]]:
    return [
        {"type": "read", "args": {"id": user_id}},
        {
            "type": "match",
            "args": {"name": "marcus"},
            "callback": {
                "onSuccess": {"type": "log", "args": "age"},
                "onFail": {"type": "noop"},
            },
        },
    ]


def make_stub_reader(settings: DemoSettings) -> Reader:
    def reader(params: ReadParams) -> User:
        return User(id=params.id, name=settings.user_name, age=settings.user_age)

    return reader


def load_actions(settings: DemoSettings) -> list[dict[str, Any]]:
    path = settings.actions_file
    if path is None:
        return default_actions(user_id=settings.user_id)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of actions")
    return data


def main() -> None:
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    settings = settings_from_env()
    logging.basicConfig(level=settings.log_level)

    actions = load_actions(settings)
    logger.info("running %d actions", len(actions))
    Exec(ExecOptions(reader=make_stub_reader(settings))).run(actions)


if __name__ == "__main__":
    main()

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from actionexec.config import ExecOptions
from actionexec.exec import Exec
from actionexec.models import ReadParams, User


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[Any] = []

    def __call__(self, value: Any) -> None:
        self.calls.append(value)


class StubReader:
    """Returns users from a fixed table and records every id it was asked for."""

    def __init__(self, users: dict[int, User]) -> None:
        self.users = users
        self.calls: list[int] = []

    def __call__(self, params: ReadParams) -> User:
        self.calls.append(params.id)
        return self.users[params.id]


@pytest.fixture()
def marcus() -> User:
    return User(id=15, name="marcus", age=42)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def reader(marcus: User) -> StubReader:
    return StubReader({15: marcus, 16: User(id=16, name="bob", age=30)})


@pytest.fixture()
def make_exec(reader: StubReader, sink: RecordingSink) -> Callable[..., Exec]:
    def _make(**overrides: Any) -> Exec:
        opts: dict[str, Any] = {"reader": reader, "logger": sink}
        opts.update(overrides)
        return Exec(ExecOptions(**opts))

    return _make

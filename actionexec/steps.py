"""Object-per-step form of the interpreter.

Each step executes itself and hands off to `next_step`. This is equivalent to a
flat action list; `MatchStep` ends its chain and continues through whichever
branch it picks.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from actionexec.core.context import ExecContext
from actionexec.core.matching import matches
from actionexec.models import ReadParams

if TYPE_CHECKING:
    from actionexec.exec import Exec


class Step(ABC):
    def __init__(self) -> None:
        self.next_step: Step | None = None

    def set_next(self, step: Step) -> Step:
        """Link `step` after this one and return it, so chains read left to right."""

        self.next_step = step
        return step

    def _continue(self, *, runner: Exec, ctx: ExecContext) -> None:
        if self.next_step is not None:
            self.next_step.execute(runner=runner, ctx=ctx)

    @abstractmethod
    def execute(self, *, runner: Exec, ctx: ExecContext) -> None:
        raise NotImplementedError


class ReadStep(Step):
    def __init__(self, params: ReadParams) -> None:
        super().__init__()
        self.params = params

    def execute(self, *, runner: Exec, ctx: ExecContext) -> None:
        ctx.set_user(runner.reader(self.params))
        self._continue(runner=runner, ctx=ctx)


class MatchStep(Step):
    def __init__(self, criteria: Mapping[str, Any], success: Step, fail: Step) -> None:
        super().__init__()
        self.criteria = dict(criteria)
        self.success = success
        self.fail = fail

    def execute(self, *, runner: Exec, ctx: ExecContext) -> None:
        user = ctx.require_user()
        branch = self.success if matches(self.criteria, user) else self.fail
        branch.execute(runner=runner, ctx=ctx)


class EffectStep(Step):
    """Log a user field (`log="age"`) or do nothing (`noop=True`)."""

    def __init__(self, *, log: str | None = None, noop: bool = False) -> None:
        super().__init__()
        if log is not None and noop:
            raise ValueError("EffectStep takes either log or noop, not both")
        self.log = log
        self.noop = noop

    def execute(self, *, runner: Exec, ctx: ExecContext) -> None:
        if self.log is not None:
            runner.execute_log(self.log, ctx)
        self._continue(runner=runner, ctx=ctx)

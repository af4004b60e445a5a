from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from actionexec.actions import Action, LogAction, MatchAction, NoopAction, ReadAction, parse_action
from actionexec.config import ExecOptions, Reader, Sink, stdout_sink
from actionexec.core.context import ExecContext
from actionexec.core.matching import MISSING, matches, user_field
from actionexec.errors import UnknownActionType

if TYPE_CHECKING:
    from actionexec.steps import Step

log = logging.getLogger(__name__)


class Exec:
    """Interpreter for the read/match/log/noop instruction set.

    Every `run` gets its own `ExecContext`; the instance itself holds no run state,
    so it can be reused (and called concurrently if the collaborators allow it).
    """

    def __init__(self, options: ExecOptions):
        self.options = options

    @property
    def reader(self) -> Reader:
        return self.options.reader

    @property
    def logger(self) -> Sink:
        return self.options.logger

    def new_context(self) -> ExecContext:
        return ExecContext()

    def run(self, actions: Iterable[Action | dict[str, Any]]) -> None:
        """Execute `actions` in order against a fresh context.

        Wire-format mappings are parsed as they are reached. Any error aborts the run.
        """

        ctx = self.new_context()
        count = 0
        for action in actions:
            self.execute_action(action, ctx)
            count += 1
        log.info("run finished: actions=%d phase=%s", count, ctx.fsm.phase)

    def run_steps(self, first: Step) -> None:
        ctx = self.new_context()
        first.execute(runner=self, ctx=ctx)
        log.info("step chain finished: phase=%s", ctx.fsm.phase)

    def execute_action(self, action: Action | dict[str, Any], ctx: ExecContext) -> None:
        if isinstance(action, Mapping):
            action = parse_action(action)

        log.debug("execute %s", getattr(action, "type", type(action).__name__))

        if isinstance(action, ReadAction):
            self.execute_read(action, ctx)
        elif isinstance(action, MatchAction):
            self.execute_match(action, ctx)
        elif isinstance(action, LogAction):
            self.execute_log(action.key, ctx)
        elif isinstance(action, NoopAction):
            return
        else:
            raise UnknownActionType(getattr(action, "type", type(action).__name__))

    def execute_read(self, action: ReadAction, ctx: ExecContext) -> None:
        user = self.reader(action.params)
        ctx.set_user(user)

    def execute_match(self, action: MatchAction, ctx: ExecContext) -> None:
        user = ctx.require_user()
        ok = matches(action.criteria, user)
        log.debug("match criteria=%r ok=%s", action.criteria, ok)

        next_action = action.on_success if ok else action.on_fail
        if next_action is not None:
            self.execute_action(next_action, ctx)

    def execute_log(self, key: str, ctx: ExecContext) -> None:
        user = ctx.require_user()
        value = user_field(user, key)
        # Unknown keys log the key itself.
        self.logger(key if value is MISSING else value)


def run_actions(actions: Iterable[Action | dict[str, Any]], *, reader: Reader, logger: Sink | None = None) -> None:
    Exec(ExecOptions(reader=reader, logger=logger or stdout_sink)).run(actions)

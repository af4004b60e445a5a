"""Optional pre-flight checks over an action list.

Validation never runs implicitly: `Exec.run` keeps its fail-at-position
semantics. Callers that want to reject a bad program before any reader or
logger call run a pipeline first.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from actionexec.actions import ACTION_MODELS, Action, LogAction, MatchAction, ReadAction, parse_actions
from actionexec.errors import ActionTreeTooDeep, MissingUserError, UnknownActionType


def _children(action: Action) -> Iterator[Action]:
    if isinstance(action, MatchAction):
        if action.on_success is not None:
            yield action.on_success
        if action.on_fail is not None:
            yield action.on_fail


class ActionValidator(ABC):
    """A small, composable check over a whole action list."""

    @abstractmethod
    def validate(self, *, actions: Sequence[Action]) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class KnownActionTypeValidator(ActionValidator):
    """Every node, nested continuations included, is one of the four action models."""

    def _check(self, action: Any) -> None:
        if not isinstance(action, ACTION_MODELS):
            raise UnknownActionType(getattr(action, "type", type(action).__name__))
        for child in _children(action):
            self._check(child)

    def validate(self, *, actions: Sequence[Action]) -> None:
        for a in actions:
            self._check(a)


@dataclass(frozen=True, slots=True)
class ReadBeforeUseValidator(ActionValidator):
    """A top-level match or log must come after some top-level read."""

    def validate(self, *, actions: Sequence[Action]) -> None:
        for a in actions:
            if isinstance(a, ReadAction):
                return
            if isinstance(a, (MatchAction, LogAction)):
                raise MissingUserError(f"Action '{a.type}' runs before any read")


@dataclass(frozen=True, slots=True)
class MaxDepthValidator(ActionValidator):
    max_depth: int = 32

    def _depth(self, action: Action) -> int:
        if not isinstance(action, MatchAction):
            return 0
        return 1 + max((self._depth(c) for c in _children(action)), default=0)

    def validate(self, *, actions: Sequence[Action]) -> None:
        for a in actions:
            depth = self._depth(a)
            if depth > self.max_depth:
                raise ActionTreeTooDeep(depth=depth, max_depth=self.max_depth)


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[ActionValidator, ...]

    def validate(self, *, actions: Sequence[Action]) -> None:
        for v in self.validators:
            v.validate(actions=actions)


DEFAULT_PIPELINE = ValidatorPipeline(
    validators=(
        KnownActionTypeValidator(),
        ReadBeforeUseValidator(),
    )
)


def validate_actions(items: Iterable[Any], *, pipeline: ValidatorPipeline = DEFAULT_PIPELINE) -> list[Action]:
    """Parse wire-format items and run `pipeline` over them. Returns the parsed models."""

    actions = parse_actions(items)
    pipeline.validate(actions=actions)
    return actions

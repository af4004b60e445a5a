"""The closed instruction set: read, match, log, noop.

Actions are plain frozen data. Behavior lives in the interpreter
(`actionexec.exec`), which dispatches on `type`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from actionexec.errors import UnknownActionType
from actionexec.models import ReadParams


class ActionType(StrEnum):
    read = "read"
    match = "match"
    log = "log"
    noop = "noop"


_KNOWN_TAGS = frozenset(t.value for t in ActionType)


class ReadAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["read"] = "read"
    params: ReadParams = Field(validation_alias=AliasChoices("params", "args"))


class MatchAction(BaseModel):
    """Compare `criteria` against the current user and run one continuation."""

    model_config = ConfigDict(frozen=True)

    type: Literal["match"] = "match"
    criteria: dict[str, Any] = Field(default_factory=dict, validation_alias=AliasChoices("criteria", "args"))
    on_success: Action | None = Field(default=None, validation_alias=AliasChoices("on_success", "onSuccess"))
    on_fail: Action | None = Field(default=None, validation_alias=AliasChoices("on_fail", "onFail"))

    @model_validator(mode="before")
    @classmethod
    def _lift_callback(cls, data: Any) -> Any:
        # {"callback": {"onSuccess": ..., "onFail": ...}} -> flat continuation fields.
        if not isinstance(data, Mapping) or "callback" not in data:
            return data
        out = dict(data)
        callback = out.pop("callback") or {}
        if not isinstance(callback, Mapping):
            raise ValueError("callback must be a mapping with onSuccess/onFail")
        for flat, camel in (("on_success", "onSuccess"), ("on_fail", "onFail")):
            if flat in callback:
                out.setdefault(flat, callback[flat])
            elif camel in callback:
                out.setdefault(flat, callback[camel])
        return out


class LogAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["log"] = "log"
    key: str = Field(validation_alias=AliasChoices("key", "args"))


class NoopAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["noop"] = "noop"


Action = Annotated[ReadAction | MatchAction | LogAction | NoopAction, Field(discriminator="type")]

ACTION_MODELS: tuple[type[BaseModel], ...] = (ReadAction, MatchAction, LogAction, NoopAction)

MatchAction.model_rebuild()

_ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


def _check_tags(data: Any) -> None:
    """Raise UnknownActionType for the first unknown tag in a raw action tree."""

    if isinstance(data, ACTION_MODELS):
        return
    if not isinstance(data, Mapping):
        raise UnknownActionType(type(data).__name__)

    tag = data.get("type")
    if not isinstance(tag, str) or tag not in _KNOWN_TAGS:
        raise UnknownActionType(tag)

    if tag == ActionType.match:
        callback = data.get("callback") or {}
        sources = (data, callback) if isinstance(callback, Mapping) else (data,)
        for key in ("on_success", "onSuccess", "on_fail", "onFail"):
            for source in sources:
                child = source.get(key)
                if child is not None:
                    _check_tags(child)


def parse_action(data: Any) -> Action:
    """Turn an action model or a wire-format mapping into an action model."""

    if isinstance(data, ACTION_MODELS):
        return data  # type: ignore[return-value]
    _check_tags(data)
    return _ACTION_ADAPTER.validate_python(data)


def parse_actions(items: Iterable[Any]) -> list[Action]:
    return [parse_action(item) for item in items]


def dump_actions(actions: Iterable[Action]) -> list[dict[str, Any]]:
    return [a.model_dump(mode="json") for a in actions]

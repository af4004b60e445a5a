from __future__ import annotations

import pytest
from pydantic import ValidationError

from actionexec.actions import (
    LogAction,
    MatchAction,
    NoopAction,
    ReadAction,
    dump_actions,
    parse_action,
    parse_actions,
)
from actionexec.errors import UnknownActionType
from actionexec.models import ReadParams


def test_callback_shape_and_flat_shape_parse_to_same_model() -> None:
    legacy = {
        "type": "match",
        "args": {"name": "marcus"},
        "callback": {
            "onSuccess": {"type": "log", "args": "age"},
            "onFail": {"type": "noop"},
        },
    }
    flat = {
        "type": "match",
        "criteria": {"name": "marcus"},
        "on_success": {"type": "log", "key": "age"},
        "on_fail": {"type": "noop"},
    }

    expected = MatchAction(criteria={"name": "marcus"}, on_success=LogAction(key="age"), on_fail=NoopAction())
    assert parse_action(legacy) == expected
    assert parse_action(flat) == expected


def test_read_accepts_args_alias() -> None:
    assert parse_action({"type": "read", "args": {"id": 15}}) == ReadAction(params=ReadParams(id=15))


def test_models_pass_through_unchanged() -> None:
    a = NoopAction()
    assert parse_action(a) is a


def test_unknown_tag_raises_unknown_action_type() -> None:
    with pytest.raises(UnknownActionType) as e:
        parse_action({"type": "write"})
    assert e.value.action_type == "write"


def test_unknown_nested_tag_raises_unknown_action_type() -> None:
    with pytest.raises(UnknownActionType) as e:
        parse_action({"type": "match", "args": {}, "callback": {"onFail": {"type": "delete"}}})
    assert e.value.action_type == "delete"


def test_missing_tag_is_unknown() -> None:
    with pytest.raises(UnknownActionType):
        parse_actions([{"args": {"id": 1}}])


def test_bad_payload_is_validation_error() -> None:
    with pytest.raises(ValidationError):
        parse_action({"type": "read", "args": {"id": "not-a-number"}})


def test_actions_are_frozen() -> None:
    a = LogAction(key="age")
    with pytest.raises(ValidationError):
        a.key = "name"  # type: ignore[misc]


def test_dump_then_parse_keeps_tree() -> None:
    actions = [
        ReadAction(params=ReadParams(id=15)),
        MatchAction(criteria={"name": "marcus"}, on_success=LogAction(key="age")),
    ]
    dumped = dump_actions(actions)
    assert dumped[0] == {"type": "read", "params": {"id": 15}}
    assert dumped[1]["on_success"] == {"type": "log", "key": "age"}
    assert parse_actions(dumped) == actions


@pytest.mark.parametrize("callback", [["x"], "onSuccess", 3])
def test_non_mapping_callback_is_validation_error(callback: object) -> None:
    with pytest.raises(ValidationError) as e:
        parse_action({"type": "match", "args": {}, "callback": callback})
    assert "callback must be a mapping" in str(e.value)

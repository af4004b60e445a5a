from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from actionexec.models import User


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Returned by `user_field` for keys that are not User fields.
MISSING: Any = _Missing()


def user_field(user: User, key: str) -> Any:
    """Read a declared User field; `user` must be a User model, not a mapping."""

    if key not in User.model_fields:
        return MISSING
    return getattr(user, key)


def matches(criteria: Mapping[str, Any], user: User) -> bool:
    """True iff every criteria key equals the user's field of that name.

    Empty criteria match any user. Keys that are not User fields never match,
    and a bool never equals a non-bool.
    """

    for key, expected in criteria.items():
        actual = user_field(user, key)
        if actual is MISSING or actual != expected:
            return False
        # Strict equality: True and 1 are different values.
        if isinstance(actual, bool) != isinstance(expected, bool):
            return False
    return True

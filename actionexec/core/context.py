from __future__ import annotations

from dataclasses import dataclass, field

from statemachine import State, StateMachine

from actionexec.errors import MissingUserError
from actionexec.models import User


class ContextFSM(StateMachine):
    """Lifecycle of a run context.

    - empty: no read has happened yet (initial)
    - populated: a user is loaded; later reads replace it
    """

    empty = State("empty", value="empty", initial=True)
    populated = State("populated", value="populated")

    user_read = empty.to(populated) | populated.to.itself()

    @property
    def phase(self) -> str:
        return str(self.current_state_value)


@dataclass(slots=True)
class ExecContext:
    """Mutable state for exactly one run. Never shared between runs."""

    current_user: User | None = None
    fsm: ContextFSM = field(default_factory=ContextFSM)

    def set_user(self, user: User) -> None:
        self.fsm.user_read()
        self.current_user = user

    def require_user(self) -> User:
        if self.current_user is None:
            raise MissingUserError()
        return self.current_user

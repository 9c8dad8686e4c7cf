"""ListingStateMachine class with trigger and history."""

from __future__ import annotations

from seller_agent.domain.errors import InvalidTransitionError
from seller_agent.domain.types import ListingState
from seller_agent.state_machine.transitions import TERMINAL_STATES, TRANSITIONS


class ListingStateMachine:
    """Finite state machine governing a listing's lifecycle.

    A listing starts RUNNING and ends exactly once: SOLD, EXPIRED, or
    WITHDRAWN when the seller shuts down.  All three end states are terminal.

    Usage::

        sm = ListingStateMachine()
        sm.trigger("sell")      # -> SOLD (terminal)
    """

    def __init__(self, initial_state: ListingState = ListingState.RUNNING) -> None:
        self._state: ListingState = initial_state
        self._history: list[tuple[ListingState, str, ListingState]] = []

    @property
    def state(self) -> ListingState:
        """Return the current listing state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """Return True if the machine is in a terminal state."""
        return self._state in TERMINAL_STATES

    @property
    def history(self) -> list[tuple[ListingState, str, ListingState]]:
        """Return a copy of the transition history.

        Each entry is a ``(from_state, event, to_state)`` tuple recorded in
        chronological order.
        """
        return list(self._history)

    def trigger(self, event: str) -> ListingState:
        """Apply an event to the current state and transition.

        Args:
            event: The event string (e.g. ``"sell"``).

        Returns:
            The new state after the transition.

        Raises:
            InvalidTransitionError: If the transition is not allowed from
                the current state, or if the machine is in a terminal state.
        """
        if self.is_terminal:
            raise InvalidTransitionError(self._state, event)

        key = (self._state, event)
        if key not in TRANSITIONS:
            raise InvalidTransitionError(self._state, event)

        old_state = self._state
        new_state = TRANSITIONS[key]
        self._history.append((old_state, event, new_state))
        self._state = new_state
        return new_state

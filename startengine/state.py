"""Application states and the machine that switches between them."""

from __future__ import annotations

from .errors import StartError


class State:
    """Base class for an application state; subclasses override the hooks."""

    destroyed = False

    def handle(self, *args):
        """React to input; the base state ignores it."""

    def update(self, *args):
        """Advance and draw the state; the base state does nothing."""

    def destroy(self):
        """Release the state; it may not be handled or updated afterwards."""
        self.destroyed = True


class StateMachine:
    """Holds the active state and forwards calls to it."""

    def __init__(self, state=None):
        self._state = state

    @property
    def state(self):
        """The active state, or None."""
        return self._state

    def switch(self, state):
        """Make `state` active, destroying the one it replaces."""
        previous = self._state
        self._state = state
        if previous is not None and previous is not state and not previous.destroyed:
            previous.destroy()

    def handle(self, *args):
        """Forward input handling to the active state."""
        self._active().handle(*args)

    def update(self, *args):
        """Forward the update step to the active state."""
        self._active().update(*args)

    def _active(self):
        if self._state is None:
            raise StartError("no active state")
        if self._state.destroyed:
            raise StartError("the active state has been destroyed")
        return self._state
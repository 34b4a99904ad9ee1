"""Session store: the single holder of client session state.

``dispatch`` runs the pure session reducer and keeps the result. It
never executes effects itself; it returns them to the caller, which
hands them to the EffectRunner.
"""

from __future__ import annotations

from collections.abc import Callable

from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.domain.events.effects import Effect
from fhe_audit.domain.events.session import SessionEvent
from fhe_audit.domain.models.session_state import SessionSettings, SessionState
from fhe_audit.domain.services.session_reducer import reduce

SessionListener = Callable[[SessionState], None]


class SessionStore(LoggingMixin):
    """State container driven by the session reducer."""

    def __init__(
        self,
        settings: SessionSettings | None = None,
        initial_state: SessionState | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            settings: Reducer settings (banner delays, form defaults).
            initial_state: Starting state; empty session if None.
        """
        self._settings = settings or SessionSettings()
        self._state = initial_state or SessionState(upload_form=self._settings.default_form)
        self._listeners: list[SessionListener] = []
        self._init_logger(component="session")

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def settings(self) -> SessionSettings:
        return self._settings

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a callback run after every state change.

        Args:
            listener: Called with the new state.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: SessionEvent) -> tuple[Effect, ...]:
        """Apply an event and return the effects it requests.

        Args:
            event: The session event.

        Returns:
            Effects to execute, in order.
        """
        previous = self._state
        transition = reduce(previous, event, self._settings)
        self._state = transition.state

        self._log.debug(
            "session_event_applied",
            event_type=type(event).__name__,
            upload_phase=self._state.upload_phase.value,
            effect_count=len(transition.effects),
        )

        if self._state is not previous:
            for listener in list(self._listeners):
                listener(self._state)
        return transition.effects

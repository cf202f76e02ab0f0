"""State machines for the rotation ticker."""

from enum import Enum

import structlog


logger = structlog.get_logger()


class TickerPhase(str, Enum):
    """Observable phase of a ticker.

    - LOADING: initial phase, until the first fetch settles
    - READY: the last fetch delivered at least one item
    - ERROR: the last fetch failed or came back empty
    """

    LOADING = "LOADING"
    READY = "READY"
    ERROR = "ERROR"


class TickerLifecycle(str, Enum):
    """Lifecycle of a ticker instance.

    - IDLE: constructed, not started
    - RUNNING: clocks may be armed
    - STOPPED: torn down; terminal
    """

    IDLE = "IDLE"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"


# Valid phase transitions. Same-phase transitions are allowed: every poll
# settles into READY or ERROR regardless of the previous outcome.
_VALID_TRANSITIONS: dict[TickerPhase, set[TickerPhase]] = {
    TickerPhase.LOADING: {TickerPhase.READY, TickerPhase.ERROR},
    TickerPhase.READY: {TickerPhase.READY, TickerPhase.ERROR},
    TickerPhase.ERROR: {TickerPhase.READY, TickerPhase.ERROR},
}


class TickerStateTransitionError(Exception):
    """Raised when an illegal phase transition is attempted."""

    def __init__(
        self,
        ticker: str,
        from_state: TickerPhase,
        to_state: TickerPhase,
    ) -> None:
        """Initialize the transition error.

        Args:
            ticker: Name of the ticker.
            from_state: Current phase.
            to_state: Attempted target phase.
        """
        self.ticker = ticker
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Illegal phase transition for ticker '{ticker}': "
            f"{from_state.value} -> {to_state.value}"
        )


class TickerLifecycleError(Exception):
    """Raised when a lifecycle operation is used out of order."""

    def __init__(self, ticker: str, lifecycle: TickerLifecycle, operation: str) -> None:
        """Initialize the lifecycle error.

        Args:
            ticker: Name of the ticker.
            lifecycle: Current lifecycle state.
            operation: Operation that was attempted.
        """
        self.ticker = ticker
        self.lifecycle = lifecycle
        self.operation = operation
        super().__init__(
            f"Cannot {operation} ticker '{ticker}' in lifecycle {lifecycle.value}"
        )


class TickerPhaseMachine:
    """Manages phase transitions for a ticker.

    Enforces valid transitions and logs every phase change.
    """

    def __init__(self, ticker: str) -> None:
        """Initialize the state machine in LOADING.

        Args:
            ticker: Name of the ticker, used in logs and errors.
        """
        self._ticker = ticker
        self._state = TickerPhase.LOADING
        self._log = logger.bind(component="ticker", ticker=ticker)

    @property
    def state(self) -> TickerPhase:
        """Get the current phase."""
        return self._state

    def can_transition_to(self, target: TickerPhase) -> bool:
        """Check if a transition to the target phase is valid.

        Args:
            target: The target phase.

        Returns:
            True if the transition is valid.
        """
        return target in _VALID_TRANSITIONS.get(self._state, set())

    def transition_to(self, target: TickerPhase) -> bool:
        """Transition to a new phase.

        Args:
            target: The target phase.

        Returns:
            True if the phase changed.

        Raises:
            TickerStateTransitionError: If the transition is invalid.
        """
        if not self.can_transition_to(target):
            self._log.error(
                "illegal_state_transition",
                from_state=self._state.value,
                to_state=target.value,
            )
            raise TickerStateTransitionError(self._ticker, self._state, target)

        old_state = self._state
        self._state = target
        if old_state is target:
            return False

        self._log.info(
            "state_transition",
            from_state=old_state.value,
            to_state=target.value,
        )
        return True

    def to_ready(self) -> bool:
        """Transition to READY."""
        return self.transition_to(TickerPhase.READY)

    def to_error(self) -> bool:
        """Transition to ERROR."""
        return self.transition_to(TickerPhase.ERROR)

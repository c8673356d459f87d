"""
State Machine

Small finite state machine over Enum states. Drives the line-by-line scans
where each line can move the scanner between a handful of states.

Usage:
    from enum import Enum, auto

    class SiteState(Enum):
        NOT_IN_SITE = auto()
        IN_SITE = auto()

    sm = StateMachine(
        initial_state=SiteState.NOT_IN_SITE,
        allowed_transitions={
            SiteState.NOT_IN_SITE: [SiteState.IN_SITE],
            SiteState.IN_SITE: [SiteState.NOT_IN_SITE],
        },
    )
    sm.transition_to(SiteState.IN_SITE, reason="begin marker at line 4")
    print(sm.state)    # SiteState.IN_SITE
"""

from enum import Enum
from typing import Generic, List, Optional, TypeVar

from utils.logging_config import get_logger

logger = get_logger(__name__)

S = TypeVar("S", bound=Enum)


class StateMachine(Generic[S]):
    """
    Generic state machine.

    Features:
    - Enum-based states (any Enum subclass)
    - Duplicate transitions are no-ops
    - Optional allowed_transitions map for enforcement
    """

    def __init__(
        self,
        initial_state: S,
        allowed_transitions: Optional[dict[S, List[S]]] = None,
    ):
        """
        Args:
            initial_state: The starting state.
            allowed_transitions: Optional dict mapping each state to its valid
                                 target states. If None, all transitions allowed.
        """
        self._state: S = initial_state
        self._allowed = allowed_transitions

    @property
    def state(self) -> S:
        """Current state."""
        return self._state

    def transition_to(self, new_state: S, reason: str = "") -> bool:
        """
        Transition to a new state.

        Args:
            new_state: Target state.
            reason: Human-readable reason (for debugging/logging).

        Returns:
            True if the transition occurred, False if skipped (duplicate or invalid).
        """
        if new_state == self._state:
            return False

        if self._allowed is not None:
            allowed = self._allowed.get(self._state, [])
            if new_state not in allowed:
                logger.warning(
                    f"Invalid transition: {self._state.name} -> {new_state.name} "
                    f"(allowed: {[s.name for s in allowed]})"
                )
                return False

        old_state = self._state
        self._state = new_state
        logger.debug(f"State: {old_state.name} -> {new_state.name} ({reason})")
        return True

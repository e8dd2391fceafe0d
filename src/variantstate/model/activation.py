"""Activation flow driven by a primary and a secondary call-to-action.

The flow starts on the "Activating" screen.  The primary action moves it
forward (activate, then finish); the secondary action cancels.  A cancelled
flow can be restarted with the primary action.
"""

from __future__ import annotations

from enum import Enum


class ActivationState(str, Enum):
    ACTIVATING = "ACTIVATING"
    IN_PROGRESS = "IN_PROGRESS"
    ACTIVATED = "ACTIVATED"
    CANCELLED = "CANCELLED"


class ActivationEvent(str, Enum):
    PRIMARY_ACTION = "PRIMARY_ACTION"      # activate / finish / restart
    SECONDARY_ACTION = "SECONDARY_ACTION"  # cancel


INITIAL_ACTIVATION: ActivationState = ActivationState.ACTIVATING

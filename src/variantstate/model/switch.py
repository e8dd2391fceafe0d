"""Tri-state switch: the canonical payload-less cyclic variant family."""

from __future__ import annotations

from enum import Enum


class TriStateSwitch(str, Enum):
    """A switch that cycles OFF -> LOW -> HIGH -> OFF."""

    OFF = "OFF"
    LOW = "LOW"
    HIGH = "HIGH"


INITIAL_SWITCH: TriStateSwitch = TriStateSwitch.OFF

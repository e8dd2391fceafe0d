"""Network reachability status and the link events that drive it.

Both the status and the events are discriminated unions: ``kind`` selects
the variant, and only ``Reachable`` / ``LinkUp`` carry a payload (the
connection type).
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ConnectionType(str, Enum):
    ETHERNET_OR_WIFI = "ETHERNET_OR_WIFI"
    WWAN = "WWAN"


# ---------------------------------------------------------------------------
# Status variants
# ---------------------------------------------------------------------------

class Unknown(BaseModel):
    """Reachability has not been determined yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"


class NotReachable(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_reachable"] = "not_reachable"


class Reachable(BaseModel):
    """The network is reachable over ``connection_type``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reachable"] = "reachable"
    connection_type: ConnectionType


NetworkReachabilityStatus = Annotated[
    Union[Unknown, NotReachable, Reachable],
    Field(discriminator="kind"),
]

REACHABILITY_ADAPTER: TypeAdapter[NetworkReachabilityStatus] = TypeAdapter(
    NetworkReachabilityStatus
)

INITIAL_REACHABILITY = Unknown()


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class LinkUp(BaseModel):
    """A link came up over ``connection_type``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["link_up"] = "link_up"
    connection_type: ConnectionType


class LinkDown(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["link_down"] = "link_down"


class Reset(BaseModel):
    """Forget what is known about the network."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reset"] = "reset"


ReachabilityEvent = Annotated[
    Union[LinkUp, LinkDown, Reset],
    Field(discriminator="kind"),
]

REACHABILITY_EVENT_ADAPTER: TypeAdapter[ReachabilityEvent] = TypeAdapter(
    ReachabilityEvent
)

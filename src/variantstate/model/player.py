"""Player life-cycle: dead, or alive with a positive heart count."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Dead(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["dead"] = "dead"


class Alive(BaseModel):
    """A living player.  Zero hearts is spelled ``Dead()``, not ``Alive(0)``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["alive"] = "alive"
    hearts: int = Field(ge=1)


PlayerState = Annotated[
    Union[Dead, Alive],
    Field(discriminator="kind"),
]

PLAYER_ADAPTER: TypeAdapter[PlayerState] = TypeAdapter(PlayerState)

INITIAL_PLAYER = Dead()


class PlayerEvent(str, Enum):
    INCREASE_HEART = "INCREASE_HEART"
    GET_ATTACKED = "GET_ATTACKED"

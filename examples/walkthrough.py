"""Walk through every variant family.

Run with ``python examples/walkthrough.py``.
"""

import logging

from variantstate.engine import (
    VariantMachine,
    classify,
    describe,
    has_valid_check_digit,
    is_reachable,
    payload_of,
    transition,
)
from variantstate.model.barcode import QRCode, Upc
from variantstate.model.player import INITIAL_PLAYER, PlayerEvent
from variantstate.model.reachability import (
    INITIAL_REACHABILITY,
    ConnectionType,
    LinkDown,
    LinkUp,
)
from variantstate.model.switch import INITIAL_SWITCH


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Tri-state switch: rebind instead of mutating
    switch = INITIAL_SWITCH
    for _ in range(4):
        print("switch:", describe(switch))
        switch = transition(switch)

    # Classification
    for n in (500, 34645, 250_000, -7):
        print(f"{n}: {describe(classify(n))}")

    # Player life-cycle
    player = VariantMachine(INITIAL_PLAYER)
    for event in (
        PlayerEvent.INCREASE_HEART,
        PlayerEvent.INCREASE_HEART,
        PlayerEvent.GET_ATTACKED,
        PlayerEvent.GET_ATTACKED,
    ):
        player.send(event)
    print("player:", " -> ".join(describe(p) for p in player.history))

    # Reachability
    status = INITIAL_REACHABILITY
    for event in (LinkUp(connection_type=ConnectionType.WWAN), LinkDown()):
        status = transition(status, event)
        print(f"network: {describe(status)} (reachable={is_reachable(status)})")

    # Barcodes
    for code in (
        Upc(number_system=8, manufacturer=85909, product=51226, check=3),
        QRCode(code="ABCDEFGHIJKLMNOP"),
    ):
        print(describe(code), payload_of(code), has_valid_check_digit(code))


if __name__ == "__main__":
    main()

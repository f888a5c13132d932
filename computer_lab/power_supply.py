from __future__ import annotations

import logging
from dataclasses import dataclass, field

from statemachine import State, StateMachine

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PowerSupply:
    """On/off flag for a computer's power supply.

    Always starts off. Only `turn_on` changes the flag, and there is no way back to off.
    """

    _is_on: bool = field(default=False, init=False)

    @property
    def is_on(self) -> bool:
        return self._is_on

    def turn_on(self) -> None:
        was_on = self._is_on
        fsm = PowerSupplyFSM(self)
        fsm.turn_on()
        fsm.sync_state_to_model()
        if not was_on:
            logger.info("power supply switched on")


class PowerSupplyFSM(StateMachine):
    """FSM wrapper around PowerSupply.

    - states: off -> on
    - `turn_on` while already on is a self-transition, so repeated calls are no-ops.
    - `sync_state_to_model` is the only writer of the supply's flag.
    """

    powered_off = State("off", value="off", initial=True)
    powered_on = State("on", value="on")

    turn_on = powered_off.to(powered_on) | powered_on.to.itself()

    def __init__(self, psu: PowerSupply):
        self.psu = psu
        super().__init__(start_value="on" if psu.is_on else "off")

    def sync_state_to_model(self) -> None:
        self.psu._is_on = self.current_state.value == "on"

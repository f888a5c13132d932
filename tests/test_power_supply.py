from __future__ import annotations

import pytest

from computer_lab.power_supply import PowerSupply, PowerSupplyFSM


def test_power_supply_starts_off() -> None:
    assert PowerSupply().is_on is False


def test_turn_on_switches_power_supply_on() -> None:
    psu = PowerSupply()
    psu.turn_on()
    assert psu.is_on is True


def test_turn_on_is_idempotent() -> None:
    psu = PowerSupply()
    psu.turn_on()
    psu.turn_on()
    assert psu.is_on is True


def test_fsm_starts_from_model_state() -> None:
    psu = PowerSupply()
    assert PowerSupplyFSM(psu).current_state.value == "off"

    psu.turn_on()
    assert PowerSupplyFSM(psu).current_state.value == "on"


def test_is_on_cannot_be_assigned() -> None:
    psu = PowerSupply()
    psu.turn_on()

    with pytest.raises(AttributeError):
        psu.is_on = False  # type: ignore[misc]
    assert psu.is_on is True


def test_power_supply_cannot_be_built_already_on() -> None:
    with pytest.raises(TypeError):
        PowerSupply(is_on=True)  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        PowerSupply(True)  # type: ignore[call-arg]


def test_fsm_only_writes_back_on_sync() -> None:
    psu = PowerSupply()
    fsm = PowerSupplyFSM(psu)

    fsm.turn_on()
    assert fsm.current_state.value == "on"
    assert psu.is_on is False

    fsm.turn_on()
    fsm.sync_state_to_model()
    assert psu.is_on is True

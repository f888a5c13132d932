from __future__ import annotations

from computer_lab.computer import Computer
from computer_lab.config import ComputerConfig
from computer_lab.games import Game
from computer_lab.power_supply import PowerSupply


_COMPUTER: Computer | None = None


def build_computer(config: ComputerConfig) -> Computer:
    computer = Computer(PowerSupply(), [Game(t) for t in config.preinstalled_games])
    if config.power_on_at_startup:
        computer.turn_on()
    return computer


def init_computer(*, config: ComputerConfig) -> Computer:
    """Build the served computer once and cache it.

    Safe to call multiple times; subsequent calls return the already built instance.
    """

    global _COMPUTER
    if _COMPUTER is None:
        _COMPUTER = build_computer(config)
    return _COMPUTER


def reset_computer_for_tests() -> None:
    global _COMPUTER
    _COMPUTER = None


def get_computer_instance() -> Computer:
    if _COMPUTER is None:
        raise RuntimeError("Computer not initialized. Call init_computer() at startup.")
    return _COMPUTER

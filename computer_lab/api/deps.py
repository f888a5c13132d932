from __future__ import annotations

from computer_lab.computer import Computer
from computer_lab.computer_singleton import get_computer_instance


def get_computer() -> Computer:
    return get_computer_instance()

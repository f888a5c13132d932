from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Game:
    name: str

    def start(self) -> str:
        return "Playing " + self.name

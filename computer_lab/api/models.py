from __future__ import annotations

from pydantic import BaseModel, Field

from computer_lab.computer import Computer


class InstallGameRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)


class PlayGameRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)


class GameState(BaseModel):
    name: str


class ComputerState(BaseModel):
    is_on: bool
    installed_games: list[GameState] = Field(default_factory=list)

    @classmethod
    def from_computer(cls, computer: Computer) -> "ComputerState":
        return cls(
            is_on=computer.power_supply.is_on,
            installed_games=[GameState(name=g.name) for g in computer.games_snapshot()],
        )


class PlayResult(BaseModel):
    title: str
    installed: bool
    message: str

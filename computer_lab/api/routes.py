from __future__ import annotations

from fastapi import APIRouter, Depends, status

from computer_lab.api.deps import get_computer
from computer_lab.api.models import ComputerState, InstallGameRequest, PlayGameRequest, PlayResult
from computer_lab.computer import GAME_NOT_INSTALLED, Computer
from computer_lab.games import Game

router = APIRouter()


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/computer", response_model=ComputerState)
def get_computer_route(computer: Computer = Depends(get_computer)) -> ComputerState:
    return ComputerState.from_computer(computer)


@router.post("/computer/turn-on", response_model=ComputerState)
def turn_on_route(computer: Computer = Depends(get_computer)) -> ComputerState:
    computer.turn_on()
    return ComputerState.from_computer(computer)


@router.post("/computer/games", response_model=ComputerState, status_code=status.HTTP_201_CREATED)
def install_game_route(payload: InstallGameRequest, computer: Computer = Depends(get_computer)) -> ComputerState:
    computer.install_game(Game(payload.name))
    return ComputerState.from_computer(computer)


@router.post("/computer/play", response_model=PlayResult)
def play_game_route(payload: PlayGameRequest, computer: Computer = Depends(get_computer)) -> PlayResult:
    # Not installed is a normal outcome, reported in the body rather than as a 404.
    message = computer.play_game(payload.title)
    return PlayResult(title=payload.title, installed=message != GAME_NOT_INSTALLED, message=message)

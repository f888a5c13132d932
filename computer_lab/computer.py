from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from computer_lab.games import Game
from computer_lab.power_supply import PowerSupply

logger = logging.getLogger(__name__)

GAME_NOT_INSTALLED = "Game not installed"


class Computer:
    """A computer built around a caller-supplied power supply.

    The power supply is shared: whoever built it keeps a reference and sees
    `turn_on` take effect. The installed games list belongs to the computer
    and only ever grows.
    """

    def __init__(self, power_supply: PowerSupply, installed_games: Iterable[Game] | None = None):
        self.power_supply = power_supply
        self.installed_games: list[Game] = list(installed_games or [])
        self._lock = threading.Lock()

    def turn_on(self) -> None:
        with self._lock:
            self.power_supply.turn_on()

    def install_game(self, game: Game) -> None:
        with self._lock:
            self.installed_games.append(game)
            count = len(self.installed_games)
        logger.info("installed game %r (%d installed)", game.name, count)

    def games_snapshot(self) -> list[Game]:
        """Copy of the installed games, taken under the lock."""

        with self._lock:
            return list(self.installed_games)

    def play_game(self, title: str) -> str:
        for g in self.games_snapshot():
            if g.name == title:
                logger.debug("playing %r", title)
                return g.start()

        logger.debug("game %r is not installed", title)
        return GAME_NOT_INSTALLED

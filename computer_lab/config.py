from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class ComputerConfig:
    preinstalled_games: tuple[str, ...] = ()
    power_on_at_startup: bool = False
    log_level: str = "INFO"


def _parse_titles(raw: str) -> tuple[str, ...]:
    # `;` rather than `,` so titles like "Warhammer 40,000" survive.
    return tuple(t.strip() for t in raw.split(";") if t.strip())


def _parse_flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes"}


def load_config() -> ComputerConfig:
    log_level = os.environ.get("COMPUTER_LOG_LEVEL", "").strip().upper() or "INFO"
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Unknown COMPUTER_LOG_LEVEL: {log_level}")

    return ComputerConfig(
        preinstalled_games=_parse_titles(os.environ.get("COMPUTER_PREINSTALLED_GAMES", "")),
        power_on_at_startup=_parse_flag(os.environ.get("COMPUTER_POWER_ON_AT_STARTUP", "")),
        log_level=log_level,
    )

from __future__ import annotations

from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def _clean_computer_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep tests hermetic: no startup config leaks in from the shell, no singleton leaks between tests."""

    for name in ("COMPUTER_PREINSTALLED_GAMES", "COMPUTER_POWER_ON_AT_STARTUP", "COMPUTER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    from computer_lab.computer_singleton import reset_computer_for_tests

    reset_computer_for_tests()
    yield
    reset_computer_for_tests()


@pytest.fixture()
def client_and_computer():
    """FastAPI TestClient wired to a fresh, powered-off computer with nothing installed."""

    from fastapi.testclient import TestClient

    from computer_lab.api.deps import get_computer
    from computer_lab.computer import Computer
    from computer_lab.main import app
    from computer_lab.power_supply import PowerSupply

    computer = Computer(PowerSupply())

    def _override() -> Computer:
        return computer

    app.dependency_overrides[get_computer] = _override
    with TestClient(app) as c:
        yield c, computer
    app.dependency_overrides.clear()

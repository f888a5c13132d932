from fastapi import FastAPI
import logging

from computer_lab.api.routes import router
from computer_lab.computer_singleton import init_computer
from computer_lab.config import load_config

app = FastAPI(title="computer-composition", version="0.1.0")
app.include_router(router)

# Configure logging
_config = load_config()
logging.basicConfig(level=_config.log_level)
logger = logging.getLogger(__name__)


@app.on_event("startup")
async def _startup() -> None:
    computer = init_computer(config=_config)
    logger.info(
        "computer ready (on=%s, %d games installed)",
        computer.power_supply.is_on,
        len(computer.games_snapshot()),
    )


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "computer-composition", "version": "0.1.0"}

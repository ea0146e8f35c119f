from fastapi import FastAPI
import logging

from tictactoe.api.models import InfoResponse
from tictactoe.api.routes import router
from tictactoe.config import settings_from_env

APP_NAME = "tictactoe"
APP_VERSION = "0.1.0"

app = FastAPI(title=APP_NAME, version=APP_VERSION)
app.include_router(router)
# Configure logging
logging.basicConfig(level=settings_from_env().log_level)
logger = logging.getLogger(__name__)


@app.get("/info", response_model=InfoResponse)
async def info() -> InfoResponse:
    return InfoResponse(name=APP_NAME, version=APP_VERSION)

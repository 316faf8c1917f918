import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from app.routers import puzzle_routers
from app.core.config import settings
from utils.logger_config import ACCESS_LOGGER, configure_logging

# configure logging before anything logs
configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger("app.main")
access_logger = logging.getLogger(ACCESS_LOGGER)

# create FastAPI
app = FastAPI(title="Puzzle Solver API", version="1.0")


# access log: client address and user agent
@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - started) * 1000
    client = request.client.host if request.client else "-"
    access_logger.info(
        '%s "%s" %s %s %d %.1fms',
        client,
        request.headers.get("user-agent", "-"),
        request.method,
        request.url.path,
        response.status_code,
        elapsed,
    )
    return response


# get routers
app.include_router(puzzle_routers.router, tags=["Puzzles"])


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    logger.info("Server up listen on port %s ...", settings.LISTEN_PORT)
    uvicorn.run(app, host=settings.LISTEN_IP, port=settings.LISTEN_PORT)

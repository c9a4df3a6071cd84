# pizzaria_admin/core/logging_config.py

import logging
import sys
import time
import uuid

from fastapi import Request
from loguru import logger

from pizzaria_admin.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"
TRACE_ID_HEADER = "X-Trace-ID"
# Probes do balanceador: só em DEBUG
QUIET_PATH_SUFFIXES = ("/health", "/healthcheck")

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}Z</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> | "
    "<magenta>{extra[trace_id]: >16.16}</magenta> | "
    "<level>{message}</level>"
)

class InterceptHandler(logging.Handler):
    """Encaminha registros do `logging` padrão (uvicorn, redis) para o loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())

def setup_logging() -> None:
    log_level = settings.LOG_LEVEL.upper()

    logger.remove()
    # Fora de uma requisição não há trace id
    logger.configure(extra={"trace_id": "-"})
    logger.add(
        sys.stderr,
        level=log_level,
        format=LOG_FORMAT,
        enqueue=True,
        backtrace=True,
        diagnose=log_level == "DEBUG",
        colorize=True,
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = [InterceptHandler()]
        logging.getLogger(name).propagate = False

    logger.info(f"Logging ready for {settings.PROJECT_NAME} (level {log_level})")

async def add_trace_id_middleware(request: Request, call_next):
    """Propaga o X-Request-ID do dashboard (ou gera um) e registra a duração da requisição."""
    trace_id = request.headers.get(REQUEST_ID_HEADER) or f"req_{uuid.uuid4().hex[:12]}"
    path = request.url.path
    level = "DEBUG" if path.endswith(QUIET_PATH_SUFFIXES) else "INFO"

    with logger.contextualize(trace_id=trace_id, method=request.method, path=path):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"{request.method} {path} failed after {(time.perf_counter() - started) * 1000:.1f}ms")
            raise
        response.headers[TRACE_ID_HEADER] = trace_id
        logger.log(level, f"{request.method} {path} -> {response.status_code} in {(time.perf_counter() - started) * 1000:.1f}ms")
        return response

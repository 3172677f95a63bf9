"""Loguru setup shared by the API process and the CLI."""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.app.runtime.config.config_data import LoggingConfig
from src.app.runtime.context import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# stdlib loggers and the level they are capped at
NOISY_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (uvicorn, SQLAlchemy) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Access lines and unhandled errors are logged by the request middleware
        if record.name == "uvicorn.access":
            return
        if record.name == "uvicorn.error" and record.levelno >= logging.ERROR:
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose_errors: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else CONSOLE_FORMAT,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )


def _intercept_stdlib_logging() -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in list(logging.root.manager.loggerDict):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = []
        stdlib_logger.propagate = True

    for name, level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


def configure_logging(cfg: LoggingConfig | None = None) -> None:
    """Install the console sink, the optional file sink and the stdlib bridge."""
    main_config = get_config()
    cfg = cfg or main_config.logging
    environment = main_config.app.environment
    verbose_errors = environment != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=CONSOLE_FORMAT,
        colorize=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose_errors)

    _intercept_stdlib_logging()

    logger.bind(
        app_level=cfg.level,
        app_format=cfg.format,
        app_file=cfg.file,
        environment=environment,
    ).info("Logging configured")

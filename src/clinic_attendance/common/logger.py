from __future__ import annotations

import logging
import time
from logging.handlers import RotatingFileHandler

from flask import Flask, g, request

LOGGER_NAME = "clinic_attendance"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_MAX_SIZE = 20 * 1024 * 1024  # 20 MB
LOG_BACKUP_COUNT = 5


def setup_logger(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Always logs to stderr; when log_file is given, also writes to a
    size-rotated file. Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_SIZE,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def register_request_logging(app: Flask, logger: logging.Logger) -> None:
    """
    Log method, path, status and processing time for every request.
    """

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.pop("request_started", None)
        if started is None:
            return response
        process_time = time.perf_counter() - started
        logger.info(
            "IP=%s | %s %s | Status=%s | Time=%.4fs",
            request.remote_addr,
            request.method,
            request.path,
            response.status_code,
            process_time,
        )
        response.headers["X-Process-Time"] = str(round(process_time, 4))
        return response

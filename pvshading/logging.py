import logging
from logging import Logger, Handler
from pathlib import Path


class ModuleLogger:
    """Hands out the module-level loggers of the package.

    Every module asks for its logger once, at import time::

        logger = ModuleLogger.get_logger(__name__)

    Records are written to the console and, optionally, also appended to a
    log file. A logger that already has handlers is returned untouched, so
    importing a module twice never duplicates its output.
    """
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    FORMATTER = logging.Formatter(
        '[%(process)s | %(name)s | %(levelname)s] %(message)s'
    )

    @classmethod
    def _configure(cls, handler: Handler, log_level: int) -> Handler:
        handler.setFormatter(cls.FORMATTER)
        handler.setLevel(log_level)
        return handler

    @classmethod
    def get_logger(
        cls,
        logger_name: str,
        file_path: Path | str | None = None,
        log_level: int = logging.WARNING
    ) -> Logger:
        """Returns the logger named `logger_name`.

        Parameters
        ----------
        logger_name:
            Usually the `__name__` of the calling module.
        file_path: optional
            If given, records are also appended to this file (UTF-8).
        log_level:
            Only records with this priority or higher are emitted.
        """
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            logger.addHandler(cls._configure(logging.StreamHandler(), log_level))
            if file_path is not None:
                file_handler = logging.FileHandler(
                    file_path, mode='a', encoding='utf-8'
                )
                logger.addHandler(cls._configure(file_handler, log_level))
            logger.setLevel(log_level)
        return logger

    @classmethod
    def set_level(cls, logger_name: str, log_level: int) -> None:
        """Changes the threshold of an existing logger and all its handlers,
        e.g. to see the derived layout constants at DEBUG level.
        """
        logger = logging.getLogger(logger_name)
        logger.setLevel(log_level)
        for handler in logger.handlers:
            handler.setLevel(log_level)

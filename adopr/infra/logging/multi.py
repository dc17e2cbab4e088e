from typing import Any, Sequence

from adopr.core.ports.logger import Logger


class MultiLogger(Logger):
    def __init__(self, loggers: Sequence[Logger]) -> None:
        self._loggers = tuple(loggers)

    def debug(self, message: str, **kwargs: Any) -> None:
        for logger in self._loggers:
            logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        for logger in self._loggers:
            logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        for logger in self._loggers:
            logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        for logger in self._loggers:
            logger.error(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        for logger in self._loggers:
            logger.exception(message, **kwargs)

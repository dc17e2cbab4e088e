import logging
from pathlib import Path
from typing import Any, Optional

from adopr.core.ports.logger import Logger

_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class _KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = getattr(record, 'context', None)
        if context:
            pairs = ' '.join(
                f'{key}={value!r}' for key, value in context.items()
            )
            return f'{base} | {pairs}'
        return base


class ConsoleLogger(Logger):
    """Logs to stderr and, when ``log_file`` is given, appends to that file too."""

    def __init__(
        self,
        name: str,
        log_file: Optional[str | Path] = None,
        level: int = logging.INFO,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False
        formatter = _KeyValueFormatter(_FORMAT)
        if not self._has_handler(logging.StreamHandler, None):
            handler = logging.StreamHandler()
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        if log_file is not None:
            path = Path(log_file)
            if not self._has_handler(logging.FileHandler, path):
                path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(path, mode='a', encoding='utf-8')
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, extra={'context': kwargs})

    def close(self) -> None:
        for handler in list(self._logger.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                self._logger.removeHandler(handler)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra={'context': kwargs})

    def _has_handler(self, kind: type, path: Optional[Path]) -> bool:
        for handler in self._logger.handlers:
            if isinstance(handler, logging.FileHandler):
                if kind is logging.FileHandler and path is not None:
                    if Path(handler.baseFilename) == path.resolve():
                        return True
                continue
            if kind is logging.StreamHandler and isinstance(handler, logging.StreamHandler):
                return True
        return False

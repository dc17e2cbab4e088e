from typing import Protocol, runtime_checkable


@runtime_checkable
class Logger(Protocol):
    """Structured log sink.

    Keyword arguments are context attached to the event, e.g. ``pr_id``,
    ``thread_id`` or ``comment_id`` so a degraded row can be traced back.
    """

    def debug(self, message: str, **kwargs: object) -> None: ...

    def info(self, message: str, **kwargs: object) -> None: ...

    def warning(self, message: str, **kwargs: object) -> None: ...

    def error(self, message: str, **kwargs: object) -> None: ...

    def exception(self, message: str, **kwargs: object) -> None: ...

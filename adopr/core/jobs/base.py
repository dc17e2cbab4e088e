from abc import ABC, abstractmethod
from typing import final

from adopr.core.exceptions import AdoprError
from adopr.core.ports.clock import Clock
from adopr.core.ports.logger import Logger


class BaseJob(ABC):
    """Sequential step loop with a fixed pause between steps.

    ``run`` calls ``execute_once`` until ``should_continue`` is false,
    sleeping ``interval`` seconds between steps through the clock port. No
    pause follows the final step.
    """

    def __init__(
        self,
        logger: Logger,
        interval: float,
        clock: Clock,
    ) -> None:
        self._logger = logger
        self._interval = interval
        self._clock = clock

    @final
    def run(self) -> None:
        job_name = self.__class__.__name__
        self._logger.debug("Job starting", job=job_name)
        try:
            self.setup()
            while self.should_continue():
                try:
                    self.execute_once()
                except AdoprError as error:
                    self.handle_error(error)
                if self._interval > 0 and self.should_continue():
                    self._clock.sleep(self._interval)
        finally:
            try:
                self.teardown()
            finally:
                self._logger.debug("Job stopping", job=job_name)

    @abstractmethod
    def setup(self) -> None: ...

    @abstractmethod
    def execute_once(self) -> None: ...

    @abstractmethod
    def teardown(self) -> None: ...

    @abstractmethod
    def should_continue(self) -> bool: ...

    def handle_error(self, error: AdoprError) -> None:
        self._logger.exception(
            "Job error",
            error=str(error),
            job=self.__class__.__name__,
        )

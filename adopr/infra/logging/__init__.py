from adopr.infra.logging.console import ConsoleLogger
from adopr.infra.logging.logfire import LogfireLogger, configure_logfire
from adopr.infra.logging.multi import MultiLogger

__all__ = ["ConsoleLogger", "LogfireLogger", "MultiLogger", "configure_logfire"]

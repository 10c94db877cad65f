"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import List, Optional

from injector import Binder, Module, multiprovider

from app.config import Config
from server.listeners import EventListener
from utils.logging.logger import setup_logging
from utils.logging.request_log import RequestLogListener


class LoggingModule(Module):
    """Configura o logging da aplicação e contribui o listener de log de requisições."""

    def __init__(self, log_level: Optional[int] = None, log_format: Optional[str] = None) -> None:
        self.log_level = Config.LOG_LEVEL if log_level is None else log_level
        self.log_format = log_format or Config.LOG_FORMAT

    def configure(self, binder: Binder) -> None:
        setup_logging(self.log_level, self.log_format)

    @multiprovider
    def provide_event_listeners(self) -> List[EventListener]:
        return [RequestLogListener()]

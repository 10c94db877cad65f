"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import List

from injector import Module, multiprovider

from app.config import Config
from server.handlers import Handler, HealthHandler


class ServerModule(Module):
    """Handlers adicionais do servidor embutido."""

    @multiprovider
    def provide_handlers(self) -> List[Handler]:
        return [HealthHandler(Config.HEALTH_PATH)]

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import List

from flask import Blueprint
from injector import Module, multiprovider, provider, singleton

from api.dispatch import DispatchFilter, RestBootstrapListener, create_api_app
from server.listeners import EventListener

logger = logging.getLogger(__name__)


class RestModule(Module):
    """
    Camada de despacho REST.

    Liga o DispatchFilter (aplicação Flask) e contribui o listener que
    registra os recursos REST quando o contexto raiz é iniciado.
    """

    def __init__(self, application_path: str) -> None:
        self.application_path = application_path

    @singleton
    @provider
    def provide_dispatch_filter(self) -> DispatchFilter:
        logger.debug(f"Dispatcher REST montado em {self.application_path}")
        return DispatchFilter(create_api_app())

    @multiprovider
    def provide_event_listeners(self, dispatch_filter: DispatchFilter,
                                resources: List[Blueprint]) -> List[EventListener]:
        return [RestBootstrapListener(dispatch_filter, resources)]

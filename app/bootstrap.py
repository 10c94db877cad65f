"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import Mapping, Optional

from injector import inject

from api.dispatch import DispatchFilter
from app.config import Config, parse_port, resolve_port
from server import (
    EventListenerScanner,
    HandlerCollection,
    HandlerScanner,
    Server,
    StaticFileHandler,
    WebContext,
)
from utils.logging.logger import log_level_probe

logger = logging.getLogger(__name__)


class Bootstrap:
    """Monta a árvore de handlers e inicia o servidor HTTP."""

    @inject
    def __init__(self, dispatch_filter: DispatchFilter,
                 event_listener_scanner: EventListenerScanner,
                 handler_scanner: HandlerScanner):
        self.dispatch_filter = dispatch_filter
        self.event_listener_scanner = event_listener_scanner
        self.handler_scanner = handler_scanner

    def build_server(self, environ: Optional[Mapping[str, str]] = None) -> Server:
        port = parse_port(resolve_port(environ))
        server = Server(port, host=Config.HOST, threads=Config.THREADS)

        log_level_probe(logger)

        logger.info("run()")

        # Contexto da aplicação em "/" (raiz da árvore de handlers)
        context = WebContext(server, Config.CONTEXT_ROOT)

        # Todo /api/* passa pelo dispatcher REST
        context.add_filter(self.dispatch_filter, Config.APPLICATION_PATH + '/*')

        # O restante cai nos arquivos estáticos do Swagger UI
        context.set_default_handler(StaticFileHandler(Config.UI_RESOURCE_DIR, Config.WELCOME_FILES))

        # Listeners ligados pelos módulos (ex: RestBootstrapListener do RestModule)
        self.event_listener_scanner.accept(context.add_event_listener)

        handlers = HandlerCollection()

        # O contexto da aplicação é o handler atual do servidor e vem primeiro
        handlers.add_handler(server.handler)

        # Handlers ligados pelos módulos
        self.handler_scanner.accept(handlers.add_handler)

        server.handler = handlers
        return server

    def run(self, environ: Optional[Mapping[str, str]] = None) -> None:
        server = self.build_server(environ)
        server.start()
        server.join()

    # Aplicação WSGI pronta para servidores externos (sem abrir socket)
    def create_app(self, environ: Optional[Mapping[str, str]] = None) -> HandlerCollection:
        server = self.build_server(environ)
        server.handler.start()
        return server.handler

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import Optional

from waitress import create_server

from exceptions import ServerStartError
from server.handlers import Handler

logger = logging.getLogger(__name__)


class Server:
    """Servidor HTTP embutido (waitress) com uma árvore de handlers WSGI."""

    def __init__(self, port: int, host: str = '0.0.0.0', threads: int = 8):
        self.host = host
        self.requested_port = port
        self.threads = threads
        self.handler: Optional[Handler] = None
        self._wsgi_server = None

    @property
    def port(self) -> int:
        if self._wsgi_server is not None:
            # waitress reporta a porta efetiva como str
            return int(self._wsgi_server.effective_port)
        return self.requested_port

    @property
    def is_running(self) -> bool:
        return self._wsgi_server is not None

    # Inicia a árvore de handlers e abre o socket (não bloqueia)
    def start(self) -> None:
        if self.handler is None:
            raise ServerStartError(self.host, self.requested_port, 'nenhum handler configurado')

        self.handler.start()
        try:
            self._wsgi_server = create_server(
                self.handler,
                host=self.host,
                port=self.requested_port,
                threads=self.threads,
                ident='qbuddy-api'
            )
        except OSError as e:
            self.handler.stop()
            raise ServerStartError(self.host, self.requested_port, str(e)) from e

        logger.info(f"Servidor iniciado em http://{self.host}:{self.port} (threads={self.threads})")

    # Bloqueia a thread atual até o servidor parar
    def join(self) -> None:
        if self._wsgi_server is None:
            raise ServerStartError(self.host, self.requested_port, 'join() chamado antes de start()')
        try:
            self._wsgi_server.run()
        finally:
            self.stop()

    def stop(self) -> None:
        wsgi_server, self._wsgi_server = self._wsgi_server, None
        if wsgi_server is not None:
            wsgi_server.close()
            logger.info("Servidor finalizado")
        if self.handler is not None and self.handler.is_started:
            self.handler.stop()

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from werkzeug.exceptions import NotFound
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from exceptions import ContextStateError
from server.handlers import REQUEST_EVENTS_KEY, Handler
from server.listeners import EventListener

logger = logging.getLogger(__name__)


# Converte '/api/*' em '/api'; '/' e '/*' viram '' (raiz)
def _path_spec_to_prefix(path_spec: str) -> str:
    prefix = path_spec
    if prefix.endswith('/*'):
        prefix = prefix[:-2]
    return prefix.rstrip('/')


class WebContext(Handler):
    """
    Contexto de requisições montado em um caminho do servidor.

    Filtros interceptam os caminhos do seu path spec; o restante vai para o
    handler padrão. Listeners recebem os eventos de ciclo de vida do contexto
    e de cada requisição.
    """

    def __init__(self, server=None, context_path: str = '/'):
        super().__init__()
        self.context_path = context_path
        self._filters: List[Tuple[str, Callable]] = []
        self._default_handler: Optional[Callable] = None
        self._listeners: List[EventListener] = []
        self._app: Optional[Callable] = None

        if server is not None:
            server.handler = self

    @property
    def event_listeners(self) -> Tuple[EventListener, ...]:
        return tuple(self._listeners)

    @property
    def filters(self) -> Dict[str, Callable]:
        return {prefix: app for prefix, app in self._filters}

    @property
    def default_handler(self) -> Optional[Callable]:
        return self._default_handler

    def _ensure_not_started(self, action: str) -> None:
        if self.is_started:
            raise ContextStateError(f"Não é possível {action} depois do start() do contexto {self.context_path}")

    def add_filter(self, app: Callable, path_spec: str) -> None:
        self._ensure_not_started('adicionar filtros')
        prefix = _path_spec_to_prefix(path_spec)
        if not prefix:
            raise ValueError(f"Path spec inválido para filtro: '{path_spec}'")
        self._filters.append((prefix, app))

    def set_default_handler(self, app: Callable) -> None:
        self._ensure_not_started('trocar o handler padrão')
        self._default_handler = app

    def add_event_listener(self, listener: EventListener) -> None:
        self._ensure_not_started('adicionar listeners')
        self._listeners.append(listener)

    def start(self) -> None:
        if self.is_started:
            return

        for listener in self._listeners:
            listener.context_initialized(self)

        default = self._default_handler or NotFound()
        if isinstance(default, Handler):
            default.start()

        app = DispatcherMiddleware(default, self.filters)
        prefix = _path_spec_to_prefix(self.context_path)
        if prefix:
            app = DispatcherMiddleware(NotFound(), {prefix: app})
        self._app = app

        super().start()
        logger.debug(f"Contexto {self.context_path} iniciado: filtros={list(self.filters)} listeners={len(self._listeners)}")

    def stop(self) -> None:
        if not self.is_started:
            return

        if isinstance(self._default_handler, Handler):
            self._default_handler.stop()
        for listener in reversed(self._listeners):
            listener.context_destroyed(self)

        self._app = None
        super().stop()

    def request_initialized(self, environ) -> None:
        for listener in self._listeners:
            listener.request_initialized(environ)

    def request_destroyed(self, environ, status) -> None:
        for listener in reversed(self._listeners):
            listener.request_destroyed(environ, status)

    def __call__(self, environ, start_response):
        if self._app is None:
            return NotFound()(environ, start_response)
        if REQUEST_EVENTS_KEY in environ:
            return self._app(environ, start_response)
        return self.handle_with_events(self._app, environ, start_response)

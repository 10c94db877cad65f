"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import itertools
import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from werkzeug.exceptions import MethodNotAllowed, NotFound
from werkzeug.wrappers import Request, Response
from werkzeug.wsgi import ClosingIterator

from exceptions import ContextStateError

# Marca no environ que os eventos da requisição já são disparados por um handler externo
REQUEST_EVENTS_KEY = 'qbuddy.request_events'


# Classe base para handlers WSGI da árvore de handlers do servidor
class Handler(ABC):

    def __init__(self):
        self._started = False

    @property
    def is_started(self) -> bool:
        return self._started

    def start(self) -> None:
        self._started = True

    def stop(self) -> None:
        self._started = False

    def request_initialized(self, environ: Dict[str, Any]) -> None:
        pass

    def request_destroyed(self, environ: Dict[str, Any], status: str) -> None:
        pass

    def handle_with_events(self, app: Callable, environ: Dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        """
        Executa `app` disparando request_initialized e request_destroyed.

        request_destroyed recebe o status enviado ao cliente e só é chamado
        quando o corpo da resposta termina (close() do iterável WSGI).
        """
        environ[REQUEST_EVENTS_KEY] = self
        self.request_initialized(environ)

        status_holder: List[str] = []

        def _start_response(status, headers, exc_info=None):
            status_holder.append(status)
            return start_response(status, headers, exc_info)

        def _finish():
            self.request_destroyed(environ, status_holder[-1] if status_holder else '')

        try:
            body = app(environ, _start_response)
        except Exception:
            _finish()
            raise
        return ClosingIterator(body, _finish)

    @abstractmethod
    def __call__(self, environ: Dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        raise NotImplementedError


class _CapturedResponse:
    """Guarda status e headers de um handler até decidir se ele atende a requisição."""

    def __init__(self):
        self.status: Optional[str] = None
        self.headers: List[Tuple[str, str]] = []
        self.exc_info = None
        self.written: List[bytes] = []
        self.body: Iterable[bytes] = ()

    def start_response(self, status, headers, exc_info=None):
        self.status = status
        self.headers = headers
        self.exc_info = exc_info
        return self.written.append

    @property
    def is_not_found(self) -> bool:
        return (self.status or '').startswith('404')

    def materialize(self) -> None:
        body = self.body
        try:
            self.body = list(body)
        finally:
            close = getattr(body, 'close', None)
            if close is not None:
                close()

    def discard(self) -> None:
        close = getattr(self.body, 'close', None)
        if close is not None:
            close()

    def replay(self, start_response: Callable) -> Iterable[bytes]:
        start_response(self.status, self.headers, self.exc_info)
        if not self.written:
            return self.body
        close = getattr(self.body, 'close', None)
        return ClosingIterator(
            itertools.chain(self.written, self.body),
            [close] if close is not None else None
        )


class HandlerCollection(Handler):
    """
    Coleção ordenada de handlers.

    Cada requisição passa pelos handlers em ordem até que um deles responda
    com status diferente de 404. Se todos responderem 404, vale a resposta do
    primeiro handler.
    """

    def __init__(self):
        super().__init__()
        self._handlers: List[Handler] = []

    @property
    def handlers(self) -> Tuple[Handler, ...]:
        return tuple(self._handlers)

    def add_handler(self, handler: Handler) -> None:
        if self.is_started:
            raise ContextStateError("Não é possível adicionar handlers depois do start()")
        self._handlers.append(handler)

    def start(self) -> None:
        for handler in self._handlers:
            handler.start()
        super().start()

    def stop(self) -> None:
        for handler in reversed(self._handlers):
            handler.stop()
        super().stop()

    def request_initialized(self, environ) -> None:
        for handler in self._handlers:
            handler.request_initialized(environ)

    def request_destroyed(self, environ, status) -> None:
        for handler in reversed(self._handlers):
            handler.request_destroyed(environ, status)

    def __call__(self, environ, start_response):
        if REQUEST_EVENTS_KEY in environ:
            return self._dispatch(environ, start_response)
        return self.handle_with_events(self._dispatch, environ, start_response)

    def _dispatch(self, environ, start_response):
        if not self._handlers:
            return NotFound()(environ, start_response)

        first_not_found: Optional[_CapturedResponse] = None

        for handler in self._handlers:
            captured = _CapturedResponse()
            captured.body = handler(environ.copy(), captured.start_response)
            if captured.status is None:
                # start_response adiado até a primeira iteração do corpo
                captured.materialize()

            if not captured.is_not_found:
                if first_not_found is not None:
                    first_not_found.discard()
                return captured.replay(start_response)

            if first_not_found is None:
                captured.materialize()
                first_not_found = captured
            else:
                captured.discard()

        return first_not_found.replay(start_response)


# Responde GET /health para verificações de load balancer e orquestradores
class HealthHandler(Handler):

    def __init__(self, path: str = '/health'):
        super().__init__()
        self.path = path

    def __call__(self, environ, start_response):
        request = Request(environ)
        if request.path != self.path:
            response = NotFound()
        elif request.method not in ('GET', 'HEAD'):
            response = MethodNotAllowed(valid_methods=['GET', 'HEAD'])
        else:
            status = 'UP' if self.is_started else 'STARTING'
            response = Response(json.dumps({'status': status}), mimetype='application/json')
        return response(environ, start_response)

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import os
import posixpath
from typing import Iterable, Optional, Sequence

from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound
from werkzeug.security import safe_join
from werkzeug.utils import redirect, send_from_directory
from werkzeug.wrappers import Request

from server.handlers import Handler

logger = logging.getLogger(__name__)


class StaticFileHandler(Handler):
    """
    Serve arquivos estáticos a partir de um diretório base.

    Requisições para diretórios são resolvidas pelo primeiro welcome file
    existente (ex: index.html). Diretórios sem barra final são redirecionados
    para o caminho com barra.
    """

    def __init__(self, resource_base: str, welcome_files: Sequence[str] = ('index.html',)):
        super().__init__()
        self.resource_base = os.path.abspath(resource_base)
        self.welcome_files = tuple(welcome_files)

    def start(self) -> None:
        if not os.path.isdir(self.resource_base):
            logger.warning(f"Diretório de recursos estáticos não encontrado: {self.resource_base}")
        super().start()

    def _welcome_file(self, directory: str) -> Optional[str]:
        for name in self.welcome_files:
            if os.path.isfile(os.path.join(directory, name)):
                return name
        return None

    def _dispatch(self, request: Request):
        path = request.path.lstrip('/')
        target = safe_join(self.resource_base, path) if path else self.resource_base
        if target is None or not os.path.exists(target):
            raise NotFound()

        # Só recursos existentes respondem 405; o resto segue para o próximo handler
        welcome = None
        if os.path.isdir(target):
            welcome = self._welcome_file(target)
            if welcome is None:
                raise NotFound()
        elif not os.path.isfile(target):
            raise NotFound()

        if request.method not in ('GET', 'HEAD'):
            raise MethodNotAllowed(valid_methods=['GET', 'HEAD'])

        if welcome is not None:
            if path and not request.path.endswith('/'):
                location = request.script_root + request.path + '/'
                if request.query_string:
                    location = f"{location}?{request.query_string.decode('latin-1')}"
                return redirect(location)
            path = posixpath.join(path, welcome)

        return send_from_directory(self.resource_base, path, request.environ)

    def __call__(self, environ, start_response) -> Iterable[bytes]:
        request = Request(environ)
        try:
            response = self._dispatch(request)
        except HTTPException as e:
            response = e.get_response(environ)
        return response(environ, start_response)

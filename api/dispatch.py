"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import List

from flask import Blueprint, Flask, jsonify
from werkzeug.exceptions import HTTPException

from api.routes import register_routes
from server.listeners import EventListener

logger = logging.getLogger(__name__)


def create_api_app() -> Flask:
    """Cria a aplicação Flask que despacha as requisições REST"""
    app = Flask(__name__, static_folder=None)

    @app.errorhandler(HTTPException)
    def http_error_handler(e: HTTPException):
        return jsonify({'error': e.name}), e.code

    @app.errorhandler(Exception)
    def unexpected_error_handler(e: Exception):
        logger.exception(f"Erro não tratado na API: {type(e).__name__}")
        return jsonify({'error': 'Internal Server Error'}), 500

    return app


# Filtro WSGI montado no contexto raiz; todo /api/* passa por aqui
class DispatchFilter:

    def __init__(self, app: Flask):
        self.app = app

    def __call__(self, environ, start_response):
        return self.app(environ, start_response)


# Registra os recursos REST no dispatcher quando o contexto é iniciado
class RestBootstrapListener(EventListener):

    def __init__(self, dispatch_filter: DispatchFilter, resources: List[Blueprint]):
        self.dispatch_filter = dispatch_filter
        self.resources = list(resources)
        self._registered = False

    def context_initialized(self, context) -> None:
        if self._registered:
            return
        register_routes(self.dispatch_filter.app, self.resources)
        self._registered = True
        logger.info(f"Recursos REST registrados: {[bp.name for bp in self.resources]}")

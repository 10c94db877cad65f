"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import os
from typing import Mapping, Optional, Tuple

from exceptions import ConfigurationError, InvalidPortError

logger = logging.getLogger(__name__)

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Config:
    # Servidor
    DEFAULT_PORT: str = '8080'
    HOST: str = '0.0.0.0'
    THREADS: int = 8  # Workers do waitress

    # Caminhos de montagem
    APPLICATION_PATH: str = '/api'
    CONTEXT_ROOT: str = '/'
    HEALTH_PATH: str = '/health'

    # Swagger UI (recursos estáticos servidos na raiz)
    UI_RESOURCE_DIR: str = os.path.join(ROOT_DIR, 'api', 'swagger-ui')
    WELCOME_FILES: Tuple[str, ...] = ('index.html',)

    # Documentação da API
    API_TITLE: str = 'QBuddy API'
    API_VERSION: str = '1.0.0'

    # Logging
    LOG_LEVEL: int = 1  # -1 TRACE, 0 DEBUG, 1 INFO, 2 WARNING, 3 ERROR
    LOG_FORMAT: str = 'console'  # 'json' ou 'console'


# Lê PORT do ambiente; vazio ou ausente usa a porta padrão
def resolve_port(environ: Optional[Mapping[str, str]] = None) -> str:
    if environ is None:
        environ = os.environ
    port = environ.get('PORT')

    if not port:
        port = Config.DEFAULT_PORT
        logger.info(f"PORT={Config.DEFAULT_PORT}")

    return port


# Converte a porta para inteiro (0 = porta efêmera escolhida pelo SO)
def parse_port(value: str) -> int:
    try:
        port = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidPortError(value)
    if not 0 <= port <= 65535:
        raise InvalidPortError(value)
    return port


def _parse_int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigurationError(f"{name} deve ser um número inteiro: '{value}'")


def load_config(environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Aplica HOST, THREADS, LOG_LEVEL e LOG_FORMAT do ambiente em Config.

    Valores inválidos levantam ConfigurationError antes de qualquer atribuição,
    então Config nunca fica parcialmente carregado.
    """
    if environ is None:
        environ = os.environ

    host = environ.get('HOST') or Config.HOST
    threads = _parse_int(environ, 'THREADS', Config.THREADS)
    log_level = _parse_int(environ, 'LOG_LEVEL', Config.LOG_LEVEL)
    log_format = environ.get('LOG_FORMAT') or Config.LOG_FORMAT

    if threads < 1:
        raise ConfigurationError(f"THREADS deve ser maior que zero: '{threads}'")

    Config.HOST = host
    Config.THREADS = threads
    Config.LOG_LEVEL = log_level
    Config.LOG_FORMAT = log_format

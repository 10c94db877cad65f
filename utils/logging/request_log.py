"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import time
from typing import Any, Dict

from server.listeners import EventListener

logger = logging.getLogger('request')

_START_KEY = 'qbuddy.request_start'


# Loga método, caminho, status e duração de cada requisição
class RequestLogListener(EventListener):

    def request_initialized(self, environ: Dict[str, Any]) -> None:
        environ[_START_KEY] = time.monotonic()

    def request_destroyed(self, environ: Dict[str, Any], status: str) -> None:
        started = environ.get(_START_KEY)
        elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
        path = environ.get('SCRIPT_NAME', '') + environ.get('PATH_INFO', '')
        logger.info(f"{environ.get('REQUEST_METHOD', '-')} {path or '/'} {status or '-'} ({elapsed_ms:.1f}ms)")

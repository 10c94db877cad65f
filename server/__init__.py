"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from server.listeners import EventListener
from server.handlers import Handler, HandlerCollection, HealthHandler
from server.static import StaticFileHandler
from server.context import WebContext
from server.scanners import EventListenerScanner, HandlerScanner
from server.server import Server

__all__ = [
    'EventListener',
    'Handler',
    'HandlerCollection',
    'HealthHandler',
    'StaticFileHandler',
    'WebContext',
    'EventListenerScanner',
    'HandlerScanner',
    'Server',
]

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import Callable, Generic, List, Tuple, TypeVar

from injector import inject

from server.handlers import Handler
from server.listeners import EventListener

T = TypeVar('T')


class _Scanner(Generic[T]):

    def __init__(self, contributions: List[T]):
        self._contributions: Tuple[T, ...] = tuple(contributions)

    def __len__(self) -> int:
        return len(self._contributions)

    # Chama o visitor uma vez para cada objeto contribuído, na ordem dos módulos
    def accept(self, visitor: Callable[[T], None]) -> None:
        for contribution in self._contributions:
            visitor(contribution)


# Listeners contribuídos pelos módulos via multibinding
class EventListenerScanner(_Scanner[EventListener]):

    @inject
    def __init__(self, listeners: List[EventListener]):
        super().__init__(listeners)


# Handlers contribuídos pelos módulos via multibinding
class HandlerScanner(_Scanner[Handler]):

    @inject
    def __init__(self, handlers: List[Handler]):
        super().__init__(handlers)

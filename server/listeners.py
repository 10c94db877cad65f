"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import Any, Dict


# Listener de eventos do contexto web (todos os métodos são opcionais)
class EventListener:

    def context_initialized(self, context: Any) -> None:
        pass

    def context_destroyed(self, context: Any) -> None:
        pass

    def request_initialized(self, environ: Dict[str, Any]) -> None:
        pass

    def request_destroyed(self, environ: Dict[str, Any], status: str) -> None:
        pass

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
from typing import Optional, Sequence

from injector import Error as InjectorError
from injector import Injector, Module

from app.bootstrap import Bootstrap
from app.config import Config
from exceptions import ContainerError
from modules import default_modules

logger = logging.getLogger(__name__)


# Monta o container de dependências (composition root, criado uma vez no main)
def create_injector(modules: Optional[Sequence[Module]] = None) -> Injector:
    if modules is None:
        modules = default_modules(Config.APPLICATION_PATH)
    try:
        injector = Injector(list(modules))
    except InjectorError as e:
        raise ContainerError(f"{type(e).__name__}: {e}") from e
    logger.debug(f"Container criado com módulos: {[type(m).__name__ for m in modules]}")
    return injector


def get_bootstrap(injector: Injector) -> Bootstrap:
    try:
        return injector.get(Bootstrap)
    except InjectorError as e:
        raise ContainerError(f"{type(e).__name__}: {e}") from e

"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import List

from injector import Module

from modules.logging_module import LoggingModule
from modules.server_module import ServerModule
from modules.rest_module import RestModule
from modules.resource_module import ResourceModule
from modules.swagger_module import SwaggerModule


# Lista fixa de módulos, na ordem em que contribuem listeners e handlers
def default_modules(application_path: str) -> List[Module]:
    return [
        LoggingModule(),
        ServerModule(),
        RestModule(application_path),
        ResourceModule(),
        SwaggerModule(application_path),
    ]


__all__ = [
    'LoggingModule',
    'ServerModule',
    'RestModule',
    'ResourceModule',
    'SwaggerModule',
    'default_modules',
]

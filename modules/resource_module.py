"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import List

from flask import Blueprint
from injector import Module, multiprovider

from api.routes import create_system_blueprint


class ResourceModule(Module):

    @multiprovider
    def provide_resources(self) -> List[Blueprint]:
        return [create_system_blueprint()]

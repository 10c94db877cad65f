"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import List

from flask import Blueprint
from injector import Module, multiprovider

from api.swagger import create_swagger_blueprint
from app.config import Config


class SwaggerModule(Module):
    """Contribui o recurso com o documento OpenAPI usado pelo Swagger UI."""

    def __init__(self, application_path: str) -> None:
        self.application_path = application_path

    @multiprovider
    def provide_resources(self) -> List[Blueprint]:
        return [create_swagger_blueprint(self.application_path, Config.API_TITLE, Config.API_VERSION)]

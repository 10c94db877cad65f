"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from typing import Iterable

from flask import Blueprint, Flask
from api.handlers import ping_handler, info_handler


def create_system_blueprint() -> Blueprint:
    blueprint = Blueprint('system', __name__)
    blueprint.add_url_rule('/ping', 'ping', ping_handler, methods=['GET'])
    blueprint.add_url_rule('/info', 'info', info_handler, methods=['GET'])
    return blueprint


def register_routes(app: Flask, blueprints: Iterable[Blueprint]):
    for blueprint in blueprints:
        app.register_blueprint(blueprint)

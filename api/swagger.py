"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import re
from typing import Any, Dict

from flask import Blueprint, Flask, current_app, jsonify

OPENAPI_VERSION = '3.0.3'

# <int:item_id> -> {item_id}
_CONVERTER_PATTERN = re.compile(r'<(?:[^:<>]+:)?([^<>]+)>')


def _summary(view) -> str:
    lines = (getattr(view, '__doc__', None) or '').strip().splitlines()
    return lines[0].strip() if lines else ''


def build_openapi_document(app: Flask, application_path: str, title: str, version: str) -> Dict[str, Any]:
    """
    Gera o documento OpenAPI a partir do url_map da aplicação Flask.

    Cada regra vira um path (conversores do werkzeug viram parâmetros de
    path) e cada método HTTP, exceto HEAD e OPTIONS, vira uma operação.
    O summary vem da primeira linha da docstring da view.
    """
    paths: Dict[str, Dict[str, Any]] = {}

    for rule in sorted(app.url_map.iter_rules(), key=lambda r: (r.rule, r.endpoint)):
        path = _CONVERTER_PATTERN.sub(r'{\1}', rule.rule)
        methods = sorted((rule.methods or set()) - {'HEAD', 'OPTIONS'})
        summary = _summary(app.view_functions.get(rule.endpoint))
        parameters = [
            {'name': name, 'in': 'path', 'required': True, 'schema': {'type': 'string'}}
            for name in sorted(rule.arguments)
        ]

        operations = paths.setdefault(path, {})
        for method in methods:
            operation_id = rule.endpoint.replace('.', '_')
            if len(methods) > 1:
                operation_id = f"{operation_id}_{method.lower()}"
            operation: Dict[str, Any] = {
                'operationId': operation_id,
                'responses': {'200': {'description': 'OK'}},
            }
            if summary:
                operation['summary'] = summary
            if parameters:
                operation['parameters'] = parameters
            operations[method.lower()] = operation

    return {
        'openapi': OPENAPI_VERSION,
        'info': {'title': title, 'version': version},
        'servers': [{'url': application_path}],
        'paths': paths,
    }


def create_swagger_blueprint(application_path: str, title: str, version: str) -> Blueprint:
    blueprint = Blueprint('swagger', __name__)

    def swagger_handler():
        """Documento OpenAPI da API"""
        return jsonify(build_openapi_document(current_app, application_path, title, version))

    blueprint.add_url_rule('/swagger.json', 'swagger', swagger_handler, methods=['GET'])
    return blueprint

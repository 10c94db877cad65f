"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

from datetime import datetime, timezone
from flask import current_app, jsonify, request
from app.config import Config


def ping_handler():
    """Verifica se a API está respondendo"""
    return jsonify({'ping': 'pong'})


def info_handler():
    """Informações da build e endpoints disponíveis"""
    endpoints = {}
    for rule in sorted(current_app.url_map.iter_rules(), key=lambda r: r.rule):
        methods = sorted(rule.methods - {'HEAD', 'OPTIONS'})
        view = current_app.view_functions.get(rule.endpoint)
        doc = (view.__doc__ or '').strip().splitlines() if view else []
        endpoints[request.script_root + rule.rule] = {
            'method': ', '.join(methods),
            'description': doc[0] if doc else ''
        }

    return jsonify({
        'time': datetime.now(timezone.utc).strftime('%A, %d-%b-%y %H:%M:%S UTC'),
        'build': f'{Config.API_TITLE} v{Config.API_VERSION}',
        'endpoints': endpoints
    })

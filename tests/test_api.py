"""Testes da camada de dispatch REST"""

import json

from flask import Blueprint
from werkzeug.test import Client

from api.dispatch import DispatchFilter, RestBootstrapListener, create_api_app
from api.routes import create_system_blueprint


def get_json(response):
    return json.loads(response.get_data(as_text=True))


def make_dispatch_filter(*blueprints):
    dispatch_filter = DispatchFilter(create_api_app())
    RestBootstrapListener(dispatch_filter, list(blueprints)).context_initialized(None)
    return dispatch_filter


def test_ping():
    client = Client(make_dispatch_filter(create_system_blueprint()))

    response = client.get("/ping")

    assert response.status_code == 200
    assert get_json(response) == {"ping": "pong"}


def test_info_lists_endpoints_with_descriptions():
    client = Client(make_dispatch_filter(create_system_blueprint()))

    data = get_json(client.get("/info"))

    assert data["build"] == "QBuddy API v1.0.0"
    assert data["endpoints"]["/ping"] == {"method": "GET", "description": "Verifica se a API está respondendo"}
    assert "/info" in data["endpoints"]
    assert data["time"].endswith("UTC")


def test_info_prefixes_endpoints_with_the_mount_path():
    client = Client(make_dispatch_filter(create_system_blueprint()))

    data = get_json(client.get("/info", environ_overrides={"SCRIPT_NAME": "/api"}))

    assert "/api/ping" in data["endpoints"]


def test_unknown_route_is_json_404():
    client = Client(make_dispatch_filter(create_system_blueprint()))

    response = client.get("/nope")

    assert response.status_code == 404
    assert get_json(response) == {"error": "Not Found"}


def test_wrong_method_is_json_405():
    client = Client(make_dispatch_filter(create_system_blueprint()))

    response = client.post("/ping")

    assert response.status_code == 405
    assert get_json(response) == {"error": "Method Not Allowed"}


def test_unexpected_errors_are_json_500():
    broken = Blueprint("broken", __name__)

    def explode():
        raise RuntimeError("boom")

    broken.add_url_rule("/explode", "explode", explode)
    client = Client(make_dispatch_filter(broken))

    response = client.get("/explode")

    assert response.status_code == 500
    assert get_json(response) == {"error": "Internal Server Error"}


def test_resources_are_registered_only_once():
    dispatch_filter = DispatchFilter(create_api_app())
    listener = RestBootstrapListener(dispatch_filter, [create_system_blueprint()])

    listener.context_initialized(None)
    listener.context_initialized(None)

    assert list(dispatch_filter.app.blueprints) == ["system"]


def test_dispatch_filter_has_no_routes_before_bootstrap():
    client = Client(DispatchFilter(create_api_app()))
    assert client.get("/ping").status_code == 404

"""Testes do documento OpenAPI"""

import json

from flask import Blueprint, Flask
from werkzeug.test import Client

from api.dispatch import create_api_app
from api.swagger import OPENAPI_VERSION, build_openapi_document, create_swagger_blueprint


def make_app():
    app = Flask(__name__, static_folder=None)

    def list_items():
        """Lista os itens

        Detalhes que não entram no summary.
        """
        return "[]"

    def item(item_id):
        return str(item_id)

    app.add_url_rule("/items", "list_items", list_items, methods=["GET"])
    app.add_url_rule("/items/<int:item_id>", "item", item, methods=["GET", "PUT"])
    return app


def test_document_header():
    document = build_openapi_document(make_app(), "/api", "Title", "2.0")

    assert document["openapi"] == OPENAPI_VERSION
    assert document["info"] == {"title": "Title", "version": "2.0"}
    assert document["servers"] == [{"url": "/api"}]


def test_paths_come_from_the_url_map():
    paths = build_openapi_document(make_app(), "/api", "Title", "2.0")["paths"]

    assert set(paths) == {"/items", "/items/{item_id}"}
    assert set(paths["/items"]) == {"get"}
    assert paths["/items"]["get"]["summary"] == "Lista os itens"
    assert paths["/items"]["get"]["operationId"] == "list_items"


def test_converters_become_path_parameters():
    operations = build_openapi_document(make_app(), "/api", "Title", "2.0")["paths"]["/items/{item_id}"]

    assert set(operations) == {"get", "put"}
    assert operations["get"]["operationId"] == "item_get"
    assert operations["put"]["operationId"] == "item_put"
    assert operations["get"]["parameters"] == [
        {"name": "item_id", "in": "path", "required": True, "schema": {"type": "string"}}
    ]
    assert "summary" not in operations["get"]


def test_swagger_resource_describes_the_dispatch_app():
    app = create_api_app()
    resource = Blueprint("things", __name__)

    def things():
        """Coisas"""
        return "ok"

    resource.add_url_rule("/things", "things", things)
    app.register_blueprint(resource)
    app.register_blueprint(create_swagger_blueprint("/api", "QBuddy API", "1.0.0"))

    response = Client(app).get("/swagger.json")
    document = json.loads(response.get_data(as_text=True))

    assert response.status_code == 200
    assert document["paths"]["/things"]["get"]["summary"] == "Coisas"
    assert document["paths"]["/things"]["get"]["operationId"] == "things_things"
    assert document["paths"]["/swagger.json"]["get"]["summary"] == "Documento OpenAPI da API"

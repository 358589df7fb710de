from __future__ import annotations

from flask import Flask, request

from ..common.responses import as_bool, fail, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/comedores", methods=["GET"], endpoint="api_comedores_list")
    def api_comedores_list():
        try:
            cafeterias = container.cafeteria_service.list(company_id=request.args.get("empresa_id") or None)
            return ok([c.to_dict() for c in cafeterias])
        except Exception as e:
            return fail(e)

    @app.route("/api/comedores/<cafeteria_id>", methods=["GET"], endpoint="api_comedores_get")
    def api_comedores_get(cafeteria_id: str):
        try:
            return ok(container.cafeteria_service.get(cafeteria_id).to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/comedores", methods=["POST"], endpoint="api_comedores_create")
    def api_comedores_create():
        try:
            data = json_body(request)
            cafeteria = container.cafeteria_service.create(
                cafeteria_id=data.get("id"),
                name=data.get("name"),
                company_id=data.get("empresa_id"),
                require_pin=as_bool(data.get("require_pin")),
            )
            return ok(cafeteria.to_dict(), 201)
        except Exception as e:
            return fail(e)

    @app.route("/api/comedores/<cafeteria_id>", methods=["PUT"], endpoint="api_comedores_update")
    def api_comedores_update(cafeteria_id: str):
        try:
            data = json_body(request)
            cafeteria = container.cafeteria_service.update(
                cafeteria_id,
                name=data.get("name"),
                require_pin=as_bool(data.get("require_pin")),
            )
            return ok(cafeteria.to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/comedores/<cafeteria_id>", methods=["DELETE"], endpoint="api_comedores_delete")
    def api_comedores_delete(cafeteria_id: str):
        try:
            cafeteria = container.cafeteria_service.delete(cafeteria_id)
            return ok(cafeteria.to_dict(), message="Comedor eliminado")
        except Exception as e:
            return fail(e)

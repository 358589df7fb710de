from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/empresas", methods=["GET"], endpoint="api_empresas_list")
    def api_empresas_list():
        try:
            return ok([c.to_dict() for c in container.company_service.list_active()])
        except Exception as e:
            return fail(e)

    @app.route("/api/empresas/<company_id>", methods=["GET"], endpoint="api_empresas_get")
    def api_empresas_get(company_id: str):
        try:
            return ok(container.company_service.get(company_id).to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/empresas/<company_id>/stats", methods=["GET"], endpoint="api_empresas_stats")
    def api_empresas_stats(company_id: str):
        try:
            return ok(container.company_service.stats(company_id).to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/empresas", methods=["POST"], endpoint="api_empresas_create")
    def api_empresas_create():
        try:
            data = json_body(request)
            company = container.company_service.create(
                company_id=data.get("id"),
                name=data.get("nombre"),
                description=data.get("descripcion"),
                logo_url=data.get("logo_url"),
            )
            return ok(company.to_dict(), 201)
        except Exception as e:
            return fail(e)

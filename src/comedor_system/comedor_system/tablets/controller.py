from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tablets", methods=["GET"], endpoint="api_tablets_list")
    def api_tablets_list():
        try:
            return ok([t.to_dict() for t in container.tablet_service.list_all()])
        except Exception as e:
            return fail(e)

    @app.route("/api/tablets/<tablet_id>", methods=["GET"], endpoint="api_tablets_get")
    def api_tablets_get(tablet_id: str):
        try:
            return ok(container.tablet_service.get(tablet_id).to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/tablets", methods=["POST"], endpoint="api_tablets_save")
    def api_tablets_save():
        try:
            data = json_body(request)
            tablet = container.tablet_service.save(
                tablet_id=data.get("tablet_id"),
                active_cafeteria_id=data.get("active_comedor_id"),
                nickname=data.get("nickname"),
            )
            return ok(tablet.to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/tablets/<tablet_id>", methods=["DELETE"], endpoint="api_tablets_delete")
    def api_tablets_delete(tablet_id: str):
        try:
            container.tablet_service.delete(tablet_id)
            return ok(message="Tablet eliminada")
        except Exception as e:
            return fail(e)

    @app.route("/api/tablets", methods=["DELETE"], endpoint="api_tablets_delete_all")
    def api_tablets_delete_all():
        try:
            return ok({"deleted": container.tablet_service.delete_all()})
        except Exception as e:
            return fail(e)

from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/historial/migrar", methods=["POST"], endpoint="api_historial_migrar")
    def api_historial_migrar():
        try:
            data = request.get_json(silent=True) or {}
            report = container.history_archiver.archive_all(data.get("week_id"))
            return ok(report.to_dict(), failed=len(report.failed))
        except Exception as e:
            return fail(e)

    @app.route("/api/historial/<cafeteria_id>", methods=["POST"], endpoint="api_historial_archivar")
    def api_historial_archivar(cafeteria_id: str):
        try:
            data = request.get_json(silent=True) or {}
            result = container.history_archiver.archive_week(cafeteria_id, data.get("week_id"))
            return ok(result.to_dict(), message=result.message)
        except Exception as e:
            return fail(e)

    @app.route("/api/historial/<cafeteria_id>", methods=["GET"], endpoint="api_historial_list")
    def api_historial_list(cafeteria_id: str):
        try:
            histories = container.history_archiver.list_for_cafeteria(cafeteria_id)
            return ok([h.to_dict() for h in histories])
        except Exception as e:
            return fail(e)

    @app.route("/api/historial/detalle/<int:history_id>", methods=["GET"], endpoint="api_historial_detalle")
    def api_historial_detalle(history_id: int):
        try:
            history, details = container.history_archiver.get_detail(history_id)
            payload = history.to_dict()
            payload["detalles"] = [d.to_dict() for d in details]
            return ok(payload)
        except Exception as e:
            return fail(e)

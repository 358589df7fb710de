from __future__ import annotations

import json

from flask import Flask, Response, request, stream_with_context

from ..common.datetime_utils import parse_iso_date
from ..common.responses import fail, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/consumos", methods=["POST"], endpoint="api_consumos_register")
    def api_consumos_register():
        try:
            data = json_body(request)
            raw_date = data.get("consumption_date")
            result = container.consumption_registrar.register(
                data.get("employee_id"),
                data.get("comedor_id"),
                parse_iso_date(raw_date) if raw_date else None,
            )
            return ok(result.to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/consumos/semana-actual/<cafeteria_id>", methods=["GET"], endpoint="api_consumos_semana")
    def api_consumos_semana(cafeteria_id: str):
        try:
            return ok(container.weekly_ledger.week_view(cafeteria_id).to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/consumos/semana-actual/<cafeteria_id>", methods=["DELETE"], endpoint="api_consumos_clear")
    def api_consumos_clear(cafeteria_id: str):
        try:
            deleted = container.weekly_ledger.clear_log(cafeteria_id)
            return ok({"deleted": deleted}, message="Registro semanal borrado")
        except Exception as e:
            return fail(e)

    @app.route("/api/consumos/eventos", methods=["GET"], endpoint="api_consumos_eventos")
    def api_consumos_eventos():
        cafeteria_id = request.args.get("comedor_id") or None
        heartbeat = float(app.config.get("EVENT_HEARTBEAT_SECONDS", 15))

        def stream():
            yield "retry: 5000\n\n"
            for event in container.event_broker.listen(heartbeat_seconds=heartbeat):
                if event is None:
                    yield ": keep-alive\n\n"
                    continue
                if cafeteria_id and event.cafeteria_id != cafeteria_id:
                    continue
                yield f"event: consumo\ndata: {json.dumps(event.to_dict(), ensure_ascii=False)}\n\n"

        return Response(
            stream_with_context(stream()),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )

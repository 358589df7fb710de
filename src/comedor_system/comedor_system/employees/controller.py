from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, json_body, ok
from ..common.validators import require_non_negative_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/empleados", methods=["GET"], endpoint="api_empleados_list")
    def api_empleados_list():
        try:
            employees = container.employee_service.list(
                cafeteria_id=request.args.get("comedor_id") or None,
                search=request.args.get("search"),
            )
            return ok([e.to_dict() for e in employees])
        except Exception as e:
            return fail(e)

    @app.route("/api/empleados/inactivos/list", methods=["GET"], endpoint="api_empleados_inactivos")
    def api_empleados_inactivos():
        try:
            dias = request.args.get("dias")
            inactive = container.inactivity_service.list_inactive(
                cafeteria_id=request.args.get("comedor_id") or None,
                threshold_days=require_non_negative_int(dias, "dias") if dias not in (None, "") else None,
            )
            return ok([i.to_dict() for i in inactive])
        except Exception as e:
            return fail(e)

    @app.route("/api/empleados/<employee_id>", methods=["GET"], endpoint="api_empleados_get")
    def api_empleados_get(employee_id: str):
        try:
            return ok(container.employee_service.get(employee_id).to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/empleados", methods=["POST"], endpoint="api_empleados_create")
    def api_empleados_create():
        try:
            data = json_body(request)
            employee = container.employee_service.create(
                employee_id=data.get("internal_id"),
                cafeteria_id=data.get("comedor_id"),
                name=data.get("name"),
                number=data.get("number"),
                type=data.get("type"),
                pin=data.get("pin"),
            )
            return ok(employee.to_dict(), 201)
        except Exception as e:
            return fail(e)

    @app.route("/api/empleados/<employee_id>", methods=["PUT"], endpoint="api_empleados_update")
    def api_empleados_update(employee_id: str):
        try:
            data = json_body(request)
            employee = container.employee_service.update(
                employee_id,
                name=data.get("name"),
                number=data.get("number"),
                type=data.get("type"),
                pin=data.get("pin"),
            )
            return ok(employee.to_dict())
        except Exception as e:
            return fail(e)

    @app.route("/api/empleados/<employee_id>", methods=["DELETE"], endpoint="api_empleados_delete")
    def api_empleados_delete(employee_id: str):
        try:
            employee = container.employee_service.delete(employee_id)
            return ok(employee.to_dict(), message="Empleado eliminado")
        except Exception as e:
            return fail(e)

    @app.route("/api/empleados/<employee_id>/verificar-pin", methods=["POST"], endpoint="api_empleados_verify_pin")
    def api_empleados_verify_pin(employee_id: str):
        try:
            data = json_body(request)
            valid = container.employee_service.verify_pin(employee_id, data.get("pin"))
            return ok({"valid": valid})
        except Exception as e:
            return fail(e)

    @app.route("/api/tipos", methods=["GET"], endpoint="api_tipos_list")
    def api_tipos_list():
        try:
            return ok([t.to_dict() for t in container.employee_type_service.list_active()])
        except Exception as e:
            return fail(e)

    @app.route("/api/tipos", methods=["POST"], endpoint="api_tipos_create")
    def api_tipos_create():
        try:
            data = json_body(request)
            return ok(container.employee_type_service.create(data.get("descripcion")).to_dict(), 201)
        except Exception as e:
            return fail(e)

from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.exceptions import StorageUnavailableError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        try:
            now = container.health_service.ping()
        except StorageUnavailableError as e:
            return jsonify({"status": "ERROR", "database": "Disconnected", "error": str(e)}), 503
        return jsonify({"status": "OK", "database": "Connected", "timestamp": now.isoformat()})

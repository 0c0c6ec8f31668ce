from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        view = container.dashboard_service.refresh()
        payload = view.to_dict()
        payload["success"] = view.error is None
        return jsonify(payload), 200

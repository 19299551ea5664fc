from __future__ import annotations

import logging

from flask import Flask, g, jsonify

from ..common.http import json_body
from ..container import Container
from .guard import token_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    staff_token_required = token_required(container.staff_tokens, subject_claim="staffId")

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        payload = json_body()
        result = container.auth_service.login(payload.get("staffId"), payload.get("password"))
        logger.info("Staff %s logged in", result.staff.staff_id)
        return jsonify({"success": True, **result.to_dict()}), 200

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @app.route("/api/auth/verify", methods=["GET"], endpoint="auth_verify")
    @staff_token_required
    def me():
        staff = container.auth_service.current_staff(g.token_claims)
        return jsonify({"success": True, "staff": staff.to_public_dict()}), 200

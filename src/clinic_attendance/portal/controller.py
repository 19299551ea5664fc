from __future__ import annotations

import logging

from flask import Flask, g, jsonify

from ..auth.guard import token_required
from ..common.http import form_or_json_value, json_body
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    portal_token_required = token_required(container.portal_tokens, subject_claim="id")

    @app.route("/api/profile", methods=["GET"], endpoint="portal_profile")
    @portal_token_required
    def profile():
        user = container.profile_service.get_profile(str(g.token_claims.get("id", "")))
        return jsonify(user.to_dict()), 200

    @app.route("/api/profile/complete", methods=["POST"], endpoint="portal_profile_complete")
    @portal_token_required
    def complete_profile():
        payload = json_body()
        user = container.profile_service.complete_profile(
            str(g.token_claims.get("id", "")),
            role=payload.get("role"),
            phone=payload.get("phone"),
            facility_name=payload.get("facilityName"),
            facility_address=payload.get("facilityAddress"),
        )
        return jsonify(user.to_dict()), 200

    @app.route("/meta/data-deletion", methods=["POST"], endpoint="meta_data_deletion")
    def meta_data_deletion():
        logger.info("Received data deletion request from Meta")
        result = container.profile_service.handle_data_deletion(
            form_or_json_value("signed_request"),
            app_secret=str(app.config.get("FACEBOOK_APP_SECRET") or ""),
            base_url=str(app.config.get("BACKEND_URL") or "http://localhost:5000"),
        )
        return jsonify(result), 200

    @app.route("/meta/deletion-status/<confirmation_code>", methods=["GET"], endpoint="meta_deletion_status")
    def meta_deletion_status(confirmation_code: str):
        return jsonify(container.profile_service.deletion_status(confirmation_code)), 200

from __future__ import annotations

import hmac
import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import AuthorizationError, CollaboratorError, ReportInProgressError, ValidationError

LOGGER = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.fine_report_service

    def report_secret_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            key = request.headers.get("X-Report-Secret") or request.args.get("key")
            secret = container.report_secret
            if not secret or not key or not hmac.compare_digest(key.encode("utf-8"), secret.encode("utf-8")):
                raise AuthorizationError("Unauthorized")
            return view(*args, **kwargs)

        return wrapper

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def _authorization_error(e: AuthorizationError):
        return jsonify({"error": "Unauthorized"}), 401

    @app.errorhandler(ReportInProgressError)
    def _in_progress(e: ReportInProgressError):
        return jsonify({"error": str(e)}), 409

    @app.errorhandler(CollaboratorError)
    def _collaborator_error(e: CollaboratorError):
        # Details are already logged where the call failed.
        return jsonify({"error": "Server error"}), 500

    @app.route("/api/report", methods=["GET"], endpoint="api_report")
    @report_secret_required
    def api_report():
        written = service.run_report()
        return jsonify({"ok": True, "rows": written})

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        """Per-piece audio requirement for ?name=, only pieces owing something."""
        results = service.requirements_for(request.args.get("name"))
        return jsonify({piece: r.as_dict() for piece, r in results.items()})

    @app.route("/api/submissions", methods=["GET"], endpoint="api_submissions")
    def api_submissions():
        return jsonify(dict(service.submissions_for(request.args.get("name"))))

    @app.route("/api/options", methods=["GET"], endpoint="api_options")
    def api_options():
        return jsonify({"songs": service.list_pieces()})

from flask import jsonify, current_app

from campus_tour.observability import log_event
from campus_tour.services import current_services
from . import bp, request_payload


@bp.post("/user/login")
def record_login():
    """Append a login event. This is an audit log, credentials are never checked."""
    services = current_services()
    data = request_payload()
    username = data.get("username")
    try:
        user = services.store.add_login(username, services.passwords.prepare(data.get("password")))
    except Exception:
        current_app.logger.exception("POST /api/user/login failed")
        return jsonify({"error": "Failed to save login"}), 500

    log_event(current_app.logger, "login_recorded", user_id=user.id, policy=services.passwords.mode)
    return jsonify({"message": "Login saved!"}), 200


@bp.get("/user/logins")
def list_logins():
    """All login events, newest first."""
    try:
        users = current_services().store.list_logins()
        return jsonify([u.to_dict() for u in users]), 200
    except Exception:
        current_app.logger.exception("GET /api/user/logins failed")
        return jsonify({"error": "Failed to fetch logins"}), 500

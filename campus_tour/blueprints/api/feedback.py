from flask import jsonify, request, current_app

from campus_tour.errors import NotificationError
from campus_tour.observability import log_event
from campus_tour.services import current_services
from . import bp, request_payload


@bp.post("/feedback")
def submit_feedback():
    """
    Store feedback (JSON or multipart with an optional `image` file), then email the admin.

    A failed write returns 500 before any mail is attempted. A failed mail after a
    successful write is logged only: the feedback is saved, so the caller gets 200.
    """
    services = current_services()
    data = request_payload()
    name, email, message = data.get("name"), data.get("email"), data.get("message")

    try:
        upload = request.files.get(current_app.config.get("UPLOAD_FIELD", "image"))
        image_url = services.intake.save(upload)
        if image_url:
            log_event(current_app.logger, "upload_saved", image_url=image_url)
        fb = services.store.add_feedback(name, email, message, image_url)
    except Exception:
        current_app.logger.exception("POST /api/feedback failed")
        return jsonify({"error": "Failed to submit feedback"}), 500

    # Structured log for observability (no message body to avoid PII)
    log_event(current_app.logger, "feedback_submitted", feedback_id=fb.id, has_image=bool(image_url))

    try:
        services.notifier.notify(name=name, email=email, message=message, image_url=image_url)
    except NotificationError:
        current_app.logger.exception("Feedback %s saved but admin notification failed", fb.id)

    return jsonify({"message": "Feedback submitted!"}), 200


@bp.get("/feedback")
def list_feedback():
    """All feedback, newest first."""
    try:
        items = current_services().store.list_feedback()
        return jsonify([fb.to_dict() for fb in items]), 200
    except Exception:
        current_app.logger.exception("GET /api/feedback failed")
        return jsonify({"error": "Failed to fetch feedback"}), 500

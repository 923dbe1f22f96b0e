from flask import Blueprint, send_from_directory

from campus_tour.services import current_services

bp = Blueprint("uploads", __name__, url_prefix="/uploads")


@bp.get("/<path:filename>")
def serve_upload(filename):
    """Serve a stored feedback image read-only."""
    return send_from_directory(current_services().intake.root, filename)

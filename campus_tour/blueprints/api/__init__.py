from flask import Blueprint, request

bp = Blueprint("api", __name__, url_prefix="/api")


def request_payload() -> dict:
    """JSON body, or form fields for multipart/url-encoded posts. Missing keys read as None."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


from . import users  # noqa: E402,F401
from . import feedback  # noqa: E402,F401

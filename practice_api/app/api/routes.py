"""HTTP routes for the Flask API."""

from http import HTTPStatus

from flask import Blueprint, Response, current_app

from practice_api.core.ping import get_ping_message
from practice_api.schemas.ping import PingResponse

api_bp = Blueprint("api", __name__)


@api_bp.get("/ping")
def ping() -> Response:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return current_app.response_class(
        response.model_dump_json(),
        status=HTTPStatus.OK,
        mimetype="application/json",
    )

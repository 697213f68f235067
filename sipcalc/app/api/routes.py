"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from sipcalc.core.ping import SERVICE_NAME, get_ping_message
from sipcalc.core.projection import project
from sipcalc.core.summary import summarize, trend
from sipcalc.schemas.ping import PingResponse
from sipcalc.schemas.projection import ProjectionRequest, ProjectionResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("Rejected projection request: %d error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


def _run_projection(payload: ProjectionRequest) -> Dict[str, Any]:
    params = payload.to_input()
    schedule = project(params)
    logger.debug("Projected %d year(s) for %s", len(schedule), params.model_dump())

    response = ProjectionResponse(
        input=params,
        schedule=schedule,
        summary=summarize(schedule),
        trend=trend(schedule),
    )
    return response.model_dump()


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), service=SERVICE_NAME)
    return jsonify(response.model_dump())


@api_bp.get("/sip/defaults")
def sip_defaults() -> Any:
    """Initial values for the calculator form."""
    return jsonify(ProjectionRequest().model_dump())


@api_bp.post("/sip/projection")
def sip_projection() -> Any:
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("Request body must be a JSON object.")
    payload = ProjectionRequest.model_validate(raw_payload)
    return jsonify(_run_projection(payload))


@api_bp.get("/sip/projection")
def sip_projection_query() -> Any:
    """Same as the POST route, with the fields read from the query string."""
    payload = ProjectionRequest.model_validate(request.args.to_dict())
    return jsonify(_run_projection(payload))

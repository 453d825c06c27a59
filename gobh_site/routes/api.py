"""
JSON API route handlers for leads and status checks.

Every path under ``/api`` is answered here: the registered routes match on
exact path and method, and everything else falls through to the catch-all
404 handler at the bottom of the module.
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from ..config import config
from ..database import DocumentStore, strip_internal
from ..models import (
    CONTACT_COLLECTION, STATUS_COLLECTION,
    ApiError, ApiMessage, ContactAccepted, ContactSubmission, StatusCheck
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["api"])

CONTACT_FIELDS = ("name", "email", "phone", "address")
CATCH_ALL_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


def get_store(request: Request) -> DocumentStore:
    """Dependency returning the store opened at application startup."""
    return request.app.state.store


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ApiError(error=message).model_dump(exclude_none=True))


def internal_error(exc: Exception) -> JSONResponse:
    logger.error(f"API error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=ApiError(error="Internal server error", details=str(exc)).model_dump()
    )


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Parse the request body; anything but a JSON object reads as empty."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


@router.get("/", response_model=ApiMessage)
async def api_root():
    return {"message": config.API_MESSAGE}


@router.post("/contact")
async def submit_contact(request: Request, store: DocumentStore = Depends(get_store)):
    """Store a lead from the contact form."""
    try:
        body = await read_json_body(request)

        if not all(_is_present(body.get(name)) for name in CONTACT_FIELDS):
            return error_response("All fields are required", 400)

        if not body.get("agreeToTerms"):
            return error_response("You must agree to the terms and conditions", 400)

        submission = ContactSubmission(
            name=body["name"],
            email=body["email"],
            phone=body["phone"],
            address=body["address"],
            agreeToTerms=True,
        )
        store.insert_one(CONTACT_COLLECTION, submission.model_dump())
        logger.info(f"Contact submission stored: {submission.id}")

        return ContactAccepted(
            message="Contact form submitted successfully",
            id=submission.id
        ).model_dump()

    except Exception as e:
        return internal_error(e)


@router.get("/contact")
async def list_contacts(store: DocumentStore = Depends(get_store)):
    """Most recent lead submissions first."""
    try:
        submissions = store.find(
            CONTACT_COLLECTION,
            sort="submittedAt",
            descending=True,
            limit=config.CONTACT_LIST_LIMIT,
        )
        return [strip_internal(doc) for doc in submissions]
    except Exception as e:
        return internal_error(e)


@router.post("/status")
async def create_status_check(request: Request, store: DocumentStore = Depends(get_store)):
    try:
        body = await read_json_body(request)

        if not body.get("client_name"):
            return error_response("client_name is required", 400)

        status_check = StatusCheck(client_name=str(body["client_name"]))
        store.insert_one(STATUS_COLLECTION, status_check.model_dump())
        logger.debug(f"Status check stored for {status_check.client_name}")

        return status_check.model_dump()

    except Exception as e:
        return internal_error(e)


@router.get("/status")
async def list_status_checks(store: DocumentStore = Depends(get_store)):
    try:
        checks = store.find(STATUS_COLLECTION, limit=config.STATUS_LIST_LIMIT)
        return [strip_internal(doc) for doc in checks]
    except Exception as e:
        return internal_error(e)


@router.options("/{path:path}", include_in_schema=False)
async def route_options(path: str):
    """Answer plain OPTIONS requests; CORS preflights are handled by the middleware."""
    return Response(status_code=200)


@router.api_route("/{path:path}", methods=CATCH_ALL_METHODS, include_in_schema=False)
async def route_not_found(path: str):
    return error_response(f"Route /{path} not found", 404)

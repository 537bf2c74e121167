"""
Contact API Routes

Public contact form endpoint and the submissions listing.
"""

import logging
from typing import Any, Dict, List, Tuple

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from studio_service.api.dependencies import get_contact_manager, get_settings, get_store
from studio_service.config.settings import Settings
from studio_service.core.contact_manager import ContactManager
from studio_service.core.dispatch import Attachment
from studio_service.core.errors import ValidationError
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.models import ContactResponse, ContactSubmission, ErrorResponse

router = APIRouter(prefix="/api", tags=["contact"])
logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")
FORM_FIELDS = ("brideName", "groomName", "phone", "email", "weddingDate", "location", "additionalInfo")


class MalformedRequest(Exception):
    """Request body could not be read as a contact submission"""


def _parse_total_price(raw: Any) -> int:
    # Display-only value computed by the client; anything unparsable counts as 0
    try:
        return max(int(raw), 0)
    except (TypeError, ValueError):
        return 0


async def _read_form(request: Request, max_file_size: int) -> Tuple[Dict[str, Any], List[Attachment], int]:
    form = await request.form()

    payload: Dict[str, Any] = {name: form.get(name, "") for name in FORM_FIELDS}
    payload["services"] = form.get("services") or "[]"

    attachments: List[Attachment] = []
    for _, value in form.multi_items():
        if not isinstance(value, UploadFile):
            continue
        content = await value.read()
        if len(content) > max_file_size:
            raise MalformedRequest(
                f"Файл занадто великий. Максимальний розмір файлу: {max_file_size // (1024 * 1024)}МБ"
            )
        attachments.append(Attachment.from_upload(value.filename, value.content_type, content))

    payload["attachments"] = [a.filename for a in attachments]
    return payload, attachments, _parse_total_price(form.get("totalPrice"))


async def _read_json(request: Request) -> Tuple[Dict[str, Any], List[Attachment], int]:
    try:
        body = await request.json()
    except ValueError:
        raise MalformedRequest("Невірний формат JSON") from None
    if not isinstance(body, dict):
        raise MalformedRequest("Очікується об'єкт з даними форми")
    return body, [], _parse_total_price(body.get("totalPrice"))


def _error(status_code: int, message: str, errors=None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "/contact",
    response_model=ContactResponse,
    summary="Submit Contact Form",
    description="""
Accept a lead from the public contact form and forward it to the studio's Telegram chat.

**Workflow**:
1. Client sends multipart/form-data (with optional files) or a JSON body
2. Service validates the form fields
3. Stores the submission and assigns its id
4. Sends the formatted notification (text, single media, album or documents)
5. Returns the submission id; notification failures do not change the response

**Multipart Fields**:
- brideName, groomName, phone (digits only), email, weddingDate, location
- services: JSON-encoded list of service names (at least one)
- additionalInfo: optional free text
- totalPrice: optional client-computed total shown in the notification
- any number of files under any field name (max 10MB each)

**Authorization**: None required (public endpoint)
    """,
    responses={
        200: {"description": "Submission stored"},
        400: {"model": ErrorResponse, "description": "Malformed body or invalid form data"},
        500: {"model": ErrorResponse, "description": "Submission could not be stored"},
    }
)
async def submit_contact(
    request: Request,
    settings: Settings = Depends(get_settings),
    manager: ContactManager = Depends(get_contact_manager),
):
    """Submit a contact form"""
    content_type = request.headers.get("content-type", "").lower()
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            payload, attachments, total_price = await _read_form(request, settings.max_file_size_bytes)
        else:
            payload, attachments, total_price = await _read_json(request)
    except MalformedRequest as e:
        logger.warning(f"Rejected contact request: {e}")
        return _error(400, str(e))

    try:
        submission = await manager.submit(payload, attachments, total_price)
    except ValidationError as e:
        logger.warning(f"Contact form validation failed: {e}")
        return _error(400, "Невірні дані форми", e.as_list())
    except Exception:
        logger.exception("Error creating contact submission")
        return _error(500, "Помилка сервера. Спробуйте пізніше.")

    return ContactResponse(success=True, id=submission.id)


@router.get(
    "/contact-submissions",
    response_model=List[ContactSubmission],
    summary="List Contact Submissions",
    description="""
Returns every stored contact submission, newest first.

**Response Fields**: id, brideName, groomName, phone, email, weddingDate,
location, services, additionalInfo, attachments (file names), createdAt
    """,
    responses={
        200: {"description": "Submissions returned"},
        500: {"model": ErrorResponse, "description": "Store error"},
    }
)
async def list_contact_submissions(store: StudioStore = Depends(get_store)):
    """List contact submissions"""
    try:
        return await store.get_contact_submissions()
    except Exception:
        logger.exception("Error fetching contact submissions")
        return _error(500, "Помилка сервера")

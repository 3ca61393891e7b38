"""Routes for the BRD request workflow and its comment threads."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.activities import list_activities as list_activities_uc
from app.application.use_cases.brd_requests import (
    assign_analyst as assign_analyst_uc,
    create_brd_request as create_brd_request_uc,
    generate_brd_content as generate_brd_content_uc,
    get_brd_request as get_brd_request_uc,
    list_brd_requests as list_brd_requests_uc,
    parse_generated_sections,
    save_form_data as save_form_data_uc,
    select_template as select_template_uc,
    update_request_status as update_request_status_uc,
)
from app.application.use_cases.comments import (
    add_comment as add_comment_uc,
    delete_comment as delete_comment_uc,
    list_comments as list_comments_uc,
    mark_comment_read as mark_comment_read_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.openai_client import BRDGenerationService, OpenAIServiceError
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_generation_service,
    require_admin,
)
from app.interfaces.api.schemas import (
    ActivityRead,
    BRDFormDataUpdate,
    BRDRequestAssign,
    BRDRequestCreate,
    BRDRequestRead,
    BRDRequestStatusUpdate,
    BRDTemplateSelection,
    CommentCreate,
    CommentRead,
    GeneratedSectionsRead,
)

router = APIRouter(prefix="/brd-requests", tags=["brd-requests"])
logger = logging.getLogger(__name__)


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    detail = str(exc)
    if detail.endswith("not found"):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.post("/", response_model=BRDRequestRead, status_code=status.HTTP_201_CREATED)
def create_brd_request(
    payload: BRDRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Raise a new BRD request."""

    try:
        return create_brd_request_uc(db, user=current_user, **payload.model_dump())
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.get("/", response_model=list[BRDRequestRead])
def list_brd_requests(
    status_filter: str | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the requests visible to the authenticated user."""

    return list_brd_requests_uc(
        db, user=current_user, status=status_filter, skip=skip, limit=limit
    )


@router.get("/{request_id}", response_model=BRDRequestRead)
def read_brd_request(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return one request."""

    try:
        return get_brd_request_uc(db, request_id=request_id, user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.put("/{request_id}/assignment", response_model=BRDRequestRead)
def assign_analyst(
    request_id: int,
    payload: BRDRequestAssign,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Assign a business analyst to the request."""

    try:
        return assign_analyst_uc(
            db, request_id=request_id, analyst_id=payload.analyst_id, acting_user=current_user
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.put("/{request_id}/status", response_model=BRDRequestRead)
def update_request_status(
    request_id: int,
    payload: BRDRequestStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Move the request to another workflow status."""

    try:
        return update_request_status_uc(
            db, request_id=request_id, status=payload.status, acting_user=current_user
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.put("/{request_id}/template", response_model=BRDRequestRead)
def select_template(
    request_id: int,
    payload: BRDTemplateSelection,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Attach a template to the request."""

    try:
        return select_template_uc(
            db, request_id=request_id, template_id=payload.template_id, user=current_user
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.put("/{request_id}/form-data", response_model=BRDRequestRead)
def save_form_data(
    request_id: int,
    payload: BRDFormDataUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Save form values and pass the turn to the other party."""

    try:
        return save_form_data_uc(
            db, request_id=request_id, values=payload.values, user=current_user
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.post("/{request_id}/generate", response_model=BRDRequestRead)
def generate_brd_content(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    generator: BRDGenerationService = Depends(get_generation_service),
):
    """Draft the BRD document from the filled form."""

    try:
        return generate_brd_content_uc(
            db, request_id=request_id, user=current_user, generator=generator
        )
    except OpenAIServiceError as exc:
        logger.error("BRD generation failed for request %s: %s", request_id, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.get("/{request_id}/sections", response_model=GeneratedSectionsRead)
def read_generated_sections(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the generated document split by its numbered headings."""

    try:
        request = get_brd_request_uc(db, request_id=request_id, user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc
    return GeneratedSectionsRead(
        request_id=request_id,
        sections=parse_generated_sections(request.generated_content or ""),
    )


@router.get("/{request_id}/comments", response_model=list[CommentRead])
def list_comments(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the comment thread of the request, newest first."""

    try:
        return list_comments_uc(db, request_id=request_id, user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.post(
    "/{request_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    request_id: int,
    payload: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Post a comment on the request."""

    try:
        return add_comment_uc(
            db,
            request_id=request_id,
            author=current_user,
            text=payload.text,
            recipient_id=payload.recipient_id,
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.post(
    "/{request_id}/comments/{comment_id}/read",
    status_code=status.HTTP_204_NO_CONTENT,
)
def mark_comment_read(
    request_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Flag a comment as read."""

    try:
        get_brd_request_uc(db, request_id=request_id, user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc
    if not mark_comment_read_uc(db, request_id=request_id, comment_id=comment_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")


@router.delete(
    "/{request_id}/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_comment(
    request_id: int,
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Delete a comment written by the authenticated user."""

    try:
        delete_comment_uc(
            db, request_id=request_id, comment_id=comment_id, user=current_user
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc


@router.get("/{request_id}/activities", response_model=list[ActivityRead])
def list_activities(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the activity log of the request, newest first."""

    try:
        return list_activities_uc(db, request_id=request_id, user=current_user)
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc

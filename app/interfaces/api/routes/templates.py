"""Routes for BRD template administration."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.templates import (
    PREDEFINED_FIELDS,
    create_template as create_template_uc,
    delete_template as delete_template_uc,
    get_template as get_template_uc,
    group_fields_into_sections,
    list_templates as list_templates_uc,
    update_template as update_template_uc,
)
from app.domain.entities import Template, User
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_active_user, require_admin
from app.interfaces.api.schemas import (
    TemplateCreate,
    TemplateFieldSchema,
    TemplateRead,
    TemplateSectionRead,
    TemplateUpdate,
)

router = APIRouter(prefix="/templates", tags=["templates"])


def _to_read_model(template: Template) -> TemplateRead:
    return TemplateRead(
        id=template.id,
        name=template.name,
        description=template.description,
        fields=[TemplateFieldSchema.model_validate(item) for item in template.fields],
        sections=[
            TemplateSectionRead.model_validate(section)
            for section in group_fields_into_sections(template.fields)
        ],
        created_by=template.created_by,
        created_by_name=template.created_by_name,
        created_at=template.created_at,
        updated_at=template.updated_at,
    )


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, PermissionError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    detail = str(exc)
    if detail == "Template not found":
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("/predefined-fields", response_model=list[TemplateFieldSchema])
def list_predefined_fields(_: User = Depends(require_admin)):
    """Return the catalog of fields offered when composing templates."""

    return [TemplateFieldSchema.model_validate(item) for item in PREDEFINED_FIELDS]


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def create_template(
    template_in: TemplateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Create a template."""

    try:
        template = create_template_uc(
            db,
            user=current_user,
            name=template_in.name,
            description=template_in.description,
            fields=[item.model_dump() for item in template_in.fields],
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc
    return _to_read_model(template)


@router.get("/", response_model=list[TemplateRead])
def list_templates(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Return the available templates."""

    return [_to_read_model(item) for item in list_templates_uc(db, skip=skip, limit=limit)]


@router.get("/{template_id}", response_model=TemplateRead)
def read_template(
    template_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    """Return the template identified by ``template_id``."""

    try:
        template = get_template_uc(db, template_id)
    except ValueError as exc:
        raise _http_error(exc) from exc
    return _to_read_model(template)


@router.put("/{template_id}", response_model=TemplateRead)
def update_template(
    template_id: int,
    template_in: TemplateUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Update a template."""

    fields = (
        [item.model_dump() for item in template_in.fields]
        if template_in.fields is not None
        else None
    )
    try:
        template = update_template_uc(
            db,
            user=current_user,
            template_id=template_id,
            name=template_in.name,
            description=template_in.description,
            fields=fields,
        )
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc
    return _to_read_model(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    """Delete a template."""

    try:
        delete_template_uc(db, user=current_user, template_id=template_id)
    except (PermissionError, ValueError) as exc:
        raise _http_error(exc) from exc

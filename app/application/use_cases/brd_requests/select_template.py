"""Use case for attaching a template to a request."""

from dataclasses import replace

from sqlalchemy.orm import Session

from app.application.use_cases.templates import (
    group_fields_into_sections,
    serialize_sections,
)
from app.domain.entities import BRDRequest, EDITOR_REQUESTER, User
from app.infrastructure.notifications import BRD_REQUESTS_TOPIC, ChangeFeed, change_feed
from app.infrastructure.repositories import BRDRequestRepository, TemplateRepository
from app.utils import now_in_app_timezone

from .access import ensure_can_edit


def select_template(
    session: Session,
    *,
    request_id: int,
    template_id: int,
    user: User,
    feed: ChangeFeed | None = None,
) -> BRDRequest:
    """Copy the template's sections into the request and prepare its form.

    Every template field gets a ``form_data`` entry; values already present on
    the request are kept.
    """

    repository = BRDRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise ValueError("BRD request not found")
    ensure_can_edit(request, user)

    template = TemplateRepository(session).get(template_id)
    if template is None:
        raise ValueError("Template not found")

    form_data = {item.name: request.form_data.get(item.name, "") for item in template.fields}
    updated = replace(
        request,
        template_id=template.id,
        template_name=template.name,
        template_sections=serialize_sections(group_fields_into_sections(template.fields)),
        form_data=form_data,
        current_editor=EDITOR_REQUESTER,
        updated_at=now_in_app_timezone(),
        updated_by=user.id,
    )
    saved = repository.update(updated)
    (feed or change_feed).publish(BRD_REQUESTS_TOPIC)
    return saved

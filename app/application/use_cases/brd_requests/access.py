"""Access rules shared by the BRD request use cases."""

from app.domain.entities import BRDRequest, EDITOR_ANALYST, EDITOR_REQUESTER, User


def ensure_can_view(request: BRDRequest, user: User) -> None:
    """Raise ``PermissionError`` unless ``user`` may read ``request``."""

    if user.is_admin() or request.is_participant(user.id):
        return
    raise PermissionError("You do not have access to this BRD request")


def can_edit(request: BRDRequest, user: User) -> bool:
    """Return ``True`` when it is ``user``'s turn to edit the request form."""

    if user.is_requester():
        return request.current_editor == EDITOR_REQUESTER and request.created_by == user.id
    if user.is_analyst():
        return (
            request.current_editor == EDITOR_ANALYST
            and request.assigned_analyst_id == user.id
        )
    return False


def ensure_can_edit(request: BRDRequest, user: User) -> None:
    if not can_edit(request, user):
        raise PermissionError("It is not your turn to edit this BRD request")


def next_editor(current_editor: str) -> str:
    return EDITOR_REQUESTER if current_editor == EDITOR_ANALYST else EDITOR_ANALYST

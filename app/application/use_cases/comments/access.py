"""Access rules shared by the comment use cases."""

from app.domain.entities import BRDRequest, User


def ensure_can_discuss(request: BRDRequest, user: User) -> None:
    """Raise ``PermissionError`` unless ``user`` may read and write the thread."""

    if user.is_admin() or request.is_participant(user.id):
        return
    raise PermissionError("You are not a participant of this BRD request")

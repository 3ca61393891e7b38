"""Persistence helpers for request comments."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from app.domain.entities import Comment
from app.infrastructure.models import CommentModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class CommentRepository:
    """Provide CRUD operations for :class:`Comment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_request(
        self,
        request_id: int,
        *,
        since: datetime | None = None,
        limit: int | None = None,
    ) -> Sequence[Comment]:
        query = self.session.query(CommentModel).filter(
            CommentModel.request_id == request_id
        )
        if since is not None:
            query = query.filter(
                CommentModel.timestamp >= ensure_app_naive_datetime(since)
            )
        query = query.order_by(CommentModel.timestamp.desc(), CommentModel.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            request_id=comment.request_id,
            user_id=comment.user_id,
            user_name=comment.user_name,
            user_role=comment.user_role,
            text=comment.text,
            recipient_id=comment.recipient_id,
            read=comment.read,
            timestamp=ensure_app_naive_datetime(comment.timestamp)
            or ensure_app_naive_datetime(now_in_app_timezone()),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, comment_id: int, *, request_id: int | None = None) -> bool:
        """Set the ``read`` flag of a comment, returning ``False`` when it does not exist."""

        query = self.session.query(CommentModel).filter(CommentModel.id == comment_id)
        if request_id is not None:
            query = query.filter(CommentModel.request_id == request_id)
        updated = query.update({CommentModel.read: True}, synchronize_session=False)
        self.session.commit()
        return bool(updated)

    def delete(self, comment_id: int) -> bool:
        model = self.session.get(CommentModel, comment_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            request_id=model.request_id,
            user_id=model.user_id,
            user_name=model.user_name,
            user_role=model.user_role,
            text=model.text,
            recipient_id=model.recipient_id,
            read=bool(model.read),
            timestamp=ensure_app_timezone(model.timestamp),
        )


__all__ = ["CommentRepository"]

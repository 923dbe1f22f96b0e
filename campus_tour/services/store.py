from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from campus_tour.errors import PersistenceError
from campus_tour.extensions import db
from campus_tour.models import Feedback, User


class RecordStore:
    """
    Append-only access to the `users` and `feedbacks` tables.
    Inserts commit one row at a time; list calls are full scans, newest first.
    """

    def add_login(self, username: Optional[str], password: Optional[str]) -> User:
        return self._insert(User(username=username, password=password))

    def list_logins(self) -> List[User]:
        return self._scan(User.query.order_by(User.login_time.desc(), User.id.desc()))

    def add_feedback(
        self,
        name: Optional[str],
        email: Optional[str],
        message: Optional[str],
        image_url: Optional[str] = None,
    ) -> Feedback:
        return self._insert(Feedback(name=name, email=email, message=message, image_url=image_url))

    def list_feedback(self) -> List[Feedback]:
        return self._scan(Feedback.query.order_by(Feedback.submitted_at.desc(), Feedback.id.desc()))

    def _insert(self, record):
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise PersistenceError(f"could not save {type(record).__name__}: {e}") from e
        return record

    def _scan(self, query) -> list:
        try:
            return query.all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise PersistenceError(f"could not read records: {e}") from e

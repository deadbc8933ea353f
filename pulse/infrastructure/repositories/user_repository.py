"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from pulse.domain.entities import User
from pulse.infrastructure.models import UserModel
from pulse.utils import ensure_app_naive_datetime

from .mappers import user_to_entity


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_all(self) -> Sequence[User]:
        query = self.session.query(UserModel).order_by(UserModel.id.asc())
        return [self._to_entity(model) for model in query.all()]

    def list_ids(self) -> list[int]:
        return [user_id for (user_id,) in self.session.query(UserModel.id).all()]

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(func.lower(UserModel.username) == username.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        if user.created_at is not None:
            model.created_at = ensure_app_naive_datetime(user.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, user_id: int) -> None:
        model = self._get_model(id=user_id)
        if not model:
            msg = f"User with id {user_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return user_to_entity(model)

    def _get_model(self, **filters) -> UserModel | None:
        return self.session.query(UserModel).filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.username = user.username
        model.email = user.email
        model.password = user.password
        model.role = user.role


__all__ = ["UserRepository"]

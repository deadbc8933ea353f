"""Persistence layer for event participations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from pulse.domain.entities import Participation
from pulse.infrastructure.models import EventModel, ParticipationModel, UserModel
from pulse.utils import ensure_app_timezone

from .mappers import event_to_entity, user_to_entity


class ParticipationRepository:
    """Provide CRUD operations for :class:`Participation` records."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_for_user_and_event(self, user_id: int, event_id: int) -> Participation | None:
        model = (
            self.session.query(ParticipationModel)
            .filter(ParticipationModel.user_id == user_id)
            .filter(ParticipationModel.event_id == event_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def get_first_by_intent(self, payment_intent_id: str) -> Participation | None:
        model = (
            self.session.query(ParticipationModel)
            .filter(ParticipationModel.payment_intent_id == payment_intent_id)
            .order_by(ParticipationModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_for_user(self, user_id: int) -> Sequence[Participation]:
        query = (
            self.session.query(ParticipationModel)
            .join(EventModel, ParticipationModel.event_id == EventModel.id)
            .filter(ParticipationModel.user_id == user_id)
            .order_by(EventModel.start_date.asc(), ParticipationModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_event(
        self,
        event_id: int,
        *,
        skip: int = 0,
        limit: int = 20,
        search: str | None = None,
    ) -> tuple[Sequence[Participation], int]:
        query = (
            self.session.query(ParticipationModel)
            .join(UserModel, ParticipationModel.user_id == UserModel.id)
            .filter(ParticipationModel.event_id == event_id)
        )
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                or_(UserModel.username.ilike(pattern), UserModel.email.ilike(pattern))
            )
        total = query.count()
        models = (
            query.order_by(
                ParticipationModel.created_at.desc(), ParticipationModel.id.desc()
            )
            .offset(skip)
            .limit(limit)
            .all()
        )
        return [self._to_entity(model) for model in models], total

    def count_for_event(self, event_id: int) -> int:
        return (
            self.session.query(ParticipationModel)
            .filter(ParticipationModel.event_id == event_id)
            .count()
        )

    def create(self, participation: Participation) -> Participation:
        model = ParticipationModel()
        self._apply_entity_to_model(model, participation)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, participation: Participation) -> Participation:
        model = self.session.get(ParticipationModel, participation.id)
        if model is None:
            msg = f"Participation with id {participation.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, participation)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status_by_intent(self, payment_intent_id: str, status: str) -> int:
        """Set ``status`` on every participation tied to the payment intent."""

        models = (
            self.session.query(ParticipationModel)
            .filter(ParticipationModel.payment_intent_id == payment_intent_id)
            .all()
        )
        for model in models:
            model.payment_status = status
        self.session.commit()
        return len(models)

    def delete(self, participation_id: int) -> None:
        model = self.session.get(ParticipationModel, participation_id)
        if model is None:
            msg = f"Participation with id {participation_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: ParticipationModel, participation: Participation
    ) -> None:
        model.user_id = participation.user_id
        model.event_id = participation.event_id
        model.payment_status = participation.payment_status
        model.payment_intent_id = participation.payment_intent_id
        model.amount_paid = participation.amount_paid

    @staticmethod
    def _to_entity(model: ParticipationModel) -> Participation:
        return Participation(
            id=model.id,
            user_id=model.user_id,
            event_id=model.event_id,
            payment_status=model.payment_status,
            payment_intent_id=model.payment_intent_id,
            amount_paid=model.amount_paid,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            event=event_to_entity(model.event) if model.event is not None else None,
            user=user_to_entity(model.user) if model.user is not None else None,
        )


__all__ = ["ParticipationRepository"]

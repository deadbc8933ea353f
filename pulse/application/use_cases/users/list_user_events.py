"""Use case listing the events a user registered to."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from pulse.application.errors import NotFoundError
from pulse.domain.entities import Participation, User
from pulse.infrastructure.repositories import ParticipationRepository, UserRepository


def list_user_events(
    session: Session, *, user_id: int, requested_by: User
) -> Sequence[Participation]:
    """Return participations of ``user_id`` ordered by event start date.

    Only the user themself or an administrator may read them.
    """

    if requested_by.id != user_id and not requested_by.is_admin():
        raise PermissionError("Accès non autorisé")
    if UserRepository(session).get(user_id) is None:
        raise NotFoundError("Utilisateur introuvable")
    return ParticipationRepository(session).list_for_user(user_id)

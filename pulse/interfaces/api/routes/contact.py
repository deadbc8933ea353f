"""Routes du formulaire de contact."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.contact_messages import (
    delete_contact_message,
    list_contact_messages,
    mark_contact_message,
    submit_contact_message,
)
from pulse.domain.entities import User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import require_admin
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    ContactMessageCreate,
    ContactMessageRead,
    ContactMessageUpdate,
    MessageResponse,
)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=ContactMessageRead, status_code=status.HTTP_201_CREATED)
def submit_message(payload: ContactMessageCreate, db: Session = Depends(get_db)):
    with translate_errors():
        message = submit_contact_message(db, **payload.model_dump())
    return ContactMessageRead.model_validate(message)


@router.get("", response_model=list[ContactMessageRead])
def list_messages(db: Session = Depends(get_db), _: User = Depends(require_admin)):
    return [ContactMessageRead.model_validate(item) for item in list_contact_messages(db)]


@router.put("/{message_id}", response_model=ContactMessageRead)
def update_message(
    message_id: int,
    payload: ContactMessageUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        message = mark_contact_message(db, message_id, read=payload.read)
    return ContactMessageRead.model_validate(message)


@router.delete("/{message_id}", response_model=MessageResponse)
def delete_message(
    message_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        delete_contact_message(db, message_id)
    return MessageResponse(message="Message supprimé avec succès")

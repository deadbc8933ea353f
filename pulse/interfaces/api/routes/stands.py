"""Routes des stands."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.stands import (
    create_stand as create_stand_uc,
    delete_stand as delete_stand_uc,
    get_stand as get_stand_uc,
    list_stands as list_stands_uc,
    update_stand as update_stand_uc,
)
from pulse.domain.entities import User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import require_admin
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    MessageResponse,
    StandCreate,
    StandRead,
    StandUpdate,
)

router = APIRouter(prefix="/stands", tags=["stands"])


@router.get("", response_model=list[StandRead])
def list_stands(db: Session = Depends(get_db)):
    return [StandRead.from_entity(stand) for stand in list_stands_uc(db)]


@router.post("", response_model=StandRead, status_code=status.HTTP_201_CREATED)
def create_stand(
    payload: StandCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        stand = create_stand_uc(db, **payload.model_dump())
    return StandRead.from_entity(stand)


@router.get("/{stand_id}", response_model=StandRead)
def read_stand(stand_id: int, db: Session = Depends(get_db)):
    with translate_errors():
        stand = get_stand_uc(db, stand_id)
    return StandRead.from_entity(stand)


@router.put("/{stand_id}", response_model=StandRead)
def update_stand(
    stand_id: int,
    payload: StandUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        stand = update_stand_uc(
            db, stand_id, changes=payload.model_dump(exclude_unset=True)
        )
    return StandRead.from_entity(stand)


@router.delete("/{stand_id}", response_model=MessageResponse)
def delete_stand(
    stand_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        delete_stand_uc(db, stand_id)
    return MessageResponse(message="Stand supprimé avec succès")

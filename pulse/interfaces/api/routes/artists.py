"""Routes des artistes."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.artists import (
    create_artist as create_artist_uc,
    delete_artist as delete_artist_uc,
    get_artist as get_artist_uc,
    list_artists as list_artists_uc,
    update_artist as update_artist_uc,
)
from pulse.domain.entities import Artist, User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import require_admin
from pulse.interfaces.api.routes_helpers import translate_errors
from pulse.interfaces.api.schemas import (
    ArtistCreate,
    ArtistRead,
    ArtistUpdate,
    MessageResponse,
)

router = APIRouter(prefix="/artists", tags=["artists"])


def _to_read_model(artist: Artist) -> ArtistRead:
    return ArtistRead.model_validate(artist)


@router.get("", response_model=list[ArtistRead])
def list_artists(db: Session = Depends(get_db)):
    """Artistes du plus récent au plus ancien, avec leurs événements."""

    return [_to_read_model(artist) for artist in list_artists_uc(db)]


@router.post("", response_model=ArtistRead, status_code=status.HTTP_201_CREATED)
def create_artist(
    payload: ArtistCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        artist = create_artist_uc(
            db,
            name=payload.name,
            description=payload.description,
            image_path=payload.image_path,
        )
    return _to_read_model(artist)


@router.get("/{artist_id}", response_model=ArtistRead)
def read_artist(artist_id: int, db: Session = Depends(get_db)):
    with translate_errors():
        artist = get_artist_uc(db, artist_id)
    return _to_read_model(artist)


@router.put("/{artist_id}", response_model=ArtistRead)
def update_artist(
    artist_id: int,
    payload: ArtistUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        artist = update_artist_uc(
            db, artist_id, changes=payload.model_dump(exclude_unset=True)
        )
    return _to_read_model(artist)


@router.delete("/{artist_id}", response_model=MessageResponse)
def delete_artist(
    artist_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        delete_artist_uc(db, artist_id)
    return MessageResponse(message="Artiste supprimé avec succès")

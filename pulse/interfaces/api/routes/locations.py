"""Routes des lieux."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from pulse.application.use_cases.locations import (
    create_location as create_location_uc,
    delete_location as delete_location_uc,
    get_location as get_location_uc,
    list_locations as list_locations_uc,
    update_location as update_location_uc,
)
from pulse.domain.entities import Location, User
from pulse.infrastructure.database import get_db
from pulse.interfaces.api.dependencies import require_admin
from pulse.interfaces.api.routes_helpers import page_to_offset, translate_errors
from pulse.interfaces.api.schemas import (
    EventSummaryRead,
    LocationCreate,
    LocationDetailRead,
    LocationListResponse,
    LocationRead,
    LocationUpdate,
    MessageResponse,
    PaginationRead,
    StandRead,
)

router = APIRouter(prefix="/locations", tags=["locations"])


def _to_detail_model(location: Location) -> LocationDetailRead:
    return LocationDetailRead(
        **LocationRead.model_validate(location).model_dump(),
        events=[EventSummaryRead.model_validate(event) for event in location.events],
        stands=[StandRead.from_entity(stand) for stand in location.stands],
    )


@router.get("", response_model=LocationListResponse)
def list_locations(
    page: int = Query(1, ge=1),
    limit: int = Query(100, ge=1, le=500),
    search: str | None = None,
    has_coordinates: bool | None = None,
    db: Session = Depends(get_db),
):
    locations, total = list_locations_uc(
        db,
        skip=page_to_offset(page, limit),
        limit=limit,
        search=search,
        has_coordinates=has_coordinates,
    )
    return LocationListResponse(
        locations=[LocationRead.model_validate(location) for location in locations],
        pagination=PaginationRead.build(page=page, limit=limit, total=total),
    )


@router.post("", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
def create_location(
    payload: LocationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        location = create_location_uc(db, **payload.model_dump())
    return LocationRead.model_validate(location)


@router.get("/{location_id}", response_model=LocationDetailRead)
def read_location(location_id: int, db: Session = Depends(get_db)):
    """Lieu avec ses événements et ses stands."""

    with translate_errors():
        location = get_location_uc(db, location_id)
    return _to_detail_model(location)


@router.put("/{location_id}", response_model=LocationRead)
def update_location(
    location_id: int,
    payload: LocationUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        location = update_location_uc(
            db, location_id, changes=payload.model_dump(exclude_unset=True)
        )
    return LocationRead.model_validate(location)


@router.delete("/{location_id}", response_model=MessageResponse)
def delete_location(
    location_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    with translate_errors():
        delete_location_uc(db, location_id)
    return MessageResponse(message="Lieu supprimé avec succès")

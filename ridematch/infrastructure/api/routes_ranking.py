"""Ranking endpoint — order drivers for a passenger by extra distance."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ridematch.application.ports.distance_matrix_port import DistanceMatrixError
from ridematch.application.use_cases.suggest_drivers import SuggestDriversUseCase
from ridematch.domain.entities.person import Person
from ridematch.domain.value_objects.geo_point import GeoPoint
from ridematch.infrastructure.api.dependencies import get_suggest_drivers_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ranking"])

# ── Request / Response schemas ──────────────────────────────────────

class PersonIn(BaseModel):
    id: str | None = None
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    def to_person(self) -> Person:
        destination = GeoPoint(latitude=self.latitude, longitude=self.longitude)
        if self.id:
            return Person(destination=destination, id=self.id)
        return Person(destination=destination)


class RankRequest(BaseModel):
    passenger: PersonIn
    drivers: list[PersonIn]


class RankedDriver(BaseModel):
    id: str
    latitude: float
    longitude: float
    measure_km: float
    strategy: str


class RankResponse(BaseModel):
    passenger_id: str
    drivers: list[RankedDriver]


# ── Routes ──────────────────────────────────────────────────────────

@router.post("/rank", response_model=RankResponse)
def rank(
    request: RankRequest,
    uc: SuggestDriversUseCase = Depends(get_suggest_drivers_uc),
):
    """Rank drivers ascending by the detour they take to serve the passenger."""
    passenger = request.passenger.to_person()
    drivers = [d.to_person() for d in request.drivers]

    try:
        suggestion = uc.execute(passenger, drivers)
    except DistanceMatrixError as e:
        status = 503 if e.retryable else 502
        logger.warning("Rank request failed with distance matrix error: %s", e)
        raise HTTPException(status_code=status, detail=str(e))

    return RankResponse(
        passenger_id=passenger.id,
        drivers=[
            RankedDriver(
                id=m.driver.id,
                latitude=m.driver.destination.latitude,
                longitude=m.driver.destination.longitude,
                measure_km=m.value,
                strategy=m.strategy.value,
            )
            for m in suggestion.ranked
        ],
    )

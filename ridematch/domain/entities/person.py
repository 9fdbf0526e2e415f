"""Person entity — a passenger or a driver heading to a destination."""

import uuid
from dataclasses import dataclass, field

from ridematch.domain.value_objects.geo_point import GeoPoint


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Person:
    destination: GeoPoint
    id: str = field(default_factory=_new_id)

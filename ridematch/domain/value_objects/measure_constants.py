"""Constants of the detour measure — threshold and distance scale factors."""

from dataclasses import dataclass

# Accumulated latitude gap (degrees) above which the flat projection is abandoned
MAX_ACCUMULATED_DIFFERENCE_DEG = 1.0

EARTH_RADIUS_KM = 6371.007177356707

# km per degree; calibrated for Saint Petersburg (~60°N), wrong elsewhere
LAT_COEF_KM = 111.412
LNG_COEF_KM = 55.800


@dataclass(frozen=True)
class MeasureConstants:
    max_accumulated_difference_deg: float = MAX_ACCUMULATED_DIFFERENCE_DEG
    earth_radius_km: float = EARTH_RADIUS_KM
    lat_coef_km: float = LAT_COEF_KM
    lng_coef_km: float = LNG_COEF_KM

"""Application configuration via Pydantic Settings.

NOTE: We explicitly map .env variable names (DEPARTURE_LATITUDE, GOOGLE_MAPS_API_KEY,
DISTANCE_MATRIX_ENABLED, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from ridematch.domain.value_objects.geo_point import GeoPoint
from ridematch.domain.value_objects.measure_constants import (
    EARTH_RADIUS_KM,
    LAT_COEF_KM,
    LNG_COEF_KM,
    MAX_ACCUMULATED_DIFFERENCE_DEG,
    MeasureConstants,
)


class Settings(BaseSettings):
    # Departure point shared by every trip (Saint Petersburg by default)
    departure_latitude: float = Field(default=59.981557, validation_alias="DEPARTURE_LATITUDE")
    departure_longitude: float = Field(default=30.214507, validation_alias="DEPARTURE_LONGITUDE")

    # Measure constants
    max_accumulated_difference_deg: float = Field(
        default=MAX_ACCUMULATED_DIFFERENCE_DEG,
        validation_alias="MAX_ACCUMULATED_DIFFERENCE_DEG",
    )
    earth_radius_km: float = Field(default=EARTH_RADIUS_KM, validation_alias="EARTH_RADIUS_KM")
    lat_coef_km: float = Field(default=LAT_COEF_KM, validation_alias="LAT_COEF_KM")
    lng_coef_km: float = Field(default=LNG_COEF_KM, validation_alias="LNG_COEF_KM")

    # External distance matrix (off unless explicitly enabled)
    distance_matrix_enabled: bool = Field(default=False, validation_alias="DISTANCE_MATRIX_ENABLED")
    google_maps_api_key: str = Field(default="", validation_alias="GOOGLE_MAPS_API_KEY")
    distance_matrix_timeout: float = Field(default=10.0, validation_alias="DISTANCE_MATRIX_TIMEOUT")
    distance_matrix_max_retries: int = Field(default=2, validation_alias="DISTANCE_MATRIX_MAX_RETRIES")
    distance_matrix_backoff_s: float = Field(default=0.5, validation_alias="DISTANCE_MATRIX_BACKOFF_S")
    distance_matrix_cache_size: int = Field(default=10_000, validation_alias="DISTANCE_MATRIX_CACHE_SIZE")

    # Runner
    points_path: str = Field(default="data/latlons", validation_alias="POINTS_PATH")
    passenger_count: int = Field(default=10, validation_alias="PASSENGER_COUNT")
    driver_count: int = Field(default=10, validation_alias="DRIVER_COUNT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def departure_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.departure_latitude, longitude=self.departure_longitude)

    def measure_constants(self) -> MeasureConstants:
        return MeasureConstants(
            max_accumulated_difference_deg=self.max_accumulated_difference_deg,
            earth_radius_km=self.earth_radius_km,
            lat_coef_km=self.lat_coef_km,
            lng_coef_km=self.lng_coef_km,
        )


settings = Settings()

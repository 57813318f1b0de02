"""Location models and the registry of supported beaches."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Historical maximum at Point Atkinson, the reference station for Vancouver
POINT_ATKINSON_MAX_TIDE_M = 4.8


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude) in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


class Beach(BaseModel):
    """A beach the engine can make recommendations for."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable identifier used in cache keys")
    name: str = Field(..., description="Display name")
    coordinates: Coordinates
    water_quality_id: str | None = Field(
        default=None, description="Identifier at the water quality provider"
    )
    tide_station: str = Field(default="point-atkinson")
    max_tide_height_m: float = Field(
        default=POINT_ATKINSON_MAX_TIDE_M,
        gt=0,
        description="Historical maximum tide height used to normalize tide scores",
    )
    timezone: str = Field(default="America/Vancouver", description="IANA timezone")


def _beach(id: str, name: str, lat: float, lon: float, wq_id: str) -> Beach:
    return Beach(
        id=id,
        name=name,
        coordinates=Coordinates(latitude=lat, longitude=lon),
        water_quality_id=wq_id,
    )


BEACHES: tuple[Beach, ...] = (
    _beach("kitsilano", "Kitsilano Beach", 49.2743, -123.1544, "kitsilano-beach"),
    _beach("english-bay", "English Bay Beach", 49.2863, -123.1432, "english-bay"),
    _beach("jericho", "Jericho Beach", 49.2726, -123.1967, "jericho-beach"),
    _beach("spanish-banks-east", "Spanish Banks East", 49.2756, -123.2089, "spanish-banks-east"),
    _beach("spanish-banks-west", "Spanish Banks West", 49.2769, -123.2244, "spanish-banks-west"),
    _beach("locarno", "Locarno Beach", 49.2768, -123.2167, "locarno-beach"),
    _beach("wreck", "Wreck Beach", 49.2621, -123.2617, "wreck-beach"),
    _beach("second", "Second Beach", 49.2912, -123.1513, "second-beach"),
    _beach("third", "Third Beach", 49.2989, -123.1588, "third-beach"),
    _beach("sunset", "Sunset Beach", 49.2799, -123.1339, "sunset-beach"),
    _beach("trout-lake", "Trout Lake Beach", 49.2555, -123.0644, "trout-lake"),
    _beach("new-brighton", "New Brighton Beach", 49.2930, -123.0365, "new-brighton"),
)

_BY_ID = {beach.id: beach for beach in BEACHES}


def get_beach(beach_id: str) -> Beach | None:
    """Look up a beach by id."""
    return _BY_ID.get(beach_id)


def all_beaches() -> tuple[Beach, ...]:
    """All registered beaches."""
    return BEACHES


def max_tide_height(beach_id: str) -> float:
    """Historical maximum tide height for a location.

    Unknown locations fall back to the Point Atkinson reference value.
    """
    beach = _BY_ID.get(beach_id)
    return beach.max_tide_height_m if beach else POINT_ATKINSON_MAX_TIDE_M

"""
Input/output contracts for the NeoWs tools.

Attributes are snake_case in Python and camelCase on the wire
(``diameter_meters`` <-> ``diameterMeters``).
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.services.hazard import RiskLevel

# ASCII digits only; \d would also accept other Unicode digits.
DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DateRangeIn(CamelModel):
    start_date: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")
    end_date: str = Field(..., pattern=DATE_PATTERN, description="YYYY-MM-DD")


class Asteroid(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    hazardous: bool
    diameter_meters: float
    relative_velocity_kps: float
    miss_distance_km: float
    close_approach_date: str
    risk_level: RiskLevel


class FetchResult(CamelModel):
    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=0)
    asteroids: List[Asteroid]


class RiskCounts(BaseModel):
    model_config = ConfigDict(frozen=True)

    LOW: int = 0
    MEDIUM: int = 0
    HIGH: int = 0


class HighRiskAsteroid(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    diameter_meters: float
    relative_velocity_kps: float
    miss_distance_km: float


class SummaryResult(CamelModel):
    model_config = ConfigDict(frozen=True)

    total: int = Field(..., ge=0)
    by_risk: RiskCounts
    top_high_risk: List[HighRiskAsteroid]

"""
Close-approach risk classification.

Each close approach gets an additive point score (0-8) built from four
factors, which is then bucketed into LOW / MEDIUM / HIGH:

    hazardous flag      +2
    diameter  (m)       +2 if >= 140, +1 if >= 50
    velocity  (km/s)    +2 if >= 25,  +1 if >= 15
    miss dist (km)      +2 if <= 500,000, +1 if <= 2,000,000

    score >= 5 -> HIGH, score >= 3 -> MEDIUM, otherwise LOW
"""
import enum
from dataclasses import dataclass


class RiskLevel(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Sorting only; HIGH ranks first.
RISK_RANK = {
    RiskLevel.HIGH: 3,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 1,
}

DIAMETER_LARGE_M = 140
DIAMETER_MEDIUM_M = 50
VELOCITY_FAST_KPS = 25
VELOCITY_MEDIUM_KPS = 15
MISS_NEAR_KM = 500_000
MISS_MEDIUM_KM = 2_000_000

HIGH_SCORE = 5
MEDIUM_SCORE = 3


@dataclass(frozen=True)
class CloseApproachEvent:
    hazardous_flag: bool
    diameter_meters: float
    relative_velocity_kps: float
    miss_distance_km: float


def risk_score(
    hazardous_flag: bool,
    diameter_meters: float,
    relative_velocity_kps: float,
    miss_distance_km: float,
) -> int:
    """Point score in [0, 8]. Never raises; a NaN factor contributes nothing."""
    score = 0

    if hazardous_flag:
        score += 2

    # Size
    if diameter_meters >= DIAMETER_LARGE_M:
        score += 2
    elif diameter_meters >= DIAMETER_MEDIUM_M:
        score += 1

    # Speed
    if relative_velocity_kps >= VELOCITY_FAST_KPS:
        score += 2
    elif relative_velocity_kps >= VELOCITY_MEDIUM_KPS:
        score += 1

    # Miss distance (closer is riskier)
    if miss_distance_km <= MISS_NEAR_KM:
        score += 2
    elif miss_distance_km <= MISS_MEDIUM_KM:
        score += 1

    return score


def level_for_score(score: int) -> RiskLevel:
    if score >= HIGH_SCORE:
        return RiskLevel.HIGH
    if score >= MEDIUM_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def classify(
    hazardous_flag: bool,
    diameter_meters: float,
    relative_velocity_kps: float,
    miss_distance_km: float,
) -> RiskLevel:
    """Classify a single close approach."""
    return level_for_score(
        risk_score(hazardous_flag, diameter_meters, relative_velocity_kps, miss_distance_km)
    )


def classify_event(event: CloseApproachEvent) -> RiskLevel:
    return classify(
        event.hazardous_flag,
        event.diameter_meters,
        event.relative_velocity_kps,
        event.miss_distance_km,
    )

from app.schemas.neo import (
    DateRangeIn as DateRangeIn,
    Asteroid as Asteroid,
    FetchResult as FetchResult,
    RiskCounts as RiskCounts,
    HighRiskAsteroid as HighRiskAsteroid,
    SummaryResult as SummaryResult,
)

"""
NASA NeoWs feed client.

Fetches the Near-Earth Object feed for a date range, flattens the per-day
grouping, normalizes each object into an ``Asteroid`` (with a computed risk
level) and builds the summary view on top of the detailed fetch.
https://api.nasa.gov/ (Asteroids - NeoWs)
"""
import httpx
import logging
import math
from itertools import islice
from typing import Any, Dict, Iterator, List, Optional, Tuple

from app.core.config import Settings, settings as default_settings
from app.core.errors import ConfigurationError, UpstreamError
from app.schemas.neo import (
    Asteroid,
    DateRangeIn,
    FetchResult,
    HighRiskAsteroid,
    RiskCounts,
    SummaryResult,
)
from app.services.hazard import RISK_RANK, RiskLevel, classify

logger = logging.getLogger(__name__)

TOP_HIGH_RISK_LIMIT = 5


async def fetch_feed(
    start_date: str,
    end_date: str,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """
    GET the raw NeoWs feed for an inclusive date range.

    Raises ConfigurationError before any network activity when NASA_API_KEY is
    missing, and UpstreamError on transport failures, timeouts and non-2xx
    responses. A body that is not a JSON object is returned as ``{}``.
    """
    cfg = settings or default_settings
    if not cfg.NASA_API_KEY:
        raise ConfigurationError("NASA_API_KEY is not set")

    params = {"start_date": start_date, "end_date": end_date, "api_key": cfg.NASA_API_KEY}
    headers = {"User-Agent": cfg.USER_AGENT}

    owns_client = client is None
    http = client if client is not None else httpx.AsyncClient()
    try:
        resp = await http.get(
            cfg.NASA_NEOWS_FEED_URL,
            params=params,
            headers=headers,
            timeout=cfg.NASA_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.error(f"NeoWs feed returned {status} for {start_date}..{end_date}")
        raise UpstreamError(f"NeoWs {status}", status_code=status) from e
    except httpx.TimeoutException as e:
        logger.error(f"NeoWs feed timed out after {cfg.NASA_TIMEOUT_SECONDS}s")
        raise UpstreamError("NeoWs request timed out") from e
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch NeoWs feed: {e}")
        raise UpstreamError(f"NeoWs request failed: {e}") from e
    finally:
        if owns_client:
            await http.aclose()

    try:
        data = resp.json()
    except ValueError:
        logger.warning("NeoWs feed body is not valid JSON, treating as empty")
        return {}
    return data if isinstance(data, dict) else {}


def _to_float(val: Any) -> float:
    """Coerce a loosely typed upstream number; anything unusable or non-finite becomes 0."""
    if val is None:
        return 0.0
    try:
        f = float(val)
    except (ValueError, TypeError):
        return 0.0
    return f if math.isfinite(f) else 0.0


def _dig(obj: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def parse_neo(neo: Dict[str, Any], date_key: str) -> Asteroid:
    """
    Normalize one upstream NEO record.

    Missing or malformed fields never raise:
    - diameter, velocity and miss distance default to 0
    - the close-approach date defaults to the feed's grouping date
    - hazardous defaults to False
    Only the first close-approach entry is used.
    """
    diameter_meters = _to_float(_dig(neo, "estimated_diameter", "meters", "estimated_diameter_max"))

    approaches = neo.get("close_approach_data")
    ca = approaches[0] if isinstance(approaches, list) and approaches else None

    relative_velocity_kps = _to_float(_dig(ca, "relative_velocity", "kilometers_per_second"))
    miss_distance_km = _to_float(_dig(ca, "miss_distance", "kilometers"))

    approach_date = _dig(ca, "close_approach_date")
    close_approach_date = str(approach_date if approach_date is not None else date_key)

    hazardous = bool(neo.get("is_potentially_hazardous_asteroid"))

    return Asteroid(
        id=str(neo.get("id")),
        name=str(neo.get("name")),
        hazardous=hazardous,
        diameter_meters=diameter_meters,
        relative_velocity_kps=relative_velocity_kps,
        miss_distance_km=miss_distance_km,
        close_approach_date=close_approach_date,
        risk_level=classify(hazardous, diameter_meters, relative_velocity_kps, miss_distance_km),
    )


def iter_feed_records(payload: Dict[str, Any]) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Yield (date_key, record) pairs in upstream order."""
    neos = payload.get("near_earth_objects")
    if not isinstance(neos, dict):
        return

    for date_key, records in neos.items():
        if not isinstance(records, list):
            logger.warning(f"Ignoring non-list NEO group for {date_key}")
            continue
        for neo in records:
            if not isinstance(neo, dict):
                logger.warning(f"Skipping non-object NEO record under {date_key}")
                continue
            yield str(date_key), neo


def normalize_feed(payload: Dict[str, Any]) -> List[Asteroid]:
    return [parse_neo(neo, date_key) for date_key, neo in iter_feed_records(payload)]


def sort_asteroids(asteroids: List[Asteroid]) -> List[Asteroid]:
    """Risk rank descending, then diameter descending. Stable for exact ties."""
    return sorted(
        asteroids,
        key=lambda a: (RISK_RANK[a.risk_level], a.diameter_meters),
        reverse=True,
    )


async def fetch_asteroids(
    start_date: str,
    end_date: str,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> FetchResult:
    """
    Fetch NEOs for a date range, enriched with a risk level and sorted
    highest-risk first.
    """
    date_range = DateRangeIn(start_date=start_date, end_date=end_date)

    payload = await fetch_feed(
        date_range.start_date,
        date_range.end_date,
        settings=settings,
        client=client,
    )
    asteroids = sort_asteroids(normalize_feed(payload))
    logger.info(f"Fetched {len(asteroids)} NEOs for {date_range.start_date}..{date_range.end_date}")

    return FetchResult(count=len(asteroids), asteroids=asteroids)


def summarize(asteroids: List[Asteroid]) -> SummaryResult:
    """Risk counts plus the first few HIGH entries of an already sorted list."""
    counts = {level.value: 0 for level in RiskLevel}
    for a in asteroids:
        counts[a.risk_level.value] += 1

    high = (a for a in asteroids if a.risk_level == RiskLevel.HIGH)
    top_high_risk = [
        HighRiskAsteroid(
            id=a.id,
            name=a.name,
            diameter_meters=a.diameter_meters,
            relative_velocity_kps=a.relative_velocity_kps,
            miss_distance_km=a.miss_distance_km,
        )
        for a in islice(high, TOP_HIGH_RISK_LIMIT)
    ]

    return SummaryResult(
        total=len(asteroids),
        by_risk=RiskCounts(**counts),
        top_high_risk=top_high_risk,
    )


async def summarize_asteroid_risk(
    start_date: str,
    end_date: str,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> SummaryResult:
    result = await fetch_asteroids(start_date, end_date, settings=settings, client=client)
    return summarize(result.asteroids)

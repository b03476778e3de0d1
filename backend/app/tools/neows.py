import httpx
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.schemas.neo import DateRangeIn, FetchResult, SummaryResult
from app.services.nasa_neows import fetch_asteroids, summarize_asteroid_risk
from app.tools.registry import ToolRegistry, ToolSpec

SYSTEM_PROMPT = """
You are the NASA Data Archivist.

You have access to tools:
- fetchAsteroids(startDate, endDate)
- summarizeAsteroidRisk(startDate, endDate)

Always:
- Ask for startDate/endDate if missing.
- Use the tools when relevant.
- Return concise results with counts and key highlights.
""".strip()


def build_registry(
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ToolRegistry:
    """Registry with the NeoWs tools bound to the given settings/client."""
    cfg = settings or default_settings
    registry = ToolRegistry(cfg.SERVICE_NAME, SYSTEM_PROMPT)

    async def _fetch(params: DateRangeIn) -> FetchResult:
        return await fetch_asteroids(params.start_date, params.end_date, settings=cfg, client=client)

    async def _summarize(params: DateRangeIn) -> SummaryResult:
        return await summarize_asteroid_risk(params.start_date, params.end_date, settings=cfg, client=client)

    registry.register(ToolSpec(
        name="fetchAsteroids",
        description=(
            "Fetch Near-Earth Objects from NASA NeoWs feed for a date range. Returns enriched "
            "asteroid list with diameter, velocity, miss distance, close approach date, and "
            "computed risk level."
        ),
        input_model=DateRangeIn,
        output_model=FetchResult,
        handler=_fetch,
        tags=["NASA", "NeoWs", "asteroids", "risk"],
        category="NASA",
    ))
    registry.register(ToolSpec(
        name="summarizeAsteroidRisk",
        description=(
            "Summarize asteroid risk levels for a date range. Returns counts by risk level "
            "and the top 5 highest-risk asteroids."
        ),
        input_model=DateRangeIn,
        output_model=SummaryResult,
        handler=_summarize,
        tags=["NASA", "NeoWs", "risk", "summary"],
        category="NASA",
    ))
    return registry

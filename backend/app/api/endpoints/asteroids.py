import httpx
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_neows_client, get_settings
from app.core.config import Settings
from app.schemas.neo import FetchResult, SummaryResult
from app.services.nasa_neows import fetch_asteroids, summarize_asteroid_risk

router = APIRouter()


@router.get("/feed", response_model=FetchResult)
async def get_asteroid_feed(
    start_date: str = Query(..., alias="startDate", description="YYYY-MM-DD"),
    end_date: str = Query(..., alias="endDate", description="YYYY-MM-DD"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_neows_client),
):
    """
    Near-Earth Objects for an inclusive date range, highest risk first
    (risk level, then diameter).
    """
    return await fetch_asteroids(start_date, end_date, settings=settings, client=client)


@router.get("/summary", response_model=SummaryResult)
async def get_asteroid_summary(
    start_date: str = Query(..., alias="startDate", description="YYYY-MM-DD"),
    end_date: str = Query(..., alias="endDate", description="YYYY-MM-DD"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_neows_client),
):
    """Counts by risk level and the top 5 HIGH-risk objects."""
    return await summarize_asteroid_risk(start_date, end_date, settings=settings, client=client)

import httpx
from typing import AsyncIterator

from app.core.config import Settings, settings


def get_settings() -> Settings:
    return settings


async def get_neows_client() -> AsyncIterator[httpx.AsyncClient]:
    client = httpx.AsyncClient()
    try:
        yield client
    finally:
        await client.aclose()

import httpx
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict

from app.api.deps import get_neows_client, get_settings
from app.core.config import Settings
from app.tools.neows import build_registry
from app.tools.registry import ToolRegistry

router = APIRouter()


def get_registry(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_neows_client),
) -> ToolRegistry:
    return build_registry(settings=settings, client=client)


def get_manifest_registry(settings: Settings = Depends(get_settings)) -> ToolRegistry:
    return build_registry(settings=settings)


@router.get("/", response_model=Dict[str, Any])
def list_tools(registry: ToolRegistry = Depends(get_manifest_registry)):
    """Service manifest: system prompt plus each tool's input/output schema."""
    return registry.describe()


@router.post("/{name}", response_model=Dict[str, Any])
async def invoke_tool(
    name: str,
    arguments: Dict[str, Any] = Body(...),
    registry: ToolRegistry = Depends(get_registry),
):
    return await registry.invoke(name, arguments)

import pytest
from pydantic import BaseModel, ValidationError

from app.core.errors import ToolNotFoundError, ToolRegistrationError
from app.schemas.neo import DateRangeIn, FetchResult
from app.tools.neows import build_registry
from app.tools.registry import ToolRegistry, ToolSpec

RANGE = {"startDate": "2024-01-01", "endDate": "2024-01-02"}


def test_registry_exposes_both_tools(settings_fixture):
    registry = build_registry(settings=settings_fixture)

    assert registry.service_name == "nasa_data_archivist"
    assert registry.names() == ["fetchAsteroids", "summarizeAsteroidRisk"]


def test_manifest_declares_input_and_output_schemas(settings_fixture):
    manifest = build_registry(settings=settings_fixture).describe()

    assert "fetchAsteroids(startDate, endDate)" in manifest["systemPrompt"]
    fetch, summary = manifest["tools"]

    assert fetch["category"] == "NASA"
    assert "asteroids" in fetch["tags"]
    assert "summary" in summary["tags"]

    inputs = fetch["inputSchema"]
    assert set(inputs["required"]) == {"startDate", "endDate"}
    assert inputs["properties"]["startDate"]["pattern"] == "^[0-9]{4}-[0-9]{2}-[0-9]{2}$"

    assert set(fetch["outputSchema"]["properties"]) == {"count", "asteroids"}
    assert set(summary["outputSchema"]["properties"]) == {"total", "byRisk", "topHighRisk"}


@pytest.mark.asyncio
async def test_invoke_fetch_returns_wire_format(settings_fixture, mock_client, feed_payload):
    registry = build_registry(settings=settings_fixture, client=mock_client(feed_payload))

    out = await registry.invoke("fetchAsteroids", RANGE)

    assert out["count"] == 6
    assert out["asteroids"][0]["riskLevel"] == "HIGH"
    assert "diameterMeters" in out["asteroids"][0]


@pytest.mark.asyncio
async def test_invoke_summary_returns_wire_format(settings_fixture, mock_client, feed_payload):
    registry = build_registry(settings=settings_fixture, client=mock_client(feed_payload))

    out = await registry.invoke("summarizeAsteroidRisk", RANGE)

    assert out["total"] == 6
    assert out["byRisk"] == {"LOW": 2, "MEDIUM": 1, "HIGH": 3}
    assert len(out["topHighRisk"]) == 3


@pytest.mark.asyncio
async def test_invoke_rejects_bad_arguments_before_network(settings_fixture, mock_client):
    client = mock_client({})
    registry = build_registry(settings=settings_fixture, client=client)

    with pytest.raises(ValidationError):
        await registry.invoke("fetchAsteroids", {"startDate": "2024-01-01"})
    with pytest.raises(ValidationError):
        await registry.invoke("summarizeAsteroidRisk", {"startDate": "Jan 1", "endDate": "2024-01-02"})

    assert client.requests == []


@pytest.mark.asyncio
async def test_unknown_tool(settings_fixture):
    registry = build_registry(settings=settings_fixture)

    with pytest.raises(ToolNotFoundError):
        await registry.invoke("deleteAsteroids", RANGE)


def test_duplicate_registration_is_rejected():
    class Out(BaseModel):
        ok: bool

    async def handler(params):
        return Out(ok=True)

    registry = ToolRegistry("svc")
    spec = ToolSpec(name="ping", description="", input_model=DateRangeIn, output_model=Out, handler=handler)
    registry.register(spec)

    with pytest.raises(ToolRegistrationError):
        registry.register(spec)


@pytest.mark.asyncio
async def test_handler_errors_propagate():
    async def handler(params):
        raise RuntimeError("boom")

    registry = ToolRegistry("svc")
    registry.register(ToolSpec(
        name="explode", description="", input_model=DateRangeIn, output_model=FetchResult, handler=handler,
    ))

    with pytest.raises(RuntimeError, match="boom"):
        await registry.invoke("explode", RANGE)

"""
Explicit tool registry.

A tool is a named async operation with a declared input model and output
model. The hosting layer looks tools up by name, validates the raw
arguments against the input model, runs the handler and serializes the
output with wire (camelCase) field names.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Type

from pydantic import BaseModel

from app.core.errors import ToolNotFoundError, ToolRegistrationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    handler: Callable[[Any], Awaitable[BaseModel]]
    tags: List[str] = field(default_factory=list)
    category: str = ""

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "tags": list(self.tags),
            "category": self.category,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
            "outputSchema": self.output_model.model_json_schema(by_alias=True),
        }


class ToolRegistry:
    """Lookup table of tools owned by the hosting layer."""

    def __init__(self, service_name: str, system_prompt: str = ""):
        self.service_name = service_name
        self.system_prompt = system_prompt
        self._tools: Dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> ToolSpec:
        if spec.name in self._tools:
            raise ToolRegistrationError(f"Tool '{spec.name}' is already registered")
        self._tools[spec.name] = spec
        logger.info(f"Registered tool {self.service_name}.{spec.name}")
        return spec

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(f"Unknown tool '{name}'") from None

    def names(self) -> List[str]:
        return list(self._tools)

    def describe(self) -> Dict[str, Any]:
        return {
            "service": self.service_name,
            "systemPrompt": self.system_prompt,
            "tools": [spec.describe() for spec in self._tools.values()],
        }

    async def invoke(self, name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate ``arguments`` and run the tool.

        Raises ToolNotFoundError for unknown names and pydantic's
        ValidationError for bad arguments; handler errors propagate as-is.
        """
        spec = self.get(name)
        params = spec.input_model.model_validate(arguments)
        result = await spec.handler(params)
        return spec.output_model.model_validate(result).model_dump(by_alias=True, mode="json")

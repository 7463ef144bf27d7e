"""
Base classes and types for MCP tools.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type

import mcp.types as types
from pydantic import BaseModel, Field, ValidationError

from ..errors import InvalidArgument


class ToolMetadata(BaseModel):
    """Metadata describing a tool."""
    name: str = Field(..., description="Unique identifier for the tool")
    description: str = Field(..., description="Human-readable description of what the tool does")


class ToolInput(BaseModel):
    """Base class for tool input schemas."""
    pass


def describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into 'field: message' pairs."""
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "arguments"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


class ToolBase(ABC):
    """
    Base class for all tools exposed by the server.

    Each tool should:
    1. Define METADATA as a class attribute
    2. Define InputSchema as a nested ToolInput subclass
    3. Implement the execute() method

    INPUT_SCHEMA may be set to publish a hand-written JSON Schema instead of
    the one pydantic generates from InputSchema.
    """

    # Each tool must define these
    METADATA: ClassVar[ToolMetadata]
    InputSchema: ClassVar[Type[ToolInput]]
    INPUT_SCHEMA: ClassVar[Optional[Dict[str, Any]]] = None

    @abstractmethod
    async def execute(self, input_data: ToolInput) -> str:
        """
        Execute the tool with validated input.

        Args:
            input_data: Validated input matching InputSchema

        Returns:
            Text result for the caller
        """
        pass

    @classmethod
    def validate_input(cls, arguments: Dict[str, Any]) -> ToolInput:
        """
        Parse raw tool arguments into the tool's InputSchema.

        Raises:
            InvalidArgument: If the arguments do not match the schema
        """
        if not isinstance(arguments, dict):
            raise InvalidArgument(f"Invalid arguments for {cls.METADATA.name}: expected an object")
        try:
            return cls.InputSchema(**arguments)
        except ValidationError as e:
            raise InvalidArgument(
                f"Invalid arguments for {cls.METADATA.name}: {describe_validation_error(e)}"
            ) from e

    @classmethod
    def get_input_schema(cls) -> Dict[str, Any]:
        """Get JSON Schema for tool input."""
        if cls.INPUT_SCHEMA is not None:
            return cls.INPUT_SCHEMA
        return cls.InputSchema.model_json_schema()

    @classmethod
    def to_mcp_tool(cls) -> types.Tool:
        """Convert to MCP tool format."""
        return types.Tool(
            name=cls.METADATA.name,
            description=cls.METADATA.description,
            inputSchema=cls.get_input_schema(),
        )

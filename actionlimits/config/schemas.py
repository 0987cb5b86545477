"""
Limits schema using Pydantic for validation.

ActionLimits is the limits section of an action definition. Raw values go
through the limit deserializers, so a file carrying ``memory: 1024`` fails
with the same message a JSON payload would.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from actionlimits.memory import MemoryLimit, deserialize, serialize


class ActionLimits(BaseModel):
    """
    Limits section of an action definition.

    Absent fields fall back to the limit's default.

    Example:
        limits = ActionLimits.model_validate({"memory": 384})
        limits.memory.megabytes  # 384
        limits.model_dump(mode="json")  # {"memory": 384}
    """

    memory: MemoryLimit = Field(
        default_factory=MemoryLimit.default,
        description="Memory limit in megabytes",
    )

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )

    @field_validator("memory", mode="before")
    @classmethod
    def validate_memory(cls, v: Any) -> MemoryLimit:
        """Deserialize raw memory values; pass through MemoryLimit instances."""
        if isinstance(v, MemoryLimit):
            return v
        return deserialize(v)

    @field_serializer("memory")
    def serialize_memory(self, v: MemoryLimit) -> int:
        """Emit the memory limit as a bare integer."""
        return serialize(v)


def validate_limits(limits_dict: dict[str, Any]) -> ActionLimits:
    """
    Validate a limits dictionary against the schema.

    Args:
        limits_dict: Dictionary containing the limits section

    Returns:
        Validated ActionLimits instance

    Raises:
        pydantic.ValidationError: If a limit is invalid or a key is unknown
    """
    return ActionLimits.model_validate(limits_dict)

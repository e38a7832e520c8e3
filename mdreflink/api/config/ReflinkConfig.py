"""Reflink configuration (UNO: single model)."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ReflinkConfigError import ReflinkConfigError


class ReflinkConfig(BaseModel):
    """Options recognized by the link transformation."""

    model_config = ConfigDict(extra="forbid")

    column_width: int | None = Field(
        None,
        gt=0,
        description="Column budget for wrapping long link text; reflow is skipped when unset",
    )

    @classmethod
    def from_config_dict(cls, config: dict) -> "ReflinkConfig":
        """Load reflink config from a plain dict.

        Raises:
            ReflinkConfigError: If a field is unknown or has an invalid value
        """
        try:
            return cls(**config)
        except ValidationError as exc:
            raise ReflinkConfigError.from_validation_error(exc) from exc

"""Reflink option errors."""

from pydantic import ValidationError


class ReflinkConfigError(ValueError):
    """Raised when transformation options are rejected.

    ``errors`` holds one ``"<option>: <problem>"`` entry per rejected option.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        lines = "\n".join(f"  - {error}" for error in errors)
        super().__init__(f"Invalid reflink options ({len(errors)}):\n{lines}")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "ReflinkConfigError":
        errors = [
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in exc.errors()
        ]
        return cls(errors)

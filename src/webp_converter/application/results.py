"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import get_args

from webp_converter.types import ErrorKind

ERROR_KINDS = frozenset(get_args(ErrorKind.__value__))


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one file during a batch run.

    Successful records carry ``output`` and ``path``; failed records carry
    ``error`` and ``error_kind``. Mixing the two raises ``ValueError``.
    """

    success: bool
    input: str
    output: str | None = None
    path: Path | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        has_output = self.output is not None and self.path is not None
        has_output_field = self.output is not None or self.path is not None
        has_error_field = self.error is not None or self.error_kind is not None
        if self.success:
            if not has_output or has_error_field:
                raise ValueError(
                    "Successful results require output and path and no error fields."
                )
        else:
            if self.error is None or self.error_kind is None or has_output_field:
                raise ValueError(
                    "Failed results require error and error_kind and no output fields."
                )
            if self.error_kind not in ERROR_KINDS:
                raise ValueError(f"Unknown error kind: {self.error_kind!r}")

    @classmethod
    def succeeded(cls, input: str, output: str, path: Path) -> ConversionResult:
        """Build a success record."""
        return cls(success=True, input=input, output=output, path=path)

    @classmethod
    def failed(cls, input: str, error: str, error_kind: ErrorKind) -> ConversionResult:
        """Build a failure record."""
        return cls(success=False, input=input, error=error, error_kind=error_kind)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping holding only the populated fields."""
        if self.success:
            return {
                "success": True,
                "input": self.input,
                "output": self.output,
                "path": str(self.path),
            }
        return {
            "success": False,
            "input": self.input,
            "error": self.error,
            "error_kind": self.error_kind,
        }

"""Source access result models."""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field  # type: ignore


class SourceFaultKind(str, Enum):
    """Reasons a source or destination cannot be used."""

    NOT_FOUND = "not_found"
    NOT_A_FILE = "not_a_file"
    WRONG_EXTENSION = "wrong_extension"
    UNREADABLE = "unreadable"
    OUTPUT_NOT_DIRECTORY = "output_not_directory"


class SourceFault(BaseModel):
    """A resource-access fault detected before parsing."""

    model_config = ConfigDict(frozen=True)

    kind: SourceFaultKind
    path: str = Field(..., description="Path that caused the fault")
    message: str = Field(..., description="Human-readable diagnostic")

    def __str__(self) -> str:
        return self.message


class SourceFaultError(Exception):
    """Raised by callers that prefer exceptions over fault values."""

    def __init__(self, fault: SourceFault):
        super().__init__(fault.message)
        self.fault = fault

    @property
    def kind(self) -> SourceFaultKind:
        return self.fault.kind


class SourceLoadResult(BaseModel):
    """Outcome of loading a source: either its lines or a fault."""

    model_config = ConfigDict(frozen=True)

    lines: Tuple[str, ...] = ()
    fault: Optional[SourceFault] = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    def unwrap(self) -> Tuple[str, ...]:
        """
        Return the loaded lines.

        Raises:
            SourceFaultError: If loading failed
        """
        if self.fault is not None:
            raise SourceFaultError(self.fault)
        return self.lines

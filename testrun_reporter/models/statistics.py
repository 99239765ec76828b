"""Aggregate statistics data models."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field  # type: ignore

from .test_record import TestRecord, TestStatus


class StatisticsSnapshot(BaseModel):
    """Immutable summary of a set of test records."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(default=0, ge=0, description="Number of records")
    counts_by_status: Dict[TestStatus, int] = Field(
        default_factory=lambda: {status: 0 for status in TestStatus},
        description="Record count per status, zero entries included",
    )
    percent_by_status: Dict[TestStatus, float] = Field(
        default_factory=lambda: {status: 0.0 for status in TestStatus},
        description="Share of total per status, 0-100",
    )
    average_duration: float = Field(default=0.0, description="Mean duration in seconds")
    total_duration: float = Field(default=0.0, description="Sum of durations in seconds")
    slowest: Optional[TestRecord] = Field(None, description="Record with the largest duration")

    def count(self, status: TestStatus) -> int:
        """Get the record count for a status."""
        return self.counts_by_status.get(status, 0)

    def percent(self, status: TestStatus) -> float:
        """Get the percentage of records with a status."""
        return self.percent_by_status.get(status, 0.0)

    @property
    def pass_rate(self) -> float:
        """Fraction of records that passed, 0-1."""
        return self.percent(TestStatus.PASSED) / 100.0

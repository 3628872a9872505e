# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class Alert(BaseModel):
    """
    A fraud alert: an immutable, weighted time interval.

    Construction fails with a ``pydantic.ValidationError`` when ``end < start``.
    Urgency and severity are taken as given; only the interval is validated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Alert identifier")
    start: int = Field(..., description="Interval start")
    end: int = Field(..., description="Interval end (touching intervals do not conflict)")
    urgency: int = Field(..., description="Urgency level")
    severity: float = Field(..., description="Severity score")
    location: str = Field(default="", description="Originating branch")

    @model_validator(mode="after")
    def check_interval(self) -> "Alert":
        if self.end < self.start:
            raise ValueError(
                f"Alert '{self.id}': end ({self.end}) must not be less than start ({self.start})"
            )
        return self

    @computed_field
    @property
    def weight(self) -> float:
        """Priority strength: urgency * severity."""
        return self.urgency * self.severity

    @property
    def duration(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return (
            f"{self.id}[{self.start}-{self.end}] u={self.urgency} "
            f"s={self.severity:.2f} loc={self.location}"
        )


class TeamSpec(BaseModel):
    """Name and skill of an investigation team, before any scheduling state exists."""
    name: str = Field(..., min_length=1, max_length=255, description="Team name")
    skill_factor: float = Field(..., description="Multiplier applied to alert weight")


def parse_team_specs(raw: str) -> list[TeamSpec]:
    """
    Parse ``"Alpha:1.1,Beta:0.9"`` into team specs.
    Raises ValueError on a malformed entry.
    """
    specs: list[TeamSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, skill = entry.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Malformed team entry '{entry}', expected NAME:SKILL")
        specs.append(TeamSpec(name=name.strip(), skill_factor=float(skill)))
    return specs

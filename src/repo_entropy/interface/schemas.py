"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from repo_entropy.domain.entities import DirectoryEntropyAnalysis, DirectoryEntropyStats


class DirectoryEntropyRequest(BaseModel):
    """Request body for ``POST /directory-entropy``."""

    github_url: str
    last: str | None = None
    limit: int | None = Field(default=None, ge=0)

    @field_validator("github_url")
    @classmethod
    def _must_be_github(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "github_url must not be empty."
            raise ValueError(msg)
        if "github.com" not in stripped.lower():
            msg = (
                f"Invalid URL: '{stripped}'. "
                "Only public GitHub repository URLs are supported."
            )
            raise ValueError(msg)
        return stripped


class ProjectTypeSchema(BaseModel):
    name: str
    description: str


class DirectoryStatsSchema(BaseModel):
    """One row of the high / low tables."""

    path: str
    file_count: int
    type_count: int
    file_types: dict[str, int]
    entropy: float
    level: str
    recommendation: str

    @classmethod
    def from_entity(cls, entry: DirectoryEntropyStats) -> DirectoryStatsSchema:
        return cls(
            path=entry.path,
            file_count=entry.file_count,
            type_count=entry.type_count,
            file_types=dict(entry.file_types),
            entropy=entry.entropy,
            level=entry.entropy_level.value if entry.entropy_level else "",
            recommendation=entry.recommendation,
        )


class DirectoryEntropyResponse(BaseModel):
    """Successful response from ``POST /directory-entropy``."""

    time_window: str
    project_type: ProjectTypeSchema
    total_dirs: int
    avg_entropy: float
    context: str
    high_entropy_dirs: list[DirectoryStatsSchema]
    low_entropy_dirs: list[DirectoryStatsSchema]

    @classmethod
    def from_analysis(
        cls, analysis: DirectoryEntropyAnalysis, context: str
    ) -> DirectoryEntropyResponse:
        return cls(
            time_window=analysis.time_window,
            project_type=ProjectTypeSchema(
                name=analysis.project_type.name,
                description=analysis.project_type.description,
            ),
            total_dirs=analysis.total_dirs,
            avg_entropy=analysis.avg_entropy,
            context=context,
            high_entropy_dirs=[DirectoryStatsSchema.from_entity(d) for d in analysis.high_entropy_dirs],
            low_entropy_dirs=[DirectoryStatsSchema.from_entity(d) for d in analysis.low_entropy_dirs],
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str

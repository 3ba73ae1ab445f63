"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

ROOT_DIR = "root"
NO_EXTENSION = "no-extension"

# Git's own heuristic: a NUL byte in the first 8000 bytes means binary.
BINARY_SNIFF_BYTES = 8000


class EntropyLevel(str, Enum):
    """Qualitative band a directory's entropy falls into."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class ThresholdMode(str, Enum):
    """How the classification ladder is derived."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A single tracked file from a repository snapshot."""

    path: str
    is_binary: bool = False
    content: bytes | None = None

    @property
    def binary(self) -> bool:
        if self.is_binary:
            return True
        if self.content is None:
            return False
        return b"\0" in self.content[:BINARY_SNIFF_BYTES]


@dataclass(frozen=True, slots=True)
class ProjectType:
    """A named project archetype.

    ``root_patterns`` lists extensions that are normal at the repository
    root.  ``expected_dirs`` maps a conventional directory name to the
    extensions expected inside it; an empty tuple accepts anything.  The
    mapping is frozen into a read-only view on construction.
    """

    name: str
    root_patterns: tuple[str, ...]
    expected_dirs: Mapping[str, tuple[str, ...]] = field(hash=False)
    description: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_patterns", tuple(self.root_patterns))
        object.__setattr__(
            self,
            "expected_dirs",
            MappingProxyType({k: tuple(v) for k, v in self.expected_dirs.items()}),
        )


@dataclass(slots=True)
class DirectoryEntropyStats:
    """Entropy statistics for one directory of the snapshot."""

    path: str
    file_count: int = 0
    file_types: dict[str, int] = field(default_factory=dict)
    entropy: float = 0.0
    entropy_level: EntropyLevel | None = None
    recommendation: str = ""

    @property
    def type_count(self) -> int:
        return len(self.file_types)


@dataclass(frozen=True, slots=True)
class DirectoryEntropyAnalysis:
    """The result of one directory-entropy analysis run."""

    time_window: str
    project_type: ProjectType
    total_dirs: int
    avg_entropy: float
    high_entropy_dirs: list[DirectoryEntropyStats] = field(default_factory=list)
    low_entropy_dirs: list[DirectoryEntropyStats] = field(default_factory=list)

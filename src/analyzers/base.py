"""Base analyzer interface and result types."""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

MAX_SCORE = 100


class TagStatus(str, enum.Enum):
    """Outcome of inspecting a single tag."""

    PRESENT = "present"  # Tag found with a non-empty value
    MISSING = "missing"  # Tag absent, value is always None
    WARNING = "warning"  # Tag absent, value carries an explanatory message


@dataclass(frozen=True)
class TagFinding:
    """Result of inspecting one tag rule against a document."""

    tag: str
    status: TagStatus
    value: str | None = None


@dataclass(frozen=True)
class Preview:
    """Title/description/image used for search and social previews."""

    title: str | None = None
    description: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Standard result format for a tag analysis."""

    url: str
    score: int  # Clamped to 0..max_score
    results: tuple[TagFinding, ...]
    preview: Preview = field(default_factory=Preview)
    max_score: int = MAX_SCORE

    def to_dict(self) -> dict:
        """Return the wire representation (camelCase ``maxScore``)."""
        return {
            "url": self.url,
            "score": self.score,
            "maxScore": self.max_score,
            "results": [
                {"tag": f.tag, "status": f.status.value, "value": f.value}
                for f in self.results
            ],
            "preview": {
                "title": self.preview.title,
                "description": self.preview.description,
                "image": self.preview.image,
            },
        }


class BaseAnalyzer(ABC):
    """Abstract base class for all analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    def analyze(self, html: str, url: str) -> AnalysisResult:
        """
        Run analysis on an already fetched document.

        Args:
            html: Raw HTML text of the page
            url: The URL the HTML was fetched from (echoed back only)

        Returns:
            AnalysisResult with score, per-tag findings and preview
        """
        pass

"""SEO Tag Inspector analyzers package."""

from analyzers.base import (
    MAX_SCORE,
    AnalysisResult,
    BaseAnalyzer,
    Preview,
    TagFinding,
    TagStatus,
)
from analyzers.rules import TAG_KEYS, TAG_RULES, Lookup, TagRule
from analyzers.seo import SEOTagAnalyzer, run_seo_analysis

__all__ = [
    "MAX_SCORE",
    "AnalysisResult",
    "BaseAnalyzer",
    "Preview",
    "TagFinding",
    "TagStatus",
    "TAG_KEYS",
    "TAG_RULES",
    "Lookup",
    "TagRule",
    "SEOTagAnalyzer",
    "run_seo_analysis",
]

"""SEO tag analysis engine."""

import logging

from bs4 import BeautifulSoup

from analyzers.base import (
    MAX_SCORE,
    AnalysisResult,
    BaseAnalyzer,
    Preview,
    TagFinding,
    TagStatus,
)
from analyzers.rules import TAG_RULES, Lookup, TagRule

logger = logging.getLogger(__name__)

# HTML attributes whose values match regardless of case (as in CSS selectors)
_CASE_INSENSITIVE_ATTRS = frozenset({"rel"})

# Elements from these namespaces reuse HTML tag names (e.g. <svg><title>)
_FOREIGN_CONTENT = ["svg", "math"]


class SEOTagAnalyzer(BaseAnalyzer):
    """
    Inspects a fixed set of SEO meta tags in an HTML document.

    Checks (see ``analyzers.rules.TAG_RULES``):
    - Title tag and meta description
    - Robots meta tag
    - Canonical URL
    - Open Graph tags
    - Twitter Card tags

    The analyzer does no I/O and never raises on malformed markup: anything
    it cannot find is reported as absent.
    """

    def __init__(self, rules: tuple[TagRule, ...] = TAG_RULES):
        self.rules = rules

    @property
    def name(self) -> str:
        return "seo"

    def analyze(self, html: str, url: str) -> AnalysisResult:
        """
        Run tag analysis on the given document.

        Args:
            html: Raw HTML text, possibly malformed
            url: Source URL, echoed back in the result

        Returns:
            AnalysisResult with score, findings in rule order, and preview
        """
        soup = BeautifulSoup(html, "lxml")

        values = {rule.key: self._extract(soup, rule) for rule in self.rules}

        findings = []
        total = 0
        for rule in self.rules:
            finding, points = self._evaluate(rule, values[rule.key])
            findings.append(finding)
            total += points

        score = self._clamp(total)
        logger.debug(f"Analyzed {url}: score {score}/{MAX_SCORE}")

        return AnalysisResult(
            url=url,
            score=score,
            results=tuple(findings),
            preview=self._build_preview(values),
            max_score=MAX_SCORE,
        )

    def _extract(self, soup: BeautifulSoup, rule: TagRule) -> str | None:
        """Return the first non-empty value among the rule's lookups."""
        for lookup in rule.lookups:
            value = self._lookup(soup, lookup)
            if value:
                return value
        return None

    def _lookup(self, soup: BeautifulSoup, lookup: Lookup) -> str | None:
        """Resolve a single lookup against the first matching element."""
        element = self._find(soup, lookup)
        if element is None:
            return None

        if lookup.attribute is None:
            text = element.get_text().strip()
            return text or None

        value = element.get(lookup.attribute)
        # Multi-valued attributes (e.g. rel, class) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value or None

    def _find(self, soup: BeautifulSoup, lookup: Lookup):
        """Return the first HTML element matching the lookup, or None."""
        attrs = {
            attr: _matcher(value) if attr in _CASE_INSENSITIVE_ATTRS else value
            for attr, value in lookup.match
        }
        for element in soup.find_all(lookup.element, attrs=attrs):
            if element.find_parent(_FOREIGN_CONTENT) is None:
                return element
        return None

    def _evaluate(self, rule: TagRule, value: str | None) -> tuple[TagFinding, int]:
        """Turn an extracted value into a finding and its awarded points."""
        if value is not None:
            return TagFinding(rule.key, TagStatus.PRESENT, value), rule.points

        if rule.absent_status == TagStatus.WARNING:
            return (
                TagFinding(rule.key, TagStatus.WARNING, rule.absent_message),
                rule.absent_points,
            )

        return TagFinding(rule.key, TagStatus.MISSING, None), rule.absent_points

    def _build_preview(self, values: dict[str, str | None]) -> Preview:
        """Prefer Open Graph values, falling back one level."""
        return Preview(
            title=values.get("og:title") or values.get("title"),
            description=values.get("og:description") or values.get("description"),
            image=values.get("og:image") or values.get("twitter:image"),
        )

    @staticmethod
    def _clamp(total: int) -> int:
        return max(0, min(total, MAX_SCORE))


def _matcher(expected: str):
    """Case-insensitive attribute matcher; bs4 calls it once per rel token."""
    expected = expected.lower()
    return lambda value: value is not None and value.lower() == expected


# Convenience function
def run_seo_analysis(html: str, url: str) -> AnalysisResult:
    """Run tag analysis on the given document."""
    analyzer = SEOTagAnalyzer()
    return analyzer.analyze(html, url)

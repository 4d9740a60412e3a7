"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app


FULL_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>  Example Domain  </title>
  <meta name="description" content="An example page.">
  <meta name="robots" content="index, follow">
  <link rel="canonical" href="https://example.com/">
  <meta property="og:title" content="OG Example">
  <meta property="og:description" content="OG description.">
  <meta property="og:image" content="https://example.com/og.png">
  <meta property="og:type" content="website">
  <meta property="og:url" content="https://example.com/">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Twitter Example">
  <meta name="twitter:description" content="Twitter description.">
  <meta name="twitter:image" content="https://example.com/twitter.png">
</head>
<body><h1>Example</h1></body>
</html>
"""

MINIMAL_HTML = "<html></html>"


@pytest.fixture()
def full_html() -> str:
    return FULL_HTML


@pytest.fixture()
def minimal_html() -> str:
    return MINIMAL_HTML


@pytest.fixture()
def client():
    """Return a TestClient with the app lifespan (shared HTTP client) running."""
    with TestClient(app) as c:
        yield c

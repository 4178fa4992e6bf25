"""Shared test fixtures for Design DNA."""

from typing import Dict, Optional, Sequence

import pytest

from design_dna.models import (
    ColorToken,
    DetectedComponentInstance,
    SpacingToken,
    TokenEvidence,
)


def make_evidence(
    page_url: str, selector: str = "div.el", styles: Optional[Dict[str, str]] = None
) -> TokenEvidence:
    return TokenEvidence(
        page_url=page_url,
        selector=selector,
        timestamp="2024-01-01T00:00:00Z",
        computed_styles=styles or {},
    )


@pytest.fixture
def evidence_factory():
    """Build TokenEvidence with a fixed timestamp."""
    return make_evidence


@pytest.fixture
def color_factory():
    """Build a ColorToken whose evidence lists the given pages (repeats allowed)."""

    def _make(value: str, pages: Sequence[str]) -> ColorToken:
        return ColorToken(
            value=value,
            original_value=value,
            context="background",
            evidence=tuple(make_evidence(p, f"div.c-{i}") for i, p in enumerate(pages)),
        )

    return _make


@pytest.fixture
def spacing_factory():
    def _make(value: str, pages: Sequence[str], context: str = "padding") -> SpacingToken:
        return SpacingToken(
            value=value,
            context=context,
            evidence=tuple(make_evidence(p, f"div.s-{i}") for i, p in enumerate(pages)),
        )

    return _make


@pytest.fixture
def instance_factory():
    """Build a DetectedComponentInstance from keyword styles."""

    def _make(
        page_url: str = "/home",
        type: str = "button",
        selector: str = "button.btn",
        **styles: str,
    ) -> DetectedComponentInstance:
        return DetectedComponentInstance(
            type=type,
            selector=selector,
            page_url=page_url,
            computed_styles=dict(styles),
            evidence=(make_evidence(page_url, selector, dict(styles)),),
        )

    return _make


@pytest.fixture
def five_pages():
    return [f"/page{i}" for i in range(1, 6)]

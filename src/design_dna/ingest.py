"""Load extraction output into the engine's data model.

Expected document shape (camelCase, as written by the extraction layer)::

    {
      "pages": {
        "https://example.com/": {
          "colors":     [{"value": "#1a73e8", "originalValue": "rgb(26, 115, 232)",
                          "category": "primary", "context": "background",
                          "evidence": [...]}],
          "typography": [{"family": "Inter", "size": "1rem", "weight": 400,
                          "lineHeight": "24px", "letterSpacing": "normal",
                          "evidence": [...]}],
          "spacing":    [{"value": "16px", "context": "padding", "evidence": [...]}],
          "radii":      [{"value": "8px", "evidence": [...]}],
          "shadows":    [{"value": "0 1px 2px rgba(0,0,0,.2)", "evidence": [...]}],
          "motion":     [{"property": "duration", "value": "200ms", "evidence": [...]}],
          "components": [{"type": "button", "selector": "button.cta",
                          "computedStyles": {...}, "evidence": [...]}]
        }
      }
    }

Evidence entries are ``{"pageUrl", "selector", "timestamp", "computedStyles"}``;
a missing ``pageUrl`` defaults to the page the entry is listed under.

Only structural problems raise ``InputFormatError``. Odd style values are kept
verbatim and dealt with (as "no signal") by the engine.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Tuple, TypeVar

from .exceptions import InputFormatError
from .logging_config import get_logger
from .models import (
    ColorToken,
    DetectedComponentInstance,
    MotionToken,
    PageTokens,
    RadiusToken,
    ShadowToken,
    SpacingToken,
    TokenEvidence,
    TypographyToken,
)

logger = get_logger(__name__)

R = TypeVar("R")

DEFAULT_FONT_WEIGHT = 400
FONT_WEIGHT_KEYWORDS = {"normal": 400, "bold": 700}


def _styles(raw: Any) -> Dict[str, str]:
    if not isinstance(raw, dict):
        return {}
    return {str(k): str(v) for k, v in raw.items() if v is not None}


def _font_weight(raw: Any) -> int:
    """Numeric CSS font weight; keywords map to 400/700, anything else to 400."""
    if raw is None:
        return DEFAULT_FONT_WEIGHT
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, str):
        text = raw.strip().lower()
        if text in FONT_WEIGHT_KEYWORDS:
            return FONT_WEIGHT_KEYWORDS[text]
        if text.isdigit():
            return int(text)
    logger.debug(f"Unrecognized font weight {raw!r}; using {DEFAULT_FONT_WEIGHT}")
    return DEFAULT_FONT_WEIGHT


def _evidence(raw: Any, page_url: str, source: str) -> Tuple[TokenEvidence, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise InputFormatError(source, f"evidence for {page_url} must be a list")
    entries = []
    for item in raw:
        if not isinstance(item, dict):
            raise InputFormatError(source, f"evidence entry on {page_url} must be an object")
        entries.append(
            TokenEvidence(
                page_url=str(item.get("pageUrl") or page_url),
                selector=str(item.get("selector", "")),
                timestamp=str(item.get("timestamp", "")),
                computed_styles=_styles(item.get("computedStyles")),
            )
        )
    return tuple(entries)


def _items(
    page: Mapping[str, Any],
    key: str,
    page_url: str,
    source: str,
    build: Callable[[Dict[str, Any], Tuple[TokenEvidence, ...]], R],
) -> Tuple[R, ...]:
    raw = page.get(key, [])
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise InputFormatError(source, f"'{key}' on {page_url} must be a list")
    built = []
    for item in raw:
        if not isinstance(item, dict):
            raise InputFormatError(source, f"'{key}' entry on {page_url} must be an object")
        try:
            built.append(build(item, _evidence(item.get("evidence"), page_url, source)))
        except KeyError as e:
            raise InputFormatError(source, f"'{key}' entry on {page_url} is missing {e}")
    return tuple(built)


def parse_page_tokens(page_url: str, page: Mapping[str, Any], source: str = "<memory>") -> PageTokens:
    """Build PageTokens from one page's JSON object."""
    return PageTokens(
        colors=_items(
            page, "colors", page_url, source,
            lambda d, ev: ColorToken(
                value=str(d["value"]),
                original_value=str(d.get("originalValue", d["value"])),
                category=str(d.get("category", "unknown")),
                context=str(d.get("context", "other")),
                evidence=ev,
            ),
        ),
        typography=_items(
            page, "typography", page_url, source,
            lambda d, ev: TypographyToken(
                family=str(d["family"]),
                size=str(d["size"]),
                weight=_font_weight(d.get("weight")),
                line_height=str(d.get("lineHeight", "normal")),
                letter_spacing=str(d.get("letterSpacing", "normal")),
                evidence=ev,
            ),
        ),
        spacing=_items(
            page, "spacing", page_url, source,
            lambda d, ev: SpacingToken(
                value=str(d["value"]), context=str(d.get("context", "other")), evidence=ev
            ),
        ),
        radii=_items(
            page, "radii", page_url, source,
            lambda d, ev: RadiusToken(value=str(d["value"]), evidence=ev),
        ),
        shadows=_items(
            page, "shadows", page_url, source,
            lambda d, ev: ShadowToken(value=str(d["value"]), evidence=ev),
        ),
        motion=_items(
            page, "motion", page_url, source,
            lambda d, ev: MotionToken(
                property=str(d.get("property", "duration")), value=str(d["value"]), evidence=ev
            ),
        ),
    )


def parse_components(
    page_url: str, page: Mapping[str, Any], source: str = "<memory>"
) -> Tuple[DetectedComponentInstance, ...]:
    """Build the component instances listed on one page."""
    return _items(
        page, "components", page_url, source,
        lambda d, ev: DetectedComponentInstance(
            type=str(d["type"]),
            selector=str(d.get("selector", "")),
            page_url=str(d.get("pageUrl") or page_url),
            computed_styles=_styles(d.get("computedStyles")),
            evidence=ev,
        ),
    )


def parse_document(
    document: Any, source: str = "<memory>"
) -> Tuple[Dict[str, PageTokens], Dict[str, Tuple[DetectedComponentInstance, ...]]]:
    """Split an extraction document into per-page tokens and components."""
    if not isinstance(document, dict) or not isinstance(document.get("pages"), dict):
        raise InputFormatError(source, "document must be an object with a 'pages' object")

    tokens: Dict[str, PageTokens] = {}
    components: Dict[str, Tuple[DetectedComponentInstance, ...]] = {}
    for page_url, page in document["pages"].items():
        if not isinstance(page, dict):
            raise InputFormatError(source, f"page {page_url} must be an object")
        try:
            tokens[page_url] = parse_page_tokens(page_url, page, source)
            components[page_url] = parse_components(page_url, page, source)
        except (TypeError, ValueError) as e:
            raise InputFormatError(source, f"page {page_url}: {e}")
    return tokens, components


def load_document(
    path: Path,
) -> Tuple[Dict[str, PageTokens], Dict[str, Tuple[DetectedComponentInstance, ...]]]:
    """Read and parse an extraction JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise InputFormatError(str(path), f"cannot read file: {e}")
    except json.JSONDecodeError as e:
        raise InputFormatError(str(path), f"invalid JSON: {e}")
    return parse_document(document, str(path))

"""Data model for the normalization & confidence engine.

Every entity is a frozen dataclass built fresh for each run. Collections are
tuples or frozensets so that nothing can be edited after a run completes.
Token categories form a tagged variant: each class carries a ``kind`` tag and
an ``evidence`` tuple, and all of them flow through the category-agnostic
``TokenWithFrequency`` wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Generic, Hashable, Mapping, Optional, Protocol, TypeVar, Union


class Unit(str, Enum):
    """CSS length units the value normalizer understands."""

    PX = "px"
    REM = "rem"
    EM = "em"


class ConfidenceLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TokenKind(str, Enum):
    COLOR = "color"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    RADIUS = "radius"
    SHADOW = "shadow"
    MOTION = "motion"


# ── Evidence ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TokenEvidence:
    """One observed occurrence of a token or component on a page."""

    page_url: str
    selector: str
    timestamp: str  # ISO 8601, as produced by the extractor
    computed_styles: Mapping[str, str] = field(default_factory=dict, hash=False)


class EvidenceCarrier(Protocol):
    """Anything the cross-page validator can count pages for."""

    @property
    def evidence(self) -> tuple[TokenEvidence, ...]: ...


# ── Values ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NormalizedValue:
    """A size expressed both as pixels and as originally written."""

    pixels: float
    original: str
    unit: Unit
    base_font_size: Optional[float] = None  # set for rem/em only


# ── Tokens (tagged by kind) ───────────────────────────────────────────


@dataclass(frozen=True)
class ColorToken:
    value: str  # normalized hex (#rrggbb)
    original_value: str = ""
    category: str = "unknown"
    context: str = "other"
    evidence: tuple[TokenEvidence, ...] = ()

    kind: ClassVar[TokenKind] = TokenKind.COLOR

    def merge_key(self) -> Hashable:
        return self.value.lower()


@dataclass(frozen=True)
class TypographyToken:
    family: str
    size: str
    weight: int = 400
    line_height: str = "normal"
    letter_spacing: str = "normal"
    evidence: tuple[TokenEvidence, ...] = ()
    normalized_size: Optional[NormalizedValue] = None

    kind: ClassVar[TokenKind] = TokenKind.TYPOGRAPHY

    def merge_key(self) -> Hashable:
        size = self.normalized_size.pixels if self.normalized_size else self.size
        return (self.family, size, self.weight, self.line_height, self.letter_spacing)


@dataclass(frozen=True)
class SpacingToken:
    value: str
    context: str = "other"  # margin | padding | gap
    evidence: tuple[TokenEvidence, ...] = ()
    normalized_value: Optional[NormalizedValue] = None

    kind: ClassVar[TokenKind] = TokenKind.SPACING

    def merge_key(self) -> Hashable:
        # "16px" and "1rem" are the same spacing step once normalized
        if self.normalized_value is not None:
            return self.normalized_value.pixels
        return self.value


@dataclass(frozen=True)
class RadiusToken:
    value: str
    evidence: tuple[TokenEvidence, ...] = ()

    kind: ClassVar[TokenKind] = TokenKind.RADIUS

    def merge_key(self) -> Hashable:
        return self.value


@dataclass(frozen=True)
class ShadowToken:
    value: str
    evidence: tuple[TokenEvidence, ...] = ()

    kind: ClassVar[TokenKind] = TokenKind.SHADOW

    def merge_key(self) -> Hashable:
        return self.value


@dataclass(frozen=True)
class MotionToken:
    property: str  # duration | easing | keyframe
    value: str
    evidence: tuple[TokenEvidence, ...] = ()

    kind: ClassVar[TokenKind] = TokenKind.MOTION

    def merge_key(self) -> Hashable:
        return (self.property, self.value)


DesignToken = Union[
    ColorToken, TypographyToken, SpacingToken, RadiusToken, ShadowToken, MotionToken
]


@dataclass(frozen=True)
class PageTokens:
    """Raw token lists extracted from a single page."""

    colors: tuple[ColorToken, ...] = ()
    typography: tuple[TypographyToken, ...] = ()
    spacing: tuple[SpacingToken, ...] = ()
    radii: tuple[RadiusToken, ...] = ()
    shadows: tuple[ShadowToken, ...] = ()
    motion: tuple[MotionToken, ...] = ()


# ── Normalization outputs ─────────────────────────────────────────────


@dataclass(frozen=True)
class ColorCluster:
    """Perceptually deduplicated color.

    ``canonical`` is always in ``variants``; ``occurrences`` equals
    ``len(evidence)``.
    """

    canonical: str
    variants: tuple[str, ...]
    evidence: tuple[TokenEvidence, ...]
    occurrences: int


@dataclass(frozen=True)
class ConfidenceScore:
    value: float  # 0-1
    level: ConfidenceLevel
    reasoning: str


T = TypeVar("T", bound=EvidenceCarrier)


@dataclass(frozen=True)
class TokenWithFrequency(Generic[T]):
    """A token plus its cross-page statistics."""

    token: T
    page_urls: frozenset[str]
    occurrence_count: int  # every evidence entry, repeats on one page included
    confidence: ConfidenceScore
    is_standard: bool

    @property
    def page_count(self) -> int:
        return len(self.page_urls)


@dataclass(frozen=True)
class SpacingScale:
    base_unit: int
    scale: tuple[int, ...]
    coverage: float


# ── Components ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DetectedComponentInstance:
    """One component observed on one page."""

    type: str  # button | input | card | nav | modal | ...
    selector: str
    page_url: str
    computed_styles: Mapping[str, str] = field(default_factory=dict, hash=False)
    evidence: tuple[TokenEvidence, ...] = ()


@dataclass(frozen=True)
class VariantDimension:
    """One classification axis for a component type.

    ``distribution`` lists every bucket label of the axis in a fixed order;
    its counts sum to the number of instances in the group.
    """

    name: str  # size | emphasis | shape
    values: tuple[str, ...]  # labels with a non-zero count
    distribution: Mapping[str, int] = field(hash=False)


@dataclass(frozen=True)
class ComponentVariant:
    size: str
    emphasis: str
    shape: str

    @property
    def signature(self) -> tuple[str, str, str]:
        return (self.size, self.emphasis, self.shape)


@dataclass(frozen=True)
class AnalyzedInstance:
    instance: DetectedComponentInstance
    variant: ComponentVariant
    dimensions: tuple[VariantDimension, ...]


@dataclass(frozen=True)
class ComponentConfidenceScore(ConfidenceScore):
    page_count: int = 0
    instance_count: int = 0
    variant_consistency: float = 0.0


@dataclass(frozen=True)
class AggregatedComponent:
    """Canonical definition of one component type across all pages."""

    type: str
    instances: tuple[DetectedComponentInstance, ...]
    page_urls: frozenset[str]
    variants: tuple[AnalyzedInstance, ...]
    canonical_styles: Mapping[str, str] = field(hash=False)
    canonical_variant: Optional[ComponentVariant] = None
    confidence: Optional[ComponentConfidenceScore] = None

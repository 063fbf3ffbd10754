"""
Immutable data model shared by the analysis engines and the generator.

Elements, stems and branches are carried as their Chinese symbols (金木水火土, 甲..癸, 子..亥) so that
they index straight into the tables of ``qiming.naming_data``. The option-like vocabularies (gender,
style, source) and the classification results (fortune level, sancai relation, rating) are closed enums.
"""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Tuple

from qiming.errors import InvalidOptionsError
from qiming.source_data import CLASSIC_SOURCES
from qiming.naming_data import (
    BRANCH_ELEMENTS,
    BRANCH_ZODIAC,
    EARTHLY_BRANCHES,
    FIVE_ELEMENTS,
    HEAVENLY_STEMS,
    STEM_ELEMENTS,
)

HAN_PATTERN = re.compile(r"^[\u4e00-\u9fff]+$")

MAX_RESULTS_LIMIT = 100
DEFAULT_MAX_RESULTS = 20


# ════════════════════════════════════════════════════════════════════════════════
# CLOSED VOCABULARIES
# ════════════════════════════════════════════════════════════════════════════════


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    NEUTRAL = "neutral"


class Style(Enum):
    CLASSIC = "classic"
    MODERN = "modern"
    POETIC = "poetic"
    ELEGANT = "elegant"


class Source(Enum):
    ANY = "any"
    POETRY = "poetry"
    CLASSICS = "classics"
    IDIOMS = "idioms"


class FortuneLevel(Enum):
    """Five ordered fortune levels of the 81-number table."""

    GREAT_FORTUNE = "大吉"
    FORTUNE = "吉"
    MIXED = "半吉"
    MISFORTUNE = "凶"
    GREAT_MISFORTUNE = "大凶"


class SancaiRelation(Enum):
    GENERATING = "相生"
    CONTROLLING = "相克"
    SAME = "同类"


class InspirationKind(Enum):
    POETRY = "poetry"
    IDIOM = "idiom"


class ScoreRating(Enum):
    """Qualitative rating of an overall score: (key, label, description, emoji)."""

    EXCELLENT = ("excellent", "优秀", "非常出色的名字，五行、五格、音韵各方面都很和谐", "🌟")
    GOOD = ("good", "良好", "很好的名字，整体协调，寓意美好", "✨")
    AVERAGE = ("average", "中等", "可以使用的名字，各方面基本合格", "👍")
    FAIR = ("fair", "一般", "名字有一些不足之处，建议考虑其他选项", "😐")
    POOR = ("poor", "欠佳", "名字存在较多问题，强烈建议更换", "⚠️")

    def __init__(self, key: str, label: str, description: str, emoji: str):
        self.key = key
        self.label = label
        self.description = description
        self.emoji = emoji


# ════════════════════════════════════════════════════════════════════════════════
# CALENDAR / ELEMENT CHART
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Pillar:
    """One stem+branch pair of a birth chart."""

    stem: str
    branch: str

    def __post_init__(self) -> None:
        if self.stem not in HEAVENLY_STEMS:
            raise ValueError(f"unknown heavenly stem: {self.stem!r}")
        if self.branch not in EARTHLY_BRANCHES:
            raise ValueError(f"unknown earthly branch: {self.branch!r}")

    @classmethod
    def from_ganzhi(cls, ganzhi: str) -> "Pillar":
        if len(ganzhi) != 2:
            raise ValueError(f"expected a two-character stem+branch, got {ganzhi!r}")
        return cls(stem=ganzhi[0], branch=ganzhi[1])

    @property
    def stem_element(self) -> str:
        return STEM_ELEMENTS[self.stem]

    @property
    def branch_element(self) -> str:
        return BRANCH_ELEMENTS[self.branch]

    def __str__(self) -> str:
        return f"{self.stem}{self.branch}"


@dataclass(frozen=True)
class Chart:
    """Four pillars plus the element tally and favorability derived from them."""

    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    elements: Mapping[str, int]
    favorable_elements: Tuple[str, ...]
    unfavorable_elements: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))

    @property
    def pillars(self) -> Tuple[Pillar, Pillar, Pillar, Pillar]:
        return (self.year, self.month, self.day, self.hour)

    @property
    def day_master(self) -> str:
        return self.day.stem

    @property
    def day_master_element(self) -> str:
        return STEM_ELEMENTS[self.day.stem]

    @property
    def day_master_strength(self) -> int:
        return self.elements[self.day_master_element]

    @property
    def zodiac(self) -> Tuple[str, str]:
        """Chinese and English zodiac animal of the year branch."""
        return BRANCH_ZODIAC[self.year.branch]

    @property
    def signature(self) -> str:
        return "".join(str(p) for p in self.pillars)


# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER POOL AND SOURCE TERMS
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Character:
    symbol: str
    pinyin: str
    tone: int
    stroke_count: int
    kangxi_stroke_count: int
    radical: str
    element: str
    meaning: str
    frequency: int
    hsk_level: Optional[int] = None

    @property
    def canonical_strokes(self) -> int:
        """Traditional (Kangxi) stroke count, falling back to the simplified count, then 1."""
        return self.kangxi_stroke_count or self.stroke_count or 1


@dataclass(frozen=True)
class PoetryVerse:
    id: str
    source: str  # 诗经 | 楚辞 | 唐诗 | 宋词
    title: str
    author: Optional[str]
    dynasty: str
    verse: str
    suitable_chars: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_classic(self) -> bool:
        return self.source in CLASSIC_SOURCES


@dataclass(frozen=True)
class Idiom:
    idiom: str
    pinyin: str
    meaning: str
    source: str
    category: str
    suitable_chars: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Inspiration:
    """Citation attached to a generated name."""

    kind: InspirationKind
    title: str
    quote: str
    author: Optional[str] = None


# ════════════════════════════════════════════════════════════════════════════════
# ANALYSIS RESULTS
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NumerologyInterpretation:
    number: int
    fortune: FortuneLevel
    meaning: str


@dataclass(frozen=True)
class SancaiAnalysis:
    heaven: str
    human: str
    earth: str
    relation: SancaiRelation
    score: int
    interpretation: str

    @property
    def configuration(self) -> str:
        return f"{self.heaven}-{self.human}-{self.earth}"


@dataclass(frozen=True)
class WugeGrid:
    heaven: int
    human: int
    earth: int
    outer: int
    total: int

    def items(self) -> Tuple[Tuple[str, int], ...]:
        return (
            ("heaven", self.heaven),
            ("human", self.human),
            ("earth", self.earth),
            ("outer", self.outer),
            ("total", self.total),
        )


@dataclass(frozen=True)
class WugeAnalysis:
    grid: WugeGrid
    heaven: NumerologyInterpretation
    human: NumerologyInterpretation
    earth: NumerologyInterpretation
    outer: NumerologyInterpretation
    total: NumerologyInterpretation
    sancai: SancaiAnalysis
    overall_score: int

    @property
    def interpretations(self) -> Tuple[NumerologyInterpretation, ...]:
        return (self.heaven, self.human, self.earth, self.outer, self.total)


@dataclass(frozen=True)
class PhoneticAnalysis:
    syllables: Tuple[str, ...]
    tones: Tuple[int, ...]
    tone_harmony: int
    readability: int
    warnings: Tuple[str, ...] = ()

    @property
    def has_homophone_issue(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class NameScore:
    overall: int
    rating: ScoreRating
    bazi_score: int
    wuge_score: int
    phonetic_score: int
    meaning_score: int
    wuge: WugeAnalysis
    phonetics: PhoneticAnalysis
    chart: Optional[Chart] = None


@dataclass(frozen=True)
class MinimumStandardsResult:
    """``meets`` iff ``issues`` is empty."""

    issues: Tuple[str, ...]

    @property
    def meets(self) -> bool:
        return not self.issues


@dataclass(frozen=True)
class ComparisonResult:
    winner: int  # 1 or 2
    difference: int


@dataclass(frozen=True)
class GeneratedName:
    full_name: str
    surname: str
    given_name: str
    pinyin: str
    characters: Tuple[Character, ...]
    score: NameScore
    explanation: str
    inspiration: Optional[Inspiration] = None


# ════════════════════════════════════════════════════════════════════════════════
# GENERATION OPTIONS
# ════════════════════════════════════════════════════════════════════════════════


def _coerce_enum(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidOptionsError(f"{field_name} must be one of {allowed}; got {value!r}") from None


def _coerce_elements(elements: Optional[Iterable[str]], field_name: str) -> Tuple[str, ...]:
    result = []
    for element in elements or ():
        if element not in FIVE_ELEMENTS:
            raise InvalidOptionsError(f"{field_name} contains unknown element {element!r}")
        if element not in result:
            result.append(element)
    return tuple(result)


@dataclass(frozen=True)
class GenerationOptions:
    """
    A naming request.

    String values are accepted for the enum fields and coerced. ``max_results`` above the limit
    is clamped rather than rejected. ``birth_hour`` is only meaningful with ``birth_date`` and is
    validated by the calendar converter.
    """

    surname: str
    gender: Gender
    birth_date: Optional[datetime.date] = None
    birth_hour: Optional[int] = None
    preferred_elements: Tuple[str, ...] = ()
    avoid_elements: Tuple[str, ...] = ()
    style: Style = Style.CLASSIC
    source: Source = Source.ANY
    character_count: int = 2
    max_results: int = DEFAULT_MAX_RESULTS

    def __post_init__(self) -> None:
        if not self.surname or not HAN_PATTERN.match(self.surname) or len(self.surname) > 2:
            raise InvalidOptionsError(f"surname must be 1-2 Han characters; got {self.surname!r}")
        if self.character_count not in (1, 2):
            raise InvalidOptionsError(f"character_count must be 1 or 2; got {self.character_count!r}")
        if not isinstance(self.max_results, int) or self.max_results < 1:
            raise InvalidOptionsError(f"max_results must be a positive integer; got {self.max_results!r}")
        if self.birth_date is not None and not isinstance(self.birth_date, datetime.date):
            raise InvalidOptionsError(f"birth_date must be a datetime.date; got {type(self.birth_date).__name__}")

        object.__setattr__(self, "gender", _coerce_enum(Gender, self.gender, "gender"))
        object.__setattr__(self, "style", _coerce_enum(Style, self.style, "style"))
        object.__setattr__(self, "source", _coerce_enum(Source, self.source, "source"))
        object.__setattr__(
            self, "preferred_elements", _coerce_elements(self.preferred_elements, "preferred_elements")
        )
        object.__setattr__(self, "avoid_elements", _coerce_elements(self.avoid_elements, "avoid_elements"))
        object.__setattr__(self, "max_results", min(self.max_results, MAX_RESULTS_LIMIT))

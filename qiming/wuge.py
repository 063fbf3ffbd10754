"""
Wuge (五格 / Five Grids) numerology.

Five integers are derived from the Kangxi stroke counts of surname and given name:

- 天格 heaven: surname strokes (+1 for a single-character surname)
- 人格 human: last surname character + first given-name character
- 地格 earth: given-name strokes (+1 for a single-character given name)
- 外格 outer: what the other four leave over (fixed offsets when either side is one character)
- 总格 total: all strokes

Each grid is reduced into 1..81 and looked up in the fortune table. The heaven/human/earth triple is
also mapped to elements by last digit (三才) and classified as generating, same or controlling.
"""

from __future__ import annotations

from typing import Sequence

from qiming.models import (
    FortuneLevel,
    NumerologyInterpretation,
    SancaiAnalysis,
    SancaiRelation,
    WugeAnalysis,
    WugeGrid,
)
from qiming.naming_data import (
    ELEMENT_GENERATION,
    FORTUNE_DESCRIPTIONS,
    LAST_DIGIT_ELEMENTS,
    NUMEROLOGY_81,
    SANCAI_INTERPRETATIONS,
)

NUMEROLOGY_SIZE = 81
SINGLE_CHARACTER_OUTER = 2
UNKNOWN_NUMBER_MEANING = "未知数理"

FORTUNE_SCORES = {
    FortuneLevel.GREAT_FORTUNE: 95,
    FortuneLevel.FORTUNE: 80,
    FortuneLevel.MIXED: 60,
    FortuneLevel.MISFORTUNE: 40,
    FortuneLevel.GREAT_MISFORTUNE: 20,
}

# Human and total carry the most weight
GRID_WEIGHTS = {
    "heaven": 0.15,
    "human": 0.25,
    "earth": 0.20,
    "outer": 0.15,
    "total": 0.25,
}

GRID_SCORE_WEIGHT = 0.7
SANCAI_SCORE_WEIGHT = 0.3

SANCAI_SCORES = {
    SancaiRelation.GENERATING: 90,
    SancaiRelation.SAME: 70,
    SancaiRelation.CONTROLLING: 50,
}

GOOD_WUGE_THRESHOLD = 70


# ════════════════════════════════════════════════════════════════════════════════
# GRID COMPUTATION
# ════════════════════════════════════════════════════════════════════════════════


def calculate_grid(surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> WugeGrid:
    if not surname_strokes:
        raise ValueError("surname_strokes must not be empty")

    surname_total = sum(surname_strokes)
    given_total = sum(given_strokes)
    total = surname_total + given_total

    heaven = surname_total if len(surname_strokes) > 1 else surname_strokes[0] + 1
    human = surname_strokes[-1] + (given_strokes[0] if given_strokes else 0)
    earth = given_total if len(given_strokes) > 1 else given_total + 1

    single_surname = len(surname_strokes) == 1
    single_given = len(given_strokes) <= 1
    if single_surname and single_given:
        outer = SINGLE_CHARACTER_OUTER
    elif single_given:
        outer = heaven + 1
    elif single_surname:
        outer = given_strokes[-1] + 1
    else:
        outer = total - human + 1

    return WugeGrid(heaven=heaven, human=human, earth=earth, outer=outer, total=total)


def reduce_number(number: int) -> int:
    """Fold any integer into 1..81."""
    return ((number - 1) % NUMEROLOGY_SIZE) + 1


def interpret_number(number: int) -> NumerologyInterpretation:
    """Fortune for a grid number; never fails, unknown entries read as a generic mixed fortune."""
    reduced = reduce_number(number)
    entry = NUMEROLOGY_81.get(reduced)
    if entry is None:
        return NumerologyInterpretation(number=reduced, fortune=FortuneLevel.MIXED, meaning=UNKNOWN_NUMBER_MEANING)
    fortune, meaning = entry
    return NumerologyInterpretation(number=reduced, fortune=FortuneLevel(fortune), meaning=meaning)


def describe_fortune(fortune: FortuneLevel) -> str:
    return FORTUNE_DESCRIPTIONS[fortune.value]


# ════════════════════════════════════════════════════════════════════════════════
# SANCAI (三才)
# ════════════════════════════════════════════════════════════════════════════════


def number_to_element(number: int) -> str:
    return LAST_DIGIT_ELEMENTS[number % 10]


def classify_sancai(heaven: str, human: str, earth: str) -> SancaiRelation:
    if heaven == human == earth:
        return SancaiRelation.SAME

    heaven_feeds_human = ELEMENT_GENERATION[heaven] == human
    human_feeds_earth = ELEMENT_GENERATION[human] == earth
    earth_feeds_heaven = ELEMENT_GENERATION[earth] == heaven
    if (
        (heaven_feeds_human and human_feeds_earth)
        or (human_feeds_earth and earth_feeds_heaven)
        or (earth_feeds_heaven and heaven_feeds_human)
    ):
        return SancaiRelation.GENERATING

    return SancaiRelation.CONTROLLING


def analyze_sancai(grid: WugeGrid) -> SancaiAnalysis:
    heaven = number_to_element(grid.heaven)
    human = number_to_element(grid.human)
    earth = number_to_element(grid.earth)
    relation = classify_sancai(heaven, human, earth)
    return SancaiAnalysis(
        heaven=heaven,
        human=human,
        earth=earth,
        relation=relation,
        score=SANCAI_SCORES[relation],
        interpretation=SANCAI_INTERPRETATIONS[relation.value].format(config=f"{heaven}-{human}-{earth}"),
    )


# ════════════════════════════════════════════════════════════════════════════════
# FULL ANALYSIS
# ════════════════════════════════════════════════════════════════════════════════


def analyze_wuge(surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> WugeAnalysis:
    grid = calculate_grid(surname_strokes, given_strokes)
    interpretations = {name: interpret_number(value) for name, value in grid.items()}
    sancai = analyze_sancai(grid)

    grid_score = sum(FORTUNE_SCORES[interpretations[name].fortune] * weight for name, weight in GRID_WEIGHTS.items())
    overall = round(grid_score * GRID_SCORE_WEIGHT + sancai.score * SANCAI_SCORE_WEIGHT)

    return WugeAnalysis(
        grid=grid,
        heaven=interpretations["heaven"],
        human=interpretations["human"],
        earth=interpretations["earth"],
        outer=interpretations["outer"],
        total=interpretations["total"],
        sancai=sancai,
        overall_score=max(0, min(100, overall)),
    )


def has_good_wuge(analysis: WugeAnalysis) -> bool:
    return analysis.overall_score >= GOOD_WUGE_THRESHOLD


def format_wuge_analysis(analysis: WugeAnalysis) -> str:
    grid = analysis.grid
    lines = []
    for label, value, interpretation in (
        ("天格", grid.heaven, analysis.heaven),
        ("人格", grid.human, analysis.human),
        ("地格", grid.earth, analysis.earth),
        ("外格", grid.outer, analysis.outer),
        ("总格", grid.total, analysis.total),
    ):
        lines.append(f"{label}: {value} ({interpretation.fortune.value}) - {interpretation.meaning}")

    sancai = analysis.sancai
    return "\n".join(
        ["五格配置:"]
        + lines
        + [
            "",
            f"三才配置: {sancai.configuration} ({sancai.relation.value})",
            sancai.interpretation,
            "",
            f"总格运势: {describe_fortune(analysis.total.fortune)}",
            f"综合评分: {analysis.overall_score}/100",
        ]
    )

"""
Five-grid numerology: grid arithmetic for every surname/given-name length combination,
81-number folding, sancai classification and the composite score.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from qiming.models import FortuneLevel, SancaiRelation
from qiming.wuge import (
    analyze_sancai,
    analyze_wuge,
    calculate_grid,
    classify_sancai,
    format_wuge_analysis,
    has_good_wuge,
    interpret_number,
    number_to_element,
    reduce_number,
)

# (surname strokes, given strokes) -> (heaven, human, earth, outer, total)
GRID_TEST_CASES = [
    (([7], [8, 14]), (8, 15, 22, 15, 29)),  # 李 + two characters
    (([1], [1, 1]), (2, 2, 2, 2, 3)),
    (([5], [6]), (6, 11, 7, 2, 11)),  # single + single: outer fixed at 2
    (([4, 6], [5, 7]), (10, 11, 12, 12, 22)),  # compound + two characters
    (([4, 6], [5]), (10, 11, 6, 11, 15)),  # compound + single: outer = heaven + 1
    (([10], [3, 20]), (11, 13, 23, 21, 33)),
]

REDUCE_TEST_CASES = [
    (1, 1),
    (81, 81),
    (82, 1),
    (100, 19),
    (162, 81),
    (163, 1),
    (0, 81),
]


def test_grid_values():
    """Test the five grids against hand-computed values."""
    for (surname_strokes, given_strokes), expected in GRID_TEST_CASES:
        grid = calculate_grid(surname_strokes, given_strokes)
        result = (grid.heaven, grid.human, grid.earth, grid.outer, grid.total)
        assert result == expected, f"{surname_strokes}+{given_strokes}: expected {expected}, got {result}"


def test_total_is_sum_of_all_strokes():
    for (surname_strokes, given_strokes), _ in GRID_TEST_CASES:
        grid = calculate_grid(surname_strokes, given_strokes)
        assert grid.total == sum(surname_strokes) + sum(given_strokes)


def test_empty_surname_rejected():
    with pytest.raises(ValueError):
        calculate_grid([], [3, 4])


def test_reduce_number():
    for number, expected in REDUCE_TEST_CASES:
        assert reduce_number(number) == expected, f"reduce_number({number}): expected {expected}"


def test_interpret_number_always_in_table_range():
    for number in range(0, 300):
        interpretation = interpret_number(number)
        assert 1 <= interpretation.number <= 81, f"{number} folded to {interpretation.number}"
        assert interpretation.meaning, f"empty meaning for {number}"


def test_interpret_known_numbers():
    assert interpret_number(1).fortune is FortuneLevel.GREAT_FORTUNE
    assert interpret_number(8).fortune is FortuneLevel.FORTUNE
    assert interpret_number(22).fortune is FortuneLevel.MISFORTUNE
    assert interpret_number(30).fortune is FortuneLevel.MIXED
    # 82 folds onto 1
    assert interpret_number(82) == interpret_number(1)


def test_number_to_element_uses_last_digit():
    cases = [(1, "木"), (12, "木"), (23, "火"), (15, "土"), (8, "金"), (29, "水"), (10, "水")]
    for number, element in cases:
        assert number_to_element(number) == element, f"{number}: expected {element}"


def test_classify_sancai():
    cases = [
        (("木", "火", "土"), SancaiRelation.GENERATING),
        (("水", "木", "火"), SancaiRelation.GENERATING),
        (("火", "土", "火"), SancaiRelation.CONTROLLING),  # only one generating link
        (("金", "金", "金"), SancaiRelation.SAME),
        (("木", "土", "水"), SancaiRelation.CONTROLLING),
        (("水", "木", "木"), SancaiRelation.CONTROLLING),
    ]
    for triple, expected in cases:
        assert classify_sancai(*triple) is expected, f"{triple}: expected {expected}"


def test_sancai_analysis_of_grid():
    sancai = analyze_sancai(calculate_grid([7], [8, 14]))
    assert (sancai.heaven, sancai.human, sancai.earth) == ("金", "土", "木")
    assert sancai.relation is SancaiRelation.CONTROLLING
    assert sancai.score == 50
    assert "金-土-木" in sancai.interpretation
    assert sancai.configuration == "金-土-木"


def test_analyze_wuge_score():
    # 8 吉, 15 大吉, 22 凶, 15 大吉, 29 吉 -> grids 78, sancai 50
    analysis = analyze_wuge([7], [8, 14])
    assert analysis.overall_score == 70
    assert has_good_wuge(analysis)
    assert analysis.human.number == 15
    assert len(analysis.interpretations) == 5


def test_wuge_score_bounds():
    for surname in ([1], [7], [12], [4, 6], [30]):
        for given in ([1], [9], [3, 20], [17, 17], [40, 41]):
            score = analyze_wuge(surname, given).overall_score
            assert 0 <= score <= 100, f"{surname}+{given}: score {score} out of range"


def test_format_wuge_analysis():
    text = format_wuge_analysis(analyze_wuge([7], [8, 14]))
    for label in ("天格: 8", "人格: 15", "地格: 22", "外格: 15", "总格: 29", "三才配置: 金-土-木", "综合评分: 70/100"):
        assert label in text, f"missing {label!r} in report"
    assert "总格运势: " in text

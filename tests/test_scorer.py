"""
Composite scoring: the meaning heuristic, weighting, ratings, minimum standards and comparison.
"""

import dataclasses
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from qiming.bazi import build_chart
from qiming.cache import MemoryCache
from qiming.characters import CharacterPool
from qiming.errors import InvalidOptionsError
from qiming.models import Pillar, ScoreRating
from qiming.scorer import (
    ISSUE_HOMOPHONE,
    ISSUE_LOW_OVERALL,
    ISSUE_POOR_WUGE,
    NameScorer,
    compare_names,
    format_name_score,
    meaning_score,
    meets_minimum_standards,
    score_rating,
)

# symbol -> single-character meaning score
MEANING_CASES = [
    ("明", 100),  # positive, 100-1000 band, HSK 1 (clamped)
    ("和", 65),  # rank under 100 is penalized
    ("伟", 85),
    ("实", 85),
    ("锦", 85),  # positive, 1000-3000 band, HSK 6
    ("鑫", 80),  # positive, 3000-5000 band, no HSK level
]

RATING_CASES = [
    (100, ScoreRating.EXCELLENT),
    (90, ScoreRating.EXCELLENT),
    (89, ScoreRating.GOOD),
    (80, ScoreRating.GOOD),
    (70, ScoreRating.AVERAGE),
    (60, ScoreRating.FAIR),
    (59, ScoreRating.POOR),
    (0, ScoreRating.POOR),
]

NAMES_TO_SCORE = ["李明", "王伟", "张思远", "欧阳明华", "李实", "陈和", "龘明"]


@pytest.fixture(scope="session")
def pool():
    return CharacterPool()


@pytest.fixture(scope="session")
def scorer(pool):
    return NameScorer(pool=pool)


@pytest.fixture(scope="session")
def chart():
    # favorable 金 木, unfavorable 土 火
    return build_chart(Pillar("己", "卯"), Pillar("丙", "子"), Pillar("戊", "午"), Pillar("壬", "子"))


def split(full_name):
    surname_length = 2 if full_name.startswith("欧阳") else 1
    return full_name[:surname_length], full_name[surname_length:]


def test_meaning_score_per_character(pool):
    for symbol, expected in MEANING_CASES:
        result = meaning_score([pool.require(symbol)])
        assert result == expected, f"{symbol}: expected {expected}, got {result}"


def test_meaning_score_averages(pool):
    assert meaning_score([pool.require("和"), pool.require("伟")]) == 75
    assert meaning_score([]) == 50


def test_score_rating():
    for overall, expected in RATING_CASES:
        assert score_rating(overall) is expected, f"{overall}: expected {expected}"


def test_scores_are_bounded(scorer, chart):
    for full_name in NAMES_TO_SCORE:
        surname, given_name = split(full_name)
        for name_chart in (None, chart):
            score = scorer.score_name(full_name, surname, given_name, chart=name_chart)
            for label, value in (
                ("overall", score.overall),
                ("bazi", score.bazi_score),
                ("wuge", score.wuge_score),
                ("phonetic", score.phonetic_score),
                ("meaning", score.meaning_score),
            ):
                assert 0 <= value <= 100, f"{full_name} {label} score {value} out of range"
            assert score.rating is score_rating(score.overall)


def test_overall_is_weighted_sum(scorer, chart):
    score = scorer.score_name("李明", "李", "明", chart=chart)
    expected = round(
        score.bazi_score * 0.30 + score.wuge_score * 0.25 + score.phonetic_score * 0.20 + score.meaning_score * 0.25
    )
    assert score.overall == expected


def test_default_bazi_without_chart(scorer):
    score = scorer.score_name("李明", "李", "明")
    assert score.bazi_score == 70
    assert score.chart is None
    assert score.meaning_score == 100


def test_bazi_counts_surname_element(scorer, chart):
    # 李 木 (favorable) + 明 火 (unfavorable)
    score = scorer.score_name("李明", "李", "明", chart=chart)
    assert score.bazi_score == 55
    assert score.chart is chart


def test_wuge_uses_kangxi_strokes(scorer):
    # 李 7, 明 8
    score = scorer.score_name("李明", "李", "明")
    grid = score.wuge.grid
    assert (grid.heaven, grid.human, grid.earth, grid.outer, grid.total) == (8, 15, 9, 2, 15)


def test_unknown_character_counts_one_stroke(scorer):
    score = scorer.score_name("龘明", "龘", "明")
    assert score.wuge.grid.heaven == 2
    assert score.wuge.grid.human == 9


def test_scoring_is_deterministic(scorer, chart):
    for full_name in NAMES_TO_SCORE:
        surname, given_name = split(full_name)
        first = scorer.score_name(full_name, surname, given_name, chart=chart)
        second = scorer.score_name(full_name, surname, given_name, chart=chart)
        assert first == second, f"{full_name} scored differently on a second run"


def test_minimum_standards(scorer):
    score = scorer.score_name("李明", "李", "明")
    assert meets_minimum_standards(score).meets

    homophone = scorer.score_name("李实", "李", "实")
    result = meets_minimum_standards(homophone)
    assert not result.meets
    assert ISSUE_HOMOPHONE in result.issues

    poor_wuge = dataclasses.replace(score, wuge_score=40)
    assert ISSUE_POOR_WUGE in meets_minimum_standards(poor_wuge).issues

    low = dataclasses.replace(score, overall=55)
    assert meets_minimum_standards(low).issues[0] == ISSUE_LOW_OVERALL


def test_compare_names(scorer):
    first = scorer.score_name("李明", "李", "明")
    second = dataclasses.replace(first, overall=first.overall - 7)
    assert compare_names(first, second).winner == 1
    assert compare_names(second, first).winner == 2
    assert compare_names(second, first).difference == 7
    # ties go to the first name
    assert compare_names(first, first).winner == 1
    assert compare_names(first, first).difference == 0


def test_format_name_score(scorer):
    score = scorer.score_name("李明", "李", "明")
    text = format_name_score(score)
    assert f"综合评分: {score.overall}/100 ({score.rating.label})" in text
    assert f"📐 五格数理: {score.wuge_score}/100 (权重 25%)" in text


def test_compound_surname_sharing_a_given_character(scorer, pool):
    # 阳 closes the surname and opens the given name; only the given-name 阳 counts toward meaning
    score = scorer.score_name("欧阳阳和", "欧阳", "阳和")
    expected = meaning_score([pool.require("阳"), pool.require("和")])
    assert score.meaning_score == expected
    assert meaning_score([pool.require("阳"), pool.require("阳"), pool.require("和")]) != expected


def test_mismatched_name_parts_rejected(scorer):
    for full_name, surname, given_name in (("", "", ""), ("李明", "", "李明"), ("李明", "王", "明"), ("李明", "李", "华")):
        with pytest.raises(InvalidOptionsError):
            scorer.score_name(full_name, surname, given_name)


def test_grid_and_phonetics_are_memoized(pool, chart):
    analysis_cache = MemoryCache(max_size=100)
    name_scorer = NameScorer(pool=pool, analysis_cache=analysis_cache)
    plain = name_scorer.score_name("李明", "李", "明")
    charted = name_scorer.score_name("李明", "李", "明", chart=chart)
    assert charted.wuge is plain.wuge
    assert charted.phonetics is plain.phonetics
    assert analysis_cache.stats().hits == 2

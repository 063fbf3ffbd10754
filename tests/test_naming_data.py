"""
Static tables and the small value types built on them.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from qiming.config import NamingConfig
from qiming.models import Character, Pillar, ScoreRating
from qiming.naming_data import (
    BRANCH_ELEMENTS,
    ELEMENT_CONTROL,
    ELEMENT_CONTROLLED_BY,
    ELEMENT_GENERATED_BY,
    ELEMENT_GENERATION,
    ELEMENT_NAMES_EN,
    FIVE_ELEMENTS,
    NUMEROLOGY_81,
    STEM_ELEMENTS,
    TOP_100_SURNAMES,
)

STEM_CASES = list(zip("甲乙丙丁戊己庚辛壬癸", "木木火火土土金金水水"))

BRANCH_CASES = list(zip("子丑寅卯辰巳午未申酉戌亥", "水土木木土火火土金金土水"))


def test_stem_and_branch_elements():
    for stem, element in STEM_CASES:
        assert STEM_ELEMENTS[stem] == element, f"{stem}: expected {element}"
    for branch, element in BRANCH_CASES:
        assert BRANCH_ELEMENTS[branch] == element, f"{branch}: expected {element}"


def test_element_cycles_are_consistent():
    for element in FIVE_ELEMENTS:
        assert ELEMENT_GENERATED_BY[ELEMENT_GENERATION[element]] == element
        assert ELEMENT_CONTROLLED_BY[ELEMENT_CONTROL[element]] == element
        # what an element generates, it never controls
        assert ELEMENT_GENERATION[element] != ELEMENT_CONTROL[element]
    assert ELEMENT_NAMES_EN["水"] == "Water"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ELEMENT_GENERATION["木"] = "水"
    with pytest.raises(TypeError):
        NUMEROLOGY_81[1] = ("凶", "")


def test_numerology_table_complete():
    assert sorted(NUMEROLOGY_81) == list(range(1, 82))


def test_top_surnames():
    assert len(TOP_100_SURNAMES) == 100
    assert TOP_100_SURNAMES[:3] == ("王", "李", "张")


def test_pillar_validation():
    pillar = Pillar.from_ganzhi("甲子")
    assert (pillar.stem, pillar.branch) == ("甲", "子")
    assert (pillar.stem_element, pillar.branch_element) == ("木", "水")
    assert str(pillar) == "甲子"
    for bad in ("子甲", "甲", "甲子丑", "AB"):
        with pytest.raises(ValueError):
            Pillar.from_ganzhi(bad)


def test_canonical_strokes_fallback():
    assert Character("华", "huá", 2, 6, 14, "十", "水", "华丽", 300).canonical_strokes == 14
    assert Character("华", "huá", 2, 6, 0, "十", "水", "华丽", 300).canonical_strokes == 6
    assert Character("华", "huá", 2, 0, 0, "十", "水", "华丽", 300).canonical_strokes == 1


def test_score_rating_fields():
    assert ScoreRating.EXCELLENT.key == "excellent"
    assert ScoreRating.GOOD.label == "良好"
    assert ScoreRating.POOR.emoji == "⚠️"
    assert len({rating.key for rating in ScoreRating}) == 5


def test_config_builders(tmp_path):
    config = NamingConfig.create_default()
    assert config.cache_dir is None
    assert config.romanization_cache_file is None
    assert config.min_acceptable_score == 50

    seeded = config.with_random_seed(5)
    assert seeded.random_seed == 5
    assert config.random_seed is None

    cache_dir = tmp_path / "nested" / "cache"
    with_dir = config.with_cache_dir(cache_dir)
    assert cache_dir.is_dir()
    assert with_dir.romanization_cache_file.parent == cache_dir

    limited = config.with_cache_limits(score_cache_size=10, chart_cache_ttl=1.0)
    assert (limited.score_cache_size, limited.chart_cache_ttl) == (10, 1.0)
    assert limited.chart_cache_size == config.chart_cache_size


def test_result_limit_builder():
    config = NamingConfig.create_default()
    assert config.max_results_limit == 100
    assert config.with_result_limit(5).max_results_limit == 5
    with pytest.raises(ValueError):
        config.with_result_limit(0)

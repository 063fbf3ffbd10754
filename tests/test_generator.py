"""
End-to-end generation: filtering, enumeration, ranking, explanations, caching and option validation.
"""

import dataclasses
import datetime
import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from qiming import generator as generator_module
from qiming.cache import MemoryCache
from qiming.characters import CharacterPool
from qiming.config import NamingConfig
from qiming.errors import InvalidDateError, InvalidOptionsError
from qiming.generator import (
    NameGenerator,
    build_explanation,
    ranking_score,
    split_full_name,
    style_bonus,
)
from qiming.models import Gender, GenerationOptions, Inspiration, InspirationKind, Source, Style

# A spread of requests that every generator must answer sensibly
GENERATION_REQUESTS = [
    dict(surname="李", gender=Gender.FEMALE),
    dict(surname="王", gender=Gender.MALE, character_count=1),
    dict(surname="张", gender=Gender.NEUTRAL, style=Style.POETIC, source=Source.POETRY),
    dict(surname="欧阳", gender=Gender.FEMALE, style=Style.MODERN, max_results=5),
    dict(surname="陈", gender=Gender.MALE, birth_date=datetime.date(1990, 12, 23), birth_hour=8),
    dict(surname="刘", gender=Gender.NEUTRAL, preferred_elements=("水",), avoid_elements=("火",)),
    dict(surname="赵", gender=Gender.FEMALE, style=Style.ELEGANT, source=Source.IDIOMS),
    dict(surname="周", gender=Gender.MALE, style=Style.CLASSIC, source=Source.CLASSICS, character_count=1),
]

INVALID_OPTIONS = [
    dict(surname="", gender="male"),
    dict(surname="Li", gender="male"),
    dict(surname="司马相", gender="male"),
    dict(surname="李", gender="other"),
    dict(surname="李", gender="male", character_count=3),
    dict(surname="李", gender="male", max_results=0),
    dict(surname="李", gender="male", style="baroque"),
    dict(surname="李", gender="male", source="novels"),
    dict(surname="李", gender="male", preferred_elements=("风",)),
    dict(surname="李", gender="male", birth_date="2020-05-17"),
]


def make_generator(seed=7):
    return NameGenerator(NamingConfig.create_default().with_random_seed(seed))


@pytest.fixture(scope="session")
def name_generator():
    return make_generator()


def test_generation_invariants(name_generator):
    """Test bounds, uniqueness, ordering and shape of every response."""
    for request in GENERATION_REQUESTS:
        options = GenerationOptions(**request)
        names = name_generator.generate_names(options)
        label = f"{request}"

        assert names, f"{label}: no names generated"
        assert len(names) <= options.max_results, f"{label}: {len(names)} names for max {options.max_results}"
        full_names = [name.full_name for name in names]
        assert len(full_names) == len(set(full_names)), f"{label}: duplicate names {full_names}"

        rankings = [ranking_score(name, options.style) for name in names]
        assert rankings == sorted(rankings, reverse=True), f"{label}: not ranked {rankings}"

        for name in names:
            assert name.surname == options.surname
            assert name.full_name == name.surname + name.given_name
            assert len(name.given_name) == options.character_count, f"{label}: {name.full_name}"
            assert name.score.overall >= 50, f"{label}: {name.full_name} scored {name.score.overall}"
            assert len(name.pinyin.split(" ")) == len(name.full_name), f"{label}: pinyin {name.pinyin}"
            assert name.explanation.startswith("此名由"), f"{label}: {name.explanation}"


def test_single_character_generation_is_deterministic():
    options = GenerationOptions(surname="王", gender=Gender.MALE, character_count=1)
    first = [name.full_name for name in make_generator(seed=1).generate_names(options)]
    second = [name.full_name for name in make_generator(seed=2).generate_names(options)]
    assert first == second


def test_seeded_two_character_generation_is_reproducible():
    options = GenerationOptions(surname="李", gender=Gender.FEMALE, max_results=10)
    first = make_generator(seed=42).generate_names(options)
    second = make_generator(seed=42).generate_names(options)
    assert [name.full_name for name in first] == [name.full_name for name in second]
    assert [name.score for name in first] == [name.score for name in second]


def test_injected_rng_drives_the_shuffle():
    options = GenerationOptions(surname="李", gender=Gender.NEUTRAL, max_results=10)
    first = NameGenerator(rng=random.Random(3)).generate_names(options)
    second = NameGenerator(rng=random.Random(3)).generate_names(options)
    assert [name.full_name for name in first] == [name.full_name for name in second]


def test_scores_are_stable_across_requests(name_generator):
    options = GenerationOptions(surname="李", gender=Gender.FEMALE, max_results=30)
    first = {name.full_name: name.score for name in name_generator.generate_names(options)}
    fresh = make_generator(seed=99)
    for full_name, score in first.items():
        again = fresh.score_name(full_name, "李", full_name[1:])
        assert again == score, f"{full_name}: {score.overall} then {again.overall}"


def test_preferred_elements_restrict_candidates(name_generator):
    options = GenerationOptions(surname="王", gender=Gender.NEUTRAL, character_count=1, preferred_elements=("木",))
    for name in name_generator.generate_names(options):
        assert name.characters[-1].element == "木", f"{name.full_name} is {name.characters[-1].element}"


def test_avoid_elements_are_excluded(name_generator):
    options = GenerationOptions(surname="王", gender=Gender.NEUTRAL, avoid_elements=("金", "土"))
    for name in name_generator.generate_names(options):
        for character in name.characters[1:]:
            assert character.element not in ("金", "土"), f"{name.full_name} carries {character.element}"


def test_modern_style_skips_rare_characters(name_generator):
    options = GenerationOptions(surname="王", gender=Gender.NEUTRAL, style=Style.MODERN)
    for name in name_generator.generate_names(options):
        for character in name.characters[1:]:
            assert character.frequency < 3000, f"{name.full_name}: {character.symbol} rank {character.frequency}"


def test_gender_filter(name_generator):
    options = GenerationOptions(surname="李", gender=Gender.FEMALE, character_count=1)
    for name in name_generator.generate_names(options):
        assert CharacterPool.is_feminine(name.characters[-1]), f"{name.full_name} is not feminine"


def test_source_names_carry_inspiration(name_generator):
    for source, kind, marker in (
        (Source.POETRY, InspirationKind.POETRY, "灵感出自《"),
        (Source.IDIOMS, InspirationKind.IDIOM, "取意于成语"),
    ):
        options = GenerationOptions(surname="李", gender=Gender.NEUTRAL, character_count=1, source=source)
        names = name_generator.generate_names(options)
        assert names
        for name in names:
            assert name.inspiration is not None and name.inspiration.kind is kind, f"{source}: {name.full_name}"
            assert marker in name.explanation


def test_birth_chart_changes_element_score(name_generator):
    without = GenerationOptions(surname="李", gender=Gender.NEUTRAL, character_count=1)
    with_chart = dataclasses.replace(without, birth_date=datetime.date(2000, 1, 1), birth_hour=0)
    assert all(name.score.bazi_score == 70 for name in name_generator.generate_names(without))

    chart = name_generator.chart_for(with_chart)
    assert chart is name_generator.chart_for(with_chart)  # memoized
    for name in name_generator.generate_names(with_chart):
        assert name.score.chart == chart
        # favorable elements drive the candidate list when nothing is preferred
        assert name.characters[-1].element in chart.favorable_elements


def test_invalid_birth_hour_propagates(name_generator):
    options = GenerationOptions(surname="李", gender=Gender.MALE, birth_date=datetime.date(2020, 5, 17), birth_hour=24)
    with pytest.raises(InvalidDateError):
        name_generator.generate_names(options)


def test_unconvertible_birth_date_raises_invalid_date(name_generator):
    options = GenerationOptions(surname="李", gender=Gender.MALE, birth_date=datetime.date(1582, 10, 10))
    with pytest.raises(InvalidDateError):
        name_generator.generate_names(options)


def test_invalid_options():
    for request in INVALID_OPTIONS:
        with pytest.raises(InvalidOptionsError):
            GenerationOptions(**request)


def test_options_coercion():
    options = GenerationOptions(
        surname="李",
        gender="female",
        style="poetic",
        source="poetry",
        preferred_elements=["水", "水", "木"],
        max_results=500,
    )
    assert options.gender is Gender.FEMALE
    assert options.style is Style.POETIC
    assert options.source is Source.POETRY
    assert options.preferred_elements == ("水", "木")
    assert options.max_results == 100


def test_score_cache_is_used():
    score_cache = MemoryCache(max_size=100)
    name_generator = NameGenerator(score_cache=score_cache)
    first = name_generator.score_name("李明", "李", "明")
    second = name_generator.score_name("李明", "李", "明")
    assert first is second
    assert score_cache.stats().hits == 1


def test_thin_pool_falls_back_without_raising():
    tiny_pool = CharacterPool(
        given_rows=[
            ("明", "míng", 2, 8, 8, "日", "火", "光明、明亮、吉祥", 200, 1),
            ("华", "huá", 2, 6, 14, "十", "水", "华丽、华美、繁荣、才华", 300, 2),
            ("清", "qīng", 1, 11, 12, "氵", "水", "清澈、清白、清雅", 300, 3),
        ]
    )
    name_generator = NameGenerator(pool=tiny_pool)
    names = name_generator.generate_names(GenerationOptions(surname="李", gender=Gender.MALE, max_results=10))
    assert len(names) <= 3
    assert len({name.full_name for name in names}) == len(names)


def test_style_bonus(name_generator):
    name = name_generator.generate_names(GenerationOptions(surname="李", gender=Gender.NEUTRAL, max_results=1))[0]
    assert style_bonus(name, Style.CLASSIC) == 0

    poetic = dataclasses.replace(name, inspiration=Inspiration(InspirationKind.POETRY, "静夜思", "床前明月光"))
    assert style_bonus(poetic, Style.POETIC) == 6
    idiom = dataclasses.replace(name, inspiration=Inspiration(InspirationKind.IDIOM, "明月清风", "月儿明亮"))
    assert style_bonus(idiom, Style.POETIC) == 0

    melodic = dataclasses.replace(name, score=dataclasses.replace(name.score, phonetic_score=85, meaning_score=84))
    assert style_bonus(melodic, Style.ELEGANT) == 3
    assert style_bonus(melodic, Style.MODERN) == 0
    assert ranking_score(melodic, Style.ELEGANT) == melodic.score.overall + 3

    with pytest.raises(ValueError):
        style_bonus(name, "classic")


def test_build_explanation(name_generator):
    pool = name_generator.pool
    score = name_generator.score_name("李明月", "李", "明月")
    given = [pool.require("明"), pool.require("月")]

    average = dataclasses.replace(score, bazi_score=50, wuge_score=50, phonetic_score=50, overall=70)
    plain = build_explanation(given, average)
    assert plain == '此名由"明"(光明、明亮、吉祥)、"月"(明月、皎洁)组成。'

    excellent = dataclasses.replace(score, bazi_score=85, wuge_score=81, phonetic_score=80, overall=92)
    text = build_explanation(given, excellent, Inspiration(InspirationKind.POETRY, "静夜思", "床前明月光，疑是地上霜"))
    assert "灵感出自《静夜思》：“床前明月光，疑是地上霜”。" in text
    assert "八字契合度优秀" in text
    assert "五格配置吉祥" in text
    assert "音韵和谐" not in text  # 80 is not above 80
    assert text.endswith("综合评分极高，是一个非常优秀的名字！")

    good = dataclasses.replace(score, bazi_score=50, wuge_score=50, phonetic_score=50, overall=80)
    assert build_explanation(given, good).endswith("综合评分良好，是一个不错的选择。")


def test_split_full_name():
    assert split_full_name("李明") == ("李", "明")
    assert split_full_name("欧阳明华") == ("欧阳", "明华")
    assert split_full_name("司马光") == ("司马", "光")
    assert split_full_name("欧阳") == ("欧", "阳")


def test_module_level_helpers():
    names = generator_module.generate_names(GenerationOptions(surname="孙", gender="male", character_count=1))
    assert names
    score = generator_module.score_name("欧阳明华")
    assert score == generator_module.score_name("欧阳明华", surname="欧阳", given_name="明华")
    assert score.wuge.grid.heaven == 15 + 17


def test_config_result_limit_caps_output():
    config = NamingConfig.create_default().with_random_seed(7).with_result_limit(3)
    names = NameGenerator(config).generate_names(GenerationOptions(surname="李", gender=Gender.NEUTRAL))
    assert 0 < len(names) <= 3


def test_empty_name_cannot_be_scored():
    with pytest.raises(InvalidOptionsError):
        generator_module.score_name("")

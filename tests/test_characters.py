"""
Character pool lookups and the poetry / classics / idiom inspiration sources.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from qiming.character_data import COMPOUND_SURNAMES, GIVEN_NAME_ROWS, SURNAME_MEANING, SURNAME_ROWS
from qiming.characters import CharacterPool, SourceTermProvider, normalize_pinyin
from qiming.errors import CharacterNotFoundError
from qiming.models import InspirationKind, Source
from qiming.naming_data import FIVE_ELEMENTS, TOP_100_SURNAMES
from qiming.source_data import IDIOM_ROWS, POETRY_ROWS

PINYIN_NORMALIZATION_CASES = [
    ("míng", "ming"),
    ("Lǐ", "li"),
    ("lǚ", "lu"),
    ("ming2", "ming"),
    ("  Hua ", "hua"),
]


@pytest.fixture(scope="session")
def pool():
    return CharacterPool()


@pytest.fixture(scope="session")
def sources():
    return SourceTermProvider()


def test_normalize_pinyin():
    for raw, expected in PINYIN_NORMALIZATION_CASES:
        assert normalize_pinyin(raw) == expected, f"{raw!r}: expected {expected!r}"


def test_pool_sizes(pool):
    stats = pool.stats()
    assert len(pool) == len(GIVEN_NAME_ROWS) == stats.total
    assert stats.surnames == len(SURNAME_ROWS)
    assert sum(stats.by_element.values()) == stats.total
    assert set(stats.by_element) == set(FIVE_ELEMENTS)


def test_rows_are_well_formed(pool):
    for character in pool.all():
        assert character.element in FIVE_ELEMENTS, f"{character.symbol}: unknown element {character.element}"
        assert character.canonical_strokes >= 1, f"{character.symbol}: no strokes"
        assert 1 <= character.tone <= 5, f"{character.symbol}: bad tone {character.tone}"
        assert character.meaning, f"{character.symbol}: empty meaning"


def test_every_common_surname_resolves(pool):
    for surname in TOP_100_SURNAMES + COMPOUND_SURNAMES:
        for symbol in surname:
            assert symbol in pool, f"surname character {symbol} missing from pool"


def test_surname_rows_do_not_shadow_given_rows(pool):
    # 林 is both a surname and a given-name candidate
    assert pool.by_char("林").meaning != SURNAME_MEANING
    assert pool.by_char("王").meaning == SURNAME_MEANING
    assert pool.by_char("王") not in pool.all()


def test_require(pool):
    assert pool.require("明").element == "火"
    with pytest.raises(CharacterNotFoundError) as excinfo:
        pool.require("龘")
    assert excinfo.value.symbol == "龘"
    assert pool.by_char("龘") is None


def test_by_elements_keeps_requested_order(pool):
    characters = pool.by_elements(["水", "木", "水"])
    elements = [c.element for c in characters]
    assert set(elements) == {"水", "木"}
    # every 水 character precedes every 木 character
    assert elements.index("木") == elements.count("水")
    assert pool.by_elements([]) == ()


def test_by_pinyin(pool):
    symbols = {c.symbol for c in pool.by_pinyin("Míng")}
    assert {"明", "铭"} <= symbols


def test_han_chars_include_surnames(pool):
    han_chars = pool.han_chars()
    assert "李" in han_chars
    assert "明" in han_chars


def test_gender_classification(pool):
    assert CharacterPool.is_feminine(pool.require("姗"))  # 女 radical
    assert CharacterPool.is_masculine(pool.require("刚"))
    assert CharacterPool.is_masculine(pool.require("明"))


def test_source_collections(sources):
    assert len(sources.verses) == len(POETRY_ROWS)
    assert len(sources.idioms) == len(IDIOM_ROWS)
    assert sources.classics
    assert all(verse.is_classic for verse in sources.classics)
    assert not any(verse.is_classic for verse in sources.verses if verse.source in ("唐诗", "宋词"))


def test_allowed_chars(sources):
    assert sources.allowed_chars(Source.ANY) == frozenset()
    poetry = sources.allowed_chars(Source.POETRY)
    classics = sources.allowed_chars(Source.CLASSICS)
    assert "明" in poetry
    assert classics <= poetry
    assert "风" in sources.allowed_chars(Source.IDIOMS)


def test_find_inspiration(sources):
    inspiration = sources.find_inspiration(Source.POETRY, "明月")
    assert inspiration.kind is InspirationKind.POETRY
    assert inspiration.title == "静夜思"
    assert inspiration.author == "李白"
    assert "明月" in inspiration.quote

    idiom = sources.find_inspiration(Source.IDIOMS, "明月")
    assert idiom.kind is InspirationKind.IDIOM
    assert idiom.title == "明月清风"

    assert sources.find_inspiration(Source.CLASSICS, "明月") is None
    assert sources.find_inspiration(Source.POETRY, "") is None
    assert sources.find_inspiration(Source.ANY, "龘") is None

"""
Character pool and inspiration source providers.

``CharacterPool`` indexes the static rows of ``qiming.character_data`` by symbol, element and toneless
pinyin. Only given-name rows are generation candidates; surname rows exist so stroke counts and elements
can be resolved for the surname too.

``SourceTermProvider`` answers the two questions the generator asks of the poetry/classics/idiom
collections: which characters a source allows, and which entry (if any) a finished name can cite.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from qiming.character_data import GIVEN_NAME_ROWS, SURNAME_MEANING, SURNAME_ROWS
from qiming.errors import CharacterNotFoundError
from qiming.models import Character, Idiom, Inspiration, InspirationKind, PoetryVerse, Source
from qiming.naming_data import (
    FEMININE_CHARACTERS,
    FEMININE_RADICALS,
    FIVE_ELEMENTS,
    MASCULINE_CHARACTERS,
    MASCULINE_RADICALS,
    NEGATIVE_KEYWORDS,
    POSITIVE_KEYWORDS,
)
from qiming.source_data import CLASSIC_SOURCES, IDIOM_ROWS, POETRY_ROWS


def normalize_pinyin(pinyin: str) -> str:
    """Toneless lowercase ASCII pinyin: ``"Míng" -> "ming"``, ``"lǚ" -> "lu"``."""
    normalized = unicodedata.normalize("NFKD", pinyin)
    return "".join(c for c in normalized if not unicodedata.combining(c) and not c.isdigit()).strip().lower()


def has_positive_meaning(character: Character) -> bool:
    return any(c in POSITIVE_KEYWORDS for c in character.meaning)


def has_negative_meaning(character: Character) -> bool:
    return any(c in NEGATIVE_KEYWORDS for c in character.meaning)


@dataclass(frozen=True)
class PoolStats:
    total: int
    surnames: int
    by_element: Mapping[str, int]


# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER POOL
# ════════════════════════════════════════════════════════════════════════════════


class CharacterPool:
    """Read-only lookups over the character rows."""

    def __init__(self, given_rows: Iterable[tuple] = GIVEN_NAME_ROWS, surname_rows: Iterable[tuple] = SURNAME_ROWS):
        self._candidates: Tuple[Character, ...] = tuple(Character(*row) for row in given_rows)

        by_char: Dict[str, Character] = {c.symbol: c for c in self._candidates}
        surname_count = 0
        for symbol, pinyin, tone, strokes, kangxi, radical, element in surname_rows:
            surname_count += 1
            if symbol not in by_char:
                by_char[symbol] = Character(symbol, pinyin, tone, strokes, kangxi, radical, element, SURNAME_MEANING, 0)
        self._by_char = by_char
        self._surname_count = surname_count

        by_element: Dict[str, List[Character]] = {element: [] for element in FIVE_ELEMENTS}
        by_pinyin: Dict[str, List[Character]] = {}
        for character in self._candidates:
            by_element[character.element].append(character)
            by_pinyin.setdefault(normalize_pinyin(character.pinyin), []).append(character)
        self._by_element = {element: tuple(chars) for element, chars in by_element.items()}
        self._by_pinyin = {key: tuple(chars) for key, chars in by_pinyin.items()}

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._by_char

    def all(self) -> Tuple[Character, ...]:
        """Given-name candidates in table order."""
        return self._candidates

    def by_char(self, symbol: str) -> Optional[Character]:
        return self._by_char.get(symbol)

    def require(self, symbol: str) -> Character:
        character = self._by_char.get(symbol)
        if character is None:
            raise CharacterNotFoundError(symbol)
        return character

    def by_elements(self, elements: Iterable[str]) -> Tuple[Character, ...]:
        """Candidates of any of ``elements``, grouped in the order the elements are given."""
        result: List[Character] = []
        for element in dict.fromkeys(elements):
            result.extend(self._by_element.get(element, ()))
        return tuple(result)

    def by_pinyin(self, romanization: str) -> Tuple[Character, ...]:
        return self._by_pinyin.get(normalize_pinyin(romanization), ())

    def han_chars(self) -> FrozenSet[str]:
        return frozenset(self._by_char)

    def stats(self) -> PoolStats:
        return PoolStats(
            total=len(self._candidates),
            surnames=self._surname_count,
            by_element=MappingProxyType({element: len(chars) for element, chars in self._by_element.items()}),
        )

    @staticmethod
    def is_feminine(character: Character) -> bool:
        return (
            character.symbol in FEMININE_CHARACTERS
            or has_positive_meaning(character)
            or character.symbol in FEMININE_RADICALS
            or character.radical in FEMININE_RADICALS
        )

    @staticmethod
    def is_masculine(character: Character) -> bool:
        return (
            character.symbol in MASCULINE_CHARACTERS
            or has_positive_meaning(character)
            or character.symbol in MASCULINE_RADICALS
            or character.radical in MASCULINE_RADICALS
        )


# ════════════════════════════════════════════════════════════════════════════════
# INSPIRATION SOURCES
# ════════════════════════════════════════════════════════════════════════════════


def _contains_all(suitable: FrozenSet[str], chars: Sequence[str]) -> bool:
    return bool(chars) and all(c in suitable for c in chars)


class SourceTermProvider:
    """Poetry, classics and idioms with their suitable-character sets."""

    def __init__(self, poetry_rows: Iterable[tuple] = POETRY_ROWS, idiom_rows: Iterable[tuple] = IDIOM_ROWS):
        self._verses: Tuple[PoetryVerse, ...] = tuple(
            PoetryVerse(verse_id, source, title, author, dynasty, verse, frozenset(chars))
            for verse_id, source, title, author, dynasty, verse, chars in poetry_rows
        )
        self._idioms: Tuple[Idiom, ...] = tuple(
            Idiom(idiom, pinyin, meaning, source, category, frozenset(chars))
            for idiom, pinyin, meaning, source, category, chars in idiom_rows
        )
        self._classics = tuple(v for v in self._verses if v.source in CLASSIC_SOURCES)

    @property
    def verses(self) -> Tuple[PoetryVerse, ...]:
        return self._verses

    @property
    def idioms(self) -> Tuple[Idiom, ...]:
        return self._idioms

    @property
    def classics(self) -> Tuple[PoetryVerse, ...]:
        return self._classics

    def allowed_chars(self, source: Source) -> FrozenSet[str]:
        """Union of suitable characters for a source; empty for ``Source.ANY`` (no restriction)."""
        if source is Source.ANY:
            return frozenset()
        elif source is Source.POETRY:
            entries: Iterable = self._verses
        elif source is Source.CLASSICS:
            entries = self._classics
        elif source is Source.IDIOMS:
            entries = self._idioms
        else:
            raise ValueError(f"Unhandled source: {source}")
        return frozenset(c for entry in entries for c in entry.suitable_chars)

    def find_inspiration(self, source: Source, chars: Sequence[str]) -> Optional[Inspiration]:
        """First entry whose suitable characters include every given-name character."""
        if source is Source.IDIOMS:
            for idiom in self._idioms:
                if _contains_all(idiom.suitable_chars, chars):
                    return Inspiration(kind=InspirationKind.IDIOM, title=idiom.idiom, quote=idiom.meaning)
            return None
        elif source is Source.CLASSICS:
            verses = self._classics
        elif source in (Source.POETRY, Source.ANY):
            verses = self._verses
        else:
            raise ValueError(f"Unhandled source: {source}")

        for verse in verses:
            if _contains_all(verse.suitable_chars, chars):
                return Inspiration(kind=InspirationKind.POETRY, title=verse.title, quote=verse.verse, author=verse.author)
        return None

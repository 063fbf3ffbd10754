"""
Name generation: filter the character pool, enumerate candidates, score, rank.

```python
import datetime
from qiming import GenerationOptions, generate_names

options = GenerationOptions(surname="李", gender="female", birth_date=datetime.date(2020, 5, 17), birth_hour=9)
for name in generate_names(options)[:5]:
    print(name.full_name, name.pinyin, name.score.overall, name.explanation)
```

Single-character given names are enumerated in pool order and are fully deterministic. Two-character
names are enumerated over a shuffled pool; the shuffle uses the generator's ``random.Random``, which is
seeded from ``NamingConfig.random_seed`` (or passed in directly) when reproducible output is wanted.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from qiming.bazi import CalendarService, chart_for_date
from qiming.cache import MemoryCache, NameCache, chart_cache_key, name_score_cache_key
from qiming.character_data import COMPOUND_SURNAMES
from qiming.characters import CharacterPool, SourceTermProvider
from qiming.config import NamingConfig
from qiming.models import (
    Character,
    Chart,
    Gender,
    GeneratedName,
    GenerationOptions,
    Inspiration,
    InspirationKind,
    NameScore,
    Source,
    Style,
)
from qiming.phonetics import RomanizationService
from qiming.scorer import NameScorer

# Style bonuses applied only when ranking
POETIC_POETRY_BONUS = 6
ELEGANT_PHONETIC_BONUS = 3
MODERN_MEANING_BONUS = 2
STYLE_BONUS_THRESHOLD = 85

# Explanation remarks
EXCELLENT_COMPONENT_SCORE = 80
EXCELLENT_OVERALL_HIGH = 90
EXCELLENT_OVERALL_LOW = 80


def style_bonus(name: GeneratedName, style: Style) -> int:
    if style is Style.POETIC:
        inspiration = name.inspiration
        return POETIC_POETRY_BONUS if inspiration and inspiration.kind is InspirationKind.POETRY else 0
    elif style is Style.ELEGANT:
        return ELEGANT_PHONETIC_BONUS if name.score.phonetic_score >= STYLE_BONUS_THRESHOLD else 0
    elif style is Style.MODERN:
        return MODERN_MEANING_BONUS if name.score.meaning_score >= STYLE_BONUS_THRESHOLD else 0
    elif style is Style.CLASSIC:
        return 0
    raise ValueError(f"Unhandled style: {style}")


def ranking_score(name: GeneratedName, style: Style) -> int:
    return name.score.overall + style_bonus(name, style)


def build_explanation(
    given_characters: Sequence[Character], score: NameScore, inspiration: Optional[Inspiration] = None
) -> str:
    meanings = "、".join(f'"{c.symbol}"({c.meaning})' for c in given_characters)
    parts = [f"此名由{meanings}组成。"]

    if inspiration is not None:
        if inspiration.kind is InspirationKind.POETRY:
            parts.append(f"灵感出自《{inspiration.title}》：“{inspiration.quote}”。")
        elif inspiration.kind is InspirationKind.IDIOM:
            parts.append(f'取意于成语"{inspiration.title}"。')

    if score.bazi_score > EXCELLENT_COMPONENT_SCORE:
        parts.append("八字契合度优秀，有助于补足命局。")
    if score.wuge_score > EXCELLENT_COMPONENT_SCORE:
        parts.append("五格配置吉祥，数理大吉。")
    if score.phonetic_score > EXCELLENT_COMPONENT_SCORE:
        parts.append("音韵和谐，读音流畅优美。")

    if score.overall >= EXCELLENT_OVERALL_HIGH:
        parts.append("综合评分极高，是一个非常优秀的名字！")
    elif score.overall >= EXCELLENT_OVERALL_LOW:
        parts.append("综合评分良好，是一个不错的选择。")

    return "".join(parts)


def split_full_name(full_name: str) -> Tuple[str, str]:
    """Split into (surname, given name); known compound surnames take two characters."""
    if len(full_name) > 2 and full_name[:2] in COMPOUND_SURNAMES:
        return full_name[:2], full_name[2:]
    return full_name[:1], full_name[1:]


# ════════════════════════════════════════════════════════════════════════════════
# NAME GENERATOR
# ════════════════════════════════════════════════════════════════════════════════


class NameGenerator:
    """Candidate search over the character pool with memoized charts and scores."""

    def __init__(
        self,
        config: Optional[NamingConfig] = None,
        pool: Optional[CharacterPool] = None,
        sources: Optional[SourceTermProvider] = None,
        romanizer: Optional[RomanizationService] = None,
        calendar: Optional[CalendarService] = None,
        chart_cache: Optional[NameCache] = None,
        score_cache: Optional[NameCache] = None,
        rng: Optional[random.Random] = None,
    ):
        self._config = config or NamingConfig.create_default()
        self._pool = pool or CharacterPool()
        self._sources = sources or SourceTermProvider()
        self._romanizer = romanizer or RomanizationService(self._config)
        self._calendar = calendar or CalendarService()
        self._scorer = NameScorer(self._config, self._pool, self._romanizer)
        self._chart_cache = (
            chart_cache
            if chart_cache is not None
            else MemoryCache(self._config.chart_cache_size, self._config.chart_cache_ttl)
        )
        self._score_cache = (
            score_cache
            if score_cache is not None
            else MemoryCache(self._config.score_cache_size, self._config.score_cache_ttl)
        )
        self._rng = rng or random.Random(self._config.random_seed)
        self._initialized = False

    @property
    def config(self) -> NamingConfig:
        return self._config

    @property
    def pool(self) -> CharacterPool:
        return self._pool

    @property
    def sources(self) -> SourceTermProvider:
        return self._sources

    def _ensure_initialized(self) -> None:
        """Romanize the pool once, before the first search."""
        if not self._initialized:
            self._romanizer.build_cache(self._pool.han_chars())
            self._initialized = True

    def _result_limit(self, options: GenerationOptions) -> int:
        return min(options.max_results, self._config.max_results_limit)

    # ── Charts and scores ────────────────────────────────────────────────────

    def chart_for(self, options: GenerationOptions) -> Optional[Chart]:
        if options.birth_date is None:
            return None

        hour = 0 if options.birth_hour is None else options.birth_hour
        key = chart_cache_key(options.birth_date, hour)
        chart = self._chart_cache.get(key)
        if chart is None:
            chart = chart_for_date(options.birth_date, hour, self._calendar)
            self._chart_cache.set(key, chart)
        return chart

    def score_name(
        self,
        full_name: str,
        surname: str,
        given_name: str,
        characters: Optional[Sequence[Character]] = None,
        chart: Optional[Chart] = None,
    ) -> NameScore:
        self._ensure_initialized()
        key = name_score_cache_key(surname, given_name, chart.signature if chart is not None else None)
        score = self._score_cache.get(key)
        if score is None:
            score = self._scorer.score_name(full_name, surname, given_name, characters, chart)
            self._score_cache.set(key, score)
        return score

    # ── Filtering ────────────────────────────────────────────────────────────

    def _apply_source_filter(self, source: Source, candidates: List[Character]) -> List[Character]:
        allowed = self._sources.allowed_chars(source)
        if not allowed:
            return candidates
        filtered = [c for c in candidates if c.symbol in allowed]
        return filtered if len(filtered) >= self._config.min_source_candidates else candidates

    def _apply_style_filter(self, style: Style, candidates: List[Character]) -> List[Character]:
        if style is Style.MODERN:
            return [c for c in candidates if c.frequency < self._config.modern_frequency_cap]
        elif style in (Style.CLASSIC, Style.POETIC, Style.ELEGANT):
            return candidates
        raise ValueError(f"Unhandled style: {style}")

    def _apply_gender_filter(
        self, gender: Gender, candidates: List[Character], base: Sequence[Character]
    ) -> List[Character]:
        if gender is Gender.FEMALE:
            matches = self._pool.is_feminine
        elif gender is Gender.MALE:
            matches = self._pool.is_masculine
        elif gender is Gender.NEUTRAL:
            return candidates
        else:
            raise ValueError(f"Unhandled gender: {gender}")

        filtered = [c for c in candidates if matches(c)]
        if len(filtered) < self._config.min_gender_candidates:
            filtered = [c for c in base if matches(c)]
        return filtered

    def filter_candidates(self, options: GenerationOptions, target_elements: Sequence[str]) -> List[Character]:
        """Narrow the pool to at most ``max_results * candidate_multiplier`` characters."""
        start_time = time.perf_counter()
        base = self._pool.all()
        candidates = list(base)

        if options.source is not Source.ANY:
            candidates = self._apply_source_filter(options.source, candidates)

        if target_elements:
            kept = {c.symbol for c in candidates}
            candidates = [c for c in self._pool.by_elements(target_elements) if c.symbol in kept]

        if options.avoid_elements:
            avoid = set(options.avoid_elements)
            candidates = [c for c in candidates if c.element not in avoid]

        candidates = self._apply_style_filter(options.style, candidates)
        candidates = self._apply_gender_filter(options.gender, candidates, base)

        if len(candidates) < self._config.min_candidates:
            logging.warning(f"Too few candidate characters ({len(candidates)}), using fallback set")
            candidates = list(base[: self._config.fallback_pool_size])

        candidates = candidates[: self._result_limit(options) * self._config.candidate_multiplier]
        logging.debug(f"Filtered {len(candidates)} candidates in {time.perf_counter() - start_time:.4f}s")
        return candidates

    # ── Enumeration ──────────────────────────────────────────────────────────

    def _enumerate(
        self, candidates: List[Character], character_count: int, target_count: int
    ) -> Iterator[Tuple[Character, ...]]:
        if character_count == 1:
            for character in candidates:
                yield (character,)
            return

        shuffled = list(candidates)
        self._rng.shuffle(shuffled)
        for i in range(min(len(shuffled), target_count)):
            for j in range(i + 1, len(shuffled)):
                yield (shuffled[i], shuffled[j])

    def generate_names(self, options: GenerationOptions) -> List[GeneratedName]:
        """
        Ranked name suggestions for one request.

        Never raises for a thin pool (the result may be shorter than ``max_results``, even empty);
        ``InvalidDateError`` from the birth chart propagates.
        """
        start_time = time.perf_counter()
        self._ensure_initialized()

        chart = self.chart_for(options)
        target_elements = options.preferred_elements or (chart.favorable_elements if chart is not None else ())
        candidates = self.filter_candidates(options, target_elements)

        surname = options.surname
        surname_characters = tuple(c for c in (self._pool.by_char(s) for s in surname) if c is not None)
        max_results = self._result_limit(options)
        target_count = max_results * self._config.target_count_multiplier

        results: List[GeneratedName] = []
        seen: Set[str] = set()
        for given_characters in self._enumerate(candidates, options.character_count, target_count):
            if len(results) >= target_count:
                break

            given_name = "".join(c.symbol for c in given_characters)
            full_name = surname + given_name
            if full_name in seen:
                continue
            seen.add(full_name)

            characters = surname_characters + given_characters
            score = self.score_name(full_name, surname, given_name, characters, chart)
            if score.overall < self._config.min_acceptable_score:
                continue

            inspiration = self._sources.find_inspiration(options.source, given_name)
            results.append(
                GeneratedName(
                    full_name=full_name,
                    surname=surname,
                    given_name=given_name,
                    pinyin=self._pinyin(surname, given_characters),
                    characters=characters,
                    score=score,
                    explanation=build_explanation(given_characters, score, inspiration),
                    inspiration=inspiration,
                )
            )

        results.sort(key=lambda name: ranking_score(name, options.style), reverse=True)
        logging.debug(
            f"Generated {len(results)} names from {len(seen)} candidates in {time.perf_counter() - start_time:.4f}s"
        )
        return results[:max_results]

    def _pinyin(self, surname: str, given_characters: Sequence[Character]) -> str:
        """Stored readings, space-joined; surname characters outside the pool are romanized."""
        syllables = []
        for symbol in surname:
            character = self._pool.by_char(symbol)
            syllables.append(character.pinyin if character is not None else self._romanizer.display_pinyin(symbol))
        syllables.extend(c.pinyin for c in given_characters)
        return " ".join(syllables)


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE TEST
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test() -> None:
    """Time cold and warm generation runs."""
    import datetime

    generator = NameGenerator(NamingConfig.create_default().with_random_seed(2024))
    requests = [
        GenerationOptions(surname="李", gender=Gender.FEMALE, character_count=2, max_results=20),
        GenerationOptions(surname="王", gender=Gender.MALE, birth_date=datetime.date(1990, 12, 23), birth_hour=8),
        GenerationOptions(surname="张", gender=Gender.NEUTRAL, style=Style.POETIC, source=Source.POETRY),
        GenerationOptions(surname="欧阳", gender=Gender.FEMALE, character_count=1, style=Style.MODERN),
    ]

    print(f"Testing {len(requests)} requests (cold caches)...")
    start = time.perf_counter()
    cold_counts = [len(generator.generate_names(options)) for options in requests]
    cold_time = time.perf_counter() - start
    print(f"Cold: {sum(cold_counts)} names in {cold_time:.3f}s")

    print(f"\nTesting {len(requests)} requests x 10 (warm caches)...")
    start = time.perf_counter()
    for _ in range(10):
        for options in requests:
            generator.generate_names(options)
    warm_time = (time.perf_counter() - start) / 10
    print(f"Warm: {warm_time:.3f}s per round")

    print(f"\nCache benefit: {cold_time / warm_time:.1f}x speedup with repeated requests")
    for name in generator.generate_names(requests[0])[:3]:
        print(f"  {name.full_name} ({name.pinyin}) {name.score.overall}/100")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

_global_generator: Optional[NameGenerator] = None


def _get_global_generator() -> NameGenerator:
    """Get or create the global generator instance."""
    global _global_generator
    if _global_generator is None:
        _global_generator = NameGenerator()
    return _global_generator


def generate_names(options: GenerationOptions) -> List[GeneratedName]:
    return _get_global_generator().generate_names(options)


def score_name(
    full_name: str,
    surname: Optional[str] = None,
    given_name: Optional[str] = None,
    characters: Optional[Sequence[Character]] = None,
    chart: Optional[Chart] = None,
) -> NameScore:
    """Score one name; surname and given name are split off ``full_name`` when not given."""
    if surname is None:
        surname, rest = split_full_name(full_name)
        given_name = rest if given_name is None else given_name
    elif given_name is None:
        given_name = full_name[len(surname):]
    return _get_global_generator().score_name(full_name, surname, given_name, characters, chart)


if __name__ == "__main__":
    run_performance_test()

"""
Composite name scoring.

    overall = round(0.30 * bazi + 0.25 * wuge + 0.20 * phonetic + 0.25 * meaning)

The element (bazi) component needs a birth chart; without one it is the neutral default (70).
The meaning component is a keyword/frequency/difficulty heuristic over the given-name characters.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from qiming.bazi import score_elements
from qiming.characters import CharacterPool, has_negative_meaning, has_positive_meaning
from qiming.config import NamingConfig
from qiming.cache import MemoryCache, phonetics_cache_key, wuge_cache_key
from qiming.errors import CharacterNotFoundError, InvalidOptionsError
from qiming.models import Character, Chart, ComparisonResult, MinimumStandardsResult, NameScore, ScoreRating
from qiming.phonetics import RomanizationService, analyze_phonetics, phonetic_score
from qiming.wuge import analyze_wuge

SCORE_WEIGHTS = {
    "bazi": 0.30,
    "wuge": 0.25,
    "phonetics": 0.20,
    "meaning": 0.25,
}

RATING_THRESHOLDS = (
    (90, ScoreRating.EXCELLENT),
    (80, ScoreRating.GOOD),
    (70, ScoreRating.AVERAGE),
    (60, ScoreRating.FAIR),
)

# Meaning heuristic
MEANING_BASE_SCORE = 60
MEANING_EMPTY_SCORE = 50
POSITIVE_MEANING_BONUS = 20
NEGATIVE_MEANING_PENALTY = 30
TOO_COMMON_PENALTY = 5
GOOD_FREQUENCY_BONUS = 15
ACCEPTABLE_FREQUENCY_BONUS = 10
TOO_RARE_PENALTY = 10
HSK_EASY_BONUS = 10
HSK_HARD_PENALTY = 5

TOO_COMMON_MAX = 100
GOOD_FREQUENCY_MAX = 1000
ACCEPTABLE_FREQUENCY_MAX = 3000
TOO_RARE_MIN = 5000
HSK_EASY_MAX = 4
HSK_HARD_MIN = 5

# Minimum standards
MIN_PASSING_OVERALL = 60
MIN_WUGE_SCORE = 50
MIN_PHONETIC_SCORE = 50
MIN_MEANING_SCORE = 50

ISSUE_LOW_OVERALL = "综合评分过低"
ISSUE_POOR_WUGE = "五格数理不佳"
ISSUE_HOMOPHONE = "存在不良谐音"
ISSUE_POOR_PHONETICS = "音韵不够和谐"
ISSUE_POOR_MEANING = "字义品质欠佳"

DEFAULT_STROKE_COUNT = 1

SCORE_RULE = "━" * 28


# ════════════════════════════════════════════════════════════════════════════════
# MEANING HEURISTIC
# ════════════════════════════════════════════════════════════════════════════════


def _character_meaning_score(character: Character) -> int:
    score = MEANING_BASE_SCORE
    if has_positive_meaning(character):
        score += POSITIVE_MEANING_BONUS
    if has_negative_meaning(character):
        score -= NEGATIVE_MEANING_PENALTY

    # Common but not top-100
    frequency = character.frequency
    if 0 < frequency < TOO_COMMON_MAX:
        score -= TOO_COMMON_PENALTY
    elif TOO_COMMON_MAX <= frequency < GOOD_FREQUENCY_MAX:
        score += GOOD_FREQUENCY_BONUS
    elif GOOD_FREQUENCY_MAX <= frequency < ACCEPTABLE_FREQUENCY_MAX:
        score += ACCEPTABLE_FREQUENCY_BONUS
    elif frequency > TOO_RARE_MIN:
        score -= TOO_RARE_PENALTY

    if character.hsk_level:
        if character.hsk_level <= HSK_EASY_MAX:
            score += HSK_EASY_BONUS
        elif character.hsk_level > HSK_HARD_MIN:
            score -= HSK_HARD_PENALTY

    return score


def meaning_score(characters: Sequence[Character]) -> int:
    if not characters:
        return MEANING_EMPTY_SCORE
    average = sum(_character_meaning_score(c) for c in characters) / len(characters)
    return max(0, min(100, round(average)))


def score_rating(overall: int) -> ScoreRating:
    for threshold, rating in RATING_THRESHOLDS:
        if overall >= threshold:
            return rating
    return ScoreRating.POOR


# ════════════════════════════════════════════════════════════════════════════════
# NAME SCORER
# ════════════════════════════════════════════════════════════════════════════════


class NameScorer:
    """Runs the four analyses on one name and weights them into a ``NameScore``."""

    def __init__(
        self,
        config: Optional[NamingConfig] = None,
        pool: Optional[CharacterPool] = None,
        romanizer: Optional[RomanizationService] = None,
        analysis_cache: Optional[MemoryCache] = None,
    ):
        self._config = config or NamingConfig.create_default()
        self._pool = pool or CharacterPool()
        self._romanizer = romanizer or RomanizationService(self._config)
        # Grid and phonetic analyses are shared across names with the same strokes or reading
        self._analysis_cache = (
            analysis_cache
            if analysis_cache is not None
            else MemoryCache(self._config.score_cache_size, self._config.score_cache_ttl)
        )

    @property
    def pool(self) -> CharacterPool:
        return self._pool

    def _ensure_romanizer_built(self) -> None:
        if not self._romanizer.is_built:
            self._romanizer.build_cache(self._pool.han_chars())

    def _stroke_count(self, symbol: str, characters: Sequence[Character]) -> int:
        for character in characters:
            if character.symbol == symbol:
                return character.canonical_strokes
        try:
            return self._pool.require(symbol).canonical_strokes
        except CharacterNotFoundError as e:
            logging.warning(f"{e}; using {DEFAULT_STROKE_COUNT} stroke")
            return DEFAULT_STROKE_COUNT

    def resolve(self, text: str) -> List[Character]:
        """Pool records for each character of ``text`` that the pool knows."""
        resolved = []
        for symbol in text:
            character = self._pool.by_char(symbol)
            if character is not None:
                resolved.append(character)
        return resolved

    def score_name(
        self,
        full_name: str,
        surname: str,
        given_name: str,
        characters: Optional[Sequence[Character]] = None,
        chart: Optional[Chart] = None,
    ) -> NameScore:
        """
        Score a full name.

        ``characters`` are the resolved records of the name (surname and given name); when omitted
        they are looked up in the pool. Unknown characters count as one stroke.
        """
        if not surname or full_name != surname + given_name:
            raise InvalidOptionsError(f"cannot score {full_name!r} as surname {surname!r} + given name {given_name!r}")

        self._ensure_romanizer_built()
        if characters is None:
            characters = self.resolve(full_name)

        surname_strokes = [self._stroke_count(c, characters) for c in surname]
        given_strokes = [self._stroke_count(c, characters) for c in given_name]
        wuge = self._analysis_cache.get_or_set(
            wuge_cache_key(surname_strokes, given_strokes), lambda: analyze_wuge(surname_strokes, given_strokes)
        )

        phonetics = self._analysis_cache.get_or_set(
            phonetics_cache_key(full_name),
            lambda: analyze_phonetics(full_name, self._romanizer.syllables(full_name)),
        )
        phonetic = phonetic_score(phonetics)

        bazi = self._config.default_bazi_score
        if chart is not None:
            bazi = score_elements(chart, [c.element for c in characters])

        # One record per position; a compound surname may share a character with the given name
        if len(characters) == len(full_name):
            given_characters = list(characters[len(surname):])
        else:
            given_characters = self.resolve(given_name)
        meaning = meaning_score(given_characters)

        overall = round(
            bazi * SCORE_WEIGHTS["bazi"]
            + wuge.overall_score * SCORE_WEIGHTS["wuge"]
            + phonetic * SCORE_WEIGHTS["phonetics"]
            + meaning * SCORE_WEIGHTS["meaning"]
        )

        return NameScore(
            overall=overall,
            rating=score_rating(overall),
            bazi_score=bazi,
            wuge_score=wuge.overall_score,
            phonetic_score=phonetic,
            meaning_score=meaning,
            wuge=wuge,
            phonetics=phonetics,
            chart=chart,
        )


# ════════════════════════════════════════════════════════════════════════════════
# VERDICTS AND REPORTING
# ════════════════════════════════════════════════════════════════════════════════


def meets_minimum_standards(score: NameScore) -> MinimumStandardsResult:
    issues = []
    if score.overall < MIN_PASSING_OVERALL:
        issues.append(ISSUE_LOW_OVERALL)
    if score.wuge_score < MIN_WUGE_SCORE:
        issues.append(ISSUE_POOR_WUGE)
    if score.phonetics.has_homophone_issue:
        issues.append(ISSUE_HOMOPHONE)
    if score.phonetic_score < MIN_PHONETIC_SCORE:
        issues.append(ISSUE_POOR_PHONETICS)
    if score.meaning_score < MIN_MEANING_SCORE:
        issues.append(ISSUE_POOR_MEANING)
    return MinimumStandardsResult(issues=tuple(issues))


def compare_names(first: NameScore, second: NameScore) -> ComparisonResult:
    """Ties go to the first name."""
    return ComparisonResult(
        winner=1 if first.overall >= second.overall else 2,
        difference=abs(first.overall - second.overall),
    )


def format_name_score(score: NameScore) -> str:
    rating = score.rating
    return "\n".join(
        [
            f"{rating.emoji} 综合评分: {score.overall}/100 ({rating.label})",
            rating.description,
            "",
            "详细评分:",
            SCORE_RULE,
            f"📊 八字契合度: {score.bazi_score}/100 (权重 30%)",
            f"📐 五格数理: {score.wuge_score}/100 (权重 25%)",
            f"🎵 音韵和谐: {score.phonetic_score}/100 (权重 20%)",
            f"✍️  字义品质: {score.meaning_score}/100 (权重 25%)",
            SCORE_RULE,
        ]
    )

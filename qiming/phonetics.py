"""
Phonetic analysis of a full name: tone harmony, readability and homophone deny-lists.

Romanization goes through ``pypinyin``. ``RomanizationService`` keeps a Han→syllable map (TONE3 form,
e.g. ``ming2``) for the character pool so the generator's hot loop never calls into pypinyin; anything
outside the map is converted live. The map can be persisted to a pickle file in ``NamingConfig.cache_dir``.
"""

from __future__ import annotations

import logging
import pickle
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pypinyin

from qiming.config import NamingConfig
from qiming.models import PhoneticAnalysis
from qiming.naming_data import (
    COMPLEX_INITIALS,
    PINYIN_INITIALS,
    PROBLEMATIC_FULL_NAMES,
    PROBLEMATIC_PAIRS,
    PROBLEMATIC_SYLLABLES,
    RHYME_CATEGORIES,
    TONE_CATEGORIES,
    TONE_PATTERNS_BAD,
    TONE_PATTERNS_GOOD,
    VERY_COMPLEX_SYLLABLES,
)

NEUTRAL_TONE = 5

# Tone harmony
BASE_TONE_HARMONY = 70
MONOTONE_PENALTY = 20
TONE_VARIETY_BONUS = 10
MIN_DISTINCT_TONES_FOR_BONUS = 3
GOOD_PATTERN_BONUS = 15
BAD_PATTERN_PENALTY = 15
REPEATED_FALLING_PENALTY = 10
FALLING_START_PENALTY = 5

# Readability
BASE_READABILITY = 80
COMFORTABLE_LENGTH_BONUS = 10
EXCESSIVE_LENGTH_PENALTY = 20
COMPLEX_INITIAL_PENALTY = 2
VERY_COMPLEX_SYLLABLE_PENALTY = 5
SMOOTH_TRANSITION_BONUS = 5
MAX_SMOOTH_TONE_STEP = 2

# Composite score
HARMONY_WEIGHT = 0.4
READABILITY_WEIGHT = 0.4
HOMOPHONE_ADJUSTMENT = 20


# ════════════════════════════════════════════════════════════════════════════════
# ROMANIZATION
# ════════════════════════════════════════════════════════════════════════════════


class RomanizationService:
    """Han → tone-numbered pinyin, cached per character."""

    def __init__(self, config: Optional[NamingConfig] = None):
        self._config = config or NamingConfig.create_default()
        self._cache: Dict[str, str] = {}
        self._cache_built = False

    @property
    def is_built(self) -> bool:
        return self._cache_built

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def build_cache(self, han_chars: Iterable[str], force_rebuild: bool = False) -> bool:
        """Load the persisted map if there is one, otherwise romanize ``han_chars`` and persist."""
        if self._cache_built and not force_rebuild:
            return True

        cache_file = self._config.romanization_cache_file
        if cache_file is not None and cache_file.exists() and not force_rebuild:
            if self._load_from_pickle(cache_file):
                return True

        return self._build_from_chars(han_chars, cache_file)

    def clear_cache(self) -> None:
        """Clear in-memory map and delete the pickle file."""
        self._cache.clear()
        self._cache_built = False

        cache_file = self._config.romanization_cache_file
        if cache_file is not None and cache_file.exists():
            try:
                cache_file.unlink()
            except OSError as e:
                logging.warning(f"Could not delete romanization cache file: {e}")

    def _load_from_pickle(self, cache_file: Path) -> bool:
        try:
            start_time = time.perf_counter()
            with cache_file.open("rb") as f:
                self._cache = pickle.load(f)
            self._cache_built = True
            logging.debug(
                f"Loaded romanization cache for {len(self._cache)} characters in "
                f"{time.perf_counter() - start_time:.3f}s"
            )
            return True
        except (pickle.PickleError, OSError, EOFError) as e:
            logging.warning(f"Failed to load romanization cache: {e}. Rebuilding...")
            return False

    def _build_from_chars(self, han_chars: Iterable[str], cache_file: Optional[Path]) -> bool:
        start_time = time.perf_counter()
        new_cache = {}
        failed_chars = []

        for char in set(han_chars):
            try:
                syllables = pypinyin.lazy_pinyin(char, style=pypinyin.Style.TONE3, neutral_tone_with_five=True)
                if syllables:
                    new_cache[char] = syllables[0]
            except (AttributeError, ValueError, TypeError) as e:
                failed_chars.append((char, str(e)))

        if failed_chars:
            logging.warning(f"Failed to romanize {len(failed_chars)} characters during cache build")

        self._cache = new_cache
        if cache_file is not None:
            self._save_to_pickle(cache_file)

        self._cache_built = True
        build_time = time.perf_counter() - start_time
        logging.debug(f"Built romanization cache for {len(self._cache)} characters in {build_time:.3f}s")
        return True

    def _save_to_pickle(self, cache_file: Path) -> None:
        try:
            with cache_file.open("wb") as f:
                pickle.dump(self._cache, f, protocol=pickle.HIGHEST_PROTOCOL)
        except (pickle.PickleError, OSError) as e:
            logging.warning(f"Failed to save romanization cache: {e}")

    def syllables(self, han_str: str) -> List[str]:
        """One TONE3 syllable per character, e.g. ``"李明" -> ["li3", "ming2"]``."""
        try:
            return [self._cache[c] for c in han_str]
        except KeyError:
            try:
                return pypinyin.lazy_pinyin(han_str, style=pypinyin.Style.TONE3, neutral_tone_with_five=True)
            except (AttributeError, ValueError, TypeError) as e:
                logging.warning(f"Pypinyin failed for '{han_str}': {e}")
                return list(han_str)

    def display_pinyin(self, han_str: str) -> str:
        """Space-separated pinyin with tone marks, for display."""
        return " ".join(pypinyin.lazy_pinyin(han_str, style=pypinyin.Style.TONE))


# ════════════════════════════════════════════════════════════════════════════════
# SYLLABLE HELPERS
# ════════════════════════════════════════════════════════════════════════════════


def strip_tone(syllable: str) -> str:
    return syllable.rstrip("0123456789").lower()


def syllable_tone(syllable: str) -> int:
    """Trailing tone digit, neutral (5) when absent."""
    if syllable and syllable[-1] in "12345":
        return int(syllable[-1])
    return NEUTRAL_TONE


def tone_sequence(syllables: Sequence[str]) -> Tuple[int, ...]:
    return tuple(syllable_tone(s) for s in syllables)


def tone_category(tone: int) -> Optional[str]:
    """平 or 仄; the neutral tone belongs to neither."""
    return TONE_CATEGORIES.get(tone)


def has_tone_balance(tones: Sequence[int]) -> bool:
    categories = {tone_category(t) for t in tones} - {None}
    return len(categories) == 2


def split_initial(syllable: str) -> Tuple[str, str]:
    bare = strip_tone(syllable)
    for initial in PINYIN_INITIALS:
        if bare.startswith(initial) and len(bare) > len(initial):
            return initial, bare[len(initial):]
    return "", bare


def rhyme_category(syllable: str) -> Optional[str]:
    _, final = split_initial(syllable)
    # After j/q/x/y, a written "u" is ü
    if final.startswith("u") and strip_tone(syllable)[:1] in ("j", "q", "x", "y"):
        final = "v" + final[1:]
    for category, finals in RHYME_CATEGORIES.items():
        if final in finals:
            return category
    return None


def is_rhyme(first: str, second: str) -> bool:
    category = rhyme_category(first)
    return category is not None and category == rhyme_category(second)


# ════════════════════════════════════════════════════════════════════════════════
# ANALYSIS
# ════════════════════════════════════════════════════════════════════════════════


def tone_harmony(tones: Sequence[int]) -> int:
    if not tones:
        return BASE_TONE_HARMONY

    score = BASE_TONE_HARMONY
    distinct = len(set(tones))
    if distinct == 1:
        score -= MONOTONE_PENALTY
    if distinct >= MIN_DISTINCT_TONES_FOR_BONUS:
        score += TONE_VARIETY_BONUS

    # Surname + two-character given name: the given name's own transition
    if len(tones) == 3:
        given_pattern = (tones[1], tones[2])
        if given_pattern in TONE_PATTERNS_GOOD:
            score += GOOD_PATTERN_BONUS
        if given_pattern in TONE_PATTERNS_BAD:
            score -= BAD_PATTERN_PENALTY

    if sum(1 for t in tones if t == 4) >= 2:
        score -= REPEATED_FALLING_PENALTY
    if tones[0] == 4:
        score -= FALLING_START_PENALTY

    return max(0, min(100, score))


def readability(syllables: Sequence[str], tones: Sequence[int]) -> int:
    score = BASE_READABILITY
    count = len(syllables)
    if count in (2, 3):
        score += COMFORTABLE_LENGTH_BONUS
    elif count > 4:
        score -= EXCESSIVE_LENGTH_PENALTY

    for syllable in syllables:
        bare = strip_tone(syllable)
        if bare.startswith(COMPLEX_INITIALS):
            score -= COMPLEX_INITIAL_PENALTY
        if bare in VERY_COMPLEX_SYLLABLES:
            score -= VERY_COMPLEX_SYLLABLE_PENALTY

    if any(abs(a - b) <= MAX_SMOOTH_TONE_STEP for a, b in zip(tones, tones[1:])):
        score += SMOOTH_TRANSITION_BONUS

    return max(0, min(100, score))


def check_homophones(full_name: str, syllables: Sequence[str]) -> Tuple[str, ...]:
    """Human-readable warnings for deny-listed sound-alikes; never raises."""
    bare = [strip_tone(s) for s in syllables]
    warnings = []

    for i, syllable in enumerate(bare):
        if syllable in PROBLEMATIC_SYLLABLES:
            char = full_name[i] if i < len(full_name) else syllable
            warnings.append(f'"{char}" 的拼音 "{syllable}" 可能与 "{PROBLEMATIC_SYLLABLES[syllable]}" 谐音')

    for first, second in zip(bare, bare[1:]):
        pair = first + second
        if pair in PROBLEMATIC_PAIRS:
            warnings.append(f'姓名连读 "{pair}" 可能与 "{PROBLEMATIC_PAIRS[pair]}" 谐音')

    whole = "".join(bare)
    if whole in PROBLEMATIC_FULL_NAMES:
        warnings.append(f'全名拼音 "{whole}" 可能与 "{PROBLEMATIC_FULL_NAMES[whole]}" 谐音')

    return tuple(warnings)


def analyze_phonetics(full_name: str, syllables: Sequence[str]) -> PhoneticAnalysis:
    tones = tone_sequence(syllables)
    return PhoneticAnalysis(
        syllables=tuple(syllables),
        tones=tones,
        tone_harmony=tone_harmony(tones),
        readability=readability(syllables, tones),
        warnings=check_homophones(full_name, syllables),
    )


def analyze_name_phonetics(full_name: str, romanizer: Optional[RomanizationService] = None) -> PhoneticAnalysis:
    romanizer = romanizer or _get_global_romanizer()
    return analyze_phonetics(full_name, romanizer.syllables(full_name))


def phonetic_score(analysis: PhoneticAnalysis) -> int:
    adjustment = -HOMOPHONE_ADJUSTMENT if analysis.has_homophone_issue else HOMOPHONE_ADJUSTMENT
    score = analysis.tone_harmony * HARMONY_WEIGHT + analysis.readability * READABILITY_WEIGHT + adjustment
    return max(0, min(100, round(score)))


def format_phonetic_analysis(analysis: PhoneticAnalysis) -> str:
    text = (
        "音韵分析:\n"
        f"声调模式: {'-'.join(str(t) for t in analysis.tones)}\n"
        f"声调和谐度: {analysis.tone_harmony}/100\n"
        f"朗读流畅度: {analysis.readability}/100"
    )
    if analysis.has_homophone_issue:
        return text + "\n\n⚠️ 谐音提示:\n" + "\n".join(analysis.warnings)
    return text + "\n\n✓ 无不良谐音"


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL ROMANIZER
# ════════════════════════════════════════════════════════════════════════════════

_global_romanizer: Optional[RomanizationService] = None


def _get_global_romanizer() -> RomanizationService:
    global _global_romanizer
    if _global_romanizer is None:
        _global_romanizer = RomanizationService()
    return _global_romanizer

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from qiming.models import MAX_RESULTS_LIMIT

ROMANIZATION_CACHE_FILENAME = "han_pinyin_tone_cache.pkl"


@dataclass(frozen=True)
class NamingConfig:
    """Immutable engine configuration; build with ``create_default()`` and derive with ``with_*``."""

    # Optional directory for the persisted Han→pinyin cache (None = memory only)
    cache_dir: Optional[Path]

    # Memoization caches
    chart_cache_size: int
    chart_cache_ttl: float
    score_cache_size: int
    score_cache_ttl: float

    # Seed for the shuffle before pair enumeration (None = fresh entropy each run)
    random_seed: Optional[int]

    # Upper bound on names returned per request
    max_results_limit: int

    # Candidate search knobs
    min_acceptable_score: int
    candidate_multiplier: int
    target_count_multiplier: int
    min_source_candidates: int
    min_gender_candidates: int
    min_candidates: int
    fallback_pool_size: int
    modern_frequency_cap: int

    # Score used for the element component when no birth date is known
    default_bazi_score: int

    @classmethod
    def create_default(cls) -> "NamingConfig":
        return cls(
            cache_dir=None,
            chart_cache_size=1000,
            chart_cache_ttl=24 * 60 * 60.0,
            score_cache_size=5000,
            score_cache_ttl=7 * 24 * 60 * 60.0,
            random_seed=None,
            max_results_limit=MAX_RESULTS_LIMIT,
            min_acceptable_score=50,
            candidate_multiplier=5,
            target_count_multiplier=2,
            min_source_candidates=10,
            min_gender_candidates=20,
            min_candidates=10,
            fallback_pool_size=50,
            modern_frequency_cap=3000,
            default_bazi_score=70,
        )

    @property
    def romanization_cache_file(self) -> Optional[Path]:
        if self.cache_dir is None:
            return None
        return self.cache_dir / ROMANIZATION_CACHE_FILENAME

    def with_cache_dir(self, new_cache_dir: Optional[Path]) -> "NamingConfig":
        if new_cache_dir is not None:
            new_cache_dir.mkdir(parents=True, exist_ok=True)
        return replace(self, cache_dir=new_cache_dir)

    def with_cache_limits(
        self,
        chart_cache_size: Optional[int] = None,
        score_cache_size: Optional[int] = None,
        chart_cache_ttl: Optional[float] = None,
        score_cache_ttl: Optional[float] = None,
    ) -> "NamingConfig":
        return replace(
            self,
            chart_cache_size=self.chart_cache_size if chart_cache_size is None else chart_cache_size,
            score_cache_size=self.score_cache_size if score_cache_size is None else score_cache_size,
            chart_cache_ttl=self.chart_cache_ttl if chart_cache_ttl is None else chart_cache_ttl,
            score_cache_ttl=self.score_cache_ttl if score_cache_ttl is None else score_cache_ttl,
        )

    def with_random_seed(self, seed: Optional[int]) -> "NamingConfig":
        return replace(self, random_seed=seed)

    def with_result_limit(self, limit: int) -> "NamingConfig":
        if limit < 1:
            raise ValueError(f"max_results_limit must be at least 1, got {limit}")
        return replace(self, max_results_limit=limit)

"""
BaZi (Four Pillars) chart computation and five-element analysis.

The solar→sexagenary conversion is delegated to ``lunar_python``; everything after that is fixed
table lookups: each of the eight stem/branch symbols maps to one element, the day pillar's stem is
the day master, and the day master's own count decides which elements a name should carry.

```python
from qiming.bazi import calculate_chart, score_elements

chart = calculate_chart(1990, 12, 23, hour=8)
print(chart.signature, chart.favorable_elements)
score_elements(chart, ["金", "水"])
```
"""

from __future__ import annotations

import datetime
import logging
import re
import time
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from lunar_python import Solar

from qiming.errors import InvalidDateError
from qiming.models import Chart, Pillar
from qiming.naming_data import (
    BRANCH_ELEMENTS,
    ELEMENT_CONTROLLED_BY,
    ELEMENT_GENERATED_BY,
    ELEMENT_GENERATION,
    FIVE_ELEMENTS,
    STEM_ELEMENTS,
    STEM_YIN_YANG,
)

DEFAULT_BIRTH_HOUR = 0
WEAK_DAY_MASTER_THRESHOLD = 2

# Element score for a name against a chart
BASE_ELEMENT_SCORE = 50
FAVORABLE_ELEMENT_BONUS = 20
UNFAVORABLE_ELEMENT_PENALTY = 15
FAVORABLE_VARIETY_BONUS = 10
MIN_DISTINCT_FAVORABLE_FOR_BONUS = 2

_BIRTH_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


# ════════════════════════════════════════════════════════════════════════════════
# CALENDAR CONVERSION
# ════════════════════════════════════════════════════════════════════════════════


class CalendarService:
    """Solar date+hour → four sexagenary pillars, via lunar_python."""

    def validate(self, year: int, month: int, day: int, hour: int) -> datetime.date:
        """Reject impossible dates instead of letting the converter roll them over."""
        try:
            civil_date = datetime.date(year, month, day)
        except (TypeError, ValueError) as e:
            raise InvalidDateError(f"invalid calendar date {year}-{month}-{day}: {e}") from None
        if not isinstance(hour, int) or not 0 <= hour <= 23:
            raise InvalidDateError(f"birth hour must be an integer in 0..23, got {hour!r}")
        return civil_date

    def pillars(self, year: int, month: int, day: int, hour: int = DEFAULT_BIRTH_HOUR) -> Tuple[Pillar, ...]:
        self.validate(year, month, day, hour)

        # Calendar fields, not an instant: no timezone can shift the day
        try:
            lunar = Solar.fromYmdHms(year, month, day, hour, 0, 0).getLunar()
        except Exception as e:
            # lunar_python rejects dates it cannot place, e.g. the 1582 Gregorian gap
            raise InvalidDateError(f"cannot convert {year}-{month}-{day}: {e}") from e
        return (
            Pillar.from_ganzhi(lunar.getYearInGanZhi()),
            Pillar.from_ganzhi(lunar.getMonthInGanZhi()),
            Pillar.from_ganzhi(lunar.getDayInGanZhi()),
            Pillar.from_ganzhi(lunar.getTimeInGanZhi()),
        )


def parse_birth_date(text: str) -> datetime.date:
    """Parse ``YYYY-MM-DD`` into a date, raising ``InvalidDateError`` for anything else."""
    match = _BIRTH_DATE_PATTERN.match(text.strip()) if text else None
    if not match:
        raise InvalidDateError(f"birth date must look like YYYY-MM-DD, got {text!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"invalid calendar date {text!r}: {e}") from None


# ════════════════════════════════════════════════════════════════════════════════
# ELEMENT BALANCE
# ════════════════════════════════════════════════════════════════════════════════


def tally_elements(pillars: Iterable[Pillar]) -> Dict[str, int]:
    """Count elements over every stem and branch; four pillars always sum to 8."""
    balance = {element: 0 for element in FIVE_ELEMENTS}
    for pillar in pillars:
        balance[STEM_ELEMENTS[pillar.stem]] += 1
        balance[BRANCH_ELEMENTS[pillar.branch]] += 1
    return balance


def _dedupe(elements: Iterable[str]) -> Tuple[str, ...]:
    seen: List[str] = []
    for element in elements:
        if element not in seen:
            seen.append(element)
    return tuple(seen)


def analyze_favorable_elements(
    day_master_element: str, balance: Mapping[str, int]
) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """
    Favorable and unfavorable elements relative to the day master.

    Weak day master (own count below 2): support it with itself and what generates it; avoid what
    controls it and what it generates. Strong day master: give it an outlet (what it generates) and a
    check (what controls it); avoid itself and what generates it.
    """
    generator = ELEMENT_GENERATED_BY[day_master_element]
    controller = ELEMENT_CONTROLLED_BY[day_master_element]
    outlet = ELEMENT_GENERATION[day_master_element]

    if balance[day_master_element] < WEAK_DAY_MASTER_THRESHOLD:
        favorable = [day_master_element, generator]
        unfavorable = [controller, outlet]
    else:
        favorable = [outlet, controller]
        unfavorable = [day_master_element, generator]

    return _dedupe(favorable), _dedupe(unfavorable)


def build_chart(year: Pillar, month: Pillar, day: Pillar, hour: Pillar) -> Chart:
    """Derive the tally and favorability of four known pillars."""
    balance = tally_elements((year, month, day, hour))
    favorable, unfavorable = analyze_favorable_elements(STEM_ELEMENTS[day.stem], balance)
    return Chart(
        year=year,
        month=month,
        day=day,
        hour=hour,
        elements=balance,
        favorable_elements=favorable,
        unfavorable_elements=unfavorable,
    )


def calculate_chart(
    year: int,
    month: int,
    day: int,
    hour: Optional[int] = None,
    calendar: Optional[CalendarService] = None,
) -> Chart:
    """Compute the full chart of a civil birth date and hour (default 0)."""
    start_time = time.perf_counter()
    calendar = calendar or _get_global_calendar()
    pillars = calendar.pillars(year, month, day, DEFAULT_BIRTH_HOUR if hour is None else hour)
    chart = build_chart(*pillars)
    logging.debug(f"Computed chart {chart.signature} in {time.perf_counter() - start_time:.4f}s")
    return chart


def chart_for_date(
    birth_date: datetime.date, hour: Optional[int] = None, calendar: Optional[CalendarService] = None
) -> Chart:
    return calculate_chart(birth_date.year, birth_date.month, birth_date.day, hour, calendar)


def is_weak_day_master(chart: Chart) -> bool:
    return chart.day_master_strength < WEAK_DAY_MASTER_THRESHOLD


# ════════════════════════════════════════════════════════════════════════════════
# SCORING AND REPORTING
# ════════════════════════════════════════════════════════════════════════════════


def score_elements(chart: Chart, name_elements: Sequence[str]) -> int:
    """Compatibility (0-100) of a name's character elements with a chart."""
    score = BASE_ELEMENT_SCORE
    for element in name_elements:
        if element in chart.favorable_elements:
            score += FAVORABLE_ELEMENT_BONUS
        if element in chart.unfavorable_elements:
            score -= UNFAVORABLE_ELEMENT_PENALTY

    distinct_favorable = {element for element in name_elements if element in chart.favorable_elements}
    if len(distinct_favorable) >= MIN_DISTINCT_FAVORABLE_FOR_BONUS:
        score += FAVORABLE_VARIETY_BONUS

    return max(0, min(100, score))


def element_percentages(balance: Mapping[str, int]) -> Dict[str, int]:
    total = sum(balance.values())
    if total == 0:
        return {element: 0 for element in FIVE_ELEMENTS}
    return {element: round(balance.get(element, 0) / total * 100) for element in FIVE_ELEMENTS}


def format_chart(chart: Chart) -> str:
    tally = " ".join(f"{element}: {chart.elements[element]}" for element in FIVE_ELEMENTS)
    return "\n".join(
        [
            f"年柱: {chart.year}",
            f"月柱: {chart.month}",
            f"日柱: {chart.day} (日主: {chart.day_master}, {STEM_YIN_YANG[chart.day_master]}{chart.day_master_element})",
            f"时柱: {chart.hour}",
            "",
            "五行分布:",
            tally,
            "",
            f"喜用神: {', '.join(chart.favorable_elements)}",
            f"忌神: {', '.join(chart.unfavorable_elements)}",
        ]
    )


def describe_element_analysis(chart: Chart) -> str:
    element = chart.day_master_element
    strength = chart.day_master_strength
    favorable_list = "、".join(chart.favorable_elements)
    favorable_choice = "或".join(chart.favorable_elements)

    if is_weak_day_master(chart):
        return (
            f"日主{chart.day_master}属{element}，命局中{element}较弱（仅{strength}个），需要{favorable_list}来扶助。"
            f"起名时宜选用五行属{favorable_choice}的字，以增强命局平衡。"
        )
    return (
        f"日主{chart.day_master}属{element}，命局中{element}较旺（有{strength}个），需要{favorable_list}来平衡。"
        f"起名时宜选用五行属{favorable_choice}的字，以调和五行。"
    )


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CALENDAR INSTANCE
# ════════════════════════════════════════════════════════════════════════════════

_global_calendar: Optional[CalendarService] = None


def _get_global_calendar() -> CalendarService:
    """Get or create the process-wide calendar service."""
    global _global_calendar
    if _global_calendar is None:
        _global_calendar = CalendarService()
    return _global_calendar

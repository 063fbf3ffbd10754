"""
Generate ranked given-name suggestions for a surname from the command line.

    python scripts/generate_names.py --surname 李 --gender female --birth_date 2020-05-17 --birth_hour 9
"""

import argparse
import logging
import sys
from pathlib import Path

from qiming import GenerationOptions, InvalidDateError, InvalidOptionsError, NameGenerator
from qiming.bazi import describe_element_analysis, format_chart, parse_birth_date
from qiming.config import NamingConfig
from qiming.models import Gender, Source, Style

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Recommend Chinese given names for a surname.")
    parser.add_argument("--surname", type=str, required=True, help="Surname, one or two Han characters.")
    parser.add_argument("--gender", type=str, default="neutral", choices=[g.value for g in Gender])
    parser.add_argument("--birth_date", type=str, default=None, help="Birth date as YYYY-MM-DD.")
    parser.add_argument("--birth_hour", type=int, default=None, help="Birth hour 0-23 (default 0).")
    parser.add_argument("--prefer", type=str, default="", help="Preferred elements, e.g. 木水.")
    parser.add_argument("--avoid", type=str, default="", help="Elements to avoid, e.g. 金.")
    parser.add_argument("--style", type=str, default="classic", choices=[s.value for s in Style])
    parser.add_argument("--source", type=str, default="any", choices=[s.value for s in Source])
    parser.add_argument("--count", type=int, default=2, help="Given-name length, 1 or 2.")
    parser.add_argument("--max_results", type=int, default=20, help="Number of names to print.")
    parser.add_argument("--random_seed", type=int, default=None, help="Seed for reproducible two-character runs.")
    parser.add_argument("--cache_dir", type=str, default=None, help="Directory for the persisted pinyin cache.")
    parser.add_argument("--verbose", action="store_true", help="Log timings and fallbacks.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(message)s")

    config = NamingConfig.create_default().with_random_seed(args.random_seed)
    if args.cache_dir:
        config = config.with_cache_dir(Path(args.cache_dir))

    try:
        options = GenerationOptions(
            surname=args.surname,
            gender=args.gender,
            birth_date=parse_birth_date(args.birth_date) if args.birth_date else None,
            birth_hour=args.birth_hour,
            preferred_elements=tuple(args.prefer),
            avoid_elements=tuple(args.avoid),
            style=args.style,
            source=args.source,
            character_count=args.count,
            max_results=args.max_results,
        )
        generator = NameGenerator(config)
        names = generator.generate_names(options)
    except (InvalidDateError, InvalidOptionsError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    chart = generator.chart_for(options)
    if chart is not None:
        print(format_chart(chart))
        print(describe_element_analysis(chart))
        print()

    if not names:
        print("No names met the minimum score.")
    for rank, name in enumerate(names, 1):
        score = name.score
        print(f"{rank:>2}. {name.full_name} ({name.pinyin})  {score.overall}/100 {score.rating.label}")
        print(
            f"    八字 {score.bazi_score}  五格 {score.wuge_score}  音韵 {score.phonetic_score}  字义 {score.meaning_score}"
        )
        print(f"    {name.explanation}")

"""
Print the full analysis of one name: five grids, phonetics, composite score and minimum-standards verdict.
Optionally compare against a second name.
"""

import argparse
import sys

from qiming import InvalidDateError, InvalidOptionsError, NameGenerator
from qiming.bazi import describe_element_analysis, format_chart, parse_birth_date
from qiming.generator import split_full_name
from qiming.models import Gender, GenerationOptions
from qiming.phonetics import format_phonetic_analysis
from qiming.scorer import compare_names, format_name_score, meets_minimum_standards
from qiming.wuge import format_wuge_analysis

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Analyze a Chinese full name.")
    parser.add_argument("--name", type=str, required=True, help="Full name, surname first.")
    parser.add_argument("--surname", type=str, default=None, help="Surname, when it cannot be inferred.")
    parser.add_argument("--compare_with", type=str, default=None, help="Second full name to compare against.")
    parser.add_argument("--birth_date", type=str, default=None, help="Birth date as YYYY-MM-DD.")
    parser.add_argument("--birth_hour", type=int, default=None, help="Birth hour 0-23 (default 0).")
    args = parser.parse_args()

    generator = NameGenerator()

    def split(full_name):
        if args.surname and full_name.startswith(args.surname):
            return args.surname, full_name[len(args.surname):]
        return split_full_name(full_name)

    surname, given_name = split(args.name)
    chart = None
    try:
        if args.birth_date:
            request = GenerationOptions(
                surname=surname,
                gender=Gender.NEUTRAL,
                birth_date=parse_birth_date(args.birth_date),
                birth_hour=args.birth_hour,
            )
            chart = generator.chart_for(request)
    except (InvalidDateError, InvalidOptionsError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    if chart is not None:
        print(format_chart(chart))
        print(describe_element_analysis(chart))
        print()

    score = generator.score_name(args.name, surname, given_name, chart=chart)
    print(f"{args.name} ({' '.join(score.phonetics.syllables)})")
    print(format_wuge_analysis(score.wuge))
    print()
    print(format_phonetic_analysis(score.phonetics))
    print()
    print(format_name_score(score))

    verdict = meets_minimum_standards(score)
    if verdict.meets:
        print("✓ 达到起名基本标准")
    else:
        print("✗ 未达标: " + "、".join(verdict.issues))

    if args.compare_with:
        other_surname, other_given = split(args.compare_with)
        other = generator.score_name(args.compare_with, other_surname, other_given, chart=chart)
        result = compare_names(score, other)
        winner = args.name if result.winner == 1 else args.compare_with
        print(f"\n{args.name} {score.overall} vs {args.compare_with} {other.overall}: {winner} 高出 {result.difference} 分")

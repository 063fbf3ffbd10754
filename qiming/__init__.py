"""qiming: rule-based Chinese given-name recommendation."""

from qiming.errors import CharacterNotFoundError, InvalidDateError, InvalidOptionsError, NamingError
from qiming.generator import NameGenerator, generate_names, score_name
from qiming.models import GeneratedName, GenerationOptions, Gender, NameScore, Source, Style

__all__ = [
    "CharacterNotFoundError",
    "GeneratedName",
    "Gender",
    "GenerationOptions",
    "InvalidDateError",
    "InvalidOptionsError",
    "NameGenerator",
    "NameScore",
    "NamingError",
    "Source",
    "Style",
    "generate_names",
    "score_name",
]

"""
Phonetic analysis: syllable helpers, tone harmony, readability, homophone deny-lists and the
pypinyin-backed romanization cache.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from qiming.config import NamingConfig
from qiming.phonetics import (
    RomanizationService,
    analyze_name_phonetics,
    analyze_phonetics,
    check_homophones,
    format_phonetic_analysis,
    has_tone_balance,
    is_rhyme,
    phonetic_score,
    readability,
    rhyme_category,
    split_initial,
    strip_tone,
    syllable_tone,
    tone_category,
    tone_harmony,
)

# tones -> harmony score
TONE_HARMONY_CASES = [
    ((3, 2, 2), 70),
    ((1, 1, 1), 50),  # monotone
    ((3, 1, 4), 95),  # three tones, good (1, 4) given-name pattern
    ((4, 4, 4), 20),  # monotone, bad pattern, repeated falling, falling start
    ((2, 4), 70),
    ((), 70),
]

RHYME_CASES = [
    ("ming2", "中东"),
    ("hua2", "发花"),
    ("xue2", "乜斜"),  # xue is xüe
    ("yu2", "一七"),  # yu is yü
    ("juan1", "言前"),
    ("yang2", "江阳"),
    ("lan2", "言前"),
    ("hao3", "遥条"),
]

HOMOPHONE_CASES = [
    ("李明", ["li3", "ming2"], 0),
    ("李实", ["li3", "shi2"], 1),
    ("王八", ["wang2", "ba1"], 1),
    ("王财", ["wang2", "cai2"], 1),  # whole name reads wangcai
]


@pytest.fixture(scope="session")
def romanizer():
    service = RomanizationService()
    service.build_cache("李王明华月清风和实")
    return service


def test_syllable_helpers():
    assert strip_tone("Ming2") == "ming"
    assert strip_tone("de") == "de"
    assert syllable_tone("ming2") == 2
    assert syllable_tone("de5") == 5
    assert syllable_tone("de") == 5
    assert tone_category(1) == "平"
    assert tone_category(4) == "仄"
    assert tone_category(5) is None


def test_tone_balance():
    assert has_tone_balance([1, 3])
    assert has_tone_balance([2, 2, 4])
    assert not has_tone_balance([1, 2])
    assert not has_tone_balance([5, 5])


def test_split_initial():
    cases = [("zhang1", ("zh", "ang")), ("ming2", ("m", "ing")), ("ai4", ("", "ai")), ("er2", ("", "er"))]
    for syllable, expected in cases:
        assert split_initial(syllable) == expected, f"{syllable}: expected {expected}"


def test_rhyme_category():
    for syllable, expected in RHYME_CASES:
        assert rhyme_category(syllable) == expected, f"{syllable}: expected {expected}"
    assert is_rhyme("ming2", "qing1")
    assert not is_rhyme("ming2", "hua2")


def test_tone_harmony():
    for tones, expected in TONE_HARMONY_CASES:
        result = tone_harmony(tones)
        assert result == expected, f"tone_harmony({tones}): expected {expected}, got {result}"


def test_readability():
    assert readability(["li3", "ming2"], (3, 2)) == 95
    # zh/sh/ch initials and very complex finals on every syllable
    assert readability(["zhuang1", "shuang1", "chuang1"], (1, 1, 1)) == 74
    assert readability(["a1"] * 5, (1, 4, 1, 4, 1)) == 60


def test_check_homophones():
    for full_name, syllables, expected_count in HOMOPHONE_CASES:
        warnings = check_homophones(full_name, syllables)
        assert len(warnings) == expected_count, f"{full_name}: expected {expected_count} warnings, got {warnings}"


def test_homophone_warning_names_the_character():
    warnings = check_homophones("李实", ["li3", "shi2"])
    assert '"实"' in warnings[0]
    assert "死" in warnings[0]


def test_phonetic_score():
    analysis = analyze_phonetics("李明", ["li3", "ming2"])
    assert analysis.tones == (3, 2)
    assert analysis.tone_harmony == 70
    assert analysis.readability == 95
    assert not analysis.has_homophone_issue
    assert phonetic_score(analysis) == 86

    flagged = analyze_phonetics("李实", ["li3", "shi2"])
    assert flagged.has_homophone_issue
    assert phonetic_score(flagged) < phonetic_score(analysis)


def test_phonetic_score_bounds():
    for tones in [(1, 1, 1), (4, 4, 4), (3, 1, 4), (2, 3)]:
        syllables = [f"shi{t}" for t in tones]
        score = phonetic_score(analyze_phonetics("实" * len(tones), syllables))
        assert 0 <= score <= 100, f"{tones}: score {score} out of range"


def test_romanizer_uses_cache_and_falls_back(romanizer):
    assert romanizer.is_built
    assert romanizer.syllables("李明") == ["li3", "ming2"]
    # 张 is not in the built map and goes through pypinyin directly
    assert romanizer.syllables("张明") == ["zhang1", "ming2"]
    assert romanizer.display_pinyin("李明") == "lǐ míng"


def test_analyze_name_phonetics(romanizer):
    analysis = analyze_name_phonetics("李明", romanizer)
    assert analysis.syllables == ("li3", "ming2")
    assert analysis.tones == (3, 2)
    assert analysis == analyze_phonetics("李明", ["li3", "ming2"])


def test_romanizer_persists_to_cache_dir(tmp_path):
    config = NamingConfig.create_default().with_cache_dir(tmp_path)
    first = RomanizationService(config)
    first.build_cache("李明华")
    assert config.romanization_cache_file.exists()

    second = RomanizationService(config)
    second.build_cache("")
    assert second.cache_size == 3
    assert second.syllables("明华") == ["ming2", "hua2"]

    second.clear_cache()
    assert not second.is_built
    assert not config.romanization_cache_file.exists()


def test_format_phonetic_analysis():
    clean = format_phonetic_analysis(analyze_phonetics("李明", ["li3", "ming2"]))
    assert "声调模式: 3-2" in clean
    assert "✓ 无不良谐音" in clean

    flagged = format_phonetic_analysis(analyze_phonetics("李实", ["li3", "shi2"]))
    assert "谐音提示" in flagged

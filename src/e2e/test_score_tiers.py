# src/e2e/test_score_tiers.py
import pytest

from notehint.models import SearchConfiguration
from notehint.search import (
    FuzzyScorer,
    SubstringScorer,
    score,
    scorer_for,
)


@pytest.mark.parametrize(
    "filename, term",
    [
        ("Project Alpha", "project"),
        ("Project Alpha", "ECT AL"),
        ("OB相关插件", "相关"),
        ("x", "x"),
    ],
)
def test_contiguous_substring_scores_100(filename, term):
    assert score(filename, term) == 100


def test_ordered_words_score_80():
    assert score("OB相关插件", "OB 插件") == 80
    assert score("Meeting notes for Monday", "meeting monday") == 80


def test_unordered_words_score_60():
    assert score("插件 for OB", "OB 插件") == 60
    assert score("Monday meeting", "meeting monday") == 60


def test_missing_word_scores_0():
    assert score("Monday meeting", "meeting friday") == 0
    assert score("anything", "") == 0


def test_whitespace_only_term_never_reaches_word_tiers():
    assert score("ab", "   ") == 0


def test_sequence_tier_does_not_reuse_filename_text():
    # "ana" twice would need to overlap inside "banana"; the single
    # left-to-right cursor cannot re-use text, so only the set tier holds
    assert score("banana", "ana ana") == 60
    assert score("ana banana", "ana ana") == 80


def test_repeated_run_of_spaces_in_term_still_splits():
    assert score("alpha beta gamma", "alpha    gamma") == 80


def test_fuzzy_scorer_uses_stripped_term():
    s = FuzzyScorer("Project")
    assert s("ProjectAlpha") == 100
    assert s("Other") == 0


def test_substring_scorer_matches_raw_or_stripped():
    s = SubstringScorer("插件 Project", "Project")
    assert s("Project A") == 100
    assert s("插件 Project notes") == 100
    assert s("OB Project") == 100
    assert s("Proj") == 0


def test_substring_scorer_is_binary():
    s = SubstringScorer("ob 插件", "ob 插件")
    assert s("插件 for OB") == 0


def test_scorer_for_picks_strategy_from_config():
    assert isinstance(scorer_for("a", "a", SearchConfiguration()), FuzzyScorer)
    assert isinstance(scorer_for("a", "a", SearchConfiguration(fuzzy_matching=False)), SubstringScorer)

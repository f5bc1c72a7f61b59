"""Tests for domain classification and the relief-probability rules."""

import pytest

from legal_insight.scoring.fairness import normalize_text
from legal_insight.scoring.jurisprudence import (
    CASE_TYPES,
    analyze_jurisprudence,
    predict_prob,
    select_case_type,
    word_count,
)


def test_case_types_in_table_order():
    assert CASE_TYPES == ("Contractual", "Criminal", "Procedural", "Family", "Cyber")


def test_word_count_keeps_edge_tokens():
    assert word_count("") == 1
    assert word_count("murder weapon") == 2
    assert word_count(" a b ") == 4


def test_criminal_scores_by_density():
    result = analyze_jurisprudence("murder weapon")
    assert result.case_type == "Criminal"
    assert result.scores["Criminal"] == pytest.approx(2 / 1.2)
    assert result.scores["Contractual"] == 0


def test_substring_matching():
    # "it" fires inside "with"
    result = analyze_jurisprudence("with")
    assert result.scores["Cyber"] > 0
    assert result.case_type == "Cyber"


def test_no_keywords_defaults_to_procedural():
    result = analyze_jurisprudence("nothing to see here")
    assert result.case_type == "Procedural"
    assert set(result.scores) == set(CASE_TYPES)
    assert all(score == 0 for score in result.scores.values())


def test_empty_text_defaults_to_procedural():
    assert analyze_jurisprudence("").case_type == "Procedural"


def test_tie_broken_by_table_order():
    assert analyze_jurisprudence("agreement police").case_type == "Contractual"


def test_select_case_type_all_equal_nonzero():
    scores = {name: 0.5 for name in CASE_TYPES}
    assert select_case_type(scores) == "Procedural"


def test_select_case_type_picks_max():
    scores = {name: 0.0 for name in CASE_TYPES}
    scores["Family"] = 0.3
    scores["Cyber"] = 0.3
    assert select_case_type(scores) == "Family"


class TestPredictProb:

    def test_base_probability(self):
        assert predict_prob("nothing relevant") == pytest.approx(0.5)

    def test_negative_rule(self, murder_case):
        assert predict_prob(murder_case.lower()) == pytest.approx(0.2)

    def test_require_all_rule_needs_every_term(self):
        assert predict_prob("there was delay") == pytest.approx(0.5)
        assert predict_prob("delay in lodging the fir") == pytest.approx(0.65)

    def test_rule_fires_once_per_group(self):
        assert predict_prob("murder under section 302") == pytest.approx(0.2)

    def test_clamped_at_zero(self):
        text = "murder rape ndps habitual absconding threat terror"
        assert predict_prob(text) == 0.0

    def test_clamped_at_one(self):
        text = "first-time medical co-accused got bail civil settlement juvenile"
        assert predict_prob(text) == 1.0

    def test_case_type_does_not_change_result(self, mitigation_case):
        text = mitigation_case.lower()
        assert predict_prob(text, "Criminal") == predict_prob(text, "Family")

    def test_empty(self):
        assert predict_prob("") == pytest.approx(0.5)


def test_relief_deltas_sum_exactly():
    text = normalize_text(
        "The applicant is a first-time offender with no criminal record and a medical "
        "condition, seeking bail under Section 437."
    )
    prob = predict_prob(text)
    assert prob >= 0.9
    assert prob == 0.9

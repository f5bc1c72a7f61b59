"""Tests for bias normalisation and evidence strength scoring."""

import pytest

from legal_insight.scoring.evidence import BASE_SCORE, calculate_strength, has_objective_evidence
from legal_insight.scoring.fairness import normalize_text


class TestNormalizeText:

    def test_lowercases_and_removes_bias_words(self):
        assert normalize_text("Clearly, the EVIL accused   obviously lied.") == ", the accused lied."

    def test_whole_words_only(self):
        assert normalize_text("The evildoer was unclearly described") == "the evildoer was unclearly described"

    def test_collapses_whitespace(self):
        assert normalize_text("  a\n\tb   c  ") == "a b c"

    def test_empty(self):
        assert normalize_text("") == ""


class TestCalculateStrength:

    def test_no_evidence_only_base_detail(self):
        result = calculate_strength("nothing to see here")
        assert result.score == pytest.approx(BASE_SCORE)
        assert result.details == ["Base legal standing (+0.30)"]
        assert not has_objective_evidence(result.details)

    def test_feature_contribution_capped(self):
        result = calculate_strength("witness witness witness witness witness")
        assert result.details[1] == "Found 5 witness(s) (+0.40)"
        assert result.score == pytest.approx(0.70)

    def test_low_weight_features(self):
        result = calculate_strength("hearing on 5 march 2020 and again on 12/08/2021")
        assert result.details == ["Base legal standing (+0.30)", "Found 2 date(s) (+0.20)"]
        assert result.score == pytest.approx(0.50)

    def test_details_follow_table_order(self):
        result = calculate_strength("the witness relied on section 437 and a surety bond")
        features = [d.split(" ")[2] for d in result.details[1:]]
        assert features == ["citation(s)", "monetary(s)", "witness(s)"]
        assert has_objective_evidence(result.details)

    def test_score_capped_at_one(self):
        text = (
            "section 437 section 438 rs. 5000 surety on 1 jan 2020 affidavit petition "
            "witness testimony first-time medical delay"
        )
        result = calculate_strength(text)
        assert result.score == pytest.approx(1.0)
        assert len(result.details) == 7

    def test_empty_text(self):
        result = calculate_strength("")
        assert result.score == pytest.approx(BASE_SCORE)
        assert len(result.details) == 1

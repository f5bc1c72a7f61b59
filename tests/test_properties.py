"""Totality, determinism and bounds checks over awkward inputs."""

import pytest

from conftest import EDGE_INPUTS, JUDGMENT_SAMPLE, MITIGATION_CASE, MURDER_CASE
from legal_insight.engine import assess_bail_risk, extract_document_structure, process
from legal_insight.parsing.structure import MAX_FACTS
from legal_insight.scoring.jurisprudence import CASE_TYPES

SAMPLES = EDGE_INPUTS + [JUDGMENT_SAMPLE, MITIGATION_CASE, MURDER_CASE]


@pytest.mark.parametrize("text", SAMPLES)
def test_extraction_is_total(text):
    result = extract_document_structure(text)
    assert result.meta.court
    assert len(result.struct.facts) <= MAX_FACTS
    assert result.laws == sorted(set(result.laws))


@pytest.mark.parametrize("text", SAMPLES)
def test_bail_assessment_is_total_and_bounded(text):
    decision = assess_bail_risk(text)
    assert decision.outcome in ("GRANTED", "DISMISSED")
    assert 65.0 <= decision.confidence <= 95.0
    assert 0.30 <= decision.evidence_score <= 1.0
    assert 0.0 <= decision.ml_probability <= 1.0
    assert decision.case_type in CASE_TYPES
    assert set(decision.type_scores) == set(CASE_TYPES)
    assert decision.evidence_log[0] == "Base legal standing (+0.30)"


@pytest.mark.parametrize("text", [JUDGMENT_SAMPLE, MITIGATION_CASE, ""])
def test_pipelines_are_deterministic(text):
    assert extract_document_structure(text) == extract_document_structure(text)
    assert assess_bail_risk(text) == assess_bail_risk(text)


def test_process_alias():
    assert process(JUDGMENT_SAMPLE) == extract_document_structure(JUDGMENT_SAMPLE)


def test_records_are_frozen():
    decision = assess_bail_risk(MURDER_CASE)
    with pytest.raises(Exception):
        decision.outcome = "GRANTED"

"""Public entry points of the legal insight engine.

Two pure, synchronous pipelines over plain text:

 - extract_document_structure(text) -> DocumentExtraction
     header metadata, statutory citations, facts / issues / arguments
 - assess_bail_risk(text) -> BailDecision
     normalize -> evidence strength -> domain -> relief probability -> decision

Both are total over every str input, including "", and share no state, so
they may be called concurrently without coordination.
"""
from __future__ import annotations

import logging

from legal_insight.parsing.header_extractor import extract_header_info
from legal_insight.parsing.statute_extractor import extract_clean_laws
from legal_insight.parsing.structure import intelligent_structure
from legal_insight.schemas import BailDecision, DocumentExtraction
from legal_insight.scoring.decision import decide, extract_entities, select_threshold
from legal_insight.scoring.evidence import calculate_strength
from legal_insight.scoring.fairness import normalize_text
from legal_insight.scoring.jurisprudence import analyze_jurisprudence, predict_prob

logger = logging.getLogger(__name__)


def extract_document_structure(raw_text: str) -> DocumentExtraction:
    text = raw_text or ""
    return DocumentExtraction(
        meta=extract_header_info(text),
        laws=extract_clean_laws(text),
        struct=intelligent_structure(text),
    )


process = extract_document_structure


def assess_bail_risk(raw_case_text: str) -> BailDecision:
    raw = raw_case_text or ""
    clean = normalize_text(raw)

    evidence = calculate_strength(clean)
    jurisprudence = analyze_jurisprudence(clean)
    ml_probability = predict_prob(clean, jurisprudence.case_type)
    threshold = select_threshold(jurisprudence.case_type, clean)
    outcome, confidence, final_score = decide(ml_probability, evidence.score, threshold)

    logger.debug(
        f"Bail assessment: {outcome} ({confidence:.1f}%) type={jurisprudence.case_type} "
        f"final={final_score:.3f} threshold={threshold}"
    )
    return BailDecision(
        outcome=outcome,
        confidence=confidence,
        evidence_log=evidence.details,
        evidence_score=evidence.score,
        case_type=jurisprudence.case_type,
        type_scores=jurisprudence.scores,
        entities=extract_entities(raw),
        ml_probability=ml_probability,
        final_score=final_score,
        threshold=threshold,
    )

__all__ = ['extract_document_structure', 'assess_bail_risk', 'process']

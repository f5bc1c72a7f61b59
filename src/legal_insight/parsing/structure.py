"""Sentence-level segmentation of judgment bodies into facts, issues and arguments.

Each sentence lands in at most one bucket. Issue cues are checked first, then
argument cues, then fact cues; sentences with no cue are dropped.
"""
from __future__ import annotations

import logging
import re
from typing import List

from legal_insight.schemas import DocumentStructure

logger = logging.getLogger(__name__)

MAX_FACTS = 8
MIN_ISSUE_LENGTH = 20

SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+[\"']?|[^.!?]+\Z")
NUMBERED_PARA_RE = re.compile(r"(?=\n\d+\.\s)")
BULLET_PREFIX_RE = re.compile(r"^\d+\.\s*")

ISSUE_CUES = ("whether", "question of law", "issue for consideration")
ARGUMENT_CUES = ("argued", "submitted", "contended", "learned counsel", "vehemently")
FACT_CUES = ("filed", "incident", "occurred", "registered", "stated", "alleged")


def split_sentences(text: str) -> List[str]:
    return [s.strip() for s in SENTENCE_RE.findall(text or "")]


def iter_sentences(text: str):
    """Yield sentences, keeping numbered paragraphs ("\\n12. ...") apart."""
    for segment in NUMBERED_PARA_RE.split(text or ""):
        yield from split_sentences(segment)


def _has_any(lowered: str, cues) -> bool:
    return any(cue in lowered for cue in cues)


def is_issue_candidate(sentence: str) -> bool:
    return "?" in sentence or _has_any(sentence.lower(), ISSUE_CUES)


def intelligent_structure(text: str) -> DocumentStructure:
    facts: List[str] = []
    issues: List[str] = []
    arguments: List[str] = []

    for sent in iter_sentences(text):
        lowered = sent.lower()
        if is_issue_candidate(sent):
            # Short issue candidates are dropped, not demoted
            if len(sent) > MIN_ISSUE_LENGTH:
                issues.append(BULLET_PREFIX_RE.sub("", sent))
        elif _has_any(lowered, ARGUMENT_CUES):
            arguments.append(sent)
        elif len(facts) < MAX_FACTS:
            if _has_any(lowered, FACT_CUES):
                facts.append(sent)

    logger.debug(f"Structured body: {len(facts)} facts, {len(issues)} issues, {len(arguments)} arguments")
    return DocumentStructure(facts=facts, issues=issues, arguments=arguments)

__all__ = ['intelligent_structure', 'split_sentences', 'iter_sentences', 'MAX_FACTS']

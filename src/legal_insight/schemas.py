"""Canonical result records for the extraction and bail-risk pipelines.

These pydantic models are frozen: each pipeline call builds fresh instances
and nothing downstream mutates them.
"""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List

UNKNOWN = "Unknown"
UNKNOWN_COURT = "Unknown Court"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class HeaderMetadata(_Record):
    court: str = UNKNOWN_COURT
    petitioner: str = UNKNOWN
    respondent: str = UNKNOWN
    date: str = UNKNOWN
    case_id: str = UNKNOWN

class DocumentStructure(_Record):
    facts: List[str] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)
    arguments: List[str] = Field(default_factory=list)

class DocumentExtraction(_Record):
    meta: HeaderMetadata
    laws: List[str]
    struct: DocumentStructure

class EvidenceAssessment(_Record):
    score: float
    details: List[str]

class JurisprudenceClassification(_Record):
    case_type: str
    scores: Dict[str, float]

class PartyEntities(_Record):
    petitioner: str = "Petitioner"
    respondent: str = "Respondent"

class BailDecision(_Record):
    outcome: str
    confidence: float
    evidence_log: List[str]
    evidence_score: float
    case_type: str
    type_scores: Dict[str, float]
    entities: PartyEntities
    ml_probability: float
    final_score: float
    threshold: float

__all__ = [
    'HeaderMetadata', 'DocumentStructure', 'DocumentExtraction', 'EvidenceAssessment',
    'JurisprudenceClassification', 'PartyEntities', 'BailDecision', 'UNKNOWN', 'UNKNOWN_COURT'
]

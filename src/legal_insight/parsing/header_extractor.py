"""Judgment header extraction.

Recovers the caption block of an Indian judgment:
  - court name from the first 20 lines
  - petitioner / respondent around the VERSUS line
  - judgment date (labelled first, then any dd/mm/yyyy token)
  - case number (Criminal Appeal No., SLP, FIR, Writ Petition ...)

Every field is an independent best-effort search; a miss leaves the default.
"""
from __future__ import annotations
import re
import logging
from typing import List, Optional, Pattern

from legal_insight.schemas import HeaderMetadata, UNKNOWN, UNKNOWN_COURT

logger = logging.getLogger(__name__)

HEADER_LINES = 20
PARTY_SCAN_LINES = 50

COURT_RE = re.compile(r"(IN THE SUPREME COURT|IN THE HIGH COURT|DISTRICT COURT|BEFORE THE).{0,50}", re.IGNORECASE)

VERSUS_LINE_RE = re.compile(r"^\s*(VERSUS|Vs\.?|V/s|V\.|AGAINST)\s*$", re.IGNORECASE)
VERSUS_WORD_RE = re.compile(r"\b(VERSUS|Vs\.?|V/s|V\.|AGAINST)\b", re.IGNORECASE)

PUNCT_ONLY_RE = re.compile(r"^[.\-_]+$")
TRAILING_PUNCT_RE = re.compile(r"[.\-_]+$")

PETITIONER_SKIP_RE = re.compile(
    r"^(BETWEEN|AND|IN THE|CIVIL (APPEAL|WRIT|REVISION|SUIT)|CRIMINAL (APPEAL|WRIT|REVISION)|SLP|NO\.|CASE NO)",
    re.IGNORECASE,
)
PETITIONER_SUFFIX_RE = re.compile(r"(\.\.\.|…)?\s*(Appellants?|Petitioners?|Plaintiff|Complainant|Applicant)\s*$", re.IGNORECASE)
# A leading label needs a ':' or '-' separator, otherwise names such as
# "State of Delhi" would lose their first word.
PETITIONER_PREFIX_RE = re.compile(r"^\s*(The\s+)?(Appellants?|Petitioners?|Plaintiff|Complainant|Applicant)\s*[:\-]\s*", re.IGNORECASE)

RESPONDENT_SKIP_RE = re.compile(r"^(AND|THROUGH|CORAM|BEFORE)", re.IGNORECASE)
RESPONDENT_SUFFIX_RE = re.compile(r"(\.\.\.|…)?\s*(Respondents?|Defendants?|State|Opposite Party)\s*$", re.IGNORECASE)
RESPONDENT_PREFIX_RE = re.compile(r"^\s*(The\s+)?(Respondents?|Defendants?|State|Opposite Party)\s*[:\-]\s*", re.IGNORECASE)

LABELLED_DATE_RE = re.compile(
    r"(?:Date of Judgment|Dated|Date|Decided on)\s*[:\-]?\s*"
    r"(\d{1,2}(?:st|nd|rd|th)?\s+[A-Za-z]+\s*,?\s*\d{4}|\d{1,2}[./-]\d{1,2}[./-]\d{4})",
    re.IGNORECASE,
)
BARE_DATE_RE = re.compile(r"\b(\d{1,2}[/-]\d{1,2}[/-]\d{4})\b")

CASE_ID_RE = re.compile(r"(Criminal Appeal|Civil Appeal|SLP|FIR|Writ Petition|Case)\s*(No\.|Number)?\s*[\w\s/]+", re.IGNORECASE)


def _lines(text: str) -> List[str]:
    return [ln.strip() for ln in re.split(r"\r?\n", text or "") if ln.strip()]


def find_versus_index(lines: List[str]) -> int:
    """Index of the first VERSUS-style separator within the scan window, or -1."""
    for i, line in enumerate(lines[:PARTY_SCAN_LINES]):
        if VERSUS_LINE_RE.search(line) or VERSUS_WORD_RE.search(line):
            return i
    return -1


def _clean_party(line: str, suffix_re: Pattern[str], prefix_re: Pattern[str]) -> str:
    cleaned = suffix_re.sub("", line)
    cleaned = prefix_re.sub("", cleaned)
    return TRAILING_PUNCT_RE.sub("", cleaned).strip()


def _walk_party(lines: List[str], indices, skip_re: Pattern[str], suffix_re: Pattern[str], prefix_re: Pattern[str]) -> Optional[str]:
    for i in indices:
        line = lines[i].strip()
        if PUNCT_ONLY_RE.match(line):
            continue
        if len(line) <= 2 or skip_re.match(line):
            continue
        cleaned = _clean_party(line, suffix_re, prefix_re)
        if len(cleaned) > 2:
            return cleaned
    return None


def extract_parties(lines: List[str]):
    """Return (petitioner, respondent) read around the VERSUS line."""
    vs_index = find_versus_index(lines)
    if vs_index == -1:
        return UNKNOWN, UNKNOWN
    petitioner = _walk_party(lines, range(vs_index - 1, -1, -1),
                             PETITIONER_SKIP_RE, PETITIONER_SUFFIX_RE, PETITIONER_PREFIX_RE)
    respondent = _walk_party(lines, range(vs_index + 1, len(lines)),
                             RESPONDENT_SKIP_RE, RESPONDENT_SUFFIX_RE, RESPONDENT_PREFIX_RE)
    return petitioner or UNKNOWN, respondent or UNKNOWN


def extract_date(text: str) -> str:
    m = LABELLED_DATE_RE.search(text)
    if m:
        return m.group(1)
    m = BARE_DATE_RE.search(text)
    if m:
        return m.group(1)
    return UNKNOWN


def extract_header_info(text: str) -> HeaderMetadata:
    text = text or ""
    lines = _lines(text)
    header_text = "\n".join(lines[:HEADER_LINES])

    court = UNKNOWN_COURT
    court_match = COURT_RE.search(header_text)
    if court_match:
        court = re.sub(r"[\r\n]+", " ", court_match.group(0)).strip()

    petitioner, respondent = extract_parties(lines)

    case_id = UNKNOWN
    case_match = CASE_ID_RE.search(header_text)
    if case_match:
        case_id = case_match.group(0).strip()

    meta = HeaderMetadata(
        court=court,
        petitioner=petitioner,
        respondent=respondent,
        date=extract_date(text),
        case_id=case_id,
    )
    logger.debug(f"Header extracted: court={meta.court!r} case_id={meta.case_id!r}")
    return meta

__all__ = ['extract_header_info', 'extract_parties', 'extract_date', 'find_versus_index']

"""Statute / section reference extraction.

Heuristics for Indian statute references such as:
  - Section 302 of the Indian Penal Code
  - Sec. 438 of the Code of Criminal Procedure, 1973
  - u/s 138 Negotiable Instruments Act
  - Section 21 of the Constitution of India

extract_statutes() returns dicts: { 'raw': str, 'act': str, 'section': str }
extract_clean_laws() renders them as sorted "<Act> Sec <number>" strings.
"""
from __future__ import annotations
import re
from typing import Dict, List

# The act capture may not run into the next "Section"/"Sec."/"u/s" token;
# a dangling connector ("IPC and", "IPC r/w") is trimmed in normalize_act, so
# "Section 302 IPC and Section 34 IPC" yields two references.
SECTION_RE = re.compile(
    r"(?:Section|Sec\.|u/s)\s*(\d+[A-Z]*)\s*(?:of\s+the\s+)?"
    r"([A-Z](?:(?!(?:Section\b|Sec\.|u/s\b))[a-zA-Z.\s()])+)",
    re.IGNORECASE,
)

# Ordered: first substring hit wins
ACT_ALIASES = (
    ('Indian Penal Code', 'IPC'),
    ('Code of Criminal Procedure', 'CrPC'),
    ('Indian Evidence Act', 'Evidence Act'),
    ('Constitution of India', 'Constitution'),
)

KNOWN_SHORT_ACTS = frozenset({'IPC', 'CrPC', 'Constitution'})

TRAILING_RE = re.compile(r"[.\s]+$")
CONNECTOR_RE = re.compile(r"(?:\s+(?:and|or|read\s+with|with|r))+$", re.IGNORECASE)


def normalize_act(act: str) -> str:
    act = TRAILING_RE.sub("", act.strip())
    act = CONNECTOR_RE.sub("", act)
    lowered = act.lower()
    for full_name, short_name in ACT_ALIASES:
        if full_name.lower() in lowered:
            return short_name
    return act


def is_plausible_act(act: str) -> bool:
    """Filter regex false positives picked up from arbitrary capitalised text."""
    if act in KNOWN_SHORT_ACTS:
        return True
    return 3 < len(act) < 40 and "Act" in act


def extract_statutes(text: str) -> List[Dict]:
    if not text:
        return []
    refs: List[Dict] = []
    for m in SECTION_RE.finditer(text):
        act = normalize_act(m.group(2))
        if not is_plausible_act(act):
            continue
        refs.append({'raw': m.group(0).strip(), 'act': act, 'section': m.group(1)})
    # Dedup by (act, section)
    seen = set()
    dedup = []
    for r in refs:
        key = (r['act'], r['section'])
        if key in seen:
            continue
        seen.add(key)
        dedup.append(r)
    return dedup


def extract_clean_laws(text: str) -> List[str]:
    laws = {f"{r['act']} Sec {r['section']}" for r in extract_statutes(text)}
    return sorted(laws)

if __name__ == '__main__':
    sample = "Charged under Section 302 of the Indian Penal Code and Section 154 of the Code of Criminal Procedure."
    print(extract_clean_laws(sample))

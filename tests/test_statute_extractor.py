"""Tests for statutory citation extraction."""

from legal_insight.parsing.statute_extractor import (
    extract_clean_laws,
    extract_statutes,
    is_plausible_act,
    normalize_act,
)


def test_law_citation_scenario():
    text = (
        "The accused was charged under Section 302 of the Indian Penal Code and "
        "Section 154 of the Code of Criminal Procedure was invoked."
    )
    assert extract_clean_laws(text) == ["CrPC Sec 154", "IPC Sec 302"]


def test_repeated_citation_deduplicated():
    text = (
        "Section 302 of the Indian Penal Code applies. "
        "Again, Section 302 of the Indian Penal Code applies. "
        "Section 302 of the Indian Penal Code."
    )
    assert extract_clean_laws(text) == ["IPC Sec 302"]


def test_judgment_laws(judgment_sample):
    assert extract_clean_laws(judgment_sample) == ["CrPC Sec 439", "Evidence Act Sec 27", "IPC Sec 302"]


def test_unrecognized_act_kept_verbatim():
    text = "The complaint was filed u/s 138 of the Negotiable Instruments Act, 1881."
    assert extract_clean_laws(text) == ["Negotiable Instruments Act Sec 138"]


def test_section_letter_suffix_and_abbreviation():
    text = "He was booked under Sec. 498A IPC, and the rest followed."
    assert extract_clean_laws(text) == ["IPC Sec 498A"]


def test_constitution_article():
    text = "The writ invokes Section 21 of the Constitution of India."
    assert extract_clean_laws(text) == ["Constitution Sec 21"]


def test_garbage_capitalised_text_rejected():
    text = "See Section 5 Something Random here. Then section 9 The court observed."
    assert extract_clean_laws(text) == []


def test_extract_statutes_keeps_raw_spans():
    refs = extract_statutes("Bail under Section 439 of the Code of Criminal Procedure.")
    assert len(refs) == 1
    assert refs[0]['act'] == 'CrPC'
    assert refs[0]['section'] == '439'
    assert refs[0]['raw'].startswith('Section 439')


def test_empty_text():
    assert extract_clean_laws("") == []
    assert extract_statutes("") == []


def test_normalize_act_first_alias_wins():
    assert normalize_act("Indian Penal Code read with Code of Criminal Procedure. ") == "IPC"
    assert normalize_act("indian evidence act") == "Evidence Act"


def test_is_plausible_act():
    assert is_plausible_act("IPC")
    assert is_plausible_act("Arms Act")
    assert not is_plausible_act("The court")
    assert not is_plausible_act("Act")
    assert not is_plausible_act("A very long name that mentions an Act somewhere in it")


def test_short_act_before_connector():
    assert extract_clean_laws("Charged under Section 302 IPC and Section 34 IPC.") == ["IPC Sec 302", "IPC Sec 34"]
    assert extract_clean_laws("Booked u/s 420 IPC r/w Section 120B IPC.") == ["IPC Sec 120B", "IPC Sec 420"]


def test_connector_trimmed_from_act_name():
    assert normalize_act("IPC and ") == "IPC"
    assert normalize_act("Arms Act read with") == "Arms Act"

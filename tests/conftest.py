import os
import sys

import pytest

# Tests exercise the API without auth or rate limits
os.environ["RATE_LIMIT_ENABLED"] = "0"
os.environ["API_KEY"] = ""

# Ensure the `src/` directory is on sys.path so we can import `legal_insight` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)


HEADER_SAMPLE = (
    "IN THE HIGH COURT OF DELHI\n"
    "...\n"
    "Raj Kumar\n"
    "...Petitioner\n"
    "VERSUS\n"
    "State of Delhi\n"
    "...Respondent\n"
    "...Dated: 5th March, 2020"
)

JUDGMENT_SAMPLE = (
    "IN THE SUPREME COURT OF INDIA\n"
    "CRIMINAL APPELLATE JURISDICTION\n"
    "Criminal Appeal No. 1234 of 2019\n"
    "BETWEEN\n"
    "Mohan Lal ...Appellant\n"
    "Versus\n"
    "AND\n"
    "Union of India ...Respondents\n"
    "Date of Judgment: 12/08/2021\n"
    "JUDGMENT\n"
    "1. The FIR was registered on the complaint of the informant. "
    "The incident occurred near the market. "
    "The prosecution alleged that the accused fled.\n"
    "2. Learned counsel for the appellant submitted that the evidence is weak. "
    "It was vehemently argued that no recovery was made.\n"
    "3. The question of law that arises is whether Section 27 of the Indian Evidence Act applies?\n"
    "4. The appellant was charged under Section 302 of the Indian Penal Code. "
    "Bail was refused u/s 439 of the Code of Criminal Procedure.\n"
)

MURDER_CASE = "The accused was arrested by police for murder under 302 with a weapon."

MITIGATION_CASE = (
    "The applicant is a first-time offender with no criminal antecedents and requires "
    "medical treatment. Bail is sought under Section 437."
)

EDGE_INPUTS = [
    "",
    " ",
    "\n\n\t",
    "Nothing to see here",
    "???",
    "...",
    "1. 2. 3.",
    "न्यायालय ने जमानत याचिका खारिज कर दी।",
    "Section Section Sec. u/s",
    "VERSUS\nVERSUS\nVERSUS",
    "(((((((((",
    "a" * 5000,
]


@pytest.fixture
def header_sample():
    return HEADER_SAMPLE


@pytest.fixture
def judgment_sample():
    return JUDGMENT_SAMPLE


@pytest.fixture
def murder_case():
    return MURDER_CASE


@pytest.fixture
def mitigation_case():
    return MITIGATION_CASE

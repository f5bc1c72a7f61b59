"""
Run either pipeline over a text file (or stdin) and print the JSON result.

Usage (from project root):
  python scripts/analyze_text.py extract judgment.txt
  python scripts/analyze_text.py bail case.txt --format detailed
  cat case.txt | python scripts/analyze_text.py bail -
"""
import argparse
import json
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from legal_insight.engine import assess_bail_risk, extract_document_structure  # noqa: E402
from legal_insight.utils.performance import format_decision  # noqa: E402


def read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Rule-based legal text analysis")
    parser.add_argument("pipeline", choices=["extract", "bail"], help="Which pipeline to run")
    parser.add_argument("path", help="Text file to analyse, or '-' for stdin")
    parser.add_argument("--format", choices=["minimal", "full", "detailed"], default="full",
                        help="Bail response format (ignored for extract)")
    args = parser.parse_args(argv)

    text = read_text(args.path)
    if args.pipeline == "extract":
        out = extract_document_structure(text).model_dump()
    else:
        out = format_decision(assess_bail_risk(text), text, args.format)
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())

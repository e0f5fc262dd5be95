"""Anonymize a CSV or HTML results sheet for use as a test fixture.

Parses the sheet to discover competitor names, generates fake replacements
using faker with a fixed seed, and writes an anonymized copy. Times are
left untouched.

Usage:
    python scripts/anonymize_results.py results/3x3-round1.csv
    python scripts/anonymize_results.py results/3x3-round1.html -o output.html
"""

import argparse
import sys
from pathlib import Path

from faker import Faker

# Make the cuberank package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from cuberank.parsers import detect_parser  # noqa: E402

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "test_parsers" / "fixtures"

SEED = 20261019


def discover_names(source: str, content: bytes) -> set[str]:
    """Return every competitor name in the sheet."""
    parser = detect_parser(source)
    if parser is None:
        raise SystemExit(f"Unsupported file type: {source}")
    sheet = parser.parse(source, content)
    return {r.student_name for r in sheet.results if r.student_name}


def generate_fake_names(names: set[str], seed: int) -> dict[str, str]:
    """Map each real name to a unique fake name, deterministically."""
    fake = Faker(["en_US", "en_GB", "en_AU"])
    Faker.seed(seed)

    lowered = {n.lower() for n in names}
    used: set[str] = set()
    mapping: dict[str, str] = {}

    for name in sorted(names):
        fake_name = fake.name()
        while fake_name.lower() in lowered or fake_name.lower() in used:
            fake_name = fake.name()
        used.add(fake_name.lower())
        mapping[name] = fake_name.upper() if name.isupper() else fake_name

    return mapping


def apply_replacements(text: str, mapping: dict[str, str]) -> str:
    """Apply all replacements, longer names first to avoid partial matches."""
    for original in sorted(mapping, key=len, reverse=True):
        text = text.replace(original, mapping[original])
    return text


def main():
    parser = argparse.ArgumentParser(
        description="Anonymize a CSV or HTML results sheet")
    parser.add_argument("input", help="Path to the input results sheet")
    parser.add_argument("-o", "--output",
                        help=f"Output path (default: {FIXTURES_DIR}/<input name>)")
    args = parser.parse_args()

    input_path = Path(args.input)
    content = input_path.read_bytes()

    names = discover_names(input_path.name, content)
    print(f"Found {len(names)} competitor names")

    mapping = generate_fake_names(names, SEED)
    for original, fake in sorted(mapping.items()):
        print(f"  {original} -> {fake}")

    result = apply_replacements(content.decode("utf-8"), mapping)

    remaining = [name for name in names if name in result]
    if remaining:
        print(f"WARNING: {len(remaining)} names still found: {remaining}")
    else:
        print("All names successfully replaced.")

    output_path = Path(args.output) if args.output else FIXTURES_DIR / input_path.name
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result, encoding="utf-8")
    print(f"Written to {output_path}")


if __name__ == "__main__":
    main()

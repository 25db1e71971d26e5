#!/usr/bin/env python3
"""
Generate a claim PDF from a JSON file with form values plus invoice files.

Usage:
    python scripts/generate_claim_pdf.py --values claim.json --attachment receipt.jpg
    python scripts/generate_claim_pdf.py --values claim.json --attachment a.pdf --attachment b.png --output out.pdf

The JSON holds the submitted form fields, including "formType"
(expense_note, public_transport or relocation) and "userDisplayName".
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def load_form_values(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data.get("form_values", data)


async def generate(values_path: Path, attachment_paths: list, output: Path = None,
                   skip_validation: bool = False) -> int:
    from core.attachment_merger import AttachmentResource
    from core.errors import FinancialFormsError
    from financial_forms import FinancialForms

    form_values = load_form_values(values_path)
    attachments = [AttachmentResource.from_path(p) for p in attachment_paths]
    form_values["facturen"] = attachments

    forms = FinancialForms()

    if not skip_validation:
        errors = forms.validate(form_values)
        if errors:
            print("Form is not valid:", file=sys.stderr)
            for field_name, message in errors.items():
                print(f"  {field_name}: {message}", file=sys.stderr)
            return 2

    try:
        claim = await forms.generate(form_values, attachments)
    except FinancialFormsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = output or Path.cwd() / claim.file_name
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(claim.pdf_bytes)
    print(f"Saved: {output} ({claim.page_count} page(s))")
    return 0


def main() -> None:
    ap = argparse.ArgumentParser(description="Generate a claim PDF (form page + invoices)")
    ap.add_argument("--values", required=True, help="JSON file with the submitted form values")
    ap.add_argument("--attachment", action="append", default=[],
                    help="Invoice or receipt (pdf/jpg/png); repeat for several files")
    ap.add_argument("--output", default=None, help="Output PDF path (default: generated file name in cwd)")
    ap.add_argument("--skip-validation", action="store_true", help="Generate even if the form is invalid")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    values_path = Path(args.values)
    if not values_path.exists():
        print(f"Error: form values not found: {values_path}", file=sys.stderr)
        sys.exit(1)

    attachment_paths = [Path(p) for p in args.attachment]
    for p in attachment_paths:
        if not p.exists():
            print(f"Error: attachment not found: {p}", file=sys.stderr)
            sys.exit(1)

    output = Path(args.output) if args.output else None
    sys.exit(asyncio.run(generate(values_path, attachment_paths, output, args.skip_validation)))


if __name__ == "__main__":
    main()

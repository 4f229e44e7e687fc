#!/usr/bin/env python3
"""
Dev helper: check how an in-app message payload will be decoded.

Loads a JSON payload (from a file, or a built-in sample), then either
parses it in-process or POST-s it to the /api/content/parse endpoint of
the local backend.

Usage
-----
# Send the built-in html sample to localhost:8000
python scripts/send_inapp_payload.py

# Send the built-in inbox sample
python scripts/send_inapp_payload.py --sample inboxHtml

# Send a payload captured from the messaging backend
python scripts/send_inapp_payload.py --file payloads/spring_sale.json

# Parse in-process, no server needed
python scripts/send_inapp_payload.py --file payloads/spring_sale.json --local

# Target a different backend URL
python scripts/send_inapp_payload.py --url http://staging.example.com
"""

import argparse
import json
import sys
import textwrap
from pathlib import Path

import httpx

# Sample payloads in the shape the messaging backend sends them
_SAMPLES = {
    "html": {
        "contentType": "html",
        "html": '<html><body><a href="itbl://close">Close</a></body></html>',
        "inAppDisplaySettings": {
            "top": {"displayOption": "AutoExpand"},
            "bottom": {"displayOption": "AutoExpand"},
            "left": {"percentage": 5},
            "right": {"percentage": 5},
            "backGroundAlpha": 0.5,
        },
    },
    "inboxHtml": {
        "contentType": "inboxHtml",
        "html": '<html><body><a href="https://example.com/sale">Shop now</a></body></html>',
        "inAppDisplaySettings": {
            "top": {"percentage": 10},
            "bottom": {"percentage": 10},
        },
        "inboxTitle": "Spring sale",
        "inboxSubtitle": "20% off everything",
        "inboxIcon": "https://example.com/icons/sale.png",
    },
}


def _load_payload(file: str | None, sample: str) -> dict:
    if file is None:
        return _SAMPLES[sample]
    with Path(file).open() as fh:
        return json.load(fh)


def _parse_locally(payload: dict) -> int:
    """Run the parser in-process using the backend package."""
    backend_dir = Path(__file__).resolve().parent.parent / "backend"
    sys.path.insert(0, str(backend_dir))
    from app.services.content_parser import parse_content

    result = parse_content(payload)
    if not result.ok:
        print(f"\n[FAIL] {result.reason}")
        return 1
    print("\n[OK]")
    print(json.dumps(result.content.model_dump(mode="json"), indent=2))
    return 0


def _print_response(response: httpx.Response) -> None:
    status = response.status_code
    symbol = "OK" if status == 200 else "FAIL"
    print(f"\n[{symbol}] HTTP {status}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="send_inapp_payload.py",
        description="Decode an in-app message payload via the backend.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            Examples:
              python scripts/send_inapp_payload.py
              python scripts/send_inapp_payload.py --sample inboxHtml
              python scripts/send_inapp_payload.py --file payload.json --local
        """),
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Backend base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--file",
        default=None,
        metavar="PATH",
        help="JSON payload file. A built-in sample is used if omitted.",
    )
    parser.add_argument(
        "--sample",
        default="html",
        choices=list(_SAMPLES),
        help="Built-in sample to use when --file is omitted (default: html)",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Parse in-process instead of calling the backend.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the payload JSON without parsing it.",
    )

    args = parser.parse_args()

    if args.file and not Path(args.file).exists():
        print(f"ERROR: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        payload = _load_payload(args.file, args.sample)
    except json.JSONDecodeError as exc:
        print(f"ERROR: {args.file} is not valid JSON: {exc}", file=sys.stderr)
        return 1

    if args.dry_run:
        print("[DRY RUN] Payload:")
        print(json.dumps(payload, indent=2))
        return 0

    if args.local:
        return _parse_locally(payload)

    endpoint = f"{args.url.rstrip('/')}/api/content/parse"
    print(f"Endpoint: {endpoint}")
    try:
        response = httpx.post(endpoint, json=payload, timeout=30)
    except httpx.ConnectError:
        print(
            f"\nERROR: Could not connect to {args.url}.\n"
            "Is the backend running? Start it with:\n"
            "  cd backend && uvicorn app.main:app --reload",
            file=sys.stderr,
        )
        return 1

    _print_response(response)
    return 0 if response.status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())

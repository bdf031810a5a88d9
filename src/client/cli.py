"""
Terminal front end for the text-to-speech form.

    python -m src.client.cli "Hello world" --voice nova --out ./downloads
    cat article.txt | python -m src.client.cli --voice onyx
"""

import argparse
import logging
import sys
from typing import Optional

from ..config import settings
from ..models.tts import DEFAULT_VOICE, VOICE_OPTIONS
from .form import Error, FormController, FormState, Loading, Success

STATUS_LINES = {
    Loading: "Generating audio... this usually takes 5-10 seconds",
    Success: "Audio ready! Download your file below.",
}


def render(state: FormState) -> None:
    if isinstance(state, Error):
        print(f"❌ {state.message}", file=sys.stderr)
    elif type(state) in STATUS_LINES:
        print(STATUS_LINES[type(state)])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert text to an MP3 file.")
    parser.add_argument("text", nargs="?", help="Text to read aloud. Reads stdin when omitted.")
    parser.add_argument(
        "--voice",
        default=DEFAULT_VOICE.value,
        choices=[v.value for v in VOICE_OPTIONS],
        help="; ".join(f"{v.value}: {v.description}" for v in VOICE_OPTIONS),
    )
    parser.add_argument("--out", default=".", help="Directory the MP3 is saved into.")
    parser.add_argument("--api-url", default=settings.tts_api_url)
    parser.add_argument("--timeout", type=float, default=settings.tts_client_timeout)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=settings.log_level.upper())
    args = build_parser().parse_args(argv)

    form = FormController(base_url=args.api_url, timeout=args.timeout, on_change=render)
    form.text = args.text if args.text is not None else sys.stdin.read()
    form.voice = args.voice
    print(form.char_count)

    state = form.generate()
    if not isinstance(state, Success):
        return 1

    path = form.download(args.out)
    print(f"MP3 file ready: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import json
import sys
from importlib import metadata
from pathlib import Path

import tomllib
from rich.console import Console
from rich.text import Text

from .config import ReibunConfig, load_config
from .errors import ReibunError
from .fetch import DocumentFetcher
from .inject import DEFAULT_SPACING_PX
from .logging_utils import set_debug_logging
from .pipeline import EntrySentences, augment_document, collect_sentences
from .sentences import parse_document


def _read_local_version() -> str | None:
    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    except IndexError:  # pragma: no cover - defensive
        return None
    try:
        with pyproject_path.open("rb") as fh:
            data = tomllib.load(fh)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return None
    return data.get("project", {}).get("version")


try:
    __version__ = metadata.version("reibun")
except metadata.PackageNotFoundError:
    __version__ = _read_local_version() or "0.0.0+unknown"


def _add_version_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"reibun {__version__}",
    )


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n",
        "--max-sentences",
        type=int,
        default=None,
        help="Maximum sentences per word (default: 3, or REIBUN_MAX_SENTENCES).",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Dictionary site to query (default: https://jisho.org, or REIBUN_BASE_URL).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: 30, or REIBUN_TIMEOUT).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print fetched URLs and skipped sentence candidates to stderr.",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Show example sentences with furigana for Japanese words. "
        "Use `reibun augment` to add them to a saved results page.",
    )
    _add_version_flag(ap)
    ap.add_argument(
        "words",
        nargs="+",
        help="Words to look up, processed one after another.",
    )
    ap.add_argument(
        "--json",
        action="store_true",
        help="Emit sentences as JSON instead of formatted text.",
    )
    _add_common_flags(ap)
    return ap


def build_augment_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Add example-sentence blocks to every entry of a saved dictionary results page.",
    )
    _add_version_flag(ap)
    ap.add_argument("input_path", help="Path to the saved .html results page")
    ap.add_argument(
        "-o",
        "--output",
        help="Where to write the augmented page (default: <input>.sentences.html)",
    )
    ap.add_argument(
        "--spacing",
        type=int,
        default=DEFAULT_SPACING_PX,
        help=f"Spacer height in pixels above each block (default: {DEFAULT_SPACING_PX}).",
    )
    _add_common_flags(ap)
    return ap


def _resolve_config(args: argparse.Namespace) -> ReibunConfig:
    try:
        config = load_config()
    except ReibunError as exc:
        raise SystemExit(str(exc)) from exc
    if args.base_url:
        config.base_url = args.base_url.rstrip("/")
    if args.timeout is not None:
        if args.timeout <= 0:
            raise SystemExit("--timeout must be positive.")
        config.timeout = args.timeout
    if args.max_sentences is not None:
        if args.max_sentences < 0:
            raise SystemExit("--max-sentences must not be negative.")
        config.max_sentences = args.max_sentences
    return config


def _entries_payload(entries: list[EntrySentences]) -> list[dict[str, object]]:
    payload: list[dict[str, object]] = []
    for entry in entries:
        sentences = []
        for record, rendered in zip(entry.sentences, entry.rendered()):
            sentences.append(
                {
                    "japanese": record.japanese.text,
                    "reading": record.japanese.reading,
                    "markup": rendered.japanese_markup,
                    "english": rendered.english_text,
                }
            )
        payload.append({"word": entry.word, "sentences": sentences})
    return payload


def _print_entries(console: Console, entries: list[EntrySentences]) -> None:
    for entry in entries:
        console.print(Text(entry.word, style="bold"))
        if not entry.sentences:
            console.print(Text("  (no example sentences)", style="dim"))
        for record, rendered in zip(entry.sentences, entry.rendered()):
            japanese = Text("  " + record.japanese.text)
            japanese.highlight_words([entry.word], style="bold yellow")
            console.print(japanese)
            console.print(Text("  " + record.japanese.reading, style="dim"))
            console.print(Text("  " + rendered.english_text))
        console.print()


def _run_lookup(args: argparse.Namespace) -> int:
    set_debug_logging(bool(getattr(args, "debug", False)))
    config = _resolve_config(args)
    words = [word.strip() for word in args.words if word.strip()]
    if not words:
        raise SystemExit("No words provided.")
    with DocumentFetcher.from_config(config) as fetcher:
        entries = collect_sentences(words, fetcher, config.max_sentences)
    if args.json:
        print(json.dumps(_entries_payload(entries), ensure_ascii=False, indent=2))
    else:
        _print_entries(Console(), entries)
    return 0 if any(entry.sentences for entry in entries) else 1


def _run_augment(args: argparse.Namespace) -> int:
    set_debug_logging(bool(getattr(args, "debug", False)))
    config = _resolve_config(args)
    input_path = Path(args.input_path).expanduser()
    if not input_path.is_file():
        raise SystemExit(f"Input page not found: {input_path}")
    output_path = (
        Path(args.output).expanduser()
        if args.output
        else input_path.with_name(f"{input_path.stem}.sentences.html")
    )
    document = parse_document(input_path.read_text(encoding="utf-8"))
    with DocumentFetcher.from_config(config) as fetcher:
        augmented = augment_document(document, fetcher, config.max_sentences, args.spacing)
    output_path.write_text(str(document), encoding="utf-8")
    print(f"Added example sentences to {augmented} entries -> {output_path}")
    return 0 if augmented else 1


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] == "augment":
        augment_parser = build_augment_parser()
        augment_args = augment_parser.parse_args(argv[1:])
        return _run_augment(augment_args)

    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    return _run_lookup(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

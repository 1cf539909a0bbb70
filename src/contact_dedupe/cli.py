from __future__ import annotations

import argparse
import logging
from pathlib import Path

from contact_dedupe.datasets import ReferenceDatasetGenerator
from contact_dedupe.interfaces import MatchPipeline
from contact_dedupe.io import ContactFileError, read_contacts_csv, write_contacts_csv, write_matches_csv
from contact_dedupe.models import MatchResult
from contact_dedupe.runners import ParallelMatcher
from contact_dedupe.steps import MAX_SCORE

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(level=args.log_level, format=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    try:
        if args.command == "match":
            run_match(input_csv=args.file, output_csv=args.output, threshold=args.threshold)
        elif args.command == "generate":
            run_generate(
                size=args.size,
                duplicate_rate=args.duplicate_rate,
                seed=args.seed,
                output_csv=args.output,
            )
    except (OSError, ContactFileError) as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")


def run_match(
    *,
    input_csv: Path,
    output_csv: Path,
    threshold: int,
    pipeline: MatchPipeline | None = None,
) -> list[MatchResult]:
    records = read_contacts_csv(input_csv)
    pipeline = pipeline or ParallelMatcher()
    results = pipeline.run(records, threshold)
    results.sort(key=MatchResult.sort_key)
    write_matches_csv(output_csv, results)

    print(f"Found {len(results)} matches above threshold {threshold}. Results written to {output_csv}")
    return results


def run_generate(*, size: int, duplicate_rate: float, seed: int, output_csv: Path) -> None:
    records = ReferenceDatasetGenerator(seed=seed).generate(size=size, duplicate_rate=duplicate_rate)
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    write_contacts_csv(output_csv, records)
    print(f"Dataset: {output_csv}")
    print(f"records={len(records)}")


def _threshold(value: str) -> int:
    try:
        threshold = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if not 0 <= threshold <= MAX_SCORE:
        raise argparse.ArgumentTypeError(f"{threshold} is not in 0..={MAX_SCORE}")
    return threshold


def _non_negative(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if size < 0:
        raise argparse.ArgumentTypeError(f"{size} must be >= 0")
    return size


def _duplicate_rate(value: str) -> float:
    try:
        rate = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}") from None
    if not 0.0 <= rate < 1.0:
        raise argparse.ArgumentTypeError(f"{rate} is not in [0, 1)")
    return rate


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contact-dedupe", description="Find likely-duplicate contacts")
    subparsers = parser.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    match_parser = subparsers.add_parser(
        "match",
        parents=[common],
        help="Score every pair of contacts in a CSV and write pairs at or above the threshold",
    )
    match_parser.add_argument("-f", "--file", type=Path, required=True)
    match_parser.add_argument("-o", "--output", type=Path, required=True)
    match_parser.add_argument("-t", "--threshold", type=_threshold, default=800)

    generate_parser = subparsers.add_parser(
        "generate",
        parents=[common],
        help="Write a synthetic contact CSV with intentional duplicates",
    )
    generate_parser.add_argument("--size", type=_non_negative, default=1000)
    generate_parser.add_argument("--duplicate-rate", type=_duplicate_rate, default=0.15)
    generate_parser.add_argument("--seed", type=int, default=42)
    generate_parser.add_argument("--output", type=Path, default=Path("data/reference_contacts.csv"))

    return parser


if __name__ == "__main__":
    main()

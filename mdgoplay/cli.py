"""CLI entrypoint: run the Go block around a line of a markdown file."""

from __future__ import annotations

import argparse
import logging
import sys

from dataclasses import replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from mdgoplay.configuration import (
    DEFAULT_CONFIG_PATH,
    GoPlaySettings,
    build_settings,
    load_config,
)
from mdgoplay.constants import (
    OUTCOME_FAILED,
    OUTCOME_NOT_FOUND,
    OUTCOME_SPLICED,
)
from mdgoplay.document import Cursor, EditorContext, TextDocument
from mdgoplay.exceptions import GoPlayConfigError
from mdgoplay.logging import OutputLog, setup_file_logger
from mdgoplay.notifications import ConsoleNotifier
from mdgoplay.orchestrator import MarkdownGoPlay

EXIT_CODES = {
    OUTCOME_SPLICED: 0,
    OUTCOME_NOT_FOUND: 1,
    OUTCOME_FAILED: 3,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Run the ```go block around a line of a markdown file and "
            "insert its output after the block."
        )
    )
    parser.add_argument(
        "source",
        type=str,
        help="Markdown file containing the ```go block.",
    )
    parser.add_argument(
        "--line",
        type=int,
        required=True,
        help="1-based line of the cursor inside the block.",
    )
    parser.add_argument(
        "--column",
        type=int,
        default=1,
        help="1-based cursor column (informational).",
    )
    parser.add_argument(
        "--config",
        type=str,
        help=(
            "Path to a YAML config. If omitted, uses "
            "configs/default_config.yaml when present."
        ),
    )
    parser.add_argument(
        "--workdir",
        type=str,
        help="Directory to run in (default: the markdown file's directory).",
    )
    parser.add_argument(
        "--go-binary",
        type=str,
        help="Go executable to invoke (default: go).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Abort the run after this many seconds (default: no limit).",
    )
    parser.add_argument(
        "--unique-temp",
        action="store_true",
        help="Write the snippet to a unique temp file instead of main.go.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the updated document instead of saving it.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to this rotating log file.",
    )
    return parser


def _load_settings(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> GoPlaySettings:
    config_path = Path(args.config) if args.config else DEFAULT_CONFIG_PATH
    config: dict = {}
    if args.config or config_path.exists():
        try:
            config = load_config(config_path)
        except (FileNotFoundError, GoPlayConfigError) as exc:
            parser.error(str(exc))
    try:
        settings = build_settings(
            config, config_root=config_path.resolve().parent
        )
    except GoPlayConfigError as exc:
        parser.error(str(exc))
    return _apply_cli_overrides(args, settings, parser)


def _apply_cli_overrides(
    args: argparse.Namespace,
    settings: GoPlaySettings,
    parser: argparse.ArgumentParser,
) -> GoPlaySettings:
    runtime = settings.runtime
    if args.go_binary:
        runtime = replace(runtime, binary=args.go_binary)
    if args.timeout is not None:
        if args.timeout <= 0:
            parser.error("--timeout must be positive")
        runtime = replace(runtime, timeout_s=args.timeout)
    if args.unique_temp:
        runtime = replace(runtime, unique_temp_files=True)
    logging_settings = settings.logging
    if args.log_file:
        logging_settings = replace(
            logging_settings, log_file=Path(args.log_file).expanduser()
        )
    workdir = settings.workdir
    if args.workdir:
        workdir = Path(args.workdir).expanduser().resolve()
    return replace(
        settings,
        workdir=workdir,
        runtime=runtime,
        logging=logging_settings,
    )


def _echo_output_log(text: str) -> None:
    print(text, end="" if text.endswith("\n") else "\n", file=sys.stderr)


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    settings = _load_settings(args, parser)
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=settings.logging.level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    if settings.logging.log_file is not None:
        setup_file_logger(settings.logging.log_file)

    source = Path(args.source).expanduser()
    if not source.is_file():
        parser.error(f"Source file '{source}' not found.")
    if args.line < 1:
        parser.error("--line must be 1 or greater")

    document = TextDocument.load(source)
    context = EditorContext(
        document=document,
        cursor=Cursor(line=args.line - 1, column=max(args.column - 1, 0)),
    )
    play = MarkdownGoPlay(
        settings,
        output_log=OutputLog(on_show=_echo_output_log),
        notifier=ConsoleNotifier(),
    )
    outcome = play.run(context)
    if outcome == OUTCOME_SPLICED:
        if args.dry_run:
            sys.stdout.write(document.text)
        else:
            document.save()
            print(f"Inserted output into {source}", file=sys.stderr)
    return EXIT_CODES.get(outcome, 0)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

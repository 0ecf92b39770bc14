"""md2wa entrypoint. Reads Markdown, writes WhatsApp-ready text or a share link."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml
from loguru import logger

from md2wa import __version__
from md2wa.config import Config, cfg, load_config_with_env, load_env_file
from md2wa.errors import Md2WaError, Md2WaInputError, Md2WaOutputError
from md2wa.formatting import count_words, markdown_to_whatsapp, word_count_level
from md2wa.share import whatsapp_share_url


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru. Replace default logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | {message}"
        ),
    )


def reload_config(config_path: Path | None) -> Config:
    """Load config from path (or env only) and update global cfg."""
    if config_path:
        data = load_config_with_env(config_path)
    else:
        load_env_file()
        data = {}
    cfg.reload(data)
    return cfg


def read_input(source: str) -> str:
    """Read Markdown from a file path, or stdin when source is '-'."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise Md2WaInputError(
            f"Cannot read input {path}: {exc}",
            code="unreadable_input",
            details={"path": str(path)},
            original_error=exc,
        ) from exc


def report_word_count(text: str, config: Config) -> int:
    """Log the word count of the raw input; louder past the thresholds."""
    count = count_words(text)
    level = word_count_level(count, config.word_count_warning, config.word_count_limit)
    if level == "ok":
        logger.info("{} words", count)
    else:
        logger.warning(
            "{} words (over the {} threshold of {})",
            count,
            level,
            config.word_count_limit if level == "limit" else config.word_count_warning,
        )
    return count


def write_output(text: str, destination: Path | None) -> None:
    if destination is None:
        sys.stdout.write(text + "\n")
        return
    try:
        destination.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise Md2WaOutputError(
            f"Cannot write output {destination}: {exc}",
            code="unwritable_output",
            details={"path": str(destination)},
            original_error=exc,
        ) from exc
    logger.info("Output written to {}", destination)


def main(argv: list[str] | None = None) -> None:
    """Main entrypoint."""
    parser = argparse.ArgumentParser(
        description="md2wa — convert LLM Markdown to WhatsApp-friendly text"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Markdown file to convert (default: stdin)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write result to this file instead of stdout",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--share",
        action="store_true",
        help="Print a wa.me share link instead of the converted text",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.config is not None and not args.config.exists():
        logger.error("Config file not found: {}", args.config)
        sys.exit(1)

    try:
        config = reload_config(args.config)
        if args.config is not None:
            logger.debug("Config loaded from {}", args.config)

        raw = read_input(args.input)
        report_word_count(raw, config)

        result = markdown_to_whatsapp(raw)
        if args.share:
            result = whatsapp_share_url(result, config.share_base_url)
        write_output(result, args.output)
    except yaml.YAMLError:
        # Already logged by load_config
        sys.exit(1)
    except Md2WaError as exc:
        logger.error("{} ({})", exc, exc.code)
        sys.exit(1)


if __name__ == "__main__":
    main()

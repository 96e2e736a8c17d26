from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, JSON file, CLI overrides), URL ingestion into the path tree and
rendering of the resulting structure.
"""

import json
import sys
from typing import IO, Iterable, Iterator, List, Optional, Tuple

from pathtree.core.renderer import render_lines
from pathtree.core.tree import PathTree, create_tree
from pathtree.core.validator import validate_config
from pathtree.domain.config import load_config
from pathtree.domain.tree_models import structure_to_json
from pathtree.errors import ConfigError, InvalidTargetError
from pathtree.infra.logging import LoggingConfig, configure_logging, get_logger
from pathtree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdin: Optional[IO[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Stream used for '-' and implicit standard input.

    Returns:
        int: Process exit code (0 success, 2 configuration/input error).
    """
    stdin = stdin if stdin is not None else sys.stdin

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy (defaults < file < CLI)
    try:
        base_conf = load_config(args.config_path)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    raw_conf = dict(base_conf)
    raw_conf.update(cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap
    configure_logging(LoggingConfig(
        level=conf["log_level"],
        console=True,
        log_file=conf["log_file"] or None,
    ))

    logger.debug(f"Configuration resolved from {args.config_path or 'defaults'} with CLI overrides.")
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Ingestion phase
    tree = create_tree(synchronized=conf["synchronized"])
    try:
        sources = _collect_sources(args.urls, conf["input_files"], stdin)
        recorded, skipped = ingest_urls(tree, sources)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        print(f"ERROR: Cannot read input: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130

    logger.info(f"Recorded {recorded} target(s), skipped {skipped}.")

    # 5. Output rendering phase
    nodes = tree.structure()
    if conf["output_format"] == "json":
        print(structure_to_json(nodes, indent=conf["json_indent"]))
    else:
        for line in render_lines(nodes):
            print(line)

    return 0

# -----------------------------------------------------------------------------
# INGESTION
# -----------------------------------------------------------------------------

def ingest_urls(tree: PathTree, urls: Iterable[str]) -> Tuple[int, int]:
    """
    Insert every URL into the tree, skipping those that cannot be split.

    Returns:
        Tuple[int, int]: Counts of recorded and skipped URLs.
    """
    recorded = 0
    skipped = 0
    for url in urls:
        try:
            tree.update(url)
        except InvalidTargetError as e:
            logger.warning(f"Skipping '{url}': {e}")
            skipped += 1
            continue
        recorded += 1
    return recorded, skipped


def _collect_sources(urls: List[str], files: List[str], stdin: IO[str]) -> Iterator[str]:
    """Yield URLs from positional arguments, then each input file in order."""
    yield from urls

    if not urls and not files:
        yield from _iter_lines(stdin)
        return

    for path in files:
        if path == "-":
            yield from _iter_lines(stdin)
            continue
        with open(path, "r", encoding="utf-8") as f:
            yield from _iter_lines(f)


def _iter_lines(stream: IO[str]) -> Iterator[str]:
    """Yield non-blank, non-comment lines."""
    for raw in stream:
        line = raw.strip()
        if line and not line.startswith("#"):
            yield line

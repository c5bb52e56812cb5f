"""
Main entry for the family tree MRCA tool.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration
- printing the result

No parsing or tree logic lives here.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from family_tree.config import get_config
from family_tree.logger import get_logger, set_debug

from family_tree.core.context import QueryContext
from family_tree.core.exceptions import PipelineError, TreeError
from family_tree.core.pipeline import Pipeline, QueryResult

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a family tree and find the most recent common ancestor"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to the family tree text file",
    )
    parser.add_argument(
        "-n",
        "--names",
        nargs=2,
        metavar=("NAME1", "NAME2"),
        default=None,
        help="The two people to query (default: query.default_names in config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, names: Optional[Sequence[str]], debug_flag: bool) -> QueryResult:
    """
    Prepare context and execute the pipeline.
    """

    cfg = get_config()
    if debug_flag:
        cfg.debug = True
        set_debug()

    log.info(f"Loading family tree: {input_path}")

    ctx = QueryContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        names=tuple(names) if names else None,
        debug=cfg.debug,
    )

    return Pipeline(ctx).run()


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        result = run(
            input_path=args.input,
            names=args.names,
            debug_flag=args.debug,
        )
    except OSError as exc:
        print(f"IO trouble: {exc}")
        return 1
    except TreeError as exc:
        print(f"Input file trouble: {exc}")
        return 1
    except PipelineError as exc:
        print(f"Configuration trouble: {exc}")
        return 1

    indent = get_config().render.get("indent", "  ")
    print("Tree:\n" + result.tree.to_text(indent) + "\n**************\n")
    print(result.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())

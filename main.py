import argparse
import json
import os
import sys
from datetime import datetime
from typing import Optional

from logging_config import setup_logging
from errors import PipelineError
from orchestrator import list_agent_tools, run_analysis
from tools.export import to_pretty_json, write_json


def run_once(
    verify: Optional[bool] = None,
    output: Optional[str] = None,
    run_dir: Optional[str] = None,
    log_level: "str | int | None" = None,
) -> int:
    logger = setup_logging(level=log_level)

    if run_dir:
        os.makedirs(run_dir, exist_ok=True)

    try:
        result = run_analysis(on_status=logger.info, verify=verify, run_dir=run_dir)
    except PipelineError as e:
        print(f"Analysis failed: {e.message}", file=sys.stderr)
        return 1

    print(to_pretty_json(result))
    if output:
        path = write_json(result, output)
        logger.info("Saved analysis JSON: %s", path)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Find, verify and analyze the most important recent financial news.")
    parser.add_argument(
        "--no-verify",
        dest="verify",
        action="store_false",
        default=None,
        help="Skip the verification agent (defaults to env ENABLE_VERIFICATION)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Also write the pretty-printed JSON to this path",
    )
    parser.add_argument(
        "--run-dir",
        dest="run_dir",
        default=None,
        help="Directory for intermediate artifacts; 'auto' creates runs/<timestamp>",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level; defaults to env LOG_LEVEL or INFO",
    )
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the agents' tool descriptors and exit",
    )
    args = parser.parse_args(argv)

    if args.list_tools:
        print(json.dumps(list_agent_tools(), indent=2))
        return 0

    run_dir = args.run_dir
    if run_dir == "auto":
        run_dir = os.path.join("runs", datetime.now().strftime("%Y%m%d_%H%M%S"))

    return run_once(verify=args.verify, output=args.output, run_dir=run_dir, log_level=args.log_level)


if __name__ == "__main__":
    sys.exit(main())

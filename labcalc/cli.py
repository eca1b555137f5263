"""Command-line front end for the computation engine.

Usage examples::

    python main.py unit_convert value=100 from_unit=c to_unit=f
    python main.py statistics data=1,2,3,4,5 --ci 0.95 --plot output
    python main.py dilution c1=10 v1=5 c2=2 --json
    python main.py --list-units
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import time
from typing import Any, Dict

from .constants import CONSTANTS, available_constants
from .engine import OPERATIONS, evaluate
from .errors import ComputeError
from .plotting import DEFAULT_OUTPUT_DIR, plot_sample_distribution
from .reporting import format_result, format_value_with_uncertainty
from .stats.intervals import mean_confidence_interval
from .units import Category, units_for

logger = logging.getLogger(__name__)


def _parse_scalar(text: str) -> Any:
    try:
        return float(text)
    except ValueError:
        return text


def parse_fields(tokens: list[str]) -> Dict[str, Any]:
    """Turn ``key=value`` tokens into a field mapping.

    Numbers become floats and everything else stays a string. ``data`` is
    split on commas into a list.
    """
    fields: Dict[str, Any] = {}
    for token in tokens:
        key, sep, raw = token.partition("=")
        if not sep or not key:
            raise ValueError(f"Field '{token}' must look like key=value.")
        if key == "data":
            fields[key] = [_parse_scalar(item) for item in raw.split(",") if item != ""]
        else:
            fields[key] = _parse_scalar(raw)
    return fields


def _json_safe(obj: Any) -> Any:
    """Replace NaN and infinities with ``None`` so the output is strict JSON."""
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {key: _json_safe(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_json_safe(value) for value in obj]
    return obj


def _dump_json(payload: Dict[str, Any]) -> str:
    return json.dumps(_json_safe(payload), ensure_ascii=False, allow_nan=False)


def _print_units() -> None:
    for category in Category:
        print(f"{category.value} (base: {category.base_unit}): {', '.join(units_for(category))}")


def _print_constants() -> None:
    for key in available_constants():
        const = CONSTANTS[key]
        aliases = f" [{', '.join(const.aliases)}]" if const.aliases else ""
        print(f"{key}{aliases}: {const.value:.10g} {const.unit} ({const.label})")


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for module execution."""
    parser = argparse.ArgumentParser(
        description="Laboratory calculations: statistics, unit conversion, "
        "constants, dilution and molarity."
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help=f"One of: {', '.join(OPERATIONS)}.",
    )
    parser.add_argument(
        "fields",
        nargs="*",
        help="Operation inputs as key=value (data=1,2,3 for statistics).",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument(
        "--ci",
        type=float,
        default=None,
        metavar="LEVEL",
        help="Also report a confidence interval for the mean (statistics only).",
    )
    parser.add_argument(
        "--plot",
        nargs="?",
        const=DEFAULT_OUTPUT_DIR,
        default=None,
        metavar="DIR",
        help=f"Save a distribution figure (statistics only; default dir: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument("--list-units", action="store_true", help="List unit spellings.")
    parser.add_argument(
        "--list-constants", action="store_true", help="List available constants."
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_units or args.list_constants:
        if args.list_units:
            _print_units()
        if args.list_constants:
            _print_constants()
        return 0

    if not args.operation:
        parser.error("an operation is required unless --list-units/--list-constants is given")

    try:
        fields = parse_fields(args.fields)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("Fields for %s: %s", args.operation, fields)
    start = time.time()
    result = evaluate(args.operation, fields)
    logger.info("Evaluated %s in %.4f seconds", args.operation, time.time() - start)

    if not result.ok:
        logger.warning("%s failed (%s): %s", args.operation, result.error.kind, result.error)
        if args.json:
            print(_dump_json(result.as_dict()))
        else:
            print(f"Error: {result.error}")
        return 1

    payload = result.as_dict()
    lines = [format_result(args.operation, result.data)]

    if args.operation == "statistics" and args.ci is not None:
        try:
            ci = mean_confidence_interval(fields["data"], confidence=args.ci)
        except (ComputeError, ValueError) as exc:
            logger.warning("Confidence interval skipped: %s", exc)
        else:
            payload["confidence_interval"] = ci
            lines.append(
                f"{ci['confidence']:.0%} CI for mean: "
                f"{format_value_with_uncertainty(ci['mean'], ci['half_width'])} "
                f"({ci['method']}, dof={ci['dof']})"
            )

    if args.operation == "statistics" and args.plot is not None:
        path = plot_sample_distribution(fields["data"], output_dir=args.plot)
        payload["figure"] = path
        lines.append(f"Saved distribution figure to {path}")
        logger.info("Distribution figure: %s", path)

    if args.json:
        print(_dump_json(payload))
    else:
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

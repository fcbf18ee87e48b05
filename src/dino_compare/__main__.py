"""CLI entry-point for dino_compare.

Usage:
    python -m dino_compare compare --name NAME --diet DIET --weight W (--height H | --feet F --inches I)
                                   [--units metric|imperial] [--seed N] [--source PATH_OR_URL] [--json]
    python -m dino_compare dinos [--units metric|imperial] [--source PATH_OR_URL] [--json]
    python -m dino_compare validate <document.json>
    python -m dino_compare serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import jsonschema

from dino_compare import __version__
from dino_compare.api import (
    build_profile as _api_build_profile,
    compare_profile as _api_compare_profile,
    list_dinosaurs as _api_list_dinosaurs,
)
from dino_compare.contracts.load import validate_file
from dino_compare.errors import DataSourceError, ProfileValidationError
from dino_compare.model import Diet, Units
from dino_compare.sources import DEFAULT_TIMEOUT
from dino_compare.utils.determinism import make_picker
from dino_compare.utils.exit_codes import ExitCode
from dino_compare.utils.json_norm import stable_json_dump
from dino_compare.utils.logging_config import resolve_log_level

logger = logging.getLogger("dino_compare")


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = resolve_log_level(os.getenv("LOG_LEVEL", "WARNING"))
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--source",
        default=os.getenv("DINO_DATA_SOURCE", ""),
        help="Dinosaur document: file path or http(s) URL (default: bundled data)",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Seconds to wait on a remote source (default: %(default)s)",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dino-compare",
        description="Compare your height, weight and diet to the dinosaurs.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    sub = p.add_subparsers(dest="command")

    # ── compare ──────────────────────────────────────────────────────
    cmp_p = sub.add_parser("compare", help="Compare a profile against every dinosaur")
    cmp_p.add_argument("--name", required=True, help="Name shown on the human tile")
    cmp_p.add_argument(
        "--diet",
        required=True,
        choices=[d.value for d in Diet],
    )
    cmp_p.add_argument(
        "--units",
        default=Units.IMPERIAL.value,
        choices=[u.value for u in Units],
    )
    cmp_p.add_argument(
        "--weight",
        type=float,
        required=True,
        help="Pounds (imperial) or kilograms (metric)",
    )
    cmp_p.add_argument(
        "--height",
        type=float,
        default=None,
        help="Inches (imperial) or centimetres (metric)",
    )
    cmp_p.add_argument("--feet", type=float, default=None, help="Imperial height, feet part")
    cmp_p.add_argument("--inches", type=float, default=None, help="Imperial height, inches part")
    cmp_p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed fact selection for reproducible output",
    )
    cmp_p.add_argument("--json", action="store_true", help="Emit JSON")
    _add_source_args(cmp_p)

    # ── dinos ────────────────────────────────────────────────────────
    dinos_p = sub.add_parser("dinos", help="List the dinosaur records")
    dinos_p.add_argument(
        "--units",
        default=Units.IMPERIAL.value,
        choices=[u.value for u in Units],
    )
    dinos_p.add_argument("--json", action="store_true", help="Emit JSON")
    _add_source_args(dinos_p)

    # ── validate ─────────────────────────────────────────────────────
    val_p = sub.add_parser("validate", help="Validate a dinosaur document")
    val_p.add_argument("document", help="Path to the JSON document")

    # ── serve ────────────────────────────────────────────────────────
    serve_p = sub.add_parser("serve", help="Run the web API with uvicorn")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    return p


# ── handlers ─────────────────────────────────────────────────────────


def _handle_compare(args: argparse.Namespace) -> int:
    profile = _api_build_profile(
        name=args.name,
        diet=args.diet,
        units=args.units,
        weight=args.weight,
        height=args.height,
        feet=args.feet,
        inches=args.inches,
    )
    try:
        result = _api_compare_profile(
            profile,
            source=args.source,
            pick=make_picker(args.seed),
            timeout=args.timeout,
        )
    except ProfileValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except DataSourceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json:
        stable_json_dump(result.to_dict(), sys.stdout)
        return ExitCode.SUCCESS

    for tile in result.tiles:
        print(f"== {tile.title} ({tile.image})")
        if tile.body:
            print(f"   {tile.body}")
    return ExitCode.SUCCESS


def _handle_dinos(args: argparse.Namespace) -> int:
    try:
        records = _api_list_dinosaurs(args.units, source=args.source, timeout=args.timeout)
    except DataSourceError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json:
        stable_json_dump(records, sys.stdout)
        return ExitCode.SUCCESS

    weight_unit, height_unit = ("kg", "cm") if args.units == Units.METRIC.value else ("lb", "in")
    for r in records:
        print(
            f"{r.species}: {r.weight} {weight_unit}, {r.height} {height_unit}, "
            f"{r.diet.value}, {r.where}, {r.when}"
        )
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    # Exit code contract:
    #   1 = schema violation
    #   2 = unreadable file / invalid JSON
    try:
        validate_file(Path(args.document))
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from dino_compare.web_api.config import settings

    uvicorn.run(
        "dino_compare.web_api.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
    )
    return ExitCode.SUCCESS


_HANDLERS = {
    "compare": _handle_compare,
    "dinos": _handle_dinos,
    "validate": _handle_validate,
    "serve": _handle_serve,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point; returns an exit code (0 = ok, 1 = rejected, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    handler = _HANDLERS.get(args.command)
    logger.debug("command=%s", args.command)
    if handler is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR
    return int(handler(args))


if __name__ == "__main__":
    raise SystemExit(main())

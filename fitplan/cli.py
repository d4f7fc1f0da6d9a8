"""Command-line entry point for fitplan.

Reads an onboarding profile from a JSON file, generates the nutrition and
workout plans and prints them.  With ``--save USER_ID`` the profile and the
plans are also written to the data directory (``FITPLAN_DATA_DIR`` or
``config.json``).

    fitplan profile.json --seed 7 --save 42
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from colorama import Fore, Style
from colorama import init as colorama_init
from pydantic import ValidationError

from .core import storage
from .core.config import default_session_minutes, load_config, log_level, random_seed
from .core.plans import generate_plans
from .core.schema import Profile, ProfileIncompleteError
from .core.texts import DESCRIPTIONS, render_plans

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    sections = "\n".join(f"  {name}: {text}" for name, text in DESCRIPTIONS.items())
    parser = argparse.ArgumentParser(
        prog="fitplan",
        description="Generate nutrition and workout plans from a profile.",
        epilog="output sections:\n" + sections,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("profile", type=Path, help="path to a profile JSON file")
    parser.add_argument("--seed", type=int, default=None, help="seed for exercise sampling")
    parser.add_argument("--save", metavar="USER_ID", help="persist profile and plans for USER_ID")
    parser.add_argument("--json", action="store_true", help="print plans as JSON")
    return parser


def load_profile_file(path: Path) -> Profile:
    return Profile.model_validate_json(path.read_text(encoding="utf-8"))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    colorama_init()
    cfg = load_config()
    logging.basicConfig(
        level=log_level(cfg),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    seed = args.seed if args.seed is not None else random_seed(cfg)
    rng = random.Random(seed) if seed is not None else None

    try:
        profile = load_profile_file(args.profile)
        plans = generate_plans(
            profile, rng, default_session_minutes=default_session_minutes(cfg)
        )
    except (ProfileIncompleteError, ValidationError) as exc:
        print(f"{Fore.RED}Invalid profile:{Style.RESET_ALL} {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"{Fore.RED}Cannot read profile:{Style.RESET_ALL} {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(plans.model_dump_json(indent=2))
    else:
        print(render_plans(plans))

    if args.save:
        storage.save_profile(args.save, profile)
        storage.save_plans(args.save, plans)
        logger.info("Plans saved: %s%s%s", Fore.GREEN, args.save, Style.RESET_ALL)
    return 0


if __name__ == "__main__":
    sys.exit(main())

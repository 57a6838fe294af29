import argparse
import logging
from pathlib import Path

from .bootstrap import initialize
from .config import settings
from .domain.models import AnalysisMode
from .engine import ClassificationEngine
from .exceptions import CallGuardError
from .reference_lists import ReferenceLists
from .scenarios import TEST_SCENARIOS, list_categories
from .screener import CallScreener
from .utils import read_phone_list, write_verdicts

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Incoming call screening")
    sub = parser.add_subparsers(dest="command", required=True)

    mode_kwargs = dict(
        type=str,
        choices=[m.value for m in AnalysisMode],
        default=settings.default_mode.value,
        help="Analysis mode",
    )

    check = sub.add_parser("check", help="Classify phone numbers given on the command line")
    check.add_argument("numbers", nargs="+", help="Phone numbers to classify")
    check.add_argument("-m", "--mode", **mode_kwargs)

    batch = sub.add_parser("batch", help="Classify phone numbers from a file")
    batch.add_argument(
        "-i",
        "--input",
        type=Path,
        required=True,
        help="Input file with phone numbers",
    )
    batch.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("results.csv"),
        help="Output CSV path",
    )
    batch.add_argument("-m", "--mode", **mode_kwargs)

    scen = sub.add_parser("scenarios", help="Run the built-in test scenarios")
    scen.add_argument("-m", "--mode", **mode_kwargs)
    group = scen.add_mutually_exclusive_group()
    group.add_argument("--category", choices=list_categories(), help="Only this category")
    group.add_argument("--difficulty", type=int, choices=[1, 2, 3], help="Only this difficulty")
    scen.add_argument(
        "--protection-off",
        action="store_true",
        help="Run with call protection disabled",
    )
    return parser


def _check(engine: ClassificationEngine, args: argparse.Namespace) -> int:
    for number in args.numbers:
        verdict = engine.classify(number, args.mode)
        if verdict.blocked:
            print(f"{number}\tBLOCK\t{verdict.reason.display_name}\t{verdict.threat_type.display_name}")
        else:
            print(f"{number}\tALLOW")
    return 0


def _batch(engine: ClassificationEngine, args: argparse.Namespace) -> int:
    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    numbers = read_phone_list(args.input)
    logger.info(f"Loaded {len(numbers)} numbers from {args.input}")
    mode = AnalysisMode.parse(args.mode)
    verdicts = [(num, engine.classify(num, mode)) for num in numbers]
    write_verdicts(args.output, mode, verdicts)
    logger.info(f"Results saved to {args.output}")
    return 0


def _scenarios(engine: ClassificationEngine, args: argparse.Namespace) -> int:
    screener = CallScreener(
        engine,
        mode=AnalysisMode.parse(args.mode),
        protection_active=not args.protection_off,
        test_results_limit=len(TEST_SCENARIOS),
    )
    if args.category:
        results = screener.run_category(args.category)
    elif args.difficulty:
        results = screener.run_difficulty(args.difficulty)
    else:
        results = screener.run_all()

    for r in results:
        reason = r.block_reason.display_name if r.block_reason else "-"
        mark = "PASS" if r.success else "FAIL"
        print(f"{mark}\t#{r.scenario_id}\t{r.phone_number}\t{r.status.value}\t{reason}")
    passed = sum(r.success for r in results)
    print(f"{passed}/{len(results)} scenarios passed in {args.mode} mode")
    return 0 if passed == len(results) else 1


COMMANDS = {
    "check": _check,
    "batch": _batch,
    "scenarios": _scenarios,
}


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``call-guard`` command."""
    args = build_parser().parse_args(argv)
    initialize()
    try:
        engine = ClassificationEngine(ReferenceLists.from_settings(settings))
        return COMMANDS[args.command](engine, args)
    except CallGuardError as exc:
        logger.error("%s", exc)
        return 2

import argparse
import sys
from typing import TextIO

from txdoctor.api.server import serve
from txdoctor.classification.classifier import classify
from txdoctor.cli.demo_transactions import DEMO_TRANSACTIONS
from txdoctor.cli.report import render_batch_summary, render_classification, render_diagnosis
from txdoctor.config.settings import Settings
from txdoctor.diagnosis.base import BaseDiagnoser
from txdoctor.diagnosis.batch import BatchAnalyzer
from txdoctor.diagnosis.exceptions import DiagnosisError
from txdoctor.diagnosis.factory import DiagnoserFactory
from txdoctor.logging.logger import Log

ALL_DEMOS = "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txdoctor",
        description="Explain why a DeFi transaction failed and how to fix it.",
    )
    parser.add_argument(
        "--demo",
        choices=[*DEMO_TRANSACTIONS, ALL_DEMOS],
        help="diagnose a bundled demo transaction (or all of them)",
    )
    parser.add_argument(
        "--classify",
        action="store_true",
        help="with --demo: print the quick error classification only, no AI call",
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="batch-analyze every demo transaction and print a summary",
    )
    parser.add_argument("--serve", action="store_true", help="start the HTTP API")
    return parser


def run(
    argv: list[str] | None,
    settings: Settings,
    diagnoser: BaseDiagnoser | None = None,
    out: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    out = out or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.serve:
        serve(settings)
        return 0
    if not (args.demo or args.batch):
        parser.print_help(out)
        return 0

    if args.demo and args.classify:
        for name in _selected_demos(args.demo):
            print(render_classification(name, classify(DEMO_TRANSACTIONS[name])), file=out)
        return 0

    diagnoser = diagnoser or DiagnoserFactory.create(settings)
    try:
        if args.demo:
            for name in _selected_demos(args.demo):
                Log.info(f"Running demo: {name}")
                result = diagnoser.diagnose(DEMO_TRANSACTIONS[name])
                print(render_diagnosis(result), file=out)
        if args.batch:
            batch = BatchAnalyzer(diagnoser).analyze(DEMO_TRANSACTIONS.values())
            print(render_batch_summary(batch.summary), file=out)
    except DiagnosisError as exc:
        Log.error(f"Diagnosis failed: {exc}")
        return 1
    except Exception:
        Log.exception("Unexpected failure while diagnosing")
        return 1
    return 0


def _selected_demos(choice: str) -> list[str]:
    if choice == ALL_DEMOS:
        return list(DEMO_TRANSACTIONS)
    return [choice]

#!/usr/bin/env python3
"""
Governance report runner.

    base-governance-report audit security
    base-governance-report --all --strict

Each report is written to <REPORTS_ROOT>/<directory>/<prefix>-<epoch ms>.json.
"""

import argparse
import logging
import sys

from .client import ChainClient, load_artifact
from .config import Settings
from .log import setup_logging
from .reports import REPORTS, ReportGenerator

logger = logging.getLogger(__name__)

ANALYTICS_CONTRACT = "GovernanceProtocolV2"


def build_parser():
    parser = argparse.ArgumentParser(description="Generate governance analytics reports")
    parser.add_argument("reports", nargs="*", metavar="REPORT", help="report names (see --list)")
    parser.add_argument("--all", action="store_true", help="generate every report")
    parser.add_argument("--list", action="store_true", help="list report names and exit")
    parser.add_argument("--strict", action="store_true", help="abort on the first getter that fails")
    parser.add_argument("--address", help="governance contract address (overrides GOVERNANCE_ADDRESS)")
    parser.add_argument("--output-root", help="output root directory (overrides REPORTS_ROOT)")
    return parser


def compiled_abi(settings: Settings):
    """ABI of the compiled analytics contract, or None to fall back to the generated one."""
    try:
        artifact = load_artifact(ANALYTICS_CONTRACT, settings.artifacts_dir)
    except FileNotFoundError:
        logger.debug("No %s artifact under %s, using generated getter ABI", ANALYTICS_CONTRACT,
                     settings.artifacts_dir)
        return None
    logger.info("Using %s ABI from artifacts", ANALYTICS_CONTRACT)
    return artifact.abi


def run_reports(names, settings: Settings, strict=False, client=None):
    definitions = [REPORTS[n] for n in names]
    address = None
    abi = None
    if any(d.needs_contract for d in definitions):
        address = settings.require_governance_address()
        abi = compiled_abi(settings)
        client = client or ChainClient.from_settings(settings)

    written = []
    for definition in definitions:
        gen = ReportGenerator(definition, client=client, governance_address=address,
                              output_root=settings.reports_root, strict=strict, abi=abi)
        path, report = gen.generate()
        print(f"{definition.name} report created: {path}")
        for key in definition.advisories:
            print(f"  {key}: {report[key]}")
        if report["unavailable"]:
            print(f"  unavailable: {len(report['unavailable'])} getter(s)")
        written.append(path)
    return written


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.list:
        for name, definition in REPORTS.items():
            print(f"{name:<16} {definition.summary}")
        return

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    if args.address:
        settings.governance_address = args.address
    if args.output_root:
        settings.reports_root = args.output_root

    names = list(REPORTS) if args.all else args.reports
    unknown = [n for n in names if n not in REPORTS]
    if not names or unknown:
        logger.error("Unknown or missing report name(s): %s. Use --list.", ", ".join(unknown) or "none given")
        sys.exit(1)

    try:
        run_reports(names, settings, strict=args.strict)
    except Exception:
        logger.exception("Report generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()

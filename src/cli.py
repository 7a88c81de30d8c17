"""
Command-line interface for the Scout CVE report.

Lists every image of a Docker organization through the Docker Scout API
and reports the CRITICAL and HIGH vulnerabilities found in them. Runs
with no arguments: DOCKER_ORG and DOCKER_TOKEN come from the environment.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from common import OUTPUT_CONFIGS
from constants import DEFAULT_OUTPUT_TYPE, ORG_ENV_VAR, TOKEN_ENV_VAR
from core.config import ScoutConfig
from core.exceptions import (
    AuthenticationException,
    ConfigurationException,
    GraphQLRequestException,
    NoDataException,
    OutputException,
    ScoutReportException,
)
from core.models import CveResult
from core.report import generate_report_data, summarize
from utils.formatting import format_severity_counts
from utils.logging_helpers import log_error_section, log_info_header, setup_logging

logger = logging.getLogger(__name__)


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="scout-cve-report",
        description="Report CRITICAL/HIGH vulnerabilities for a Docker organization's images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Environment: {ORG_ENV_VAR} (organization), {TOKEN_ENV_VAR} (Scout API token)",
    )
    parser.add_argument("--org", dest="organization", default=None, help=f"Organization (overrides {ORG_ENV_VAR}).")
    parser.add_argument("-o", "--output", type=str, default=None, help="Output types (comma-separated): console, csv, xlsx.")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Output directory for file reports.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")

    return parser.parse_args(args)


def parse_output_types(output_arg: Optional[str]) -> set[str]:
    """Parse comma-delimited output types argument."""
    valid_types = set(OUTPUT_CONFIGS.keys())
    if output_arg is None:
        return {DEFAULT_OUTPUT_TYPE}
    requested_types = {t.strip() for t in output_arg.split(",") if t.strip()}
    invalid_types = requested_types - valid_types
    if invalid_types:
        raise ValueError(
            f"Invalid output type(s): {', '.join(sorted(invalid_types))}. "
            f"Valid types: {', '.join(sorted(valid_types))}"
        )
    if not requested_types:
        raise ValueError("At least one output type must be specified")
    return requested_types


def write_outputs(results: list[CveResult], output_types: set[str], output_dir: Path) -> dict[str, Optional[Path]]:
    """
    Hand the finished report to each requested sink.

    Returns:
        Output type -> written file (None for console)
    """
    written = {}
    for output_type in sorted(output_types):
        config = OUTPUT_CONFIGS[output_type]
        output_path = output_dir / config["file_suffix"] if config["file_suffix"] else None
        config["generator"]().generate(results, output_path)
        written[output_type] = output_path
    return written


def _failure_hints(error: ScoutReportException) -> list[str]:
    """Operator hints for a failed run."""
    if isinstance(error, ConfigurationException):
        return [f"Set {ORG_ENV_VAR} to your Docker organization and {TOKEN_ENV_VAR} to a Docker access token."]
    if isinstance(error, AuthenticationException):
        return [f"Check that {TOKEN_ENV_VAR} is valid and has not expired."]
    if isinstance(error, GraphQLRequestException):
        if error.status_code is None:
            return ["The Scout API could not be reached. Check network connectivity."]
        return ["The Scout API rejected the request. Run with --verbose for request details."]
    if isinstance(error, NoDataException):
        return [f"Check that {ORG_ENV_VAR} names an organization with images enrolled in Docker Scout."]
    if isinstance(error, OutputException):
        return ["Check that the output directory exists and is writable."]
    return []


def run(args: argparse.Namespace) -> int:
    """Run the report pipeline; returns the process exit status."""
    try:
        output_types = parse_output_types(args.output)
    except ValueError as e:
        logger.error(f"Invalid output specification: {e}")
        return 1

    try:
        config = ScoutConfig.from_env().with_organization(args.organization)
        log_info_header(f"Scout CVE report for {config.organization or '<unset>'}", logger=logger)

        results = generate_report_data(config)
        written = write_outputs(results, output_types, args.output_dir)
    except ScoutReportException as e:
        log_error_section(str(e), _failure_hints(e), logger=logger)
        return 1

    logger.info("=" * 60)
    logger.info(f"Findings: {len(results)} ({format_severity_counts(summarize(results))})")
    for output_type, path in written.items():
        if path is not None:
            logger.info(f"  - {OUTPUT_CONFIGS[output_type]['description']}: {path}")
    logger.info("Done!")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

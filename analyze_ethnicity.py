#!/usr/bin/env python3
"""
Main script for estimating ethnicity from MyHeritage DNA match exports.
"""

import argparse
import logging
import sys
from pathlib import Path

from match_ethnicity import (
    EthnicityConfig,
    EthnicityError,
    EthnicityEstimator,
    EthnicityReporter,
)
from match_ethnicity.config import DEFAULT_EXCLUDED_COUNTRIES

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_ethnicity_analysis(matches_file: str,
                           segments_file: str,
                           parent_matches_file: str = None,
                           config: EthnicityConfig = None,
                           output_file: str = None,
                           plot_file: str = None):
    """
    Run the ethnicity estimate and print the report.

    Args:
        matches_file: Path to the "DNA matches list" CSV export
        segments_file: Path to the "shared DNA segments" CSV export
        parent_matches_file: Path to a tested parent's matches export (optional)
        config: Estimation parameters
        output_file: Path to save the report (optional)
        plot_file: Path to save a bar chart (optional, single-sample only)

    Returns:
        The estimate: a ResolvedEthnicity, or a phase-keyed dictionary of
        them when a parent matches file is given
    """
    estimator = EthnicityEstimator(config)
    reporter = EthnicityReporter()

    results = estimator.estimate_files(matches_file, segments_file, parent_matches_file)

    if parent_matches_file is None:
        report = reporter.format_report(results)
        if plot_file:
            if results.total == 0:
                logger.warning("No segments resolved; skipping chart")
            else:
                reporter.plot_ethnicities(results, plot_file)
    else:
        report = reporter.format_trio_report(results)
        if plot_file:
            logger.warning("Charts are only drawn for single-sample estimates")

    print(report)

    if output_file:
        with open(output_file, 'w') as f:
            f.write(report + "\n")
        logger.info(f"Report saved to {output_file}")

    return results


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Estimate ethnicity from the countries of your DNA matches',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Estimate from a MyHeritage matches list and shared segments export
  python analyze_ethnicity.py matches.csv shared_segments.csv

  # Add your birth country for a more accurate estimate
  python analyze_ethnicity.py matches.csv shared_segments.csv --birth-country Germany

  # Phase against a tested parent's match list
  python analyze_ethnicity.py matches.csv shared_segments.csv --parent mother_matches.csv
        """
    )

    parser.add_argument('matches_file', help='Path to MyHeritage "DNA matches list" CSV')
    parser.add_argument('segments_file', help='Path to MyHeritage "shared DNA segments" CSV')

    parser.add_argument(
        '--parent',
        help="Path to a tested parent's matches list for trio phasing",
        default=None
    )

    parser.add_argument(
        '--birth-country',
        default="",
        help='Your birth country; reinforces every populated segment'
    )

    parser.add_argument(
        '--exclude',
        nargs='+',
        metavar='COUNTRY',
        default=list(DEFAULT_EXCLUDED_COUNTRIES),
        help='Countries excluded because of recent mass migration '
             '(default: %(default)s)'
    )

    parser.add_argument(
        '--no-exclude',
        action='store_true',
        help='Do not exclude any countries'
    )

    parser.add_argument('--output', help='Path to save the report')
    parser.add_argument('--plot', help='Path to save a bar chart of the estimate')

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output (per-segment vote maps)'
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    for path in [args.matches_file, args.segments_file, args.parent]:
        if path is not None and not Path(path).exists():
            logger.error(f"Input file not found: {path}")
            sys.exit(1)

    try:
        config = EthnicityConfig(
            birth_country=args.birth_country,
            excluded_countries=() if args.no_exclude else tuple(args.exclude),
        )
        run_ethnicity_analysis(
            matches_file=args.matches_file,
            segments_file=args.segments_file,
            parent_matches_file=args.parent,
            config=config,
            output_file=args.output,
            plot_file=args.plot
        )
    except (EthnicityError, ValueError) as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Example script demonstrating ethnicity estimation from DNA matches.
"""

from match_ethnicity import (
    EthnicityConfig,
    EthnicityEstimator,
    EthnicityReporter,
    Match,
    SharedSegment,
    generate_synthetic_matches,
)
from match_ethnicity.records import frame_to_matches


def example_with_records():
    """
    Example using a handful of hand-written match records.
    """
    print("Example: Ethnicity Estimate from Match Records")
    print("=" * 60)

    matches = [
        Match("Anna Schmidt", "Germany", 52.0),
        Match("Lars Jensen", "Denmark", 31.5),
        Match("Piet de Vries", "Netherlands", 18.2),
    ]
    segments = [
        SharedSegment("Anna Schmidt", 1, 10000000, 18000000),
        SharedSegment("Anna Schmidt", 7, 40000000, 45000000),
        SharedSegment("Lars Jensen", 1, 30000000, 36000000),
        SharedSegment("Piet de Vries", 3, 5000000, 9000000),
    ]

    estimator = EthnicityEstimator(EthnicityConfig(excluded_countries=()))
    result = estimator.estimate(matches, segments)
    print(EthnicityReporter().format_report(result))


def example_with_synthetic_data():
    """
    Example using synthetic matches, with and without a birth country.
    """
    print("\nExample: Ethnicity Estimate from Synthetic Matches")
    print("=" * 60)

    matches, segments = generate_synthetic_matches(
        n_matches=300,
        weights=[0.45, 0.25, 0.15, 0.1, 0.05],
    )
    print(f"Generated {len(matches)} matches with {len(segments)} segments")

    reporter = EthnicityReporter()
    for birth_country in ["", "Germany"]:
        config = EthnicityConfig(birth_country=birth_country)
        result = EthnicityEstimator(config).estimate(matches, segments)
        print(f"\nBirth country: {birth_country or '(none)'}")
        print(reporter.format_report(result))


def example_trio_phasing():
    """
    Example splitting a child's matches by a tested parent's matches.
    """
    print("\nExample: Trio Phasing")
    print("=" * 60)

    matches, segments = generate_synthetic_matches(n_matches=300, seed=7)
    # The tested parent shares every other match, and shares less DNA
    # than the child with every fourth one.
    parent = matches.iloc[::2].copy()
    parent.loc[parent.index % 4 == 0, 'Total_cM_shared'] /= 2

    estimator = EthnicityEstimator()
    phased = estimator.phaser.phase(matches, parent)
    through_both = frame_to_matches(phased.both)
    print(f"{len(through_both)} matches are related through both parents, e.g.:")
    for match in through_both[:3]:
        print(f"  {match.name} ({match.country}, {match.shared_cm:.1f} cM)")

    results = estimator.estimate_trio(matches, segments, parent)
    print(EthnicityReporter().format_trio_report(results))


if __name__ == '__main__':
    print("MATCH ETHNICITY - USAGE EXAMPLES")
    print("=" * 60)

    example_with_records()
    example_with_synthetic_data()
    example_trio_phasing()

    print("\n" + "=" * 60)
    print("Examples complete!")
    print("\nFor real analysis, use: python analyze_ethnicity.py <matches.csv> <segments.csv>")

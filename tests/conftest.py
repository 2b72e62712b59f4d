"""Shared fixtures for the match_ethnicity test suite."""

import matplotlib
import pandas as pd
import pytest

from match_ethnicity.records import MATCH_COLUMNS, SEGMENT_COLUMNS

# Charts are written to files only.
matplotlib.use('Agg')


@pytest.fixture
def two_country_matches():
    return pd.DataFrame([
        ('P', 'Germany', 50.0),
        ('Q', 'Denmark', 30.0),
    ], columns=MATCH_COLUMNS)


@pytest.fixture
def separate_bin_segments():
    """One segment per match, each voting in exactly one bin of chromosome 1."""
    return pd.DataFrame([
        ('P', 1, 5000000, 6500000),
        ('Q', 1, 10000000, 11500000),
    ], columns=SEGMENT_COLUMNS)


@pytest.fixture
def shared_bin_segments():
    """Both matches vote in bin 6 of chromosome 1."""
    return pd.DataFrame([
        ('P', 1, 5000000, 6500000),
        ('Q', 1, 5200000, 6800000),
    ], columns=SEGMENT_COLUMNS)


@pytest.fixture
def make_joined():
    return joined_rows


def joined_rows(rows):
    """Build a joined match/segment table from (country, chrom, start, end) tuples."""
    return pd.DataFrame(
        [(f"M{i}", country, 10.0, chrom, start, end)
         for i, (country, chrom, start, end) in enumerate(rows)],
        columns=MATCH_COLUMNS + SEGMENT_COLUMNS[1:],
    )

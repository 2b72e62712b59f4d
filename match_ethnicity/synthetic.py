"""
Synthetic Data Module
Generates synthetic match lists and shared segments for demos and tests.
"""

from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from .genome_grid import CHROMOSOME_SIZES, CHROMOSOMES
from .records import MATCH_COLUMNS, SEGMENT_COLUMNS

DEFAULT_COUNTRIES = ['Germany', 'Denmark', 'Netherlands', 'Poland', 'USA']


def generate_synthetic_matches(n_matches: int = 200,
                               countries: Optional[List[str]] = None,
                               weights: Optional[List[float]] = None,
                               segments_per_match: Tuple[int, int] = (1, 6),
                               seed: int = 42) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Generate a synthetic match list with shared segments.

    Segment lengths are drawn from an exponential distribution typical of
    distant cousins, so most fall well below the close-relative threshold.

    Args:
        n_matches: Number of matches to generate
        countries: Countries to draw matches from
        weights: Relative frequency of each country (uniform if omitted)
        segments_per_match: Inclusive (min, max) number of segments per match
        seed: Random seed

    Returns:
        Tuple of (matches_df, segments_df)
    """
    rng = np.random.default_rng(seed)
    countries = countries or DEFAULT_COUNTRIES
    if weights is None:
        probs = np.full(len(countries), 1.0 / len(countries))
    else:
        probs = np.asarray(weights, dtype=float)
        probs = probs / probs.sum()

    match_rows = []
    segment_rows = []
    for i in range(n_matches):
        name = f"Match {i + 1}"
        country = countries[rng.choice(len(countries), p=probs)]
        n_segments = rng.integers(segments_per_match[0], segments_per_match[1] + 1)

        total_length = 0
        for _ in range(n_segments):
            chromosome = int(rng.integers(1, CHROMOSOMES + 1))
            length = int(np.clip(rng.exponential(6000000), 1000000, 30000000))
            max_start = CHROMOSOME_SIZES[chromosome - 1] - length - 1000000
            start = int(rng.integers(0, max_start))
            segment_rows.append((name, chromosome, start, start + length))
            total_length += length

        # Roughly one centiMorgan per million base pairs.
        match_rows.append((name, country, round(total_length / 1000000, 1)))

    return (pd.DataFrame(match_rows, columns=MATCH_COLUMNS),
            pd.DataFrame(segment_rows, columns=SEGMENT_COLUMNS))

"""
Ethnicity Resolver Module
Resolves every populated bin to its dominant country and totals the results.
"""

import logging
from typing import Dict, List, Tuple

import pandas as pd

from .config import DEFAULT_DOMINANCE_RATIO
from .errors import DivisionUndefined
from .genome_grid import GenomeBinGrid

logger = logging.getLogger(__name__)


def most_common_country(votes: Dict[str, int],
                        dominance_ratio: float = DEFAULT_DOMINANCE_RATIO) -> str:
    """
    Determine the country of origin of one bin.

    A single pass tracks the highest vote count and the runner-up. A tie
    at the top makes the runner-up equal to the top, so tied bins never
    pass the dominance test.

    Args:
        votes: Number of matches from each country covering the bin
        dominance_ratio: Minimum top/second ratio for a clear result

    Returns:
        The dominant country, or an empty string if there is no clear result
    """
    if not votes:
        return ""

    winner = ""
    top = 0
    second = 0
    for country, value in votes.items():
        if value > top:
            second = top
            top = value
            winner = country
        elif second < value <= top:
            second = value

    logger.debug(f"Bin votes {votes} -> top={top} second={second}")

    # All votes for one country.
    if second == 0:
        return winner

    if top / second >= dominance_ratio:
        return winner
    return ""


class ResolvedEthnicity:
    """
    Count of resolved bins per country, plus the total of resolved bins.
    """

    def __init__(self, country_totals: Dict[str, int], total: int):
        self._country_totals = dict(country_totals)
        self.total = total

    @property
    def country_totals(self) -> Dict[str, int]:
        return dict(self._country_totals)

    def percentage(self, country: str) -> float:
        """Share of resolved bins that belong to a country."""
        if self.total == 0:
            raise DivisionUndefined("No bins were resolved to a country")
        return self._country_totals.get(country, 0) / self.total * 100

    def rows(self) -> List[Tuple[str, int, float]]:
        """
        Get report rows sorted by bin count.

        Returns:
            List of (country, count, percentage) tuples, largest first;
            empty when no bins were resolved
        """
        if self.total == 0:
            return []
        results = [(country, count, count / self.total * 100)
                   for country, count in self._country_totals.items()]
        results.sort(key=lambda x: x[1], reverse=True)
        return results

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows(), columns=['Country', 'Segments', 'Percentage'])

    def __eq__(self, other):
        if not isinstance(other, ResolvedEthnicity):
            return NotImplemented
        return self.total == other.total and self._country_totals == other._country_totals

    def __repr__(self):
        return f"ResolvedEthnicity(total={self.total}, country_totals={self._country_totals})"


class EthnicityResolver:
    """
    Reduces a populated GenomeBinGrid to per-country bin counts.
    """

    def __init__(self, dominance_ratio: float = DEFAULT_DOMINANCE_RATIO):
        self.dominance_ratio = dominance_ratio

    def resolve_labels(self, grid: GenomeBinGrid) -> List[List[str]]:
        """
        Label every bin with its most likely country.

        Returns:
            One list per chromosome holding a country name per bin (bin k
            at position k - 1), or an empty string where the bin is unresolved
        """
        return [[most_common_country(bin_votes, self.dominance_ratio) for bin_votes in bins]
                for bins in grid.chromosomes]

    def resolve(self, grid: GenomeBinGrid) -> ResolvedEthnicity:
        """
        Calculate the ethnicity breakdown of a grid.

        Args:
            grid: Grid populated by a SegmentMapper

        Returns:
            ResolvedEthnicity with per-country counts and the resolved total
        """
        totals: Dict[str, int] = {}
        total = 0
        for chromosome in self.resolve_labels(grid):
            for label in chromosome:
                if label != "":
                    total += 1
                    totals[label] = totals.get(label, 0) + 1

        logger.info(f"Resolved {total} bins to {len(totals)} countries")
        return ResolvedEthnicity(totals, total)

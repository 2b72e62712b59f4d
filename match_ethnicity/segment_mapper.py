"""
Segment Mapper Module
Maps the countries of matches onto the chromosome bins their shared segments cover.
"""

import logging
from typing import Dict, Iterable, Tuple

import pandas as pd

from .config import (
    DEFAULT_BIN_LENGTH,
    DEFAULT_CLOSE_RELATIVE_THRESHOLD,
    DEFAULT_EXCLUDED_COUNTRIES,
)
from .genome_grid import GenomeBinGrid

logger = logging.getLogger(__name__)


class SegmentMapper:
    """
    Casts country votes into a GenomeBinGrid.

    Each shared segment votes once for its match's country in every bin
    it covers. Segments of close relatives and matches from excluded
    countries cast no votes.
    """

    def __init__(self, close_relative_threshold: int = DEFAULT_CLOSE_RELATIVE_THRESHOLD,
                 bin_length: int = DEFAULT_BIN_LENGTH):
        """
        Initialize segment mapper.

        Args:
            close_relative_threshold: Segments longer than this are skipped
            bin_length: Bin length of the grids this mapper fills
        """
        self.close_relative_threshold = close_relative_threshold
        self.bin_length = bin_length

    def bin_range(self, start: int, end: int) -> Tuple[int, int]:
        """
        Get the inclusive range of bins a segment votes in.

        The first bin a segment touches is skipped: the scan starts one
        bin length past the segment start.

        Returns:
            Tuple of (first_bin, last_bin); empty when first_bin > last_bin
        """
        first = (start + self.bin_length) // self.bin_length
        last = end // self.bin_length
        return first, last

    def map_votes(self, grid: GenomeBinGrid, joined: pd.DataFrame,
                  birth_country: str = "",
                  excluded_countries: Iterable[str] = DEFAULT_EXCLUDED_COUNTRIES) -> Dict[str, int]:
        """
        Map matches' segments onto the grid, then reinforce the birth country.

        Args:
            grid: Fresh grid, mutated in place
            joined: Joined match/segment table with columns
                Country, Chromosome, StartLocation, EndLocation
            birth_country: Country added once to every populated bin
            excluded_countries: Countries that never receive votes

        Returns:
            Summary counts of the mapping pass
        """
        if grid.bin_length != self.bin_length:
            raise ValueError(
                f"Grid bin length {grid.bin_length} does not match "
                f"mapper bin length {self.bin_length}"
            )
        excludes = set(excluded_countries)
        summary = {
            'rows': len(joined),
            'mapped': 0,
            'close_relatives': 0,
            'excluded': 0,
            'votes': 0,
            'reinforced_bins': 0,
        }

        rows = joined[['Country', 'Chromosome', 'StartLocation', 'EndLocation']]
        for country, chromosome, start, end in rows.itertuples(index=False):
            # Ignore close relatives.
            if end - start > self.close_relative_threshold:
                summary['close_relatives'] += 1
                continue
            if country in excludes:
                summary['excluded'] += 1
                continue

            first, last = self.bin_range(int(start), int(end))
            for index in range(first, last + 1):
                grid.add_vote(int(chromosome), index, country)
                summary['votes'] += 1
            summary['mapped'] += 1

        summary['reinforced_bins'] = self._reinforce_birth_country(
            grid, birth_country, excludes
        )

        logger.info(
            f"Mapped {summary['mapped']} of {summary['rows']} segments "
            f"({summary['votes']} votes); skipped {summary['close_relatives']} "
            f"close-relative and {summary['excluded']} excluded-country segments"
        )
        return summary

    def _reinforce_birth_country(self, grid: GenomeBinGrid, birth_country: str,
                                 excludes: set) -> int:
        """Add one birth-country vote to every bin that already has votes."""
        if birth_country == "" or birth_country in excludes:
            return 0
        populated = [(chrom, index) for chrom, index, _ in grid.populated_bins()]
        for chrom, index in populated:
            grid.add_vote(chrom, index, birth_country)
        logger.debug(f"Reinforced {len(populated)} bins with birth country {birth_country}")
        return len(populated)

"""
Genome Bin Grid Module
Partitions each autosome into fixed-length bins that collect country votes.
"""

from typing import Dict, Iterator, List, Tuple

import pandas as pd

from .errors import IngestionError

CHROMOSOMES = 22

BIN_LENGTH = 1000000

# Upper bounds rather than exact sizes, since chromosome lengths differ
# between genome reference versions.
CHROMOSOME_SIZES = [250000000, 250000000, 200000000, 200000000, 190000000,
                    180000000, 160000000, 150000000, 150000000, 140000000,
                    140000000, 140000000, 120000000, 110000000, 110000000,
                    100000000, 90000000, 90000000, 60000000, 70000000,
                    50000000, 60000000]


class GenomeBinGrid:
    """
    DNA modelled as 22 chromosomes, each a list of bins.

    Every bin is a dictionary mapping country names to the number of
    match segments from that country covering the bin. Chromosomes are
    numbered 1..22 and bins 1..n_bins; bin k is stored at position k - 1.
    """

    def __init__(self, bin_length: int = BIN_LENGTH):
        self.bin_length = bin_length
        self.chromosomes: List[List[Dict[str, int]]] = []
        for size in CHROMOSOME_SIZES:
            n_bins = (size + bin_length - 1) // bin_length
            self.chromosomes.append([{} for _ in range(n_bins)])

    def n_bins(self, chromosome: int) -> int:
        return len(self._chromosome(chromosome))

    def votes(self, chromosome: int, index: int) -> Dict[str, int]:
        """Return the country vote map of one bin."""
        return self._chromosome(chromosome)[self._check_index(chromosome, index)]

    def add_vote(self, chromosome: int, index: int, country: str, count: int = 1):
        """Increment a country's vote count in one bin."""
        bin_votes = self.votes(chromosome, index)
        bin_votes[country] = bin_votes.get(country, 0) + count

    def populated_bins(self) -> Iterator[Tuple[int, int, Dict[str, int]]]:
        """Yield (chromosome, index, votes) for every bin with at least one vote."""
        for chrom_idx, bins in enumerate(self.chromosomes):
            for index, bin_votes in enumerate(bins, start=1):
                if bin_votes:
                    yield chrom_idx + 1, index, bin_votes

    def total_votes(self) -> int:
        return sum(sum(v.values()) for _, _, v in self.populated_bins())

    def to_frame(self) -> pd.DataFrame:
        """
        Flatten the grid into a long table.

        Returns:
            DataFrame with columns: Chromosome, Bin, Country, Votes
        """
        rows = [(chrom, index, country, count)
                for chrom, index, bin_votes in self.populated_bins()
                for country, count in bin_votes.items()]
        return pd.DataFrame(rows, columns=['Chromosome', 'Bin', 'Country', 'Votes'])

    def _chromosome(self, chromosome: int) -> List[Dict[str, int]]:
        if not 1 <= chromosome <= CHROMOSOMES:
            raise IngestionError(f"Chromosome {chromosome} out of range 1..{CHROMOSOMES}")
        return self.chromosomes[chromosome - 1]

    def _check_index(self, chromosome: int, index: int) -> int:
        n_bins = len(self.chromosomes[chromosome - 1])
        if not 1 <= index <= n_bins:
            raise IngestionError(
                f"Bin {index} beyond the end of chromosome {chromosome} "
                f"({n_bins} bins of {self.bin_length})"
            )
        return index - 1

"""
Records Module
Normalized match and shared-segment records, and their DataFrame tables.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

import pandas as pd

from .errors import IngestionError
from .genome_grid import CHROMOSOMES

logger = logging.getLogger(__name__)

MATCH_COLUMNS = ['Name', 'Country', 'Total_cM_shared']
SEGMENT_COLUMNS = ['Name', 'Chromosome', 'StartLocation', 'EndLocation']


@dataclass(frozen=True)
class Match:
    """One genetic relative with a declared country of origin."""
    name: str
    country: str
    shared_cm: float

    def __post_init__(self):
        if not self.name or not self.country:
            raise IngestionError(f"Match requires a name and a country: {self!r}")
        if self.shared_cm < 0:
            raise IngestionError(f"Negative shared cM for match {self.name!r}")


@dataclass(frozen=True)
class SharedSegment:
    """One contiguous stretch of DNA shared with a match."""
    name: str
    chromosome: int
    start: int
    end: int

    def __post_init__(self):
        if not self.name:
            raise IngestionError("Segment requires a match name")
        if not 1 <= self.chromosome <= CHROMOSOMES:
            raise IngestionError(
                f"Chromosome {self.chromosome} out of range for segment of {self.name!r}"
            )
        if self.end <= self.start:
            raise IngestionError(
                f"Segment of {self.name!r} ends at {self.end} before it starts at {self.start}"
            )

    @property
    def length(self) -> int:
        return self.end - self.start


class NameDisambiguator:
    """
    Makes display names unique within one ingestion pass.

    Repeated display names belonging to different people get the suffixes
    "2", "3", ... in order of appearance. Segment exports list one block of
    rows per person, so a name only counts as a new person when its block
    is interrupted by a different name.
    """

    def __init__(self):
        self.counts: Dict[str, int] = {}
        self._prev_name = ""
        self._block_name = ""

    def unique_match_name(self, name: str) -> str:
        """Return a unique name for a match row."""
        if name not in self.counts:
            self.counts[name] = 1
            return name
        self.counts[name] += 1
        return f"{name}{self.counts[name]}"

    def block_name(self, name: str) -> str:
        """Return the unique name of the segment block this row belongs to."""
        if name not in self.counts:
            self.counts[name] = 1
            self._block_name = name
        elif name != self._prev_name:
            self.counts[name] += 1
            self._block_name = f"{name}{self.counts[name]}"
        self._prev_name = name
        return self._block_name


def matches_to_frame(matches: Iterable[Match]) -> pd.DataFrame:
    """Convert Match records into a match table."""
    rows = [(m.name, m.country, float(m.shared_cm)) for m in matches]
    df = pd.DataFrame(rows, columns=MATCH_COLUMNS)
    return df.astype({'Name': str, 'Country': str, 'Total_cM_shared': float})


def segments_to_frame(segments: Iterable[SharedSegment]) -> pd.DataFrame:
    """Convert SharedSegment records into a segment table."""
    rows = [(s.name, s.chromosome, s.start, s.end) for s in segments]
    df = pd.DataFrame(rows, columns=SEGMENT_COLUMNS)
    return df.astype({'Name': str, 'Chromosome': 'int64',
                      'StartLocation': 'int64', 'EndLocation': 'int64'})


def frame_to_matches(df: pd.DataFrame) -> List[Match]:
    """Convert a match table back into Match records."""
    return [Match(row.Name, row.Country, row.Total_cM_shared)
            for row in df[MATCH_COLUMNS].itertuples(index=False)]


def as_match_frame(matches) -> pd.DataFrame:
    """Accept either a match table or a list of Match records."""
    if isinstance(matches, pd.DataFrame):
        _require_columns(matches, MATCH_COLUMNS, 'match')
        return matches
    return matches_to_frame(matches)


def as_segment_frame(segments) -> pd.DataFrame:
    """Accept either a segment table or a list of SharedSegment records."""
    if isinstance(segments, pd.DataFrame):
        _require_columns(segments, SEGMENT_COLUMNS, 'segment')
        return segments
    return segments_to_frame(segments)


def _require_columns(df: pd.DataFrame, columns: List[str], kind: str):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise IngestionError(f"{kind} table is missing columns: {missing}")


def join_segments(matches: pd.DataFrame, segments: pd.DataFrame) -> pd.DataFrame:
    """
    Attach each match's country to its shared segments.

    Inner join on Name: segments whose name has no match are dropped.

    Args:
        matches: Match table
        segments: Segment table

    Returns:
        DataFrame with one row per (match, segment) pair
    """
    joined = pd.merge(matches[MATCH_COLUMNS], segments[SEGMENT_COLUMNS],
                      on='Name', how='inner')
    orphans = len(segments) - int(segments['Name'].isin(matches['Name']).sum())
    if orphans:
        logger.debug(f"Dropped {orphans} segments without a matching match entry")
    return joined

"""
Match List Parser Module
Parses MyHeritage "DNA matches" and "shared DNA segments" CSV exports.
"""

import logging
from typing import Dict

import pandas as pd

from .errors import IngestionError
from .records import MATCH_COLUMNS, SEGMENT_COLUMNS, NameDisambiguator

logger = logging.getLogger(__name__)

# Zero-based column positions in MyHeritage's English export format.
MATCH_NAME_COL = 1
MATCH_COUNTRY_COL = 3
MATCH_CM_COL = 9

SEGMENT_NAME_COL = 2
SEGMENT_CHROMOSOME_COL = 3
SEGMENT_START_COL = 4
SEGMENT_END_COL = 5


class MatchListParser:
    """
    Parser for MyHeritage match list and shared segment exports.
    Columns are read by position, since the header names vary by language.
    """

    def __init__(self):
        self.metadata: Dict[str, Dict] = {}

    def parse_matches(self, filepath: str) -> pd.DataFrame:
        """
        Parse a "DNA matches list" export.

        Args:
            filepath: Path to the matches CSV file

        Returns:
            DataFrame with columns: Name, Country, Total_cM_shared
        """
        raw = self._read(filepath, MATCH_CM_COL + 1)

        names = NameDisambiguator()
        rows = []
        dropped = 0
        for values in raw.itertuples(index=False):
            name = values[MATCH_NAME_COL].strip()
            country = values[MATCH_COUNTRY_COL].strip()
            shared_cm = values[MATCH_CM_COL].strip()
            if name == "" or country == "" or shared_cm == "":
                dropped += 1
                continue

            try:
                cm = float(shared_cm.replace(',', ''))
            except ValueError as e:
                raise IngestionError(
                    f"Invalid shared cM value {shared_cm!r} for {name!r} in {filepath}"
                ) from e
            rows.append((names.unique_match_name(name), country, cm))

        df = pd.DataFrame(rows, columns=MATCH_COLUMNS)
        self._record(filepath, len(df), dropped)
        return df

    def parse_segments(self, filepath: str) -> pd.DataFrame:
        """
        Parse a "shared DNA segments" export.

        Args:
            filepath: Path to the segments CSV file

        Returns:
            DataFrame with columns: Name, Chromosome, StartLocation, EndLocation
        """
        raw = self._read(filepath, SEGMENT_END_COL + 1)

        names = NameDisambiguator()
        rows = []
        dropped = 0
        for values in raw.itertuples(index=False):
            name = values[SEGMENT_NAME_COL].strip()
            fields = [values[SEGMENT_CHROMOSOME_COL].strip(),
                      values[SEGMENT_START_COL].strip(),
                      values[SEGMENT_END_COL].strip()]
            if name == "" or "" in fields:
                dropped += 1
                continue

            block_name = names.block_name(name)
            try:
                chromosome, start, end = (int(v.replace(',', '')) for v in fields)
            except ValueError as e:
                raise IngestionError(
                    f"Invalid segment location {fields!r} for {name!r} in {filepath}"
                ) from e
            rows.append((block_name, chromosome, start, end))

        df = pd.DataFrame(rows, columns=SEGMENT_COLUMNS)
        self._record(filepath, len(df), dropped)
        return df

    def _read(self, filepath: str, min_columns: int) -> pd.DataFrame:
        """Read a CSV export as strings, keeping empty cells empty."""
        try:
            raw = pd.read_csv(filepath, dtype=str, keep_default_na=False)
        except (OSError, UnicodeDecodeError, pd.errors.ParserError,
                pd.errors.EmptyDataError) as e:
            raise IngestionError(f"Could not read file {filepath}: {e}") from e

        if raw.shape[1] < min_columns:
            raise IngestionError(
                f"{filepath} has {raw.shape[1]} columns, expected at least "
                f"{min_columns}. Wrong format?"
            )
        return raw

    def _record(self, filepath: str, kept: int, dropped: int):
        self.metadata[str(filepath)] = {'rows': kept, 'dropped': dropped}
        logger.info(f"Loaded {kept} rows from {filepath} ({dropped} incomplete rows dropped)")

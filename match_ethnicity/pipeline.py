"""
Ethnicity Pipeline Module
Runs matches and segments through mapping and resolution, optionally phased by parent.
"""

import logging
from typing import Dict, Optional

import pandas as pd

from .config import EthnicityConfig
from .ethnicity_resolver import EthnicityResolver, ResolvedEthnicity
from .genome_grid import GenomeBinGrid
from .match_parser import MatchListParser
from .records import as_match_frame, as_segment_frame, join_segments
from .segment_mapper import SegmentMapper
from .trio_phaser import TrioPhaser

logger = logging.getLogger(__name__)


class EthnicityEstimator:
    """
    Estimates ethnicity from where a person's DNA matches come from.

    Each evaluation allocates its own GenomeBinGrid, so groups never
    share state.
    """

    def __init__(self, config: Optional[EthnicityConfig] = None):
        self.config = config or EthnicityConfig()
        self.mapper = SegmentMapper(
            close_relative_threshold=self.config.close_relative_threshold,
            bin_length=self.config.bin_length,
        )
        self.resolver = EthnicityResolver(dominance_ratio=self.config.dominance_ratio)
        self.phaser = TrioPhaser()

    def estimate(self, matches, segments) -> ResolvedEthnicity:
        """
        Calculate an ethnicity estimate.

        Args:
            matches: Match table or list of Match records
            segments: Segment table or list of SharedSegment records

        Returns:
            ResolvedEthnicity for the given matches
        """
        matches_df = as_match_frame(matches)
        segments_df = as_segment_frame(segments)
        joined = join_segments(matches_df, segments_df)
        return self._evaluate(joined)

    def estimate_trio(self, matches, segments, parent_matches) -> Dict[str, ResolvedEthnicity]:
        """
        Calculate separate estimates for each side of the family.

        Args:
            matches: Child's match table or Match records
            segments: Child's segment table or SharedSegment records
            parent_matches: Tested parent's match table or Match records

        Returns:
            Dictionary mapping phase name (parent, other_parent, both)
            to its ResolvedEthnicity
        """
        matches_df = as_match_frame(matches)
        segments_df = as_segment_frame(segments)
        parent_df = as_match_frame(parent_matches)

        phased = self.phaser.phase(matches_df, parent_df)
        results = {}
        for phase_name, group in phased.by_label().items():
            logger.info(f"Evaluating {phase_name} group ({len(group)} matches)")
            results[phase_name] = self._evaluate(join_segments(group, segments_df))
        return results

    def estimate_files(self, matches_file: str, segments_file: str,
                       parent_matches_file: Optional[str] = None):
        """
        Calculate an estimate from MyHeritage CSV exports.

        Returns:
            ResolvedEthnicity, or a phase-keyed dictionary of them when a
            parent matches file is given
        """
        parser = MatchListParser()
        matches = parser.parse_matches(matches_file)
        segments = parser.parse_segments(segments_file)
        if parent_matches_file is None:
            return self.estimate(matches, segments)
        parent = parser.parse_matches(parent_matches_file)
        return self.estimate_trio(matches, segments, parent)

    def _evaluate(self, joined: pd.DataFrame) -> ResolvedEthnicity:
        grid = GenomeBinGrid(bin_length=self.config.bin_length)
        self.mapper.map_votes(
            grid,
            joined,
            birth_country=self.config.birth_country,
            excluded_countries=self.config.excluded_countries,
        )
        return self.resolver.resolve(grid)

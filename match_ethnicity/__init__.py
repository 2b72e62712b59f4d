"""
Match Ethnicity
Estimates ethnic origins from the birth countries of DNA matches rather than reference panels.
"""

__version__ = "0.1.0"

from .config import EthnicityConfig
from .errors import ConsistencyError, DivisionUndefined, EthnicityError, IngestionError
from .ethnicity_resolver import EthnicityResolver, ResolvedEthnicity, most_common_country
from .genome_grid import GenomeBinGrid
from .match_parser import MatchListParser
from .pipeline import EthnicityEstimator
from .records import Match, NameDisambiguator, SharedSegment, join_segments
from .report import EthnicityReporter
from .segment_mapper import SegmentMapper
from .synthetic import generate_synthetic_matches
from .trio_phaser import PHASE_LABELS, PhasedMatches, TrioPhaser

__all__ = [
    'EthnicityConfig',
    'EthnicityError',
    'IngestionError',
    'ConsistencyError',
    'DivisionUndefined',
    'Match',
    'SharedSegment',
    'NameDisambiguator',
    'join_segments',
    'MatchListParser',
    'GenomeBinGrid',
    'SegmentMapper',
    'EthnicityResolver',
    'ResolvedEthnicity',
    'most_common_country',
    'TrioPhaser',
    'PhasedMatches',
    'PHASE_LABELS',
    'EthnicityEstimator',
    'EthnicityReporter',
    'generate_synthetic_matches',
]

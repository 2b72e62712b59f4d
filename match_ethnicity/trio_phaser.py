"""
Trio Phaser Module
Splits a child's matches by the side of the family they were inherited from.
"""

import logging
from typing import Dict, NamedTuple, Tuple

import pandas as pd

from .errors import ConsistencyError
from .records import MATCH_COLUMNS

logger = logging.getLogger(__name__)

PARENT = 'parent'
OTHER_PARENT = 'other_parent'
BOTH = 'both'

PHASE_LABELS = {
    PARENT: "Ethnicities you inherited from your parent.",
    OTHER_PARENT: "Ethnicities you inherited from your other parent.",
    BOTH: "Ethnicities that contributed to you and both of your parents.",
}


class PhasedMatches(NamedTuple):
    """A child's matches split into three inheritance groups."""
    both: pd.DataFrame
    parent_only: pd.DataFrame
    other_parent_only: pd.DataFrame

    def by_label(self) -> Dict[str, pd.DataFrame]:
        """Groups keyed by phase name, in report order."""
        return {
            PARENT: self.parent_only,
            OTHER_PARENT: self.other_parent_only,
            BOTH: self.both,
        }


def split_by_shared_cm(child_parent: pd.DataFrame,
                       parent_cm: Dict[str, float]) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Separate matches where the child shares more DNA than the tested parent.

    A child cannot inherit more DNA from a match through one parent than
    that parent shares with the match, so such matches must be related
    through both parents.

    Args:
        child_parent: Child's matches that the parent also matches
        parent_cm: Parent's shared cM per match name

    Returns:
        Tuple of (both, parent_only) match tables
    """
    through_both = []
    for name, child_cm in zip(child_parent['Name'], child_parent['Total_cM_shared']):
        if name not in parent_cm:
            raise ConsistencyError(
                f"Match {name!r} is shared with the parent but has no parent cM entry"
            )
        through_both.append(child_cm > parent_cm[name])

    mask = pd.Series(through_both, index=child_parent.index, dtype=bool)
    both = child_parent[mask].reset_index(drop=True)
    parent_only = child_parent[~mask].reset_index(drop=True)
    return both, parent_only


class TrioPhaser:
    """
    Phases a child's matches against the matches of one tested parent.
    """

    def phase(self, child_matches: pd.DataFrame,
              parent_matches: pd.DataFrame) -> PhasedMatches:
        """
        Partition the child's matches into inheritance groups.

        Args:
            child_matches: Child's match table
            parent_matches: Tested parent's match table

        Returns:
            PhasedMatches with both, parent_only and other_parent_only tables
        """
        child = child_matches[MATCH_COLUMNS]
        in_parent = child['Name'].isin(parent_matches['Name'])
        child_parent = child[in_parent]
        # Matches absent from the tested parent come from the other parent.
        other_parent_only = child[~in_parent].reset_index(drop=True)

        parent_cm = dict(zip(parent_matches['Name'], parent_matches['Total_cM_shared']))
        both, parent_only = split_by_shared_cm(child_parent, parent_cm)

        logger.info(
            f"Phased {len(child)} matches: {len(parent_only)} from parent, "
            f"{len(other_parent_only)} from other parent, {len(both)} through both"
        )
        return PhasedMatches(both, parent_only, other_parent_only)

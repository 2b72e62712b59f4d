"""
Configuration Module
Tunable parameters for segment mapping and ethnicity resolution.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, Tuple

DEFAULT_EXCLUDED_COUNTRIES = ("USA", "Canada", "Australia")

# Matching segments longer than this indicate close family members.
DEFAULT_CLOSE_RELATIVE_THRESHOLD = 20000000

DEFAULT_BIN_LENGTH = 1000000

DEFAULT_DOMINANCE_RATIO = 1.5


@dataclass
class EthnicityConfig:
    """
    Parameters of one ethnicity evaluation.

    Attributes:
        birth_country: Country that reinforces every populated bin (optional)
        excluded_countries: Countries that never receive votes, usually
            because of massive recent migration
        close_relative_threshold: Segments longer than this are ignored
        bin_length: Physical length of a chromosome bin
        dominance_ratio: Minimum top/second vote ratio for a bin to resolve
    """
    birth_country: str = ""
    excluded_countries: Tuple[str, ...] = field(
        default_factory=lambda: DEFAULT_EXCLUDED_COUNTRIES
    )
    close_relative_threshold: int = DEFAULT_CLOSE_RELATIVE_THRESHOLD
    bin_length: int = DEFAULT_BIN_LENGTH
    dominance_ratio: float = DEFAULT_DOMINANCE_RATIO

    def __post_init__(self):
        self.excluded_countries = tuple(self.excluded_countries)
        self.validate()

    def validate(self):
        """Raise ValueError if any parameter is out of range."""
        if self.bin_length <= 0:
            raise ValueError(f"bin_length must be positive, got {self.bin_length}")
        if self.close_relative_threshold <= 0:
            raise ValueError(
                f"close_relative_threshold must be positive, "
                f"got {self.close_relative_threshold}"
            )
        if self.dominance_ratio < 1.0:
            raise ValueError(
                f"dominance_ratio must be at least 1.0, got {self.dominance_ratio}"
            )

    @classmethod
    def from_dict(cls, values: Dict) -> 'EthnicityConfig':
        """
        Build a config from a plain mapping.

        Args:
            values: Mapping of field names to values

        Returns:
            EthnicityConfig with the given overrides
        """
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**values)

"""
Ethnicity Report Module
Formats resolved ethnicity breakdowns as text and bar charts.
"""

import logging
from typing import Dict

import matplotlib.pyplot as plt

from .errors import DivisionUndefined
from .ethnicity_resolver import ResolvedEthnicity
from .trio_phaser import PHASE_LABELS

logger = logging.getLogger(__name__)


class EthnicityReporter:
    """
    Renders ResolvedEthnicity results for people.
    """

    def format_report(self, result: ResolvedEthnicity) -> str:
        """
        Format one ethnicity breakdown.

        Example:
            Total: 1311 segments
                    Germany  465  35.5%
                    Denmark  336  25.6%
        """
        report_lines = [f"Total: {result.total} segments"]
        rows = result.rows()
        if not rows:
            report_lines.append("No resolvable segments.")
        for country, count, pct in rows:
            report_lines.append("%15s %4d %5.1f%%" % (country, count, pct))
        return "\n".join(report_lines)

    def format_trio_report(self, results: Dict[str, ResolvedEthnicity]) -> str:
        """Format the phased breakdowns, each under its inheritance label."""
        report_lines = []
        for phase_name, result in results.items():
            report_lines.append("")
            report_lines.append(PHASE_LABELS.get(phase_name, phase_name))
            report_lines.append(self.format_report(result))
        return "\n".join(report_lines)

    def plot_ethnicities(self, result: ResolvedEthnicity, output_file: str,
                         title: str = "Ethnicity estimate from DNA matches") -> str:
        """
        Save a horizontal bar chart of the breakdown.

        Args:
            result: Resolved ethnicity breakdown
            output_file: Path of the image to write
            title: Chart title

        Returns:
            Path of the saved chart
        """
        rows = result.rows()
        if not rows:
            raise DivisionUndefined("Nothing to plot: no bins were resolved")

        # Largest share on top.
        countries = [row[0] for row in reversed(rows)]
        percentages = [row[2] for row in reversed(rows)]

        fig, ax = plt.subplots(figsize=(10, max(3, 0.4 * len(rows) + 1)))
        bars = ax.barh(countries, percentages, color='steelblue', edgecolor='black')
        for bar, pct in zip(bars, percentages):
            ax.text(bar.get_width() + 0.5, bar.get_y() + bar.get_height() / 2,
                    f"{pct:.1f}%", va='center', fontsize=9)

        ax.set_xlabel('Percentage of resolved segments (%)', fontsize=12)
        ax.set_title(f"{title} ({result.total} segments)", fontsize=14, fontweight='bold')
        ax.set_xlim(0, min(100, max(percentages) + 10))
        ax.grid(True, axis='x', alpha=0.3)

        plt.tight_layout()
        plt.savefig(output_file, dpi=150, bbox_inches='tight')
        plt.close(fig)

        logger.info(f"Saved ethnicity chart: {output_file}")
        return str(output_file)

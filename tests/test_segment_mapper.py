"""Tests for match_ethnicity.segment_mapper — country votes on chromosome bins."""

import pytest

from match_ethnicity.errors import IngestionError
from match_ethnicity.genome_grid import GenomeBinGrid
from match_ethnicity.segment_mapper import SegmentMapper


def populated(grid):
    return {(c, i): dict(v) for c, i, v in grid.populated_bins()}


# ── bin_range ─────────────────────────────────────────────────────────

class TestBinRange:
    def test_first_touched_bin_is_skipped(self):
        mapper = SegmentMapper()
        assert mapper.bin_range(1500000, 4200000) == (2, 4)

    def test_segment_from_origin(self):
        assert SegmentMapper().bin_range(0, 1000000) == (1, 1)

    def test_short_segment_inside_one_bin_is_empty(self):
        first, last = SegmentMapper().bin_range(1100000, 1900000)
        assert first > last

    def test_custom_bin_length(self):
        mapper = SegmentMapper(bin_length=500000)
        assert mapper.bin_range(1000000, 2000000) == (3, 4)


# ── vote mapping ──────────────────────────────────────────────────────

class TestMapVotes:
    def test_one_vote_per_covered_bin(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(
            grid, make_joined([('Germany', 2, 1500000, 4200000)]), excluded_countries=()
        )
        assert populated(grid) == {
            (2, 2): {'Germany': 1},
            (2, 3): {'Germany': 1},
            (2, 4): {'Germany': 1},
        }
        assert summary['votes'] == 3
        assert summary['mapped'] == 1

    def test_votes_accumulate_across_segments(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper().map_votes(grid, make_joined([
            ('Germany', 1, 5000000, 6500000),
            ('Germany', 1, 5300000, 6900000),
            ('Denmark', 1, 5100000, 6200000),
        ]), excluded_countries=())
        assert grid.votes(1, 6) == {'Germany': 2, 'Denmark': 1}

    def test_segment_too_short_to_vote(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(
            grid, make_joined([('Germany', 1, 1100000, 1900000)]), excluded_countries=()
        )
        assert populated(grid) == {}
        assert summary['votes'] == 0

    def test_empty_input(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(grid, make_joined([]), birth_country='Germany')
        assert populated(grid) == {}
        assert summary['reinforced_bins'] == 0

    def test_segment_ending_at_chromosome_bound_votes(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(
            grid, make_joined([('Germany', 21, 45000000, 50000000)]), excluded_countries=()
        )
        assert [i for c, i in populated(grid)] == [46, 47, 48, 49, 50]
        assert summary['votes'] == 5

    def test_segment_ending_in_last_partial_bin_votes(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper().map_votes(
            grid, make_joined([('Germany', 21, 45000000, 50999999)]), excluded_countries=()
        )
        assert max(i for c, i in populated(grid)) == 50

    def test_segment_past_chromosome_end(self, make_joined):
        grid = GenomeBinGrid()
        with pytest.raises(IngestionError):
            SegmentMapper().map_votes(
                grid, make_joined([('Germany', 21, 46000000, 51000000)]), excluded_countries=()
            )

    def test_bin_length_mismatch(self, make_joined):
        with pytest.raises(ValueError):
            SegmentMapper(bin_length=500000).map_votes(GenomeBinGrid(), make_joined([]))


class TestCloseRelatives:
    def test_long_segment_casts_no_votes(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(
            grid, make_joined([('Germany', 1, 0, 20000001)]), excluded_countries=()
        )
        assert populated(grid) == {}
        assert summary['close_relatives'] == 1

    def test_threshold_length_still_votes(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper().map_votes(
            grid, make_joined([('Germany', 1, 0, 20000000)]), excluded_countries=()
        )
        assert len(populated(grid)) == 20

    def test_custom_threshold(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper(close_relative_threshold=2000000).map_votes(
            grid, make_joined([('Germany', 1, 0, 3000000)]), excluded_countries=()
        )
        assert populated(grid) == {}


class TestExcludedCountries:
    def test_default_exclusions(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(grid, make_joined([
            ('USA', 1, 5000000, 8000000),
            ('Canada', 2, 5000000, 8000000),
            ('Australia', 3, 5000000, 8000000),
            ('Germany', 4, 5000000, 6500000),
        ]))
        assert populated(grid) == {(4, 6): {'Germany': 1}}
        assert summary['excluded'] == 3

    def test_custom_exclusions(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper().map_votes(grid, make_joined([
            ('USA', 1, 5000000, 6500000),
            ('Brazil', 1, 5000000, 6500000),
        ]), excluded_countries=['Brazil'])
        assert grid.votes(1, 6) == {'USA': 1}


# ── birth country pass ────────────────────────────────────────────────

class TestBirthCountry:
    def test_reinforces_populated_bins_once(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(grid, make_joined([
            ('Denmark', 1, 5000000, 6500000),
            ('Denmark', 1, 5000000, 6500000),
            ('Germany', 3, 9000000, 10500000),
        ]), birth_country='Germany', excluded_countries=())
        assert grid.votes(1, 6) == {'Denmark': 2, 'Germany': 1}
        assert grid.votes(3, 10) == {'Germany': 2}
        assert summary['reinforced_bins'] == 2

    def test_never_creates_votes_in_empty_bins(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper().map_votes(
            grid, make_joined([('Denmark', 1, 5000000, 6500000)]),
            birth_country='Germany', excluded_countries=()
        )
        assert list(populated(grid)) == [(1, 6)]

    def test_excluded_birth_country_skipped(self, make_joined):
        grid = GenomeBinGrid()
        summary = SegmentMapper().map_votes(
            grid, make_joined([('Denmark', 1, 5000000, 6500000)]), birth_country='USA'
        )
        assert grid.votes(1, 6) == {'Denmark': 1}
        assert summary['reinforced_bins'] == 0

    def test_no_birth_country(self, make_joined):
        grid = GenomeBinGrid()
        SegmentMapper().map_votes(
            grid, make_joined([('Denmark', 1, 5000000, 6500000)]), excluded_countries=()
        )
        assert grid.total_votes() == 1

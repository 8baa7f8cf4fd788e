"""Tests for the preference ranking."""
import pytest
from hypothesis import given, strategies as st

from oncall.solver.ranking import (
    PreferenceRecord,
    build_preference_ranking,
    find_record,
    reset_cooldowns,
    sort_ranking,
    tick_cooldowns,
)

from conftest import N, P, X, make_grid


class TestBuildRanking:
    def test_fewest_preferred_first(self):
        grid = make_grid([
            [P, P, N],  # 2
            [N, N, N],  # 0
            [P, X, P],  # 2
            [N, P, N],  # 1
        ])
        ranking = build_preference_ranking(grid)
        assert [r.person_idx for r in ranking] == [1, 3, 2, 0]
        assert [r.preferred_count for r in ranking] == [0, 1, 2, 2]

    def test_ties_keep_reverse_roster_order(self):
        grid = make_grid([[P], [P], [P]])
        ranking = build_preference_ranking(grid)
        assert [r.person_idx for r in ranking] == [2, 1, 0]

    def test_preferred_days_listed(self):
        grid = make_grid([[N, P, X, P]])
        record = build_preference_ranking(grid)[0]
        assert record.preferred_days == [2, 4]
        assert record.prefers(4)
        assert not record.prefers(3)
        assert record.cooldown == 0

    @given(st.lists(
        st.lists(st.sampled_from([P, N, X]), min_size=5, max_size=5),
        min_size=1, max_size=8,
    ))
    def test_permutation_sorted(self, rows):
        ranking = build_preference_ranking(make_grid(rows))
        assert sorted(r.person_idx for r in ranking) == list(range(len(rows)))
        counts = [r.preferred_count for r in ranking]
        assert counts == sorted(counts)


class TestRankingHelpers:
    def test_sort_is_stable(self):
        ranking = [PreferenceRecord(0, 2), PreferenceRecord(1, 1), PreferenceRecord(2, 2), PreferenceRecord(3, 1)]
        sort_ranking(ranking)
        assert [r.person_idx for r in ranking] == [1, 3, 0, 2]

    def test_tick_stops_at_zero(self):
        ranking = [PreferenceRecord(0, 0, cooldown=2), PreferenceRecord(1, 0, cooldown=0)]
        tick_cooldowns(ranking)
        assert [r.cooldown for r in ranking] == [1, 0]
        tick_cooldowns(ranking)
        tick_cooldowns(ranking)
        assert [r.cooldown for r in ranking] == [0, 0]

    def test_reset(self):
        ranking = [PreferenceRecord(0, 0, cooldown=5)]
        reset_cooldowns(ranking)
        assert ranking[0].cooldown == 0

    def test_find_record(self):
        ranking = [PreferenceRecord(3, 0), PreferenceRecord(1, 0)]
        assert find_record(ranking, 1) is ranking[1]
        with pytest.raises(KeyError):
            find_record(ranking, 7)

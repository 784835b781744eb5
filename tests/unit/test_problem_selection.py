"""Unit tests for rating/tag filtering and sampling."""

import random
from collections import Counter

from domain.models import ProblemRecord, ProblemStatistic
from domain.selection import index_statistics, select_problems, shuffle


def make_problem(contest_id, index, rating=1200, tags=("dp",), name=None):
    return ProblemRecord(
        contest_id=contest_id,
        index=index,
        name=name or f"Problem {contest_id}{index}",
        rating=rating,
        tags=tuple(tags),
    )


class TestSelectProblems:
    """Filtering and sampling behaviour."""

    def test_excluded_tag_and_statistics_join(self):
        """Scenario A: excluded tag removed, solve count attached."""
        problems = [
            make_problem(1, "A", tags=["dp"]),
            make_problem(1, "B", tags=["greedy"]),
        ]
        statistics = [ProblemStatistic(contest_id=1, index="A", solved_count=500)]

        result = select_problems(problems, statistics, 1200, ["greedy"], 10)

        assert len(result) == 1
        assert result[0].contest_id == 1
        assert result[0].index == "A"
        assert result[0].solved_count == 500

    def test_no_matching_rating_returns_empty(self):
        """Scenario B: nothing rated 900."""
        problems = [make_problem(1, "A", rating=1200), make_problem(2, "B", rating=1300)]

        assert select_problems(problems, [], 900, [], 10) == []

    def test_quantity_one_picks_single_problem(self):
        """Scenario C: one out of five."""
        problems = [make_problem(i, "A") for i in range(1, 6)]

        result = select_problems(problems, [], 1200, [], 1)

        assert len(result) == 1
        assert result[0].contest_id in range(1, 6)

    def test_quantity_larger_than_survivors_returns_all(self):
        problems = [make_problem(i, "A") for i in range(3)]

        result = select_problems(problems, [], 1200, [], 50)

        assert sorted(p.contest_id for p in result) == [0, 1, 2]

    def test_unrated_problems_are_dropped(self):
        problems = [make_problem(1, "A", rating=None), make_problem(1, "B", rating=0)]

        assert select_problems(problems, [], 1200, [], 10) == []

    def test_exclusion_is_case_insensitive(self):
        problems = [
            make_problem(1, "A", tags=["Dynamic Programming"]),
            make_problem(1, "B", tags=["math"]),
        ]

        result = select_problems(problems, [], 1200, ["DYNAMIC programming"], 10)

        assert [p.index for p in result] == ["B"]

    def test_missing_statistic_defaults_to_zero(self):
        problems = [make_problem(7, "C")]
        statistics = [ProblemStatistic(contest_id=7, index="D", solved_count=42)]

        result = select_problems(problems, statistics, 1200, [], 10)

        assert result[0].solved_count == 0

    def test_tags_keep_original_case(self):
        problems = [make_problem(1, "A", tags=["Brute Force"])]

        result = select_problems(problems, [], 1200, [], 10)

        assert result[0].tags == ("Brute Force",)

    def test_invariants_hold_on_mixed_input(self):
        rng = random.Random(7)
        tags_pool = ["dp", "greedy", "math", "graphs", "strings"]
        problems = [
            make_problem(
                i,
                "A",
                rating=rng.choice([None, 800, 1200, 1600]),
                tags=rng.sample(tags_pool, 2),
            )
            for i in range(200)
        ]

        for quantity in (1, 5, 50):
            result = select_problems(problems, [], 1200, ["Greedy", "math"], quantity, rng=rng)

            assert len(result) <= quantity
            for problem in result:
                assert problem.rating == 1200
                assert not {t.lower() for t in problem.tags} & {"greedy", "math"}

    def test_first_position_is_roughly_uniform(self):
        problems = [make_problem(i, "A") for i in range(5)]
        rng = random.Random(12345)
        trials = 5000

        counts = Counter(
            select_problems(problems, [], 1200, [], 1, rng=rng)[0].contest_id
            for _ in range(trials)
        )

        assert set(counts) == set(range(5))
        for count in counts.values():
            assert 800 < count < 1200


class TestShuffle:
    """Fisher-Yates helper."""

    def test_shuffle_is_permutation_and_leaves_input_alone(self):
        items = list(range(20))

        result = shuffle(items, random.Random(1))

        assert sorted(result) == items
        assert items == list(range(20))

    def test_shuffle_handles_short_sequences(self):
        assert shuffle([]) == []
        assert shuffle(["x"]) == ["x"]


def test_index_statistics_uses_contest_and_index():
    statistics = [
        ProblemStatistic(contest_id=1, index="A", solved_count=10),
        ProblemStatistic(contest_id=1, index="B", solved_count=20),
    ]

    indexed = index_statistics(statistics)

    assert indexed[(1, "B")].solved_count == 20
    assert (2, "A") not in indexed

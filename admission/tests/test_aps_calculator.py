"""
Test the level mapper and APS aggregator.
"""

import random
from itertools import combinations, permutations

import pytest

from admission.logic import Subject, level_of, total_aps


def _subjects(*pairs):
    return [Subject(name=name, mark=mark, level=level) for name, mark, level in pairs]


# =============================================================================
# LEVEL MAPPER
# =============================================================================

def test_levels_from_marks():
    assert level_of(85) == 7
    assert level_of(70) == 6
    assert level_of(65) == 5
    assert level_of(50) == 4
    assert level_of(40) == 3
    assert level_of(33) == 2
    assert level_of(20) == 1


@pytest.mark.parametrize("boundary,level", [
    (80, 7), (70, 6), (60, 5), (50, 4), (40, 3), (30, 2),
])
def test_boundary_marks_map_to_higher_band(boundary, level):
    assert level_of(boundary) == level
    assert level_of(boundary - 1) == level - 1


@pytest.mark.parametrize("low,high,level", [
    (80, 100, 7), (70, 79, 6), (60, 69, 5), (50, 59, 4), (40, 49, 3), (30, 39, 2), (0, 29, 1),
])
def test_every_mark_in_band(low, high, level):
    for mark in range(low, high + 1):
        assert level_of(mark) == level


def test_fractional_marks_use_inclusive_lower_bound():
    assert level_of(79.5) == 6
    assert level_of(80.0) == 7
    assert level_of(29.99) == 1


def test_out_of_range_marks_extrapolate():
    assert level_of(-10) == 1
    assert level_of(-0.5) == 1
    assert level_of(100.5) == 7
    assert level_of(250) == 7


# =============================================================================
# APS AGGREGATOR
# =============================================================================

def test_best_six_excluding_life_orientation():
    subjects = _subjects(
        ("Life Orientation", 80, 7),   # Excluded
        ("Mathematics", 80, 7),
        ("Physical Science", 70, 6),
        ("English", 60, 5),
        ("History", 50, 4),
        ("Geography", 50, 4),
        ("Accounting", 40, 3),
        ("Art", 30, 2),                # Ranked 7th, dropped
    )
    # 7+6+5+4+4+3
    assert total_aps(subjects) == 29


def test_exactly_six_subjects_plus_life_orientation():
    subjects = _subjects(("Life Orientation", 50, 4), *[(f"S{i}", 50, 4) for i in range(1, 7)])
    assert total_aps(subjects) == 24


def test_life_orientation_case_insensitive():
    subjects = _subjects(("life orientation", 90, 7), *[(f"S{i}", 50, 4) for i in range(1, 7)])
    assert total_aps(subjects) == 24


@pytest.mark.parametrize("name", [
    "LIFE ORIENTATION", "  Life Orientation  ", "\tlife Orientation\n",
])
def test_life_orientation_whitespace_and_case_variants(name):
    subjects = _subjects((name, 90, 7), ("Mathematics", 55, 4))
    assert total_aps(subjects) == 4


def test_similar_names_are_not_excluded():
    subjects = _subjects(("Life Orientations", 90, 7), ("Life  Orientation", 90, 7))
    assert total_aps(subjects) == 14


def test_empty_list():
    assert total_aps([]) == 0


def test_only_life_orientation():
    assert total_aps(_subjects(("Life Orientation", 85, 7))) == 0


def test_fewer_than_six_sums_all():
    subjects = _subjects(("Mathematics", 75, 6), ("English", 45, 3), ("Life Orientation", 90, 7))
    assert total_aps(subjects) == 9


def test_out_of_range_levels_summed_as_given():
    subjects = _subjects(("A", 50, -2), ("B", 50, 9), ("C", 50, 0))
    assert total_aps(subjects) == 7


def test_duplicate_names_are_independent():
    subjects = _subjects(("Mathematics", 80, 7), ("Mathematics", 80, 7))
    assert total_aps(subjects) == 14


def test_input_not_mutated():
    subjects = _subjects(("Art", 30, 2), ("Mathematics", 80, 7), ("Life Orientation", 60, 5))
    snapshot = list(subjects)
    total_aps(subjects)
    assert subjects == snapshot


# =============================================================================
# PROPERTIES
# =============================================================================

def _random_subjects(rng, count, with_lo=True):
    subjects = [Subject.from_mark(f"Subject {i}", rng.randint(0, 100)) for i in range(count)]
    if with_lo:
        subjects.insert(rng.randint(0, count), Subject.from_mark("Life Orientation", rng.randint(0, 100)))
    return subjects


def test_order_independent():
    subjects = _subjects(
        ("Life Orientation", 80, 7), ("A", 80, 7), ("B", 70, 6), ("C", 60, 5),
        ("D", 50, 4), ("E", 40, 3), ("F", 30, 2), ("G", 20, 1),
    )
    expected = total_aps(subjects)
    for perm in permutations(subjects[:6]):
        assert total_aps(list(perm) + subjects[6:]) == expected

    rng = random.Random(42)
    for _ in range(200):
        shuffled = list(subjects)
        rng.shuffle(shuffled)
        assert total_aps(shuffled) == expected


def test_removing_life_orientation_changes_nothing():
    rng = random.Random(7)
    for _ in range(100):
        subjects = _random_subjects(rng, rng.randint(0, 10))
        without_lo = [s for s in subjects if s.name != "Life Orientation"]
        assert total_aps(without_lo) == total_aps(subjects)


def test_up_to_six_valid_subjects_sum_all_levels():
    rng = random.Random(11)
    for count in range(0, 7):
        subjects = _random_subjects(rng, count)
        expected = sum(s.level for s in subjects if s.name != "Life Orientation")
        assert total_aps(subjects) == expected


def test_more_than_six_valid_subjects_take_best_six():
    rng = random.Random(3)
    for _ in range(30):
        subjects = _random_subjects(rng, rng.randint(7, 10), with_lo=False)
        levels = [s.level for s in subjects]
        best = sum(sorted(levels, reverse=True)[:6])
        result = total_aps(subjects)
        assert result == best
        for subset in combinations(levels, 6):
            assert result >= sum(subset)


def test_result_range():
    rng = random.Random(5)
    for _ in range(100):
        result = total_aps(_random_subjects(rng, rng.randint(0, 12)))
        assert 0 <= result <= 42


def test_idempotent():
    subjects = _random_subjects(random.Random(9), 9)
    first = total_aps(subjects)
    assert all(total_aps(subjects) == first for _ in range(5))

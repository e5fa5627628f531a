import random

import pytest

from algobasics.validator import main, random_array, validate


def test_random_array_length_and_bounds():
    values = random_array(500, 7, random.Random(1))
    assert len(values) == 500
    assert min(values) >= 1
    assert max(values) <= 7


def test_random_array_is_reproducible_with_seed():
    first = random_array(20, 1000, random.Random(42))
    second = random_array(20, 1000, random.Random(42))
    assert len(first) == 20
    assert all(1 <= value <= 1000 for value in first)
    assert first == second


def test_random_array_single_value_range():
    assert random_array(4, 1, random.Random(3)) == [1, 1, 1, 1]


def test_random_array_empty():
    assert random_array(0, 10, random.Random(0)) == []


def test_random_array_rejects_negative_size():
    with pytest.raises(ValueError):
        random_array(-1, 10)


def test_random_array_rejects_small_max_value():
    with pytest.raises(ValueError):
        random_array(5, 0)


def test_validate_finds_no_disagreement():
    assert validate(300, 50, 100, random.Random(7)) == []


def test_validate_zero_trials():
    assert validate(0, 10, 10, random.Random(0)) == []


def test_validate_rejects_bad_max_size():
    with pytest.raises(ValueError):
        validate(10, 0, 10)


def test_validate_rejects_negative_trials():
    with pytest.raises(ValueError):
        validate(-1, 10, 10)


def test_main_output(capsys):
    assert main(["--times", "50", "--max-size", "20", "--seed", "5"]) == 0
    assert capsys.readouterr().out == "Testing begins\nend of test\n"
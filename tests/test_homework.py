import pytest

import snailfish as sf
from tests import harness


def test_example_sum_magnitude():
    assert sf.sum_magnitude(harness.homework_numbers()) == 3488


def test_example_best_pair_magnitude():
    assert sf.best_pair_magnitude(harness.homework_numbers()) == 3805


def test_assignment_modes():
    numbers = harness.homework_numbers(harness.HOMEWORK_ASSIGNMENT)
    total = sf.sum_numbers(numbers)
    assert (
        sf.format_number(total)
        == "[[[[6,6],[7,6]],[[7,7],[7,0]]],[[[7,7],[7,7]],[[7,8],[9,9]]]]"
    )
    assert sf.sum_magnitude(numbers) == 4140
    assert sf.best_pair_magnitude(numbers) == 3993


def test_best_pair_matches_host_loop():
    numbers = sf.parse_numbers(harness.random_literals(5, 5))
    best = max(
        sf.magnitude_of(sf.add(numbers[a], numbers[b]))
        for a, b in sf.ordered_pairs(len(numbers))
    )
    assert sf.best_pair_magnitude(numbers) == best


@pytest.mark.parametrize("chunk_size", [1, 7, 90, 5000])
def test_best_pair_chunking(chunk_size):
    cfg = sf.PairSearchConfig(chunk_size=chunk_size)
    assert sf.best_pair_magnitude(harness.homework_numbers(), cfg) == 3805


def test_best_pair_covers_both_orders():
    numbers = sf.parse_numbers("[[2,[[7,7],7]],[[5,8],[[9,3],[0,2]]]]\n"
                               "[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]\n")
    forward = sf.magnitude_of(sf.add(numbers[0], numbers[1]))
    backward = sf.magnitude_of(sf.add(numbers[1], numbers[0]))
    assert forward == 3993
    assert sf.best_pair_magnitude(numbers) == max(forward, backward)


def test_ordered_pairs_excludes_diagonal():
    assert sf.ordered_pairs(3) == [(0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)]
    assert sf.ordered_pairs(1) == []


def test_modes_on_small_inputs():
    assert sf.sum_magnitude([]) is None
    assert sf.best_pair_magnitude([]) is None
    one = sf.parse_numbers("[9,1]")
    assert sf.sum_magnitude(one) == 29
    assert sf.best_pair_magnitude(one) is None


def test_solve_text():
    result = sf.solve_text(harness.HOMEWORK_EXAMPLE)
    assert result == sf.HomeworkResult(
        count=10, sum_magnitude=3488, best_pair_magnitude=3805
    )


def test_solve_text_empty():
    assert sf.solve_text("\n") == sf.HomeworkResult(0, None, None)


def test_solve_text_propagates_parse_errors():
    with pytest.raises(sf.ParseError):
        sf.solve_text(harness.HOMEWORK_EXAMPLE + "[1,2\n")


@pytest.mark.parametrize("chunk_size", [0, -3])
def test_pair_search_config_validation(chunk_size):
    with pytest.raises(sf.PairSearchConfigError, match="chunk_size"):
        sf.PairSearchConfig(chunk_size=chunk_size)


def test_best_pair_rejects_over_deep_operand():
    numbers = sf.parse_numbers("[1,1]\n[2,2]\n[[[[[9,8],1],2],3],4]\n")
    with pytest.raises(sf.SnailfishCapacityError, match="best_pair_magnitude") as excinfo:
        sf.best_pair_magnitude(numbers)
    assert excinfo.value.slot == 31
    with pytest.raises(sf.SnailfishCapacityError):
        sf.solve_numbers(numbers)

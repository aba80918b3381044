import pytest

import snailfish as sf
from tests import harness


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("[9,1]", 29),
        ("[1,9]", 21),
        ("[[9,1],[1,9]]", 129),
        ("[[1,2],3]", 27),
        ("[[1,2],[[3,4],5]]", 143),
        ("[[[[0,7],4],[[7,8],[6,0]]],[8,1]]", 1384),
        ("[[[[1,1],[2,2]],[3,3]],[4,4]]", 445),
        ("[[[[3,0],[5,3]],[4,4]],[5,5]]", 791),
        ("[[[[5,0],[7,4]],[5,5]],[6,6]]", 1137),
        ("[[[[8,7],[7,7]],[[8,6],[7,7]]],[[[0,7],[6,6]],[8,7]]]", 3488),
    ],
)
def test_magnitude_examples(literal, expected):
    assert sf.magnitude_of(sf.parse_number(literal)) == expected


def test_magnitude_of_subtrees():
    number = sf.parse_number("[[9,1],[1,9]]")
    assert sf.magnitude_of(number, 1) == 29
    assert sf.magnitude_of(number, 2) == 21
    assert sf.magnitude_of(number, 3) == 9
    assert sf.magnitude_of(number, 0) == 129


def test_magnitude_of_unused_slot_is_zero():
    number = sf.parse_number("[1,2]")
    assert sf.magnitude_of(number, 5) == 0


def test_magnitude_formula_per_slot():
    number = sf.parse_number("[[3,[4,5]],[[6,7],8]]")
    table = [int(v) for v in sf.magnitude_table(number)]
    slots = sf.decode_slots(number)
    for position, s in enumerate(slots):
        if isinstance(s, sf.Leaf):
            assert table[position] == s.value
        elif isinstance(s, sf.Branch):
            left = table[2 * position + 1]
            right = table[2 * position + 2]
            assert table[position] == 3 * left + 2 * right


def test_magnitude_matches_literal_evaluation():
    for literal in harness.random_literals(3, 40, max_value=40):
        number = sf.parse_number(literal)
        assert sf.magnitude_of(number) == harness.direct_magnitude(literal)


def test_magnitude_on_unreduced_tree():
    literal = "[[[[[9,8],1],2],3],4]"
    assert sf.magnitude_of(sf.parse_number(literal)) == harness.direct_magnitude(
        literal
    )


def test_empty_tree_has_zero_magnitude():
    empty = sf.init_number()
    assert all(s == sf.Unused() for s in sf.decode_slots(empty))
    assert sf.magnitude_of(empty) == 0

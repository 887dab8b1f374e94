import pytest

from drillbook.sequences import (
    NoSolution,
    beautiful_permutation,
    gray_code,
    increasing_array,
    missing_number,
    palindrome_reorder,
    repetitions,
    two_sets,
    weird_algorithm,
)


def test_weird_algorithm_example():
    assert weird_algorithm(3) == [3, 10, 5, 16, 8, 4, 2, 1]


@pytest.mark.parametrize("n", [1, 2, 7, 27, 97, 1000])
def test_weird_algorithm_steps(n):
    seq = weird_algorithm(n)
    assert seq[0] == n
    assert seq[-1] == 1
    assert seq.count(1) == 1
    for current, following in zip(seq, seq[1:]):
        if current % 2 == 0:
            assert following * 2 == current
        else:
            assert following == current * 3 + 1


def test_weird_algorithm_rejects_zero():
    with pytest.raises(ValueError):
        weird_algorithm(0)


@pytest.mark.parametrize("n,gone", [(2, 1), (2, 2), (5, 3), (10, 10), (50, 1)])
def test_missing_number_finds_gap(n, gone):
    numbers = [v for v in range(1, n + 1) if v != gone]
    assert missing_number(n, numbers) == gone
    assert missing_number(n, reversed(numbers)) == gone


def test_missing_number_wrong_length():
    with pytest.raises(ValueError):
        missing_number(5, [1, 2, 3])


def test_increasing_array_example():
    assert increasing_array([3, 2, 5, 1, 7]) == 5


def test_increasing_array_sorted_needs_nothing():
    assert increasing_array(sorted([9, 4, 4, 1, 12])) == 0
    assert increasing_array([]) == 0


def test_increasing_array_leading_maximum():
    values = [4, 1, 9, 3, 3, 7]
    top = max(values)
    assert increasing_array([top, *values]) == sum(top - v for v in values)


def test_increasing_array_trailing_large_value_is_free():
    values = [5, 2, 8, 1]
    assert increasing_array(values + [max(values)]) == increasing_array(values)


def test_repetitions_example():
    assert repetitions("ATTCGGGA") == 3


@pytest.mark.parametrize("k", [1, 2, 5, 40])
def test_repetitions_single_letter(k):
    assert repetitions("G" * k) == k
    assert repetitions("AC" * k) == 1


def test_repetitions_run_in_middle():
    assert repetitions("AC" + "T" * 6 + "GA") == 6


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 10, 31])
def test_beautiful_permutation_valid(n):
    perm = beautiful_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(perm, perm[1:]))


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_impossible(n):
    with pytest.raises(NoSolution, match="NO SOLUTION"):
        beautiful_permutation(n)


@pytest.mark.parametrize("s", ["AAAACACBA", "A", "ABBA", "ZZYYX", "QQQ"])
def test_palindrome_reorder_valid(s):
    result = palindrome_reorder(s)
    assert result == result[::-1]
    assert sorted(result) == sorted(s)


def test_palindrome_reorder_impossible():
    with pytest.raises(NoSolution):
        palindrome_reorder("AB")


def test_palindrome_reorder_rejects_lowercase():
    with pytest.raises(ValueError):
        palindrome_reorder("abba")


@pytest.mark.parametrize("n", [3, 4, 7, 8, 11, 12, 100])
def test_two_sets_balanced(n):
    first, second = two_sets(n)
    assert sum(first) == sum(second)
    assert sorted(first + second) == list(range(1, n + 1))
    assert not set(first) & set(second)


@pytest.mark.parametrize("n", [1, 2, 5, 6])
def test_two_sets_impossible(n):
    with pytest.raises(NoSolution):
        two_sets(n)


def test_two_sets_rejects_zero():
    with pytest.raises(ValueError):
        two_sets(0)


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_gray_code_properties(n):
    codes = gray_code(n)
    assert len(codes) == 2**n
    assert len(set(codes)) == len(codes)
    assert all(len(code) == n for code in codes)
    assert codes[0] == "0" * n
    for a, b in zip(codes, codes[1:]):
        assert sum(x != y for x, y in zip(a, b)) == 1


def test_gray_code_negative():
    with pytest.raises(ValueError):
        gray_code(-1)
import pytest
from hpo_tpe.kde.windowing import Full, Left, LeftMiddle, Middle, MiddleRight, Right, triples


def test_triples_from_empty():
    """
    Tests that an empty sequence produces no windows.
    """
    assert list(triples([])) == []


def test_triples_from_one():
    """
    Tests the partial windows around a single value.
    """
    assert list(triples([1])) == [Right(1), Middle(1), Left(1)]


def test_triples_from_two():
    assert list(triples([1, 2])) == [Right(1), MiddleRight(1, 2), LeftMiddle(1, 2), Left(2)]


def test_triples_from_three():
    assert list(triples([1, 2, 3])) == [
        Right(1),
        MiddleRight(1, 2),
        Full(1, 2, 3),
        LeftMiddle(2, 3),
        Left(3),
    ]


def test_triples_accepts_lazy_input():
    """
    Tests that a generator is consumed correctly.
    """
    assert list(triples(x for x in (1.5, 2.5))) == [
        Right(1.5), MiddleRight(1.5, 2.5), LeftMiddle(1.5, 2.5), Left(2.5)
    ]


@pytest.mark.parametrize("n", range(6))
def test_every_value_is_a_middle_exactly_once(n):
    """
    Tests that each value is the centre of exactly one window.
    """
    values = list(range(n))
    windows = list(triples(values))
    middles = [w.middle for w in windows if hasattr(w, "middle")]

    assert middles == values
    assert len(windows) == (n + 2 if n else 0)


def test_triples_is_restartable():
    values = [1, 2, 3]
    assert list(triples(values)) == list(triples(values))


def test_variants_are_distinct():
    assert Left(1) != Right(1)
    assert Middle(1) != Left(1)
    assert LeftMiddle(1, 2) != MiddleRight(1, 2)

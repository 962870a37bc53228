import pytest

from pushswap.stacks import Stacks


def make(values):
    log = []
    return Stacks(values, emit=log.append), log


def test_sa_swaps_top_two_and_emits():
    s, log = make([1, 2, 3])
    s.sa()
    assert list(s.a) == [2, 1, 3]
    assert log == ["sa"]


def test_sa_twice_restores():
    s, log = make([5, 6, 7])
    s.sa()
    s.sa()
    assert list(s.a) == [5, 6, 7]
    assert log == ["sa", "sa"]


def test_sa_on_single_element_is_silent():
    s, log = make([4])
    s.sa()
    assert list(s.a) == [4]
    assert log == []


def test_ra_moves_top_to_bottom():
    s, log = make([1, 2, 3])
    s.ra()
    assert list(s.a) == [2, 3, 1]
    assert log == ["ra"]


def test_ra_then_rra_restores():
    s, log = make([9, 8, 7, 6])
    s.ra()
    s.rra()
    assert list(s.a) == [9, 8, 7, 6]
    assert log == ["ra", "rra"]


def test_rra_moves_bottom_to_top():
    s, _ = make([1, 2, 3])
    s.rra()
    assert list(s.a) == [3, 1, 2]


def test_pb_then_pa_restores():
    s, log = make([1, 2, 3])
    s.pb()
    assert list(s.b) == [1]
    assert list(s.a) == [2, 3]
    s.pa()
    assert list(s.a) == [1, 2, 3]
    assert list(s.b) == []
    assert log == ["pb", "pa"]


def test_pa_on_empty_b_is_silent():
    s, log = make([1, 2])
    s.pa()
    assert list(s.a) == [1, 2]
    assert log == []


def test_b_instructions_act_on_b():
    s, log = make([1, 2, 3])
    s.pb()
    s.pb()
    s.sb()
    assert list(s.b) == [1, 2]
    s.rb()
    s.rrb()
    assert list(s.b) == [1, 2]
    assert log == ["pb", "pb", "sb", "rb", "rrb"]


def test_combined_instructions_skip_only_when_both_short():
    s, log = make([1])
    s.ss()
    s.rr()
    s.rrr()
    assert log == []
    s2, log2 = make([1, 2])
    s2.rr()
    assert list(s2.a) == [2, 1]
    assert log2 == ["rr"]


def test_ss_swaps_both():
    s, log = make([1, 2, 3, 4])
    s.pb()
    s.pb()
    s.ss()
    assert list(s.a) == [4, 3]
    assert list(s.b) == [1, 2]
    assert log[-1] == "ss"


def test_apply_dispatches_by_name():
    s, log = make([3, 4, 5])
    s.apply("ra")
    s.apply("rra")
    assert list(s.a) == [3, 4, 5]
    assert log == ["ra", "rra"]


def test_apply_rejects_unknown_name():
    s, _ = make([1, 2])
    with pytest.raises(ValueError):
        s.apply("apply")


def test_default_emit_writes_lines(capsys):
    s = Stacks([2, 1])
    s.sa()
    assert capsys.readouterr().out == "sa\n"
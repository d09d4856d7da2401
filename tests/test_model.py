import pytest

from powerset import Decision, Directive, InvalidArgument, fork_state, format_path, validate_path


def test_decision_hash_and_eq():
    d1 = Decision(2, True)
    d2 = Decision(2, True)
    assert d1 == d2
    assert hash(d1) == hash(d2)
    assert d1 != Decision(2, False)


def test_validate_path():
    path = (Decision(1, True), Decision(0, False))
    assert validate_path(path, (Decision(1, True), Decision(0, False)))
    assert not validate_path(path, (Decision(1, False), Decision(0, False)))
    assert not validate_path(path, (Decision(1, True),))
    assert validate_path((), ())


def test_format_path():
    assert format_path(()) == "{}"
    assert format_path((Decision(2, True), Decision(1, False), Decision(0, False))) == "+2,-1,-0"


def test_directive_coerce_accepts_tuples():
    assert Directive.coerce((True, -1, "s")) == Directive(True, -1, "s")
    assert Directive.coerce(Directive.proceed(3)) == Directive(False, 0, 3)
    with pytest.raises(InvalidArgument):
        Directive.coerce(None)
    with pytest.raises(InvalidArgument):
        Directive.coerce((True, 0))


def test_directive_check_resume_level():
    Directive.backtrack(-1).check(0)
    Directive.backtrack(3).check(3)
    Directive(False, 99, None).check(1)
    with pytest.raises(InvalidArgument):
        Directive.backtrack(4).check(3)
    with pytest.raises(InvalidArgument):
        Directive.backtrack(-2).check(3)


class Counter:
    def __init__(self, value=0):
        self.value = value

    def fork(self):
        return Counter(self.value)


def test_fork_state():
    state = Counter(5)
    forked = fork_state(state)
    assert forked is not state
    assert forked.value == 5
    shared = ["a"]
    assert fork_state(shared) is shared
    assert fork_state(None) is None

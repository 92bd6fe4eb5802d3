import pytest

from danobj.stack import Stack


def test_new_stack_is_empty():
    st = Stack()
    assert st.is_empty()
    assert len(st) == 0


def test_push_and_pop_are_lifo():
    st = Stack()
    for item in ("a", "b", "c"):
        st.push(item)
    assert [st.pop(), st.pop(), st.pop()] == ["c", "b", "a"]
    assert st.is_empty()


def test_peek_does_not_remove():
    st = Stack()
    st.push(1)
    st.push(2)
    assert st.peek() == 2
    assert len(st) == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_iteration_runs_bottom_to_top():
    st = Stack()
    items = [10, 20, 30]
    for item in items:
        st.push(item)
    assert list(st) == items


def test_grows_past_initial_capacity():
    st = Stack()
    items = list(range(40))
    for item in items:
        st.push(item)
    assert len(st) == len(items)
    assert st.peek() == items[-1]


def test_clear_empties_stack():
    st = Stack([1, 2, 3])
    st.clear()
    assert st.is_empty()
    with pytest.raises(IndexError):
        st.pop()


def test_len_tracks_push_and_pop():
    st = Stack()
    st.push("x")
    st.push("y")
    st.pop()
    assert len(st) == 1
    assert st.peek() == "x"
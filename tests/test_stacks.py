import pytest

from algokit.stacks import (
    MinStack,
    Stack,
    daily_temperatures,
    eval_rpn,
    generate_parentheses,
    is_valid_parentheses,
)


def test_stack_is_last_in_first_out():
    stack = Stack()
    values = [3, 1, 4, 1, 5]
    for v in values:
        stack.push(v)
    assert len(stack) == len(values)
    assert stack.top() == values[-1]
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_stack_clear_empties():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.top()


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_min_stack_example():
    stack = MinStack()
    stack.push(1)
    stack.push(2)
    stack.push(0)
    assert stack.get_min() == 0
    stack.pop()
    assert stack.top() == 2
    assert stack.get_min() == 1


def test_min_stack_tracks_prefix_minimum():
    values = [5, 7, 3, 3, 8, -2, 6]
    stack = MinStack()
    for i, v in enumerate(values):
        stack.push(v)
        assert stack.get_min() == min(values[: i + 1])
    for i in range(len(values), 0, -1):
        assert stack.get_min() == min(values[:i])
        assert stack.pop() == values[i - 1]
    assert len(stack) == 0


def test_min_stack_clear_resets_minimum():
    stack = MinStack()
    stack.push(-10)
    stack.clear()
    stack.push(4)
    assert stack.get_min() == 4


def test_min_stack_empty_min_raises():
    with pytest.raises(IndexError):
        MinStack().get_min()


@pytest.mark.parametrize("s", ["([{}])", "()[]{}(((())))", "", "{[]}()"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(", ")(", "(]", "([)]", "(a)"])
def test_invalid_parentheses(s):
    assert not is_valid_parentheses(s)


def test_eval_rpn_example():
    assert eval_rpn(["1", "2", "+", "3", "*", "4", "-"]) == 5


@pytest.mark.parametrize("tokens", [["-7", "2", "/"], ["7", "-2", "/"]])
def test_eval_rpn_division_truncates_toward_zero(tokens):
    assert eval_rpn(tokens) == -3


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


@pytest.mark.parametrize("tokens", [["+"], ["1", "-"], []])
def test_eval_rpn_malformed(tokens):
    with pytest.raises(ValueError):
        eval_rpn(tokens)


def test_generate_parentheses_zero_pairs():
    assert generate_parentheses(0) == [""]


def test_generate_parentheses_three_pairs_count():
    assert len(generate_parentheses(3)) == 5


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_generate_parentheses_invariants(n):
    result = generate_parentheses(n)
    assert len(set(result)) == len(result)
    assert all(len(s) == 2 * n for s in result)
    assert all(is_valid_parentheses(s) for s in result)
    assert result == sorted(result, key=lambda s: s[::-1])


@pytest.mark.parametrize("n", [-1, 17])
def test_generate_parentheses_out_of_range(n):
    with pytest.raises(ValueError):
        generate_parentheses(n)


def test_daily_temperatures_example():
    assert daily_temperatures([30, 40, 50, 60]) == [1, 1, 1, 0]


@pytest.mark.parametrize("temps", [[73, 74, 75, 71, 69, 72, 76, 73], [30, 60, 90], [5, 5, 5, 6]])
def test_daily_temperatures_points_to_next_warmer_day(temps):
    result = daily_temperatures(temps)
    assert len(result) == len(temps)
    for day, wait in enumerate(result):
        if wait:
            assert temps[day + wait] > temps[day]
            assert all(t <= temps[day] for t in temps[day + 1: day + wait])
        else:
            assert all(t <= temps[day] for t in temps[day + 1:])


def test_daily_temperatures_non_increasing():
    temps = [9, 8, 8, 3]
    assert daily_temperatures(temps) == [0] * len(temps)


def test_daily_temperatures_empty():
    assert daily_temperatures([]) == []
import threading

import pytest

from expression_ast import (
    IdentifierNode, VariableEnvironment, clear_variables, get_global_environment,
    reset_global_environment, set_variable
)


def test_new_environment_is_empty():
    env = VariableEnvironment()
    assert len(env) == 0
    assert env.names() == []
    assert env.snapshot() == {}


def test_set_inserts_and_overwrites():
    env = VariableEnvironment()
    env.set("x", 1.0)
    env.set("x", 2.0)
    env.set("y", 3)
    assert env.get("x") == 2.0
    assert env.get("y") == 3.0
    assert isinstance(env.get("y"), float)
    assert env.names() == ["x", "y"]


def test_set_is_idempotent():
    env = VariableEnvironment()
    env.set("x", 1.5)
    env.set("x", 1.5)
    assert env.snapshot() == {"x": 1.5}


def test_lookup_reports_found_and_not_found():
    env = VariableEnvironment({"x": 4.0})
    assert env.lookup("x") == (True, 4.0)
    assert env.lookup("missing") == (False, 0.0)
    assert env.get("missing") is None
    assert "x" in env
    assert "missing" not in env


def test_lookup_distinguishes_bound_zero_from_missing():
    env = VariableEnvironment({"zero": 0.0})
    assert env.lookup("zero") == (True, 0.0)
    assert env.get("zero") == 0.0


def test_clear_removes_all_bindings():
    env = VariableEnvironment({"a": 1, "b": 2})
    env.clear()
    assert len(env) == 0
    env.clear()
    assert len(env) == 0


def test_snapshot_is_a_copy():
    env = VariableEnvironment({"a": 1})
    snapshot = env.snapshot()
    snapshot["a"] = 99.0
    assert env.get("a") == 1.0


def test_names_must_be_strings():
    env = VariableEnvironment()
    with pytest.raises(TypeError):
        env.set(1, 2.0)


@pytest.mark.parametrize("value", ["not a number", "3", True, None, 10**400])
def test_values_must_be_real_numbers(value):
    env = VariableEnvironment()
    with pytest.raises(TypeError):
        env.set("x", value)
    assert "x" not in env


def test_integer_values_are_stored_as_floats():
    env = VariableEnvironment({"n": 3})
    assert env.get("n") == 3.0
    assert isinstance(env.get("n"), float)


def test_global_helpers_share_one_instance():
    set_variable("g", 7.0)
    assert get_global_environment() is get_global_environment()
    assert get_global_environment().get("g") == 7.0
    clear_variables()
    assert len(get_global_environment()) == 0


def test_reset_global_environment_creates_a_fresh_instance():
    first = get_global_environment()
    first.set("x", 1.0)
    reset_global_environment()
    second = get_global_environment()
    assert second is not first
    assert "x" not in second


def test_independent_environments_do_not_interfere():
    env_a = VariableEnvironment({"x": 1.0})
    env_b = VariableEnvironment({"x": 2.0})
    node = IdentifierNode("x")
    assert node.evaluate(env_a) == 1.0
    assert node.evaluate(env_b) == 2.0
    assert "x" not in get_global_environment()


def test_concurrent_sets_are_all_recorded():
    env = VariableEnvironment()

    def writer(prefix):
        for i in range(200):
            env.set(f"{prefix}{i}", float(i))

    threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(env) == 800
    assert env.get("c199") == 199.0

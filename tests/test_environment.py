from minishell.environment import Environment


def test_init_copies_entries():
    source = ["HOME=/home/me", "SHELL=/bin/sh"]
    env = Environment(source)
    source.append("EXTRA=1")
    assert list(env) == ["HOME=/home/me", "SHELL=/bin/sh"]
    assert len(env) == 2


def test_empty_environment():
    env = Environment()
    assert len(env) == 0
    assert env.get("HOME") == ""


def test_get_returns_value():
    env = Environment(["USER=alice", "PATH=/bin:/usr/bin"])
    assert env.get("USER") == "alice"
    assert env.get("PATH") == "/bin:/usr/bin"


def test_get_needs_exact_name():
    env = Environment(["USERNAME=bob"])
    assert env.get("USER") == ""
    assert env.get("USERNAME") == "bob"


def test_get_value_may_contain_equals():
    env = Environment(["OPTS=a=b"])
    assert env.get("OPTS") == "a=b"


def test_export_appends_new_variable():
    env = Environment(["A=1"])
    assert env.export("B=2") is True
    assert list(env) == ["A=1", "B=2"]
    assert env.get("B") == "2"


def test_export_updates_existing_in_place():
    env = Environment(["A=1", "B=2"])
    env.export("A=9")
    assert list(env) == ["A=9", "B=2"]
    assert env.get("A") == "9"


def test_export_without_equals_is_ignored():
    env = Environment(["A=1"])
    assert env.export("NOVALUE") is False
    assert list(env) == ["A=1"]


def test_export_empty_value():
    env = Environment()
    env.export("EMPTY=")
    assert list(env) == ["EMPTY="]
    assert env.get("EMPTY") == ""


def test_unset_removes_variable():
    env = Environment(["A=1", "B=2", "C=3"])
    env.unset("B")
    assert list(env) == ["A=1", "C=3"]


def test_unset_leaves_prefix_names():
    env = Environment(["AB=1", "A=2"])
    env.unset("A")
    assert list(env) == ["AB=1"]


def test_unset_missing_and_none_changes_nothing():
    env = Environment(["A=1"])
    env.unset("Z")
    env.unset(None)
    assert list(env) == ["A=1"]


def test_declarations_format():
    env = Environment(["A=1", "B=2"])
    assert env.declarations() == ["declare -x A=1", "declare -x B=2"]


def test_iteration_is_a_snapshot():
    env = Environment(["A=1"])
    snapshot = iter(env)
    env.export("B=2")
    assert list(snapshot) == ["A=1"]
    assert len(env) == 2
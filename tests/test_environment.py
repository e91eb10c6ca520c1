from minishell.environment import Environment, parse_environment


def test_listing_is_newest_first():
    env = parse_environment(["A=1", "B=2", "C=3"])
    assert env.format_lines() == ["C=3", "B=2", "A=1"]


def test_entries_without_equals_are_skipped():
    env = parse_environment(["A=1", "garbage", "B=2"])
    assert env.format_lines() == ["B=2", "A=1"]
    assert len(env) == 2


def test_value_keeps_later_equals():
    env = parse_environment(["X=a=b"])
    assert env.lookup("X") == "a=b"


def test_empty_value():
    env = parse_environment(["EMPTY="])
    assert env.lookup("EMPTY") == ""


def test_lookup_missing():
    env = parse_environment(["HOME=/home/user"])
    assert env.lookup("PATH") is None


def test_lookup_matches_key_prefix():
    env = parse_environment(["HOME=/home/user"])
    assert env.lookup("HO") == "/home/user"


def test_lookup_prefers_newest_matching_entry():
    env = parse_environment(["X=old", "XY=newer"])
    assert env.lookup("X") == "newer"


def test_add_shadows_existing_key():
    env = parse_environment(["A=1"])
    env.add("A", "new")
    assert env.lookup("A") == "new"
    assert env.format_lines() == ["A=new", "A=1"]


def test_empty_environment():
    env = Environment()
    assert env.lookup("") is None
    assert env.format_lines() == []


def test_mapping_source():
    env = parse_environment({"USER": "user", "SHELL": "/bin/sh"})
    assert dict(env) == {"USER": "user", "SHELL": "/bin/sh"}


def test_round_trip_through_lines():
    env = parse_environment(["A=1", "B=x=y", "C="])
    again = parse_environment(reversed(env.format_lines()))
    assert list(again) == list(env)
from __future__ import annotations

from common.env import env_bool, env_int, env_list, env_str


def test_env_int(monkeypatch) -> None:
    monkeypatch.delenv("PALETTE_TEST_INT", raising=False)
    assert env_int("PALETTE_TEST_INT", 7) == 7
    monkeypatch.setenv("PALETTE_TEST_INT", " 42 ")
    assert env_int("PALETTE_TEST_INT", 7) == 42
    monkeypatch.setenv("PALETTE_TEST_INT", "-3")
    assert env_int("PALETTE_TEST_INT", 7, min_value=0) == 0
    monkeypatch.setenv("PALETTE_TEST_INT", "abc")
    assert env_int("PALETTE_TEST_INT", 7) == 7


def test_env_bool(monkeypatch) -> None:
    monkeypatch.delenv("PALETTE_TEST_BOOL", raising=False)
    assert env_bool("PALETTE_TEST_BOOL", True) is True
    for raw, expected in (("0", False), ("1", True), ("yes", True), ("off", False)):
        monkeypatch.setenv("PALETTE_TEST_BOOL", raw)
        assert env_bool("PALETTE_TEST_BOOL") is expected
    monkeypatch.setenv("PALETTE_TEST_BOOL", "maybe")
    assert env_bool("PALETTE_TEST_BOOL", True) is True


def test_env_str_and_list(monkeypatch) -> None:
    monkeypatch.setenv("PALETTE_TEST_STR", "   ")
    assert env_str("PALETTE_TEST_STR", "x") == "x"
    monkeypatch.setenv("PALETTE_TEST_STR", " host ")
    assert env_str("PALETTE_TEST_STR", "x") == "host"

    monkeypatch.setenv("PALETTE_TEST_LIST", "a.com, ,b.com")
    assert env_list("PALETTE_TEST_LIST", ["*"]) == ["a.com", "b.com"]
    monkeypatch.setenv("PALETTE_TEST_LIST", " , ")
    assert env_list("PALETTE_TEST_LIST", ["*"]) == ["*"]

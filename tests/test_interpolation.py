"""
Tests for %{name} placeholder handling
"""
from mailtext.services.interpolation import find_keys, format_keys, interpolate, invalid_keys


def test_find_keys_in_string():
    assert find_keys("[%{email_prefix}] Hi %{username}, %{username}") == {"email_prefix", "username"}


def test_find_keys_ignores_other_percent_forms():
    assert find_keys("100% sure, %(name)s and %{ spaced }") == set()


def test_find_keys_in_plural_mapping():
    value = {"one": "1 user waiting", "other": "%{count} users waiting for %{site}"}
    assert find_keys(value) == {"count", "site"}


def test_find_keys_empty():
    assert find_keys("") == set()
    assert find_keys(None) == set()


def test_invalid_keys_accepts_same_set_in_any_order():
    assert invalid_keys("%{a} then %{b}", "%{b} before %{a} and %{a}") == set()


def test_invalid_keys_reports_missing_and_unknown():
    assert invalid_keys("%{a} %{b}", "%{a} %{c}") == {"b", "c"}


def test_format_keys_is_sorted():
    assert format_keys({"site_name", "base_url", "email_token"}) == "base_url, email_token, site_name"


def test_interpolate_replaces_known_keys_only():
    text = "Welcome to %{site_name}, %{username}!"
    assert interpolate(text, {"site_name": "Forum", "count": 3}) == "Welcome to Forum, %{username}!"

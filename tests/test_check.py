"""Tests for check expressions: naming, custom messages, negation and chaining."""

import pytest

from fluentcheck import Check, CheckFailure, CheckLink, FluentCheckConfig, check, check_that


# --- as_ ---


def test_as_names_the_checked_value():
    with pytest.raises(CheckFailure) as exc_info:
        check.that(42).as_("answer").is_after(100)
    assert str(exc_info.value).split("\n") == [
        "The checked [answer] is not after the reference value.",
        "The checked [answer]:",
        "\t[42]",
        "The expected [answer]: after",
        "\t[100]",
    ]


def test_as_works_with_not():
    with pytest.raises(CheckFailure) as exc_info:
        check.that(42).as_("answer").not_.is_before(100)
    assert str(exc_info.value).split("\n") == [
        "The checked [answer] is before the reference value whereas it must not.",
        "The checked [answer]:",
        "\t[42]",
        "The expected [answer]: after",
        "\t[100]",
    ]


# --- with_custom_message ---


def test_custom_message_is_first_line():
    with pytest.raises(CheckFailure) as exc_info:
        check.with_custom_message("We should get 2.").that(1).is_equal_to(2)
    assert str(exc_info.value).split("\n") == [
        "We should get 2.",
        "The checked value is different from the expected one.",
        "The checked value:",
        "\t[1]",
        "The expected value:",
        "\t[2]",
    ]


def test_custom_message_does_not_leak_to_default_factory():
    check.with_custom_message("Custom")
    with pytest.raises(CheckFailure) as exc_info:
        check.that(1).is_equal_to(2)
    assert not str(exc_info.value).startswith("Custom")


def test_custom_message_on_negated_failure():
    with pytest.raises(CheckFailure) as exc_info:
        Check(custom_message="Custom").that(1).not_.is_equal_to(1)
    assert str(exc_info.value).split("\n") == [
        "Custom",
        "The checked value is equal to the expected one whereas it must not.",
        "The checked value:",
        "\t[1]",
        "The expected value: different from",
        "\t[1]",
    ]


# --- catalog ---


def test_is_equal_to_passes():
    assert isinstance(check_that("a").is_equal_to("a"), CheckLink)


def test_is_after_and_before():
    check_that(5).is_after(1)
    check_that(1).is_before(5)
    with pytest.raises(CheckFailure):
        check_that(5).is_before(5)
    with pytest.raises(CheckFailure):
        check_that(5).is_after(5)


def test_not_inverts_catalog_checks():
    check_that(1).not_.is_equal_to(2)
    check_that(1).not_.is_after(5)
    with pytest.raises(CheckFailure):
        check_that(1).not_.is_equal_to(1)


# --- negation ---


def test_negate_twice_raises():
    expression = check.that(1).not_
    with pytest.raises(RuntimeError, match="already negated"):
        expression.negate()


def test_negate_after_check_raises():
    expression = check.that(1)
    expression.is_equal_to(1)
    with pytest.raises(RuntimeError, match="after a check has run"):
        expression.negate()


def test_negated_flag():
    expression = check.that(1)
    assert expression.negated is False
    assert expression.not_.negated is True


# --- chaining ---


def test_and_chains_further_checks():
    link = check.that(5).is_after(1).and_.is_before(10)
    assert isinstance(link, CheckLink)


def test_and_clears_negation():
    check.that(5).not_.is_after(10).and_.is_before(10)


def test_and_keeps_label_and_custom_message():
    with pytest.raises(CheckFailure) as exc_info:
        check.with_custom_message("Custom").that(5).as_("five").is_after(1).and_.is_after(10)
    lines = str(exc_info.value).split("\n")
    assert lines[0] == "Custom"
    assert lines[1] == "The checked [five] is not after the reference value."


def test_and_can_negate_again():
    check.that(5).not_.is_after(10).and_.not_.is_before(1)


def test_link_is_immutable():
    link = check.that(5).is_after(1)
    with pytest.raises(AttributeError):
        link.check = None


# --- configuration ---


def test_with_config_truncates_values():
    truncating = check.with_config(FluentCheckConfig(messages={"max_value_length": 5}))
    with pytest.raises(CheckFailure) as exc_info:
        truncating.that("abcdefghij").is_equal_to("x")
    assert "\t['abcd...]" in str(exc_info.value)
    assert "\t['x']" in str(exc_info.value)


def test_with_config_keeps_custom_message():
    factory = check.with_custom_message("Custom").with_config(FluentCheckConfig())
    assert factory.custom_message == "Custom"

import pytest

from password_checker import (
    PasswordChecker,
    PasswordPolicyViolationError,
    RuleKind,
    RuleViolation,
    ValidationResult,
)


def test_empty_result_is_truthy():
    result = ValidationResult()

    assert result
    assert result.is_valid
    assert result.messages == []
    result.raise_for_violations()


def test_result_with_violations_is_falsy():
    result = ValidationResult((RuleViolation(RuleKind.NUMBER, "need a digit"),))

    assert not result
    assert result.messages == ["need a digit"]
    assert str(result.violations[0]) == "need a digit"


def test_raise_for_violations_lists_every_message(full_checker):
    result = full_checker.validate("abcdefgh")

    with pytest.raises(PasswordPolicyViolationError) as exc_info:
        result.raise_for_violations()

    assert exc_info.value.ctx["violations"] == result.violations
    assert str(exc_info.value) == (
        "Password does not meet the policy requirements.\n\n"
        "- Password must contain both uppercase and lowercase letters.\n"
        "- Password must contain at least one number.\n"
        "- Password must contain at least one special character."
    )


def test_raise_for_violations_keeps_braces_in_messages():
    result = PasswordChecker().require_number("use {digits}").validate("")

    with pytest.raises(PasswordPolicyViolationError, match=r"use \{digits\}"):
        result.raise_for_violations()

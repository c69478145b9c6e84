import pytest

from password_checker import PasswordChecker


@pytest.fixture
def full_checker() -> PasswordChecker:
    return (
        PasswordChecker()
        .min_length(8)
        .require_upper_lower()
        .require_number()
        .require_special_char()
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PASSWORD_CHECKER_POLICY",
        "PASSWORD_CHECKER_POLICY__MIN_LENGTH",
        "PASSWORD_CHECKER_POLICY__REQUIRE_NUMBER",
        "PASSWORD_CHECKER_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)

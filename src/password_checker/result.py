from collections.abc import Iterable
from dataclasses import dataclass, field

from .exc import PasswordPolicyViolationError
from .rule import Rule, RuleKind

__all__ = ("RuleOutcome", "RuleViolation", "ValidationResult")


@dataclass(slots=True, frozen=True)
class RuleOutcome:
    rule: Rule
    passed: bool


@dataclass(slots=True, frozen=True)
class RuleViolation:
    kind: RuleKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, frozen=True)
class ValidationResult:
    """
    The outcome of checking a password against every configured rule.

    The result is falsy when the password failed at least one rule, so callers can
    write::

        result = checker.validate(password)
        if not result:
            show_checklist(result.messages)
    """

    violations: tuple[RuleViolation, ...] = field(default_factory=tuple)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[RuleOutcome]) -> "ValidationResult":
        return cls(
            tuple(
                RuleViolation(kind=o.rule.kind, message=o.rule.error_message())
                for o in outcomes
                if not o.passed
            )
        )

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_violations(self) -> None:
        if self.violations:
            raise PasswordPolicyViolationError(
                "Password does not meet the policy requirements.",
                PasswordPolicyViolationError.Context(violations=self.violations),
            )

import logging
from dataclasses import dataclass, field
from typing import Optional

from .result import RuleOutcome, ValidationResult
from .rule import (
    Custom,
    MinLength,
    Predicate,
    RequireNumber,
    RequireSpecialChar,
    RequireUpperLower,
    Rule,
)

__all__ = ("PasswordChecker",)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PasswordChecker:
    """
    An ordered collection of password rules.

    Every configuration method appends one rule and returns the checker itself, so
    calls can be chained. Rules are evaluated in the order they were added, and
    :meth:`validate` reports every failed rule rather than stopping at the first one.

    Example::

        checker = (
            PasswordChecker()
            .min_length(8)
            .require_upper_lower()
            .require_number()
            .require_special_char()
        )

        result = checker.validate("Passw0rd!")
        assert result.is_valid
    """

    _rules: list[Rule] = field(default_factory=list)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def add_rule(self, rule: Rule) -> "PasswordChecker":
        self._rules.append(rule)
        logger.debug("rule added: %r", rule.kind.value)
        return self

    def min_length(
        self, length: int, message: Optional[str] = None
    ) -> "PasswordChecker":
        return self.add_rule(MinLength(message, length=length))

    def require_upper_lower(self, message: Optional[str] = None) -> "PasswordChecker":
        return self.add_rule(RequireUpperLower(message))

    def require_number(self, message: Optional[str] = None) -> "PasswordChecker":
        return self.add_rule(RequireNumber(message))

    def require_special_char(self, message: Optional[str] = None) -> "PasswordChecker":
        return self.add_rule(RequireSpecialChar(message))

    def require(
        self, predicate: Predicate, message: Optional[str] = None, name: str = "custom"
    ) -> "PasswordChecker":
        return self.add_rule(Custom(message, predicate=predicate, name=name))

    def evaluate(self, password: Optional[str]) -> tuple[RuleOutcome, ...]:
        """
        Checks the password against every rule and reports each outcome, passed or
        not, in configuration order. A ``None`` password is checked as ``""``.
        """
        if password is None:
            password = ""

        return tuple(RuleOutcome(rule, rule.check(password)) for rule in self._rules)

    def validate(self, password: Optional[str]) -> ValidationResult:
        result = ValidationResult.from_outcomes(self.evaluate(password))

        logger.debug(
            "validation finished, %d of %d rule(s) failed",
            len(result.violations),
            len(self._rules),
        )
        return result

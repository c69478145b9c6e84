import string
from abc import abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, ClassVar, Optional

import regex
from typing_extensions import override

__all__ = (
    "RuleKind",
    "Rule",
    "MinLength",
    "RequireUpperLower",
    "RequireNumber",
    "RequireSpecialChar",
    "Custom",
    "Predicate",
)

Predicate = Callable[[str], bool]

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_GRAPHEME = regex.compile(r"\X")


class RuleKind(StrEnum):
    MIN_LENGTH = "min_length"
    UPPER_LOWER = "upper_lower"
    NUMBER = "number"
    SPECIAL_CHAR = "special_char"
    CUSTOM = "custom"


@dataclass(slots=True, frozen=True)
class Rule:
    """
    A single password check.

    Attributes:
        message: Overrides the default failure message when set.
    """

    kind: ClassVar[RuleKind]

    message: Optional[str] = None

    @abstractmethod
    def check(self, password: str) -> bool: ...

    @abstractmethod
    def default_message(self) -> str: ...

    def error_message(self) -> str:
        return self.message if self.message is not None else self.default_message()


@dataclass(slots=True, frozen=True, kw_only=True)
class MinLength(Rule):
    """
    Requires the password to be at least ``length`` characters long.

    Characters are counted as user-perceived characters (extended grapheme
    clusters), so ``"pässwörd"`` has a length of 8 whether its umlauts are
    precomposed or written with combining marks.
    """

    kind: ClassVar[RuleKind] = RuleKind.MIN_LENGTH

    length: int

    @override
    def check(self, password: str) -> bool:
        return sum(1 for _ in _GRAPHEME.finditer(password)) >= self.length

    @override
    def default_message(self) -> str:
        return "Password must be at least %d characters long." % self.length


@dataclass(slots=True, frozen=True)
class RequireUpperLower(Rule):
    kind: ClassVar[RuleKind] = RuleKind.UPPER_LOWER

    @override
    def check(self, password: str) -> bool:
        return any(c in string.ascii_uppercase for c in password) and any(
            c in string.ascii_lowercase for c in password
        )

    @override
    def default_message(self) -> str:
        return "Password must contain both uppercase and lowercase letters."


@dataclass(slots=True, frozen=True)
class RequireNumber(Rule):
    kind: ClassVar[RuleKind] = RuleKind.NUMBER

    @override
    def check(self, password: str) -> bool:
        return any(c in string.digits for c in password)

    @override
    def default_message(self) -> str:
        return "Password must contain at least one number."


@dataclass(slots=True, frozen=True)
class RequireSpecialChar(Rule):
    """Anything that is not an ASCII letter or digit counts as special."""

    kind: ClassVar[RuleKind] = RuleKind.SPECIAL_CHAR

    @override
    def check(self, password: str) -> bool:
        return any(c not in _ALPHANUMERIC for c in password)

    @override
    def default_message(self) -> str:
        return "Password must contain at least one special character."


@dataclass(slots=True, frozen=True, kw_only=True)
class Custom(Rule):
    kind: ClassVar[RuleKind] = RuleKind.CUSTOM

    predicate: Predicate
    name: str = "custom"

    @override
    def check(self, password: str) -> bool:
        return bool(self.predicate(password))

    @override
    def default_message(self) -> str:
        return "Password does not satisfy the %r rule." % self.name

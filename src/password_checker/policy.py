from typing import Annotated, Optional

import annotated_types
import pydantic

from .checker import PasswordChecker
from .rule import RuleKind

__all__ = ("PasswordPolicy",)


class PasswordPolicy(pydantic.BaseModel):
    """
    Declarative description of a :class:`PasswordChecker`.

    Rules are compiled in a fixed order: minimum length, upper/lower case, number,
    special character. ``messages`` overrides the default failure message of a rule,
    keyed by its kind.

    Example (YAML)::

        min_length: 12
        require_upper_lower: true
        require_number: true
        messages:
          min_length: Use at least twelve characters.
    """

    model_config = pydantic.ConfigDict(extra="forbid")

    min_length: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    require_upper_lower: bool = False
    require_number: bool = False
    require_special_char: bool = False
    messages: dict[RuleKind, str] = pydantic.Field(default_factory=dict)

    @pydantic.field_validator("messages")
    @classmethod
    def reject_custom_kind(cls, value: dict[RuleKind, str]) -> dict[RuleKind, str]:
        if RuleKind.CUSTOM in value:
            raise ValueError(
                "custom rules cannot be declared in a policy, register them with "
                "PasswordChecker.require()"
            )
        return value

    def build_checker(self) -> PasswordChecker:
        checker, messages = PasswordChecker(), self.messages

        if self.min_length is not None:
            checker.min_length(self.min_length, messages.get(RuleKind.MIN_LENGTH))
        if self.require_upper_lower:
            checker.require_upper_lower(messages.get(RuleKind.UPPER_LOWER))
        if self.require_number:
            checker.require_number(messages.get(RuleKind.NUMBER))
        if self.require_special_char:
            checker.require_special_char(messages.get(RuleKind.SPECIAL_CHAR))

        return checker

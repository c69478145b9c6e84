import pathlib
import typing
from dataclasses import dataclass
from typing import NotRequired

from typing_extensions import TypedDict, override

if typing.TYPE_CHECKING:
    from .result import RuleViolation

__all__ = (
    "ApplicationError",
    "Location",
    "PasswordPolicyViolationError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]


@dataclass(slots=True)
class PasswordPolicyViolationError(ApplicationError):
    """
    Raised when a password fails one or more rules and the caller asked for an
    exception instead of inspecting the result.
    """

    class Context(TypedDict):
        """
        Attributes:
            violations: Every failed rule, in the order the rules were configured.
        """

        violations: "tuple[RuleViolation, ...]"

    ctx: Context

    @override
    def format_message(self) -> str:
        return "%s\n\n%s" % (
            self.message,
            "\n".join("- %s" % v.message for v in self.ctx["violations"]),
        )

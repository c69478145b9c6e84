__all__ = (
    "exc",
    "PasswordChecker",
    "PasswordPolicy",
    "PasswordPolicyViolationError",
    "Rule",
    "RuleKind",
    "RuleViolation",
    "ValidationResult",
)
__version__ = "0.1.0"

from . import exc
from .checker import PasswordChecker
from .exc import PasswordPolicyViolationError
from .policy import PasswordPolicy
from .result import RuleViolation, ValidationResult
from .rule import Rule, RuleKind

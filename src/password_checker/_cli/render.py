from dataclasses import dataclass, field
from enum import StrEnum

from rich.console import Group, RenderableType
from rich.text import Text

from ..result import RuleOutcome
from ..rule import Custom, MinLength, Rule, RuleKind

__all__ = ("ChecklistRenderer",)

LABELS = {
    RuleKind.UPPER_LOWER: "uppercase and lowercase letters",
    RuleKind.NUMBER: "at least one number",
    RuleKind.SPECIAL_CHAR: "at least one special character",
}


class RecordStyle(StrEnum):
    PASSED = "green"
    FAILED = "yellow"


@dataclass(slots=True)
class Record:
    content: str
    style: str = ""


def describe(rule: Rule) -> str:
    if isinstance(rule, MinLength):
        return "at least %d characters" % rule.length
    if isinstance(rule, Custom):
        return rule.name
    return LABELS[rule.kind]


@dataclass(slots=True)
class ChecklistRenderer:
    """Renders one line per configured rule, marking it as passed or failed."""

    _records: list[Record] = field(default_factory=list)

    def add_outcomes(self, outcomes: tuple[RuleOutcome, ...]) -> None:
        for outcome in outcomes:
            if outcome.passed:
                record = Record(
                    content="✔ %s" % describe(outcome.rule), style=RecordStyle.PASSED
                )
            else:
                record = Record(
                    content="✘ %s" % outcome.rule.error_message(),
                    style=RecordStyle.FAILED,
                )
            self._records.append(record)

    def compose_renderable(self) -> RenderableType:
        return Group(*(self._compose_record_content(r) for r in self._records))

    def _compose_record_content(self, record: Record) -> RenderableType:
        return Text(f"=> {record.content}", style=record.style)

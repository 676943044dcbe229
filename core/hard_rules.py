from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List
from schemas.schedule.generate import Employee

# (state, employee, day, shift code) -> True if the employee may take the shift
RulePredicate = Callable[[object, Employee, date, str], bool]


@dataclass
class HardRule:
    name: str
    check: RulePredicate
    message: str


@dataclass
class RelaxationTier:
    """A named set of hard rules a candidate must pass. Lower levels are looser."""

    level: int
    rules: List[HardRule] = field(default_factory=list)

    def allows(self, state, emp: Employee, day: date, code: str) -> bool:
        return all(rule.check(state, emp, day, code) for rule in self.rules)

    def first_failure(self, state, emp: Employee, day: date, code: str):
        """Return the first rule the employee fails, or None."""
        for rule in self.rules:
            if not rule.check(state, emp, day, code):
                return rule
        return None

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]

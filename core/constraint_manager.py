from typing import Callable, List


class ConstraintManager:
    def __init__(self, context):
        self.context = context
        self.rules: list[Callable] = []

    def add_rule(self, rule_func: Callable, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self) -> List:
        """Apply all registered rules in order and collect what they report."""
        results = []
        for rule in self.rules:
            results.extend(rule(self.context))
        return results

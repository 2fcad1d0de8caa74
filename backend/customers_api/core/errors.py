"""Domain errors raised below the HTTP layer."""
from __future__ import annotations


class CustomerValidationError(ValueError):
    """Customer rejected by the strict validation policy.

    ``problems`` is a list of ``(field_path, message)`` pairs, e.g.
    ``(("billing_address", "city"), "must not be blank")``.
    """

    def __init__(self, problems: list[tuple[tuple[str, ...], str]]) -> None:
        self.problems = problems
        summary = "; ".join(f"{'.'.join(path)}: {msg}" for path, msg in problems)
        super().__init__(f"Invalid customer: {summary}")

"""Validation report collecting errors, warnings and notes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationReport:
    """Outcome of validating a command sequence or configuration."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)

    def add_error(self, msg: str) -> None:
        """Record an error; the report is then no longer valid."""
        self.errors.append(str(msg))
        self.valid = False

    def add_warning(self, msg: str) -> None:
        """Record a warning without affecting validity."""
        self.warnings.append(str(msg))

    def add_info(self, msg: str) -> None:
        """Record an informational note."""
        self.info.append(str(msg))
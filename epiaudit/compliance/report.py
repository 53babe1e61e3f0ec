"""CheckResult / TechnicalReport models and Markdown report generation."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from epiaudit.models.enums import CheckStatus


class CheckResult(BaseModel):
    """Result of a single technical or mandatory sub-check."""

    name: str
    title: str = ""
    status: CheckStatus = CheckStatus.NOT_APPLICABLE
    value: float | None = None
    """Computed or declared value that was checked."""

    limit: float | None = None
    """Threshold the value was compared against."""

    message: str = ""

    @property
    def failed(self) -> bool:
        return self.status == CheckStatus.NON_COMPLIANT

    @property
    def applicable(self) -> bool:
        return self.status != CheckStatus.NOT_APPLICABLE


class TechnicalReport(BaseModel):
    """Per-check outcome of the Level 2 technical validation."""

    window_wall_ratio: float = 0.0
    skylight_roof_ratio: float = 0.0
    lpd_limit: float = 0.0
    required_motor_level: int = 0
    checks: list[CheckResult] = Field(default_factory=list)
    checked_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status(self) -> str:
        """'non_compliant', 'compliant' or 'not_applicable'."""
        if any(c.failed for c in self.checks):
            return "non_compliant"
        if any(c.applicable for c in self.checks):
            return "compliant"
        return "not_applicable"

    def get(self, name: str) -> CheckResult | None:
        for check in self.checks:
            if check.name == name:
                return check
        return None

    def failures(self) -> list[CheckResult]:
        return [c for c in self.checks if c.failed]

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        data["status"] = self.status
        return data

    def to_markdown(self) -> str:
        """Render the report as a Markdown document."""
        lines: list[str] = []

        lines.append("# Technical Compliance Report")
        lines.append("")
        lines.append(f"**Status:** {self.status.replace('_', ' ').upper()}")
        lines.append(f"**Checked:** {self.checked_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append("")

        passes = sum(1 for c in self.checks if c.status == CheckStatus.COMPLIANT)
        fails = len(self.failures())
        skips = sum(1 for c in self.checks if not c.applicable)
        lines.append(f"**Results:** {passes} compliant, {fails} non-compliant, {skips} not applicable")
        lines.append("")

        if self.checks:
            lines.append("| Status | Check | Value | Limit | Detail |")
            lines.append("|--------|-------|-------|-------|--------|")
            for c in self.checks:
                value = "" if c.value is None else f"{c.value:g}"
                limit = "" if c.limit is None else f"{c.limit:g}"
                detail = c.message.replace("|", "\\|")
                lines.append(
                    f"| {c.status.value} | {c.title or c.name} | {value} | {limit} | {detail} |"
                )
            lines.append("")

        return "\n".join(lines)

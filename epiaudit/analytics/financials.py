"""Per-audit financial summary: costs, savings, payback and cash flow."""

from __future__ import annotations

from pydantic import BaseModel

from epiaudit.config import CASH_FLOW_YEARS
from epiaudit.metrics.calculator import round_half_up
from epiaudit.metrics.normalizer import total_cost
from epiaudit.models.audit import AuditInput, AuditRecord


def payback_period(cost: float, savings: float) -> float:
    """Simple payback in years, two decimals.  Zero when nothing is saved."""
    if savings <= 0:
        return 0.0
    return round_half_up(cost / savings, 2)


class AuditFinancials(BaseModel):
    """Financial view of one audit's measures and compliance actions."""

    audit_id: str = ""
    annual_energy_cost: float = 0.0
    potential_savings: float = 0.0
    """Sum of annual savings across efficiency measures."""

    total_investment: float = 0.0
    """Sum of efficiency measure costs."""

    compliance_investment: float = 0.0

    @classmethod
    def from_audit(cls, audit: AuditInput | AuditRecord) -> AuditFinancials:
        if isinstance(audit, AuditRecord):
            audit = audit.audit
        return cls(
            audit_id=audit.id,
            annual_energy_cost=total_cost(audit.utility_data),
            potential_savings=sum((m.estimated_savings for m in audit.measures), 0.0),
            total_investment=sum((m.estimated_cost for m in audit.measures), 0.0),
            compliance_investment=sum(
                (a.investment for a in audit.compliance_actions), 0.0,
            ),
        )

    @property
    def simple_payback(self) -> float:
        """Years to recover measure investment, one decimal."""
        if self.potential_savings <= 0:
            return 0.0
        return round_half_up(self.total_investment / self.potential_savings, 1)

    def cash_flow(self, years: int = CASH_FLOW_YEARS) -> list[tuple[int, float]]:
        """Cumulative (year, net position) pairs from year 0 to *years*."""
        return [
            (year, -self.total_investment + self.potential_savings * year)
            for year in range(years + 1)
        ]

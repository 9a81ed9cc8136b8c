"""
Tool Catalog

Each module holds the tools for one area of the Gusto API, as a plain
list of GustoTool declarations. ALL_TOOLS is the catalog the adapter
registers.

To add a new area:
1. Create tools/newarea.py with a NEWAREA_TOOLS list
2. Import it here and append it to ALL_TOOLS
"""

from __future__ import annotations

from ..endpoints import GustoTool
from .benefits import BENEFIT_TOOLS
from .company import COMPANY_TOOLS
from .connection import CONNECTION_TOOLS
from .contractors import CONTRACTOR_TOOLS
from .employees import EMPLOYEE_TOOLS
from .payroll import PAYROLL_TOOLS
from .time_off import TIME_OFF_TOOLS
from .webhooks import WEBHOOK_TOOLS

ALL_TOOLS: list[GustoTool] = [
    *CONNECTION_TOOLS,
    *COMPANY_TOOLS,
    *EMPLOYEE_TOOLS,
    *CONTRACTOR_TOOLS,
    *PAYROLL_TOOLS,
    *BENEFIT_TOOLS,
    *TIME_OFF_TOOLS,
    *WEBHOOK_TOOLS,
]

__all__ = [
    "ALL_TOOLS",
    "BENEFIT_TOOLS",
    "COMPANY_TOOLS",
    "CONNECTION_TOOLS",
    "CONTRACTOR_TOOLS",
    "EMPLOYEE_TOOLS",
    "PAYROLL_TOOLS",
    "TIME_OFF_TOOLS",
    "WEBHOOK_TOOLS",
]

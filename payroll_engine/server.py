"""
Payroll Earnings Engine - MCP Server

FastMCP server exposing the payroll calculation tools:
- resolve_pay_period: current/previous pay period boundaries
- calculate_period_earnings: per-day hours, overtime split and pay
"""

import logging

from payroll_engine.config import get_settings
from payroll_engine.tools.payroll_tools import mcp

logger = logging.getLogger(__name__)


def main():
    """Run the MCP server."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        f"Starting {settings.app_name} MCP Server "
        f"(default timezone {settings.default_timezone})"
    )
    mcp.run()


if __name__ == "__main__":
    main()

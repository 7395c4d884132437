#!/usr/bin/env python3
"""MCP Server for the Swing Pay Planner.

This server exposes the swing pay calculations as MCP tools, allowing AI
assistants to answer questions about take-home pay on FIFO rosters.
"""

import os
import sys
import json
import asyncio
import logging
from typing import Any

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from tools import SwingPayTools


logger = logging.getLogger(__name__)

# Create the MCP server
server = Server("swing-pay-planner")

# Global tools instance (initialized on first use)
tools: SwingPayTools | None = None


def get_tools() -> SwingPayTools:
    """Get or initialize the tools instance."""
    global tools
    if tools is None:
        # Project root can be overridden via SWING_PAY_BASE_PATH env var
        base_path = os.environ.get('SWING_PAY_BASE_PATH', os.path.join(os.path.dirname(__file__), '..'))
        tools = SwingPayTools(base_path)
    return tools


INCOME_PARAM = {
    "type": "number",
    "minimum": 0,
    "description": "Annual taxable income in AUD"
}

SWING_PARAM = {
    "type": "string",
    "description": "Swing roster name, e.g. '8/6', '2/1' (14 on/7 off) or '2/2' (14 on/14 off). Use list_swings to see the catalog."
}

COMMON_JOB_PROPERTIES = {
    "name": {"type": "string", "description": "Optional label for the job"},
    "swing": SWING_PARAM,
    "backpacker": {"type": "boolean", "description": "Use backpacker (working holiday maker) tax rates"},
    "hecsDebt": {"type": "boolean", "description": "Whether the worker has a HECS-HELP debt"},
    "superannuation": {
        "type": "object",
        "description": "Employer superannuation. Omit or set enabled=false for none.",
        "properties": {
            "enabled": {"type": "boolean"},
            "rate": {"type": "number", "minimum": 0, "maximum": 100, "description": "Rate in percent, e.g. 11.5"},
            "hoursPerDay": {"type": "number", "minimum": 1, "maximum": 12,
                            "description": "Hourly jobs only: ordinary hours per day counted for super (default 8)"}
        }
    }
}

JOB_SCHEMA = {
    "type": "object",
    "description": "A job: payType 'hourly' with hourlyRate, or payType 'salary' with salary, plus swing options.",
    "properties": dict(
        COMMON_JOB_PROPERTIES,
        payType={"type": "string", "enum": ["hourly", "salary"]},
        hourlyRate={"type": "number", "minimum": 0},
        salary={"type": "number", "minimum": 0},
    ),
    "required": ["payType"]
}


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available pay calculation tools."""
    return [
        Tool(
            name="list_swings",
            description="List the available swing rosters with their days on/off, cycle length and swings per year.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="calculate_income_tax",
            description="Calculate annual Australian income tax (2024-25, excluding Medicare levy) on an income, using standard resident rates or backpacker rates.",
            inputSchema={
                "type": "object",
                "properties": {
                    "annual_income": INCOME_PARAM,
                    "backpacker": {"type": "boolean", "description": "Use backpacker rates instead of standard rates"}
                },
                "required": ["annual_income"]
            }
        ),
        Tool(
            name="calculate_hecs_repayment",
            description="Calculate the compulsory HECS-HELP repayment for an annual income. The band rate applies to the whole income.",
            inputSchema={
                "type": "object",
                "properties": {
                    "annual_income": INCOME_PARAM
                },
                "required": ["annual_income"]
            }
        ),
        Tool(
            name="project_hourly_pay",
            description="Project gross and take-home pay per swing, month and year for an hourly job, assuming 12-hour days.",
            inputSchema={
                "type": "object",
                "properties": dict(COMMON_JOB_PROPERTIES, hourlyRate={"type": "number", "minimum": 0}),
                "required": ["hourlyRate"]
            }
        ),
        Tool(
            name="project_salary_pay",
            description="Project gross and take-home pay per swing, month and year for a salaried job, with the equivalent hourly rate.",
            inputSchema={
                "type": "object",
                "properties": dict(COMMON_JOB_PROPERTIES, salary={"type": "number", "minimum": 0}),
                "required": ["salary"]
            }
        ),
        Tool(
            name="compare_jobs",
            description="Compare two jobs side by side and report which takes home more. Returns per-metric differences and a net/tax/HECS breakdown for each job.",
            inputSchema={
                "type": "object",
                "properties": {
                    "job_one": JOB_SCHEMA,
                    "job_two": JOB_SCHEMA
                },
                "required": ["job_one", "job_two"]
            }
        ),
        Tool(
            name="list_programs",
            description="List saved job programs (folders in input-parameters) and the jobs in each.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="reload_programs",
            description="Reload saved job programs from disk after adding, modifying, or removing spec.json files.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="get_program_results",
            description="Project every job in a saved program. Programs with two jobs also get a comparison.",
            inputSchema={
                "type": "object",
                "properties": {
                    "program": {
                        "type": "string",
                        "description": "The program name (folder in input-parameters). Use list_programs to see available programs."
                    }
                },
                "required": ["program"]
            }
        )
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        sp_tools = get_tools()

        if name == "list_swings":
            result = sp_tools.list_swings()
        elif name == "calculate_income_tax":
            result = sp_tools.calculate_income_tax(arguments["annual_income"], arguments.get("backpacker", False))
        elif name == "calculate_hecs_repayment":
            result = sp_tools.calculate_hecs_repayment(arguments["annual_income"])
        elif name == "project_hourly_pay":
            result = sp_tools.project_hourly_pay(arguments)
        elif name == "project_salary_pay":
            result = sp_tools.project_salary_pay(arguments)
        elif name == "compare_jobs":
            result = sp_tools.compare_jobs(arguments["job_one"], arguments["job_two"])
        elif name == "list_programs":
            result = sp_tools.list_programs()
        elif name == "reload_programs":
            result = sp_tools.reload_programs()
        elif name == "get_program_results":
            result = sp_tools.get_program_results(arguments["program"])
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, default=str)
        )]
    except Exception as e:
        logger.warning("Tool %s failed: %s", name, e)
        return [TextContent(
            type="text",
            text=json.dumps({"error": str(e)}, indent=2)
        )]


async def main():
    """Run the MCP server."""
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(level=logging.INFO, stream=sys.stderr, format='%(levelname)s: %(name)s: %(message)s')
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())

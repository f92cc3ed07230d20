"""Command-line planner.

Usage:
    agentplan "Fetch data, then extract fields, then notify team."

    # canned template, exported as a Mermaid flowchart
    agentplan --template support-triage --format mermaid

    # JSON download written to a file
    agentplan "Collect leads and score them" --format json --output plan.json
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

from agentplan.analysis.layout import calculate_bounds, plan_to_positions
from agentplan.analysis.validator import ValidationResult, validate_plan
from agentplan.export.json_export import plan_to_json
from agentplan.export.mermaid import to_flow_diagram, to_sequence_diagram
from agentplan.models.agent_plan import Plan
from agentplan.planning.planner import Planner
from agentplan.utils.identifiers import slot_label

FORMATS = ("summary", "json", "mermaid", "sequence", "layout")


def format_plan(plan: Plan, validation: ValidationResult) -> str:
    """Format a plan and its diagnostics for human-readable output."""
    lines = []
    lines.append("=" * 60)
    lines.append(plan.title.upper())
    lines.append("=" * 60)
    lines.append("")
    lines.append(f"Description: {plan.description}")
    lines.append(f"Agents:      {len(plan.agents)}")
    lines.append(f"Handoffs:    {len(plan.edges)}")
    lines.append("")

    lines.append("-" * 40)
    lines.append("AGENTS")
    lines.append("-" * 40)
    for agent in plan.agents:
        lines.append(f"  • {agent.name} [{agent.type.value}] ({agent.id})")
        lines.append(f"    {agent.summary}")
        if agent.suggested_tools:
            lines.append(f"    Tools: {', '.join(agent.suggested_tools)}")
    lines.append("")

    if plan.edges:
        lines.append("-" * 40)
        lines.append("HANDOFFS")
        lines.append("-" * 40)
        for edge in plan.edges:
            lines.append(f"  {edge.source} → {edge.target} ({slot_label(edge.data)})")
        lines.append("")

    if validation.warnings:
        lines.append("-" * 40)
        lines.append("WARNINGS")
        lines.append("-" * 40)
        for warning in validation.warnings:
            lines.append(f"  ! {warning}")
        lines.append("")

    lines.append("-" * 40)
    if validation.ok:
        lines.append("✓ Plan is valid")
    else:
        lines.append("ERRORS")
        lines.append("-" * 40)
        for error in validation.errors:
            lines.append(f"  ✗ {error}")
    lines.append("-" * 40)

    return "\n".join(lines)


def render(plan: Plan, validation: ValidationResult, output_format: str) -> str:
    if output_format == "json":
        return plan_to_json(plan)
    if output_format == "mermaid":
        return to_flow_diagram(plan)
    if output_format == "sequence":
        return to_sequence_diagram(plan)
    if output_format == "layout":
        layout = plan_to_positions(plan)
        return json.dumps(
            {
                "nodes": [asdict(node) for node in layout.nodes],
                "edges": [asdict(edge) for edge in layout.edges],
                "unplaced": layout.unplaced,
                "bounds": asdict(calculate_bounds(layout)),
            },
            indent=2,
        )
    return format_plan(plan, validation)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agentplan",
        description="Turn a plain-English workflow description into an agent plan.",
    )
    parser.add_argument(
        "description",
        nargs="?",
        default="",
        help="plain-English workflow description",
    )
    parser.add_argument(
        "--template",
        metavar="ID",
        help="use a canned template instead of planning the description",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="summary",
        help="output format (default: summary)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="write output to this file instead of stdout",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="list canned template ids and exit",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    planner = Planner()

    if args.list_templates:
        for example in planner.config.templates.examples():
            print(f"{example['id']:<20} {example['label']}: {example['shortDescription']}")
        return 0

    if args.template:
        plan = planner.get_template(args.template)
        if plan is None:
            known = ", ".join(planner.config.templates.ids())
            print(f"Error: unknown template: {args.template} (known: {known})", file=sys.stderr)
            return 1
    else:
        plan = planner.plan_from_description(args.description)

    validation = validate_plan(plan)
    if not validation.ok:
        print(format_plan(plan, validation), file=sys.stderr)
        return 1

    output = render(plan, validation, args.format)
    if args.output:
        args.output.write_text(output + "\n")
        print(f"Wrote {args.format} output to {args.output}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

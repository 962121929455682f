"""Command-line interface for the skills scorecard.

Commands:
    generate: Score every skill and publish skills.json to each output
    validate: Check a published site for required files and a well-formed report
    view: Load a published report and print or snapshot a searchable listing

Example:
    $ skills-scorecard generate --skills-dir ./skills
    $ skills-scorecard validate --site-dir web
    $ skills-scorecard view --report web/skills.json --search alpha
    $ skills-scorecard view --report https://example.org/skills.json --format html --output web/index.html
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from skills_scorecard.config import SKILLS_DIR_ENV, ScorecardConfig
from skills_scorecard.exceptions import ScorecardError
from skills_scorecard.observability.audit import JSONLAuditSink
from skills_scorecard.report.generator import ReportGenerator
from skills_scorecard.report.sinks import FileReportSink, StdoutReportSink, publish
from skills_scorecard.validation import SiteValidator
from skills_scorecard.viewer.app import ReportViewer
from skills_scorecard.viewer.community import CommunityCatalog
from skills_scorecard.viewer.loader import ReportLoader


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="skills-scorecard",
        description="Score skill documentation and publish the report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Score skills and publish skills.json",
        description="Score every skill directory and write the report to each output",
    )
    generate_parser.add_argument(
        "--skills-dir",
        type=Path,
        help=f"Skills root directory (default: ${SKILLS_DIR_ENV} or the OpenClaw install path)",
    )
    generate_parser.add_argument(
        "--site-root",
        type=Path,
        help="Directory the default outputs are resolved against (default: CWD)",
    )
    generate_parser.add_argument(
        "--output",
        action="append",
        help="Output path relative to the site root (can be specified multiple times; "
             "default: web/skills.json and docs/skills.json)",
    )
    generate_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Also print the report to stdout",
    )
    generate_parser.add_argument(
        "--audit-log",
        type=Path,
        help="Append scan/score/publish events to this JSONL file (optional)",
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a published site",
        description="Check required files exist and skills.json is well-formed",
    )
    validate_parser.add_argument(
        "--site-dir",
        type=Path,
        default=Path("web"),
        help="Published site directory (default: web)",
    )
    validate_parser.add_argument(
        "--require",
        action="append",
        default=[],
        help="Additional required file relative to the site directory "
             "(can be specified multiple times)",
    )

    # View command
    view_parser = subparsers.add_parser(
        "view",
        help="Render a published report",
        description="Load skills.json from a URL or path and render a filtered listing",
    )
    view_parser.add_argument(
        "--report",
        default="web/skills.json",
        help="URL or path of skills.json (default: web/skills.json)",
    )
    view_parser.add_argument(
        "--search",
        default="",
        help="Case-insensitive filter over name, description, location, score and risk",
    )
    view_parser.add_argument(
        "--format",
        choices=["text", "html"],
        default="text",
        help="Output format (default: text)",
    )
    view_parser.add_argument(
        "--output",
        type=Path,
        help="Write the rendering to this file instead of stdout",
    )
    view_parser.add_argument(
        "--community",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Append the community catalog preview after the report (default: off)",
    )
    view_parser.add_argument(
        "--timeout",
        type=float,
        default=5.0,
        help="Per-URL timeout in seconds for the community catalog (default: 5)",
    )

    return parser


def cmd_generate(args: argparse.Namespace) -> int:
    """Execute the generate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config = ScorecardConfig.from_env(
            skills_dir=args.skills_dir,
            site_root=args.site_root,
            outputs=args.output,
        )
        audit_sink = JSONLAuditSink(args.audit_log) if args.audit_log else None

        # Nothing is published if the root is missing
        report = ReportGenerator(config.skills_dir, audit_sink=audit_sink).generate()

        sinks = [FileReportSink(path) for path in config.output_paths]
        if args.stdout:
            sinks.append(StdoutReportSink())

        publish(report, sinks, audit_sink=audit_sink)

        for sink in sinks:
            if isinstance(sink, FileReportSink):
                print(
                    f"Updated {sink.target} with {report.count} skills from {report.source_dir}",
                    file=sys.stderr if args.stdout else sys.stdout,
                )

        return 0

    except ScorecardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        validator = SiteValidator(args.site_dir, required_files=args.require)
        count = validator.validate()
        print(f"OK: validated {count} skills")
        return 0

    except ScorecardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


def cmd_view(args: argparse.Namespace) -> int:
    """Execute the view command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 for error)
    """
    config = ScorecardConfig.from_env(community_timeout_s=args.timeout)
    community = (
        CommunityCatalog(config.community_urls, timeout_s=config.community_timeout_s)
        if args.community
        else None
    )
    viewer = ReportViewer(
        args.report,
        fmt=args.format,
        loader=ReportLoader(timeout_s=config.report_timeout_s),
        community=community,
    )

    try:
        viewer.refresh()
        output = viewer.search(args.search)
    except ScorecardError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.output:
            write_output(args.output, viewer.render_error(str(e)))
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

    # The primary listing goes out before the community catalog is fetched
    if args.output:
        write_output(args.output, output)
        print(f"Wrote {args.output}", flush=True)
    else:
        print(output, flush=True)

    if viewer.has_community:
        output = viewer.load_community()
        if args.output:
            write_output(args.output, output)
        else:
            print()
            print(viewer.render_community())

    return 0


def write_output(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')


def main() -> NoReturn:
    """Main entry point for the CLI.

    Parses command-line arguments and dispatches to the appropriate
    command handler.
    """
    parser = create_parser()
    args = parser.parse_args()

    if args.command == "generate":
        exit_code = cmd_generate(args)
    elif args.command == "validate":
        exit_code = cmd_validate(args)
    elif args.command == "view":
        exit_code = cmd_view(args)
    else:
        parser.print_help()
        exit_code = 1

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

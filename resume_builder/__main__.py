"""
CLI entry point for the resume builder.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from .config import AppConfig
from .editor import EditorSession
from .exceptions import ConfigurationError, ResumeBuilderError
from .logging_config import configure_logging
from .models import TemplateId

SECTIONS = ["experience", "education", "skill"]
TEMPLATE_CHOICES = [t.value for t in TemplateId]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-builder",
        description="AI Resume Builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s show
  %(prog)s set personal name "Jane Doe"
  %(prog)s set experience 0 jobTitle "Staff Engineer"
  %(prog)s current 0 on
  %(prog)s export pdf --template classic
  %(prog)s analyze job.txt
        """
    )
    parser.add_argument(
        "--env-file",
        help="Path to a .env file (default: ./.env)"
    )
    parser.add_argument(
        "--storage-dir",
        help="Directory holding saved resume data (overrides STORAGE_DIR)"
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (overrides LOG_LEVEL)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Print the current resume as JSON")

    set_parser = commands.add_parser("set", help="Update one field")
    set_targets = set_parser.add_subparsers(dest="target", required=True)
    personal = set_targets.add_parser("personal", help="Update a personal info field")
    personal.add_argument("field")
    personal.add_argument("value")
    for section in ("experience", "education"):
        entry = set_targets.add_parser(section, help=f"Update a field of an {section} entry")
        entry.add_argument("index", type=int)
        entry.add_argument("field")
        entry.add_argument("value")
    skill = set_targets.add_parser("skill", help="Rename a skill")
    skill.add_argument("index", type=int)
    skill.add_argument("value")

    add_parser = commands.add_parser("add", help="Append an empty entry")
    add_parser.add_argument("section", choices=SECTIONS)
    add_parser.add_argument("--name", default="", help="Skill name (skills only)")

    remove_parser = commands.add_parser("remove", help="Remove an entry")
    remove_parser.add_argument("section", choices=SECTIONS)
    remove_parser.add_argument("index", type=int)

    current_parser = commands.add_parser("current", help="Mark a position as current")
    current_parser.add_argument("index", type=int)
    current_parser.add_argument("state", choices=["on", "off"])

    commands.add_parser("reset", help="Restore the sample resume")

    render_parser = commands.add_parser("render", help="Print the preview markup")
    render_parser.add_argument("--template", choices=TEMPLATE_CHOICES)

    export_parser = commands.add_parser("export", help="Export the resume")
    export_parser.add_argument("format", choices=["pdf", "docx", "html"])
    export_parser.add_argument("--template", choices=TEMPLATE_CHOICES)
    export_parser.add_argument("--output-dir", help="Output directory (overrides OUTPUT_DIR)")

    commands.add_parser("summary", help="Generate a professional summary with AI")

    analyze_parser = commands.add_parser("analyze", help="Score the resume against a job")
    analyze_parser.add_argument("job_file", help="Job description file, or - for stdin")

    commands.add_parser("ats", help="Check ATS compatibility with AI")

    commands.add_parser("config", help="Print the effective configuration")

    feedback_parser = commands.add_parser("feedback", help="AI personalization log")
    feedback_parser.add_argument("action", choices=["show", "clear"])

    return parser


def _read_job_description(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _print_report(title: str, result) -> None:
    print(f"{title}: {result.score}/100")
    print(f"\n{result.analysis}\n")
    print("Suggestions:")
    for suggestion in result.suggestions:
        print(f"  - {suggestion}")


def run_command(session: EditorSession, args) -> int:
    """Execute one parsed command against the session."""
    command = args.command

    if command == "show":
        print(session.resume.to_storage_json())
    elif command == "set":
        if args.target == "personal":
            session.update_personal_info(args.field, args.value)
        elif args.target == "experience":
            session.update_experience(args.index, args.field, args.value)
        elif args.target == "education":
            session.update_education(args.index, args.field, args.value)
        else:
            session.update_skill(args.index, args.value)
    elif command == "add":
        if args.section == "experience":
            entry = session.add_experience()
        elif args.section == "education":
            entry = session.add_education()
        else:
            entry = session.add_skill(args.name)
        print(f"✓ Added {args.section} {entry.id}")
    elif command == "remove":
        if args.section == "experience":
            entry = session.remove_experience(args.index)
        elif args.section == "education":
            entry = session.remove_education(args.index)
        else:
            entry = session.remove_skill(args.index)
        print(f"✓ Removed {args.section} {entry.id}")
    elif command == "current":
        session.set_currently_working(args.index, args.state == "on")
    elif command == "reset":
        session.reset()
        print("✓ Resume reset to sample data")
    elif command == "render":
        if args.template:
            session.set_template(args.template)
        print(session.preview().html)
    elif command == "export":
        if args.template:
            session.set_template(args.template)
        if args.output_dir:
            session.output_dir = Path(args.output_dir)
        if args.format == "pdf":
            path = asyncio.run(session.export_pdf())
        elif args.format == "docx":
            path = asyncio.run(session.export_docx())
        else:
            path = session.export_html()
        if path:
            print(f"✓ {args.format.upper()} generated at {path}")
    elif command == "summary":
        summary = asyncio.run(session.generate_summary())
        if summary:
            print(summary)
    elif command == "analyze":
        job_description = _read_job_description(args.job_file)
        result = asyncio.run(session.analyze_job_match(job_description))
        if result:
            _print_report("Match Score", result)
    elif command == "ats":
        report = asyncio.run(session.check_ats_compatibility())
        if report:
            _print_report("ATS Score", report)
    elif command == "feedback":
        if args.action == "clear":
            session.clear_ai_personalization()
            print("✓ AI personalization cleared")
        elif not session.feedback:
            print("No AI feedback recorded")
        else:
            for i, entry in enumerate(session.feedback):
                print(f"[{i}] AI-Generated: {entry.original}")
                print(f"    User-Edited: {entry.edited}")

    if session.error:
        print(f"Error: {session.error}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    """Run the resume builder from the command line."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig(args.env_file)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    configure_logging(args.log_level or config.log_level, config.log_format)
    if args.storage_dir:
        config.storage_dir = Path(args.storage_dir).expanduser()

    if args.command == "config":
        config.print_config_summary()
        return 0

    session = EditorSession.from_config(config)
    try:
        return run_command(session, args)
    except (ResumeBuilderError, IndexError, OSError) as e:
        print(f"Error: {getattr(e, 'message', e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

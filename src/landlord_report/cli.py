"""
Command Line Interface for Landlord Report Generation

Provides entry points for:
- landlord-report generate: Build a report deck from an offering memorandum
- landlord-report inspect: Summarize a generated report
"""

import sys
import json
import argparse
import mimetypes
import zipfile
from pathlib import Path

from .config import load_config, ReportConfig
from .errors import ReportError
from .export import PptxExporter
from .narrative import HttpNarrativeSource, StaticNarrativeSource
from .pipeline import ReportRequest, generate_report, write_report
from .rasterize import PdfEngine
from .summary import summarize_report, format_summary


def generate_command(args: argparse.Namespace) -> int:
    """Execute generate command."""
    print("=" * 60)
    print("Landlord Update Report")
    print("=" * 60)

    try:
        config = load_config(args.config) if args.config else ReportConfig()
        if args.narrative_url:
            config.narrative.endpoint = args.narrative_url

        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input file not found: {input_path}")
            return 1

        mime_type, _ = mimetypes.guess_type(input_path.name)
        request = ReportRequest(
            document=input_path.read_bytes(),
            address=args.address,
            mime_type=mime_type,
            filename=input_path.name,
        )

        if args.narrative_file:
            narrative_source = StaticNarrativeSource(Path(args.narrative_file).read_text(encoding='utf-8'))
        else:
            narrative_source = HttpNarrativeSource(config.narrative)

        result = generate_report(
            request,
            engine=PdfEngine(),
            exporter=PptxExporter(),
            narrative_source=narrative_source,
            config=config,
            verbose=True,
        )

        output_path = write_report(result, args.output)
        print(f"\nCreated: {output_path}")
        print(f"Slides: {len(result.deck.slides)}")
        return 0

    except (ReportError, ValueError, OSError) as e:
        print(f"\nError: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def inspect_command(args: argparse.Namespace) -> int:
    """Execute inspect command."""
    try:
        slides = summarize_report(args.report)
    except (OSError, ValueError, zipfile.BadZipFile) as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps(slides, indent=2))
    else:
        print("=" * 60)
        print(f"Report: {Path(args.report).name}")
        print("=" * 60)
        print(format_summary(slides))
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Landlord Report - Offering memorandum to leasing activity deck',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate offering.pdf --address "123 Main St, Springfield, IL 62704"
  %(prog)s generate offering.pdf -a "..." --narrative-url http://localhost:3000/api/generate-report
  %(prog)s inspect Landlord_Update_Report.pptx --json
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Generate command
    generate_parser = subparsers.add_parser('generate', help='Generate a report from an offering memorandum')
    generate_parser.add_argument('input', help='Offering memorandum (PDF)')
    generate_parser.add_argument('--address', '-a', required=True, help='Property address')
    generate_parser.add_argument('--output', '-o', default='.', help='Output directory (default: current)')
    generate_parser.add_argument('--config', '-c', help='Report configuration file (YAML/JSON)')
    generate_parser.add_argument('--narrative-url', help='Market narrative service URL (overrides config)')
    generate_parser.add_argument('--narrative-file', help='Use text from this file as the market narrative')
    generate_parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    # Inspect command
    inspect_parser = subparsers.add_parser('inspect', help='Summarize a generated report')
    inspect_parser.add_argument('report', help='PPTX report to summarize')
    inspect_parser.add_argument('--json', action='store_true', help='Output results as JSON')

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'generate':
        return generate_command(args)
    elif args.command == 'inspect':
        return inspect_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())

"""
Command-line interface for kontent-codegen.

Builds a GenerationConfig from arguments and an optional JSON config file,
then runs the generator in the current directory.
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .codegen.core.config import FORMATTERS, GenerationConfig, load_config
from .codegen.core.naming import InvalidConfiguration, accepted_keywords
from .codegen.orchestrator import GenerationOrchestrator, Reporter
from .logging_config import get_logger, setup_logging
from .utils import FetchFailure, load_types_from_file

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="kontent-codegen",
        description="Generate TypeScript models from Kontent content types",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  kontent-codegen --project-id 8d20758c-d74c-4f59-ae04-ee928c0816b7
  kontent-codegen --project-id ID --element-resolver camelCase --add-timestamp
  kontent-codegen --types-file types.json --formatter basic
  kontent-codegen --config kontent.json
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_argument_group("input")
    source = input_group.add_mutually_exclusive_group()
    source.add_argument("--project-id", help="Kontent project id to fetch types from")
    source.add_argument(
        "--types-file", metavar="FILE", help="JSON dump of the Delivery API '/types' endpoint"
    )
    input_group.add_argument(
        "--secure-access-key", metavar="KEY", help="Delivery API secure access key"
    )
    input_group.add_argument("--base-url", metavar="URL", help="Delivery API base URL")
    input_group.add_argument("--config", metavar="FILE", help="JSON configuration file")

    # Naming options
    naming_group = parser.add_argument_group("naming")
    naming_group.add_argument(
        "--element-resolver",
        choices=accepted_keywords(),
        help="Naming convention for element properties",
    )
    naming_group.add_argument(
        "--file-resolver",
        choices=accepted_keywords(),
        help="Naming convention for file names",
    )

    # Output options
    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output-dir", metavar="DIR", help="Directory for generated files (default: .)"
    )
    output_group.add_argument(
        "--add-timestamp",
        action="store_true",
        default=None,
        help="Add generation time to the file header",
    )
    output_group.add_argument(
        "--formatter", choices=FORMATTERS, help="Formatter for generated code"
    )
    output_group.add_argument(
        "--strict-elements",
        action="store_true",
        default=None,
        help="Fail on element types that cannot be mapped",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_config(args: argparse.Namespace) -> GenerationConfig:
    """Build configuration from CLI arguments."""
    overrides: Dict[str, Any] = {
        "project_id": args.project_id,
        "secure_access_key": args.secure_access_key,
        "base_url": args.base_url,
        "element_resolver": args.element_resolver,
        "file_resolver": args.file_resolver,
        "output_dir": args.output_dir,
        "add_timestamp": args.add_timestamp,
        "formatter": args.formatter,
        "strict_element_kinds": args.strict_elements,
    }
    config = load_config(config_file=args.config, overrides=overrides)

    if not args.types_file and not config.project_id:
        raise CLIError("Either --project-id (or projectId in --config) or --types-file is required")

    return config


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """
    Run the generator from command line arguments.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    console = console or Console()
    args = create_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = _build_config(args)
        types = load_types_from_file(args.types_file) if args.types_file else None
        orchestrator = GenerationOrchestrator(config, reporter=Reporter(console))
    except (CLIError, InvalidConfiguration, FetchFailure, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    logger.debug("Generating models from %s", args.types_file or config.project_id)
    try:
        asyncio.run(orchestrator.run(types))
    except Exception:
        # Already reported by the orchestrator
        logger.debug("Generation aborted", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

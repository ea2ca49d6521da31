"""Command-line interface for building SubRip files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, List, Dict, Any

from ..core import SubripFile, SubripError, TimecodeError, TimelineOrderingViolation
from ..transforms import TransformFactory
from ..utils.config import ConfigManager

logger = logging.getLogger(__name__)


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: List of command line arguments. If None, uses sys.argv[1:].

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Parse a SubRip file and write it back out cleaned up and renumbered.'
    )

    # Input/output options
    io_group = parser.add_argument_group('Input/Output')
    io_group.add_argument(
        'input',
        type=str,
        help='Input .srt file'
    )
    io_group.add_argument(
        '-o', '--output',
        type=str,
        help='Output file (default: standard output)'
    )
    io_group.add_argument(
        '--encoding',
        type=str,
        default=None,
        help='Text encoding of the input and output files'
    )
    io_group.add_argument(
        '--overwrite',
        action='store_true',
        help='Overwrite an existing output file'
    )

    # Range options
    range_group = parser.add_argument_group('Range')
    range_group.add_argument(
        '--from',
        dest='from_index',
        type=int,
        default=0,
        help='First cue to write (0-based, after sorting)'
    )
    range_group.add_argument(
        '--to',
        dest='to_index',
        type=int,
        default=-1,
        help='Last cue to write (0-based, after sorting; default: last cue)'
    )

    # Text options
    text_group = parser.add_argument_group('Text')
    text_group.add_argument(
        '--strip-tags',
        action='store_true',
        default=None,
        help='Remove markup tags from cue text'
    )
    text_group.add_argument(
        '--strip-basic',
        action='store_true',
        default=None,
        help='Only remove basic formatting tags (<b>, <i>, <u>, <s>, <font>)'
    )
    text_group.add_argument(
        '--replacements',
        action='store_true',
        default=None,
        help='Apply the default text replacements (<br>, &nbsp;, &amp;)'
    )
    text_group.add_argument(
        '--transform',
        type=str,
        choices=sorted(TransformFactory.get_available_transforms()),
        default=None,
        help='Text transform to apply to cue text'
    )
    text_group.add_argument(
        '--strict',
        action='store_true',
        default=None,
        help='Fail on out-of-order timelines instead of repairing them'
    )

    # Output options
    out_group = parser.add_argument_group('Output')
    out_group.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (can be used multiple times)'
    )
    out_group.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )

    # Config options
    config_group = parser.add_argument_group('Configuration')
    config_group.add_argument(
        '--config',
        type=str,
        help='Path to configuration file'
    )
    config_group.add_argument(
        '--save-config',
        action='store_true',
        help='Save current options to config file'
    )

    return parser.parse_args(args)


def setup_logging(verbosity: int = 0, quiet: bool = False) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        quiet: If True, suppress all non-error output
    """
    if quiet:
        log_level = logging.ERROR
    else:
        log_level = max(
            logging.WARNING - (verbosity * 10),
            logging.DEBUG
        )

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def resolve_build_options(config: ConfigManager, args: argparse.Namespace) -> Dict[str, Any]:
    """Combine build options from the config file with command line flags.

    Flags given on the command line win over the config file.
    """
    options = config.get_build_options()
    for key in ('strip_tags', 'strip_basic', 'replacements'):
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    return options


def process_file(
    input_file: Path,
    config: ConfigManager,
    args: argparse.Namespace
) -> Optional[str]:
    """Parse and rebuild a single SubRip file.

    Args:
        input_file: Input file path
        config: Configuration manager
        args: Command line arguments

    Returns:
        The rebuilt content, or None if the file could not be processed
    """
    encoding = args.encoding or config.get('io.encoding', 'utf-8')
    strict = args.strict if args.strict is not None else config.get('parser.strict', False)
    transform = TransformFactory.create_transform(args.transform or config.get('build.transform', 'markup'))

    try:
        content = input_file.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {input_file}: {e}")
        return None

    subrip = SubripFile(content, strict=strict, transform=transform)
    try:
        if subrip.parse() is None:
            logger.error(f"Not a SubRip file: {input_file}")
            return None
    except (TimecodeError, TimelineOrderingViolation) as e:
        logger.error(f"Failed to parse {input_file}: {e}")
        return None

    logger.info(f"Parsed {subrip.get_cues_count()} cues from {input_file}")

    try:
        subrip.set_options(resolve_build_options(config, args))
    except SubripError as e:
        logger.error(f"Invalid build options: {e}")
        return None

    subrip.build_part(args.from_index, args.to_index)
    return subrip.get_file_content()


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        args: Command line arguments. If None, uses sys.argv[1:].

    Returns:
        int: Exit code (0 for success, non-zero for error)
    """
    # Parse command line arguments
    args = parse_args(args)

    # Set up logging
    setup_logging(verbosity=args.verbose, quiet=args.quiet)

    # Initialize config
    config = ConfigManager(args.config)

    input_file = Path(args.input).expanduser().resolve()
    if not input_file.is_file():
        logger.error(f"Input file does not exist: {input_file}")
        return 1

    output_file = Path(args.output) if args.output else None
    if output_file and output_file.exists() and not args.overwrite:
        logger.error(f"Output file exists, use --overwrite to replace it: {output_file}")
        return 1

    content = process_file(input_file, config, args)
    if content is None:
        return 1

    if output_file:
        encoding = args.encoding or config.get('io.encoding', 'utf-8')
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding=encoding)
        logger.info(f"Wrote {output_file}")
    else:
        sys.stdout.write(content)

    # Save config if requested
    if args.save_config:
        updates = {}

        for key in ('strip_tags', 'strip_basic', 'replacements'):
            if getattr(args, key) is not None:
                updates[f'build.{key}'] = getattr(args, key)
        if args.transform:
            updates['build.transform'] = args.transform
        if args.strict is not None:
            updates['parser.strict'] = args.strict
        if args.encoding:
            updates['io.encoding'] = args.encoding

        if updates:
            config.update(updates)
            logger.info(f"Configuration saved to {config.config_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

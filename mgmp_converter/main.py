"""
Command-line interface for converting catalog records to MGMP 2.0 XML.

This module provides a small CLI around MgmpConverter.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from mgmp_converter.exceptions import (
    ConfigurationError,
    DocumentAssemblyError,
    MgmpConverterError,
    RecordLoadError,
)
from mgmp_converter.io.record_loader import RecordLoader
from mgmp_converter.models.settings import ConverterSettings
from mgmp_converter.plugins.mgmp import MgmpConverter

EXIT_OK = 0
EXIT_RECORD_LOAD_ERROR = 1
EXIT_CONFIGURATION_ERROR = 2
EXIT_DOCUMENT_ASSEMBLY_ERROR = 3
EXIT_CONVERTER_ERROR = 4
EXIT_FILE_SYSTEM_ERROR = 5
EXIT_UNEXPECTED_ERROR = 9


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging from the converter if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stdout,
        force=True,  # Override existing configuration
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(
        prog="mgmp-convert",
        description="Convert a catalog record into an MGMP 2.0 metadata document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the document for a JSON record
  mgmp-convert record.json

  # Write to a file using a settings file
  mgmp-convert record.yaml -c settings.yaml -o record.xml

  # Show per-step mapping detail
  mgmp-convert record.json --debug
        """,
    )

    parser.add_argument(
        "record_file",
        type=Path,
        help="JSON or YAML file holding the record attributes",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        dest="output_file",
        help="Where to write the XML document (default: stdout)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        dest="config_file",
        help="YAML or JSON converter settings file",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable informational logging from the converter",
    )

    return parser.parse_args(argv)


def run_conversion(
    record_file: Path,
    output_file: Path | None = None,
    config_file: Path | None = None,
    debug: bool = False,
    verbose: bool = False,
) -> NoReturn:
    """Execute the conversion of one record file.

    Args:
        record_file: JSON or YAML record to convert.
        output_file: Destination file, or None for stdout.
        config_file: Optional settings file.
        debug: Enable debug logging for detailed output.
        verbose: Enable informational logging.

    Raises:
        SystemExit: Always exits with appropriate code (0 for success, >0 for errors).
    """
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = (
            ConverterSettings.from_file(config_file)
            if config_file is not None
            else ConverterSettings()
        )
        record = RecordLoader.load(record_file)

        converter = MgmpConverter(settings)
        document = converter.to_bytes(record)

        if output_file is None:
            sys.stdout.buffer.write(document)
            sys.stdout.flush()
        else:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_bytes(document)
            logger.info(f"MGMP document saved to: {output_file}")

        sys.exit(EXIT_OK)

    except RecordLoadError as e:
        logger.error(f"Record load error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(EXIT_RECORD_LOAD_ERROR)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(EXIT_CONFIGURATION_ERROR)
    except DocumentAssemblyError as e:
        logger.error(f"Document assembly error: {e}")
        sys.exit(EXIT_DOCUMENT_ASSEMBLY_ERROR)
    except MgmpConverterError as e:
        logger.error(f"Converter error: {e}")
        sys.exit(EXIT_CONVERTER_ERROR)
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error(f"File system error: {e}")
        sys.exit(EXIT_FILE_SYSTEM_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(EXIT_UNEXPECTED_ERROR)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    run_conversion(
        args.record_file, args.output_file, args.config_file, args.debug, args.verbose
    )


if __name__ == "__main__":
    main()

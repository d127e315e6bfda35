"""Application entry point and composition root."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

from zipbatch import __version__
from zipbatch.application.use_cases.divide_archive import DivideArchiveUseCase
from zipbatch.application.use_cases.split_and_upload import SplitAndUploadUseCase
from zipbatch.config import Settings, get_settings
from zipbatch.domain.exceptions import ValidationError
from zipbatch.domain.value_objects import BatchLimits
from zipbatch.infrastructure.api.archives_client import ArchivesApiClient
from zipbatch.infrastructure.archive.staging import staged_archive
from zipbatch.infrastructure.archive.zip_reader import ZipArchiveReader
from zipbatch.infrastructure.archive.zip_validator import validate_zip_path
from zipbatch.infrastructure.archive.zip_writer import ZipArchiveWriter
from zipbatch.infrastructure.packing.greedy_packer import GreedyPacker

logger = logging.getLogger("zipbatch")
console = Console(stderr=True)

CONFIRM_ANSWERS = frozenset({"s", "sim", "y", "yes"})


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def confirm(assume_yes: bool) -> bool:
    """Ask before doing any work unless --yes was given."""
    if assume_yes:
        return True
    answer = Prompt.ask("Continue? (y/N)", default="", show_default=False, console=console)
    return answer.strip().lower() in CONFIRM_ANSWERS


def mask_token(token: str) -> str:
    return f"{token[:11]}..." if len(token) > 10 else "***"


def build_divide_use_case() -> DivideArchiveUseCase:
    """Composition root for the divide command."""
    return DivideArchiveUseCase(
        validator=validate_zip_path,
        reader_factory=ZipArchiveReader,
        packer=GreedyPacker(),
        writer=ZipArchiveWriter(),
    )


def build_split_use_case(settings: Settings, uploader: ArchivesApiClient) -> SplitAndUploadUseCase:
    """Composition root for the split command."""
    return SplitAndUploadUseCase(
        validator=validate_zip_path,
        reader_factory=ZipArchiveReader,
        packer=GreedyPacker(),
        writer=ZipArchiveWriter(),
        uploader=uploader,
        stage=staged_archive,
        limits=BatchLimits.from_megabytes(settings.split_max_files, settings.split_max_size_mb),
        request_interval=settings.request_interval,
    )


def run_divide(args: argparse.Namespace, settings: Settings) -> int:
    zip_path = Path(args.zip_path)
    try:
        limits = BatchLimits.from_megabytes(args.max_files, args.size_mb)
    except ValueError as e:
        logger.error("Error: %s", e)
        return 1
    output_dir = Path(args.output_dir) if args.output_dir else zip_path.parent

    logger.info("ZIP file: %s", zip_path)
    logger.info("Approx size per ZIP: %s MB", args.size_mb)
    logger.info("Max files per ZIP: %d", args.max_files)
    logger.info("Output directory: %s", output_dir)
    if not confirm(args.yes):
        logger.info("Operation cancelled.")
        return 0

    summary = build_divide_use_case().execute(zip_path, limits, output_dir)
    logger.info("Division summary:")
    logger.info("Total files processed: %d", summary.total_entries)
    logger.info("Total ZIP files created: %d", summary.archives_created)
    logger.info("Total processing time: %.2f seconds", summary.elapsed_seconds)
    return 0


def run_split(args: argparse.Namespace, settings: Settings) -> int:
    zip_path = Path(args.zip_path)
    environment = args.env or settings.environment
    base_url = settings.base_url_for(environment)

    logger.info("Token: %s", mask_token(args.token))
    logger.info("ZIP file: %s", zip_path)
    logger.info("Environment: %s (%s)", environment, base_url)
    if not confirm(args.yes):
        logger.info("Operation cancelled.")
        return 0

    with ArchivesApiClient(base_url, args.token, timeout=settings.api_timeout) as client:
        summary = build_split_use_case(settings, client).execute(zip_path)

    logger.info("Upload summary:")
    logger.info("Total XML files processed: %d", summary.total_entries)
    logger.info("Successful uploads: %d", summary.successful_uploads)
    logger.info("Failed uploads: %d", summary.failed_uploads)
    for filename, error in summary.failures:
        logger.info("  %s: %s", filename, error)
    return 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zipbatch",
        description="Split a large ZIP archive into smaller batches.",
    )
    parser.add_argument("--version", action="version", version=f"zipbatch {__version__}")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    parser.add_argument(
        "--compile-mode",
        action="store_true",
        help="Exit immediately without doing any work (used when freezing executables)",
    )
    sub = parser.add_subparsers(dest="command")

    divide = sub.add_parser("divide", help="Divide a ZIP into smaller ZIPs on disk")
    divide.add_argument("zip_path", help="Path to the ZIP file")
    divide.add_argument("--max-files", type=int, required=True, help="Max files per ZIP")
    divide.add_argument("--size-mb", type=float, required=True, help="Approx size of each ZIP (MB)")
    divide.add_argument("--output-dir", help="Output directory (default: next to the input)")
    divide.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    divide.set_defaults(handler=run_divide)

    split = sub.add_parser("split", help="Split the XML files of a ZIP and upload each batch")
    split.add_argument("zip_path", help="Path to the ZIP file")
    split.add_argument("--token", required=True, help="API token")
    split.add_argument(
        "--env",
        choices=sorted(settings.api_base_urls),
        help=f"Target environment (default: {settings.environment})",
    )
    split.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    split.set_defaults(handler=run_split)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    settings = get_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.compile_mode:
        print("Running in compilation mode - skipping execution")
        return 0
    if args.command is None:
        parser.print_help()
        return 2

    configure_logging(args.log_level)
    try:
        return args.handler(args, settings)
    except ValidationError as e:
        logger.error("Error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    except Exception:
        logger.exception("Unhandled error")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for the test-run reporter."""

import json
import logging
from typing import Optional

import click  # type: ignore

from .core.config import ReporterConfig
from .core.loader import check_output_dir, load_source_lines
from .core.logging_config import setup_logging
from .core.record_parser import RecordParser
from .core.statistics import summarize
from .interface.menu import SummaryMenu
from .models.source import SourceFaultError
from .models.test_record import TestStatus
from .reports.writer import write_reports

logger = logging.getLogger(__name__)


def _load_config(config: Optional[str]) -> ReporterConfig:
    if not config:
        return ReporterConfig()
    try:
        return ReporterConfig.from_file(config)
    except Exception as e:
        click.echo(f"Error loading config file: {e}", err=True)
        raise click.Abort()


def _load_lines(csv_path: str):
    result = load_source_lines(csv_path)
    if not result.ok:
        click.echo(f"Error: {result.fault.message}", err=True)
        raise click.Abort()
    return result.lines


@click.group()
def cli():
    """Test-run reporter - validate test result CSVs and summarize them."""
    pass


@cli.command()
@click.argument('csv_path', type=click.Path())
@click.argument('out_dir', type=click.Path())
@click.option('--skip-header/--no-skip-header',
              default=None,
              help='Treat the first non-blank line as a header')
@click.option('--menu/--no-menu',
              default=None,
              help='Open the interactive summary menu after writing reports')
@click.option('--config',
              help='Path to configuration file (YAML or JSON)',
              type=click.Path(exists=True, file_okay=True, dir_okay=False))
@click.option('--verbose',
              is_flag=True,
              help='Enable debug logging')
def report(csv_path: str,
           out_dir: str,
           skip_header: Optional[bool],
           menu: Optional[bool],
           config: Optional[str],
           verbose: bool):
    """
    Validate CSV_PATH and write summary.txt, summary.csv and errors.log to OUT_DIR.

    Examples:

    \b
    # Basic usage
    testrun-report report results.csv out/

    \b
    # CSV with a header row, then browse the results
    testrun-report report results.csv out/ --skip-header --menu
    """
    settings = _load_config(config).merged(skip_header=skip_header, open_menu=menu)
    setup_logging("DEBUG" if verbose else settings.log_level)

    lines = _load_lines(csv_path)

    fault = check_output_dir(out_dir)
    if fault is not None:
        click.echo(f"Error: {fault.message}", err=True)
        raise click.Abort()

    parser = RecordParser(skip_header=settings.skip_header, delimiter=settings.delimiter)
    result = parser.parse(lines)
    snapshot = summarize(result.records)

    try:
        paths = write_reports(result.records, result.errors, out_dir, snapshot=snapshot, config=settings)
    except (SourceFaultError, OSError) as e:
        click.echo(f"Error writing reports: {e}", err=True)
        raise click.Abort()

    click.echo(f"Report generated at: {paths.directory.resolve()}")
    click.echo(f"Total tests: {snapshot.total}")
    for status in TestStatus:
        click.echo(f"{status}: {snapshot.count(status)} ({snapshot.percent(status):.2f}%)")
    click.echo(f"Invalid lines: {len(result.errors)}")

    logger.info("Finished: %d valid records, %d errors", len(result.records), len(result.errors))

    if settings.open_menu:
        SummaryMenu(result.records, result.errors, paths.directory).run()


@cli.command()
@click.argument('csv_path', type=click.Path())
@click.option('--skip-header',
              is_flag=True,
              help='Treat the first non-blank line as a header')
@click.option('--output',
              help='Write validation results as JSON to this file',
              type=click.Path())
def validate(csv_path: str, skip_header: bool, output: Optional[str]):
    """Validate a test results CSV without writing reports."""
    click.echo(f"Validating test results from {csv_path}...")

    lines = _load_lines(csv_path)
    result = RecordParser(skip_header=skip_header).parse(lines)
    snapshot = summarize(result.records)

    if result.errors:
        click.echo(f"Found {len(result.errors)} invalid lines:")
        for error in result.errors:
            click.echo(f"   - {error}")
    else:
        click.echo("All lines are valid!")

    click.echo(f"Summary: {snapshot.total} tests, {snapshot.pass_rate:.1%} pass rate")

    if output:
        validation_results = {
            "valid": not result.has_errors,
            "issues": [str(error) for error in result.errors],
            "summary": snapshot.model_dump(mode="json"),
            "record_count": len(result.records),
        }
        with open(output, 'w', encoding='utf-8') as f:
            json.dump(validation_results, f, indent=2)
        click.echo(f"Validation results saved to {output}")


@cli.command()
@click.option('--config-template',
              default='testrun_config.yaml',
              help='Output file for configuration template')
def init_config(config_template: str):
    """Generate a configuration template file."""
    ReporterConfig().save(config_template)
    click.echo(f"Configuration template created: {config_template}")
    click.echo("Edit the file with your settings and use with --config option")


def main():
    cli()


if __name__ == '__main__':
    main()

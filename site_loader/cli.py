# === FILE: site_loader/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for SiteLoader.

Commands:
  load      Crawl from a root URL and print/save the extracted documents
  config    Show the effective configuration

Global options:
  --config PATH       Path to a YAML/JSON config file
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

Options of `load` (override the config file):
  ROOT_URL            Seed URL (required when no config file is given)
  --max-depth INT     Maximum link depth
  --exclude PREFIX    Excluded URL prefix, repeatable
  --timeout-ms INT    Timeout of a single fetch in milliseconds
  --allow-outside     Follow links outside the current page URL
  --json PATH         Save documents to a JSON file
  --pretty            Indent JSON printed to stdout
  --crawl-timeout SEC Deadline for the whole crawl (seconds)

Example:
  site-loader load https://example.com/docs/ --max-depth 3 --json docs.json
"""
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from site_loader import __version__
from site_loader.config import CrawlConfig, load_config
from site_loader.loader import load
from site_loader.logger import DEFAULT_FORMAT, init_logging, logger
from site_loader.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def build_config(config_path: Optional[Path], overrides: Dict[str, Any]) -> CrawlConfig:
    """Load the config file (if any) and apply command-line overrides on top."""
    base: Dict[str, Any] = load_config(config_path).model_dump() if config_path else {}
    base.update({k: v for k, v in overrides.items() if v is not None})
    if 'root_url' not in base:
        raise click.UsageError('ROOT_URL is required when no --config file is given')
    return CrawlConfig(**base)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteLoader, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML/JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SiteLoader command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('load', context_settings=CONTEXT_SETTINGS)
@click.argument('root_url', required=False)
@click.option('--max-depth', '-d', 'max_depth', type=click.IntRange(min=0), default=None,
              help='Maximum link depth (root is 0)')
@click.option('--exclude', '-e', 'exclude_dirs', multiple=True,
              help='Excluded URL prefix, may be repeated')
@click.option('--timeout-ms', 'timeout_millis', type=click.IntRange(min=1), default=None,
              help='Timeout of a single fetch in milliseconds')
@click.option('--allow-outside', is_flag=True,
              help='Follow links that leave the current page URL')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save documents to a JSON file'
)
@click.option('--pretty', is_flag=True, help='Indent JSON output (2 spaces)')
@click.option('--crawl-timeout', 'crawl_timeout', type=float, default=None,
              help='Deadline for the whole crawl (seconds)')
@click.pass_context
def load_command(ctx, root_url, max_depth, exclude_dirs, timeout_millis, allow_outside,
                 json_output, pretty, crawl_timeout):
    """Crawl from ROOT_URL and output the extracted documents."""
    overrides = {
        'root_url': root_url,
        'max_depth': max_depth,
        'exclude_dirs': frozenset(exclude_dirs) if exclude_dirs else None,
        'timeout_millis': timeout_millis,
        'prevent_outside': False if allow_outside else None,
    }
    try:
        cfg = build_config(ctx.obj['config_path'], overrides)
    except (ValidationError, OSError, ValueError, TypeError) as e:
        print_error(f'Configuration error: {e}')

    logger.debug('Effective config: %s', cfg.model_dump_json())
    try:
        if crawl_timeout:
            docs = asyncio.run(asyncio.wait_for(load(cfg), timeout=crawl_timeout))
        else:
            docs = asyncio.run(load(cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')

    if json_output:
        try:
            saved = render_json(docs, json_output)
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')
        click.echo(f'Saved {len(docs)} documents to {saved}')
        return

    indent = 2 if pretty else None
    click.echo(json.dumps([d.to_dict() for d in docs], ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('root_url', required=False)
@click.pass_context
def show_config(ctx, root_url):
    """Show the effective configuration as JSON."""
    try:
        cfg = build_config(ctx.obj['config_path'], {'root_url': root_url})
    except (ValidationError, OSError, ValueError, TypeError) as e:
        print_error(f'Configuration error: {e}')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()

"""CLI entry point for resolving the test runner config.

Usage:
    webrunner [FILES]... [options]

Prints the resolved config as JSON, in the same envelope used for errors.
"""

import asyncio
import logging
import sys
from typing import Any, Optional

import click
from click.core import ParameterSource

from .config import parse_config, read_config_file
from .errors import RunnerStartError
from .reporting import JsonReporter

# CLI parameter name -> config key, for parameters that are config overrides
CONFIG_OPTIONS = {
    "files": "files",
    "root_dir": "root_dir",
    "group": "group",
    "watch": "watch",
    "coverage": "coverage",
    "concurrency": "concurrency",
    "concurrent_browsers": "concurrent_browsers",
    "static_logging": "static_logging",
    "manual": "manual",
    "open_browser": "open",
    "port": "port",
    "preserve_symlinks": "preserve_symlinks",
    "puppeteer": "puppeteer",
    "playwright": "playwright",
    "browsers": "browsers",
    "node_resolve": "node_resolve",
    "esbuild_target": "esbuild_target",
    "debug": "debug",
}


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1)
@click.option("--config", "config_path", help="Location of the config file.")
@click.option("--root-dir", help="Root directory to serve files from.")
@click.option("--group", help="Only run the group with this name.")
@click.option("--watch", is_flag=True, help="Run in watch mode.")
@click.option("--coverage", is_flag=True, help="Check for code coverage.")
@click.option("--concurrency", type=int, help="Number of test files to run concurrently.")
@click.option("--concurrent-browsers", type=int, help="Number of browsers to run concurrently.")
@click.option("--static-logging", is_flag=True, help="Disable dynamic CLI progress output.")
@click.option("--manual", is_flag=True, help="Serve tests for manual testing in a browser.")
@click.option("--open", "open_browser", is_flag=True, help="Open the browser in manual mode.")
@click.option("--port", type=int, help="Port of the test runner server.")
@click.option("--preserve-symlinks", is_flag=True, help="Keep symlinks when resolving imports.")
@click.option("--puppeteer", is_flag=True, help="Launch browsers with puppeteer.")
@click.option("--playwright", is_flag=True, help="Launch browsers with playwright.")
@click.option("--browsers", multiple=True, help="Browsers to run with --puppeteer or --playwright.")
@click.option("--node-resolve", is_flag=True, help="Resolve bare module imports.")
@click.option("--esbuild-target", multiple=True, help="JS language target to compile down to.")
@click.option("--debug", is_flag=True, help="Log debug messages.")
@click.option("--pretty", is_flag=True, help="Pretty print output.")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[str], pretty: bool, **params: Any):
    """Resolve the test runner config for FILES."""
    cli_args = read_cli_args(ctx, params)
    reporter = JsonReporter()

    if cli_args.get("debug"):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        user_config = read_config_file(config_path)
        parsed = asyncio.run(parse_config(user_config, cli_args))
    except RunnerStartError as e:
        output_error(reporter, str(e))
        sys.exit(1)
    except OSError as e:
        output_error(reporter, f"Failed to resolve config: {e}")
        sys.exit(1)

    report = reporter.generate(parsed)
    output = reporter.generate_output(report, reporter.summarize(report))
    click.echo(reporter.to_json_string(output, pretty=pretty))


def read_cli_args(ctx: click.Context, params: dict[str, Any]) -> dict[str, Any]:
    """Collect the options actually given on the command line.

    Options left at their default are omitted so they don't override the
    config file.
    """
    cli_args: dict[str, Any] = {}
    for param, key in CONFIG_OPTIONS.items():
        if ctx.get_parameter_source(param) != ParameterSource.COMMANDLINE:
            continue
        value = params[param]
        if isinstance(value, tuple):
            value = list(value)
        cli_args[key] = value
    return cli_args


def output_error(reporter: JsonReporter, message: str) -> None:
    """Output error in the JSON envelope."""
    output = reporter.generate_output(None, message, success=False)
    click.echo(reporter.to_json_string(output))


if __name__ == "__main__":
    main()

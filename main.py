#!/usr/bin/env python3
"""GraphQL Template - Entry point."""
import json
import logging
from dataclasses import replace
from typing import Any, Dict, Optional

import click
import requests
from colorama import Fore, Style, init

from config import app_config
from graphql_template import __version__
from graphql_template.api.graphql_client import GraphqlClient
from graphql_template.builder import PayloadBuilder
from graphql_template.exporter.payload_exporter import PayloadExporter

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}", err=True)
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}GraphQL Template{Fore.CYAN}                     ║", err=True)
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Query file to request payload{Fore.CYAN}        ║", err=True)
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}", err=True)


def load_variables(variables: Optional[str], variables_file: Optional[str]) -> Optional[Dict[str, Any]]:
    """Decode --variables / --variables-file into a dict, or None when absent."""
    if variables and variables_file:
        raise click.UsageError("Use either --variables or --variables-file, not both")

    if variables_file:
        with open(variables_file, "r", encoding=app_config.graphql.encoding) as f:
            variables = f.read()

    if not variables:
        return None

    try:
        decoded = json.loads(variables)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="variables")

    if not isinstance(decoded, dict):
        raise click.BadParameter("Variables must be a JSON object", param_hint="variables")

    return decoded


def build_payload(query_file: str, variables: Optional[str], variables_file: Optional[str]) -> str:
    """Build the payload, reporting I/O and encoding failures as CLI errors."""
    try:
        return PayloadBuilder().parse_graphql_file(
            query_file,
            load_variables(variables, variables_file),
        )
    except (OSError, ValueError, TypeError) as e:
        raise click.ClickException(str(e))


variables_option = click.option(
    "--variables",
    help="Query variables as a JSON object",
)
variables_file_option = click.option(
    "--variables-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON file holding the query variables",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """GraphQL Template - Turn GraphQL files into request payloads."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.argument("query_file", type=click.Path(exists=True, dir_okay=False))
@variables_option
@variables_file_option
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    help="Write the payload to this file instead of stdout",
)
def build(query_file, variables, variables_file, output):
    """Build a request payload from a GraphQL file."""
    payload = build_payload(query_file, variables, variables_file)

    if output:
        path = PayloadExporter().export(output, payload)
        click.echo(f"{Fore.GREEN}✅ Payload written to {path}", err=True)
    else:
        click.echo(payload)


@cli.command()
@click.argument("query_file", type=click.Path(exists=True, dir_okay=False))
@variables_option
@variables_file_option
@click.option("--endpoint", help="GraphQL endpoint URL")
def send(query_file, variables, variables_file, endpoint):
    """Build a payload and POST it to a GraphQL endpoint."""
    print_banner()

    payload = build_payload(query_file, variables, variables_file)

    config = app_config.graphql
    if endpoint:
        config = replace(config, endpoint=endpoint)

    click.echo(f"{Fore.CYAN}Sending to {config.endpoint}...", err=True)

    try:
        result = GraphqlClient(config).execute(payload)
    except (requests.RequestException, ValueError) as e:
        raise click.ClickException(f"Request failed: {e}")

    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()

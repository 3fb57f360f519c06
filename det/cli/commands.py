import argparse
from typing import List

import det.cli.echo as fmt
from det.cli import SupportsCliCommand
from det.config import (
    TDestinationConnector,
    TJobConfig,
    TSourceConnector,
    get_source_names,
    load_job_config,
)


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help=(
            "Path to the job configuration file. Defaults to the RUNTIME__CONFIG_FILE_PATH"
            " environment variable or config.yaml"
        ),
    )


def describe_source(name: str, source: TSourceConnector) -> str:
    if source["type"] == "filesystem":
        return f"{name}: filesystem {source['format']} {source['path']}"
    return f"{name}: {source['type']}"


def describe_destination(destination: TDestinationConnector) -> str:
    if destination["type"] == "postgres":
        # dsn is not displayed as it may contain credentials
        details = [f"write_mode={destination.get('write_mode') or 'default'}"]
        if destination.get("schema"):
            details.append(f"schema={destination['schema']}")
        return f"{destination['name']}: postgres {' '.join(details)}"
    return (
        f"{destination['name']}: {destination['type']} {destination['format']}"
        f" {destination['base_dir']}"
    )


def describe_job(config: TJobConfig) -> List[str]:
    """Returns human readable listing of the job, one line per element"""
    lines = [f"Job {fmt.bold(config['name'])} (profile: {config['profile']})", "Sources:"]
    for name, source in config["extract"]["sources"].items():
        lines.append(f"  {describe_source(name, source)}")
    lines.append(f"Transform with {config['transform']['engine']}:")
    for idx, sql_path in enumerate(config["transform"]["sql_paths"], start=1):
        lines.append(f"  {idx}. {sql_path}")
    lines.append("Destinations:")
    for destination in config["load"]["destinations"]:
        lines.append(f"  - {describe_destination(destination)}")
    return lines


class ValidateCommand(SupportsCliCommand):
    command = "validate"
    help_string = "Parses and validates the job configuration file"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        self.parser = parser
        _add_path_argument(parser)

    def execute(self, args: argparse.Namespace) -> int:
        config = load_job_config(args.path)
        if not config["transform"]["sql_paths"]:
            fmt.warning(f"Job {config['name']} does not run any sql scripts")
        fmt.secho("OK", fg="green")
        fmt.echo(
            f"Job {fmt.bold(config['name'])} has {len(config['extract']['sources'])} source(s),"
            f" {len(config['transform']['sql_paths'])} sql script(s) and"
            f" {len(config['load']['destinations'])} destination(s)"
        )
        return 0


class SourcesCommand(SupportsCliCommand):
    command = "sources"
    help_string = "Lists source names of the job in the order they are declared"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        self.parser = parser
        _add_path_argument(parser)

    def execute(self, args: argparse.Namespace) -> int:
        config = load_job_config(args.path)
        for name in get_source_names(config):
            fmt.echo(name)
        return 0


class ShowCommand(SupportsCliCommand):
    command = "show"
    help_string = "Shows sources, transformations and destinations of the job"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        self.parser = parser
        _add_path_argument(parser)

    def execute(self, args: argparse.Namespace) -> int:
        config = load_job_config(args.path)
        for line in describe_job(config):
            fmt.echo(line)
        return 0


DEFAULT_COMMANDS = [ValidateCommand, SourcesCommand, ShowCommand]

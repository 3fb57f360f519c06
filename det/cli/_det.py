from typing import Any, Dict, Optional, Sequence
import argparse

from det.version import __version__
from det.common import logger
from det.common.exceptions import DetException
from det.common.configuration import resolve_configuration
from det.common.configuration.specs import RunConfiguration
from det.cli import SupportsCliCommand
from det.cli.commands import DEFAULT_COMMANDS

import det.cli.echo as fmt
from det.cli import debug


class DebugAction(argparse.Action):
    def __init__(
        self,
        option_strings: Sequence[str],
        dest: Any = argparse.SUPPRESS,
        default: Any = argparse.SUPPRESS,
        help: str = None,  # noqa
    ) -> None:
        super(DebugAction, self).__init__(
            option_strings=option_strings, dest=dest, default=default, nargs=0, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str = None,
    ) -> None:
        # will show stack traces
        debug.enable_debug()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validates and inspects ETL job configuration files.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s {version}".format(version=__version__)
    )
    parser.add_argument(
        "--debug", action=DebugAction, help="Displays full stack traces on exceptions."
    )
    subparsers = parser.add_subparsers(dest="command")

    # install available commands
    installed_commands: Dict[str, SupportsCliCommand] = {}
    for c in DEFAULT_COMMANDS:
        command = c()
        command_parser = subparsers.add_parser(command.command, help=command.help_string)
        command.configure_parser(command_parser)
        installed_commands[command.command] = command

    args = parser.parse_args(argv)

    if args.command not in installed_commands:
        parser.print_help()
        return -1

    try:
        run_config = resolve_configuration(RunConfiguration())
        logger.init_logging_from_config(run_config)
        if args.path is None:
            args.path = run_config.config_file_path
        return installed_commands[args.command].execute(args)
    except DetException as ex:
        if debug.is_debug_enabled():
            raise
        fmt.error(str(ex))
        return -1


def _main() -> None:
    """Script entry point"""
    exit(main())


if __name__ == "__main__":
    exit(main())

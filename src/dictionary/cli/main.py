"""
Dictionary CLI.

    dictionary -action=add hello "a greeting" philo
    dictionary -action=define hello
    dictionary -action=tag philo
    dictionary -action=remove hello
    dictionary                      # same as -action=list
"""

import argparse

from dictionary.cli.commands import add, define, remove, tag
from dictionary.cli.commands import list as list_
from dictionary.cli.console import console, handle_error
from dictionary.config import load_settings
from dictionary.core.dictionary import Dictionary
from dictionary.core.errors import DictionaryError
from dictionary.log import configure_logging

ACTIONS = {
    "list": list_,
    "add": add,
    "define": define,
    "tag": tag,
    "remove": remove,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dictionary", description="Dictionary CLI")
    parser.add_argument(
        "-action", default="list",
        help=f"Action to perform on the dictionary ({', '.join(ACTIONS)})",
    )
    parser.add_argument("-dir", dest="data_dir", help="Storage directory (default: $DICTIONARY_DIR)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("args", nargs="*", help="Arguments of the action")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    command = ACTIONS.get(args.action)
    if command is None:
        console.print(f"Unknown command :  {args.action}")
        return
    if len(args.args) < command.NARGS:
        parser.error(f"-action={args.action} expects {command.USAGE}")

    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        d = Dictionary.open(
            args.data_dir or settings.data_dir,
            prefetch_size=settings.prefetch_size,
            lock_timeout=settings.lock_timeout,
        )
    except DictionaryError as e:
        handle_error(e)

    with d:
        try:
            command.run(d, args.args)
        except DictionaryError as e:
            handle_error(e)


if __name__ == "__main__":
    main()

"""Command-line driver: reads a source file, runs it, and turns the program's result into the process
exit status. Diagnostics go to stderr as a single line; see GhlError.format.
"""

import argparse
import logging
import sys

from termcolor import colored

from .Errors import GhlError
from .Pipeline import compile, execute

STDIN = "-"


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="ghl", description="Interpreter for the ghl language")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("input_file", nargs="?", help="source file to run ('-' reads standard input)")
    source.add_argument("-i", "--input", dest="input_opt", metavar="FILE", help="source file to run")
    parser.add_argument("--dump-tokens", action="store_true", help="dump tokens to file")
    parser.add_argument("--tokens-out", default="out.ghl_tokens", metavar="FILE",
                        help="file name to which the tokens should be dumped")
    parser.add_argument("--dump-ast", action="store_true", help="dump ast to file")
    parser.add_argument("--ast-out", default="out.ghl_ast", metavar="FILE",
                        help="file name to which the AST should be dumped")
    parser.add_argument("--strict-bindings", action="store_true",
                        help="reject a second 'let' of an already bound name")
    parser.add_argument("--print-result", action="store_true", help="print the program's result to stdout")
    parser.add_argument("--no-color", action="store_true", help="never colour diagnostics")
    parser.add_argument("-v", "--verbose", action="store_true", help="log pipeline stages to stderr")
    return parser


def read_source(path):
    if path == STDIN:
        return sys.stdin.read()
    with open(path, "r") as file:
        return file.read()


def exit_status(result):
    """Low 8 bits of the result, as exit() reports it to a POSIX parent."""
    return result & 0xFF


def run_file(args, filename):
    source = read_source(filename)
    ast = compile(source,
                  allow_rebinding=not args.strict_bindings,
                  tokens_out=args.tokens_out if args.dump_tokens else None,
                  ast_out=args.ast_out if args.dump_ast else None)
    return execute(ast)


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    filename = args.input_opt or args.input_file
    if filename is None:
        parser.error("no input file given")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    display_name = "<stdin>" if filename == STDIN else filename
    color = not args.no_color

    try:
        result = run_file(args, filename)
    except GhlError as err:
        print(err.format(display_name, color=color), file=sys.stderr)
        return 1
    except OSError as err:
        msg = f"'{err.filename or filename}' could not be opened: {err.strerror}"
        head = colored("error: ", "red", attrs=["bold"]) if color else "error: "
        print(head + msg, file=sys.stderr)
        return 1
    except Exception as err:  # anything else is a bug in ghl itself
        head = colored("[internal] error: ", "red", attrs=["bold"]) if color else "[internal] error: "
        print(f"{head}unknown error: '{type(err).__name__}: {err}'", file=sys.stderr)
        return 2

    if args.print_result:
        print(result)
    return exit_status(result)


if __name__ == "__main__":
    sys.exit(main())

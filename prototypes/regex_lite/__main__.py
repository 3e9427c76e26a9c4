# coding: utf-8
import sys
import logging
import unittest

import regex_lite.tests
from regex_lite import is_match
from regex_lite.parser import Parser, ParserError, DEFAULT_LANGUAGE

from docopt import docopt


logger = logging.getLogger(__name__)


def explain(pattern):
    try:
        parsed = Parser().parse(pattern)
    except ParserError as error:
        print(error, file=sys.stderr)
    else:
        logger.debug("parsed pattern %s", DEFAULT_LANGUAGE.to_string(parsed))


def main(argv=sys.argv):
    """
    Usage:
      regex_lite match [--verbose] [--] <pattern> <text>
      regex_lite test [<args>...]
      regex_lite -h | --help

    Options:
      -h --help     Show this.
      -v --verbose  Log debug messages and explain invalid patterns.
    """
    arguments = docopt(main.__doc__, argv[1:], help=True)
    if arguments["match"]:
        if arguments["--verbose"]:
            logging.basicConfig(level=logging.DEBUG)
            explain(arguments["<pattern>"])
        result = is_match(arguments["<pattern>"], arguments["<text>"])
        print("true" if result else "false")
        return 0 if result else 1
    elif arguments["test"]:
        unittest.main(
            module=regex_lite.tests,
            argv=argv[0:1] + arguments["<args>"],
            buffer=True
        )
    return 0

if __name__ == "__main__":
    sys.exit(main())

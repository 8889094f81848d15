#!/usr/bin/env python3
# Prints the extended characters in the given text (or standard input),
# one per line, along with their byte offsets.
#
# To the extent possible under law, the author(s) have dedicated all
# copyright and neighboring rights to this software to the public domain
# worldwide. This software is distributed without any warranty. See
# <http://creativecommons.org/publicdomain/zero/1.0/> for a copy of the
# CC0 Public Domain Dedication.

from utf8chars import utf8_chars
import logging
import sys

USAGE = "Usage: segment.py [--debug] [text]"


def main(argv):
    args = argv[1:]
    log_debug = "--debug" in args
    args = [a for a in args if a != "--debug"]
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 1

    if log_debug:
        logging.basicConfig(
            format="[%(levelname)s][%(name)s] %(message)s",
            level=logging.DEBUG,
        )
    text = args[0] if args else sys.stdin.read()
    for char in utf8_chars(text):
        print("{:>6} {!r}".format(char.offset, char))
    return 0

if __name__ == "__main__":
    sys.exit(main(sys.argv))

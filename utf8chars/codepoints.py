# Copyright (C) 2023 taylor.fish <contact@taylor.fish>
#
# This file is part of utf8chars.
#
# utf8chars is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# As an additional permission under GNU GPL version 3 section 7, you may
# distribute non-source forms of comments (lines beginning with "#") and
# strings (text enclosed in quotation marks) in utf8chars source code without
# the copy of the GNU GPL normally required by section 4, provided you
# include a URL through which recipients can obtain a copy of the
# Corresponding Source and the GPL at no charge.
#
# utf8chars is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with utf8chars.  If not, see <http://www.gnu.org/licenses/>.

import logging

__all__ = ["VARIATION_SELECTOR", "ZERO_WIDTH_JOINER", "InvalidLeadByteError",
           "code_point_len", "try_code_point_len", "next_code_point",
           "variation_selector", "zero_width_joiner", "bytes_as_str"]

VARIATION_SELECTOR = "\ufe0f"
ZERO_WIDTH_JOINER = "\u200d"

logger = logging.getLogger(__name__)


class InvalidLeadByteError(ValueError):
    """Raised by `code_point_len` when the byte it is given cannot start a
    UTF-8 code point (a continuation byte or a byte that never occurs in
    UTF-8).

    This means the caller broke the contract of passing valid,
    code-point-aligned UTF-8. It signals corruption or a bug upstream and
    should not be caught in order to guess a length.

    The offending byte is available as the `byte` attribute.
    """
    def __init__(self, byte):
        super().__init__("invalid first byte '{:08b}'".format(byte))
        self.byte = byte


def code_point_len(buffer, start=0):
    """Gets the number of bytes the code point starting at ``start`` takes
    up, judging only by its leading byte::

        >>> code_point_len("A".encode("utf8"))
        1
        >>> code_point_len("\\u26bd".encode("utf8"))
        3

    ``buffer`` must be valid UTF-8 and ``start`` must be the index of the
    first byte of a code point. These preconditions are not checked: an
    invalid leading byte raises `InvalidLeadByteError`, and an empty
    ``buffer`` raises `IndexError`. Use `try_code_point_len` if the input
    isn't trusted.

    :param buffer: A bytes-like object.
    :param int start: The index of the code point's first byte.
    :returns: 1, 2, 3 or 4.
    :rtype: `int`
    """
    first_byte = buffer[start]
    if first_byte & 0b1000_0000 == 0:
        return 1
    if first_byte & 0b1110_0000 == 0b1100_0000:
        return 2
    if first_byte & 0b1111_0000 == 0b1110_0000:
        return 3
    if first_byte & 0b1111_1000 == 0b1111_0000:
        return 4
    raise InvalidLeadByteError(first_byte)


def try_code_point_len(buffer, start=0):
    """Like `code_point_len`, but returns None instead of raising an
    exception when ``buffer`` is empty at ``start`` or the byte there can't
    start a code point.

    :rtype: `int` or None
    """
    if start >= len(buffer):
        return None
    try:
        return code_point_len(buffer, start)
    except InvalidLeadByteError:
        return None


# Splits off the first code point. Returns None when there is no more input.
def next_code_point(view):
    if not view:
        return None
    length = code_point_len(view)
    return view[:length], view[length:]


def variation_selector(view):
    """Checks if ``view`` starts with a `VARIATION_SELECTOR`.

    :returns: A ``(selector, rest)`` tuple, or None if the next code point
      isn't a variation selector. Nothing is consumed in that case.
    """
    result = next_code_point(view)
    if result is None:
        return None
    cp_bytes, rest = result
    if bytes_as_str(cp_bytes) == VARIATION_SELECTOR:
        return cp_bytes, rest
    return None


def zero_width_joiner(view):
    """Checks if ``view`` starts with a `ZERO_WIDTH_JOINER` and, if so,
    returns it together with the code point it joins.

    :returns: A ``(joined, rest)`` tuple, where ``joined`` covers both the
      joiner and the following code point, or None if the next code point
      isn't a joiner.
    """
    result = next_code_point(view)
    if result is None:
        return None
    joiner_bytes, rest = result
    if bytes_as_str(joiner_bytes) != ZERO_WIDTH_JOINER:
        return None

    result = next_code_point(rest)
    if result is not None:
        join_with_bytes, rest = result
        return view[:len(joiner_bytes) + len(join_with_bytes)], rest

    # Nothing follows the joiner, so it ends the current character on its
    # own. Provisional: there may be a better way to report this.
    logger.debug("Dangling zero-width joiner at end of input")
    return joiner_bytes, rest


# Decodes bytes which are assumed to be valid UTF-8.
def bytes_as_str(view):
    return str(view, "utf8")

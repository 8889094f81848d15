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

from .codepoints import bytes_as_str, next_code_point
from .codepoints import variation_selector, zero_width_joiner

__all__ = ["UTF8Char", "UTF8Chars", "UTF8Str", "utf8_chars"]


# Returns a memoryview of the unsigned bytes in a bytes-like object without
# copying it. Non-contiguous buffers raise TypeError.
def as_view(buffer, name="buffer"):
    if not isinstance(buffer, memoryview):
        try:
            buffer = memoryview(buffer)
        except TypeError:
            raise TypeError(
                "'{}' must be a str or a bytes-like object.".format(name),
            ) from None
    return buffer.cast("B")


class UTF8Char:
    """A single extended character: one code point, optionally followed by a
    variation selector and any number of zero-width joiners together with
    the code points they join. ``"A"``, ``"\\u26bd"`` and
    ``"\\U0001f468\\u200d\\U0001f469\\u200d\\U0001f466"`` are each one
    `UTF8Char`.

    Objects of this type are produced by `UTF8Chars`. They don't copy the
    text they represent; `bytes` is a view into the buffer that was
    segmented. The bytes are assumed to be valid UTF-8.

    `UTF8Char` objects compare equal to other `UTF8Char` objects with the
    same bytes, and to `str` objects with the same text, so they can be used
    directly in assertions::

        >>> next(utf8_chars("± and more")) == "±"
        True
        >>> UTF8Char("⚽")
        '⚽'

    :param value: A `str`, which is encoded as UTF-8 but not segmented, or a
      bytes-like object holding valid UTF-8.
    :param int offset: The position of the first byte in the original
      buffer.
    """
    def __init__(self, value, offset=0):
        if isinstance(value, str):
            value = value.encode("utf8")
        self._bytes = as_view(value, "value")
        self._offset = offset

    @property
    def bytes(self):
        """The character's bytes.

        :type: `memoryview`
        """
        return self._bytes

    @property
    def nbytes(self):
        """The number of bytes the character takes up.

        :type: `int`
        """
        return len(self._bytes)

    @property
    def offset(self):
        """The index of the character's first byte in the buffer it came
        from.

        :type: `int`
        """
        return self._offset

    def as_str(self):
        return bytes_as_str(self._bytes)

    def is_str(self, right):
        """Checks if the character's text is equal to ``right``.

        :param str right: The string to compare against.
        :rtype: `bool`
        """
        return self.as_str() == right

    def __str__(self):
        return self.as_str()

    def __eq__(self, other):
        if isinstance(other, UTF8Char):
            return self._bytes == other._bytes
        if isinstance(other, str):
            return self.is_str(other)
        return NotImplemented

    def __hash__(self):
        return hash(self.as_str())

    def __repr__(self):
        return "'{}'".format(self.as_str())


class UTF8Chars:
    """An iterator over the extended characters (`UTF8Char` objects) in a
    UTF-8 buffer. ::

        >>> list(UTF8Chars("A±⚽"))
        ['A', '±', '⚽']

    Each step takes one code point, then an optional `VARIATION_SELECTOR`,
    then as many `ZERO_WIDTH_JOINER` + code point pairs as follow. Nothing
    else (combining marks, regional indicators, etc.) is merged.

    The buffer is consumed from left to right and never copied. Once the
    iterator is exhausted it stays exhausted; create a new one (or call
    `utf8_chars` again) to iterate a second time.

    The buffer must be valid UTF-8. If it isn't, iteration may raise
    `InvalidLeadByteError`.

    :param buffer: A `str` (encoded as UTF-8 first) or a bytes-like object.
    """
    def __init__(self, buffer):
        if isinstance(buffer, str):
            buffer = buffer.encode("utf8")
        self._bytes = as_view(buffer)
        self._offset = 0

    @property
    def exhausted(self):
        """Whether all characters have been consumed.

        :type: `bool`
        """
        return not self._bytes

    @property
    def remaining(self):
        """The bytes that haven't been consumed yet.

        :type: `memoryview`
        """
        return self._bytes

    def __iter__(self):
        return self

    def __next__(self):
        if not self._bytes:
            raise StopIteration

        cp_bytes, remaining_bytes = next_code_point(self._bytes)
        char_len = len(cp_bytes)

        result = variation_selector(remaining_bytes)
        if result is not None:
            variant_bytes, remaining_bytes = result
            char_len += len(variant_bytes)

        # A character can consist of any number of joined code points.
        result = zero_width_joiner(remaining_bytes)
        while result is not None:
            joined_bytes, remaining_bytes = result
            char_len += len(joined_bytes)
            result = zero_width_joiner(remaining_bytes)

        char = UTF8Char(self._bytes[:char_len], self._offset)
        self._bytes = remaining_bytes
        self._offset += char_len
        return char

    def __repr__(self):
        name = type(self).__name__
        return "{0}({1!r})".format(name, bytes(self._bytes))


def utf8_chars(text):
    """Gets the extended characters in ``text``. Each call returns a new
    `UTF8Chars` iterator.

    :param text: A `str` or a bytes-like object containing valid UTF-8.
    :rtype: `UTF8Chars`
    """
    return UTF8Chars(text)


class UTF8Str(str):
    """A `str` that can be viewed as a sequence of extended characters.
    This class behaves just like `str`; it simply has extra methods. ::

        >>> s = UTF8Str("\\U0001f3f3\\ufe0f\\u200d\\U0001f308!")
        >>> len(s)
        5
        >>> s.char_count()
        2
    """

    def utf8_chars(self):
        """Returns a new iterator over the string's extended characters.

        :rtype: `UTF8Chars`
        """
        return UTF8Chars(self)

    def char_count(self):
        """Counts the extended characters in the string.

        :rtype: `int`
        """
        return sum(1 for _ in self.utf8_chars())

    def __repr__(self):
        name = type(self).__name__
        return "{0}({1})".format(name, super().__repr__())

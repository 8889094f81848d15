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

from .tests import BaseTest
from utf8chars import code_point_len, try_code_point_len
from utf8chars import InvalidLeadByteError, VARIATION_SELECTOR
from utf8chars import ZERO_WIDTH_JOINER
from utf8chars.codepoints import next_code_point, variation_selector
from utf8chars.codepoints import zero_width_joiner
import unittest


class TestCodePointLen(BaseTest):
    def test_single_byte(self):
        self.assertEqual(code_point_len("A".encode("utf8")), 1)

    def test_double_byte(self):
        self.assertEqual(code_point_len("±".encode("utf8")), 2)

    def test_triple_byte(self):
        self.assertEqual(code_point_len("⚽".encode("utf8")), 3)

    def test_quadruple_byte(self):
        self.assertEqual(code_point_len("\U0001fae5".encode("utf8")), 4)

    def test_start(self):
        buffer = "A±⚽".encode("utf8")
        self.assertEqual(code_point_len(buffer, 1), 2)
        self.assertEqual(code_point_len(buffer, 3), 3)

    def test_invalid_first_byte(self):
        with self.assertRaises(InvalidLeadByteError) as cm:
            code_point_len(b"\xbf")
        self.assertEqual(cm.exception.byte, 0xbf)
        self.assertEqual(str(cm.exception), "invalid first byte '10111111'")
        self.assertIsInstance(cm.exception, ValueError)

        # Continuation byte in the middle of a code point.
        with self.assertRaises(InvalidLeadByteError):
            code_point_len("±".encode("utf8"), 1)
        with self.assertRaises(InvalidLeadByteError):
            code_point_len(b"\xf8")
        with self.assertRaises(InvalidLeadByteError):
            code_point_len(b"\xff")

    def test_empty(self):
        with self.assertRaises(IndexError):
            code_point_len(b"")

    def test_try_code_point_len(self):
        self.assertEqual(try_code_point_len(b"A"), 1)
        self.assertEqual(try_code_point_len("\U0001fae5".encode("utf8")), 4)
        self.assertIsNone(try_code_point_len(b""))
        self.assertIsNone(try_code_point_len(b"A", 1))
        self.assertIsNone(try_code_point_len(b"\x80"))


class TestExtensionRules(BaseTest):
    def test_constants(self):
        self.assertEqual(VARIATION_SELECTOR, "\ufe0f")
        self.assertEqual(ZERO_WIDTH_JOINER, "\u200d")

    def test_next_code_point(self):
        view = memoryview("±A".encode("utf8"))
        cp_bytes, rest = next_code_point(view)
        self.assertEqual(bytes(cp_bytes), "±".encode("utf8"))
        self.assertEqual(bytes(rest), b"A")
        cp_bytes, rest = next_code_point(rest)
        self.assertEqual(bytes(cp_bytes), b"A")
        self.assertEqual(len(rest), 0)
        self.assertIsNone(next_code_point(rest))

    def test_variation_selector(self):
        view = memoryview("\ufe0fA".encode("utf8"))
        selector, rest = variation_selector(view)
        self.assertEqual(bytes(selector), b"\xef\xb8\x8f")
        self.assertEqual(bytes(rest), b"A")

    def test_variation_selector_not_present(self):
        self.assertIsNone(variation_selector(memoryview(b"A\xef\xb8\x8f")))
        self.assertIsNone(variation_selector(memoryview(b"")))
        # Other variation selectors aren't recognized.
        self.assertIsNone(variation_selector(
            memoryview("\ufe0e".encode("utf8"))))

    def test_zero_width_joiner(self):
        view = memoryview("\u200d\U0001f9b0!".encode("utf8"))
        joined, rest = zero_width_joiner(view)
        self.assertEqual(bytes(joined), "\u200d\U0001f9b0".encode("utf8"))
        self.assertEqual(bytes(rest), b"!")

    def test_zero_width_joiner_not_present(self):
        self.assertIsNone(zero_width_joiner(memoryview(b"A\xe2\x80\x8d")))
        self.assertIsNone(zero_width_joiner(memoryview(b"")))

    def test_dangling_zero_width_joiner(self):
        view = memoryview("\u200d".encode("utf8"))
        with self.assertLogs("utf8chars", level="DEBUG") as cm:
            joined, rest = zero_width_joiner(view)
        self.assertEqual(bytes(joined), "\u200d".encode("utf8"))
        self.assertEqual(len(rest), 0)
        self.assertEqual(len(cm.output), 1)
        self.assertIn("Dangling zero-width joiner", cm.output[0])


def main():
    unittest.main()


if __name__ == "__main__":
    main()

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

from .chars import UTF8Char, UTF8Chars, UTF8Str, utf8_chars
from .codepoints import VARIATION_SELECTOR, ZERO_WIDTH_JOINER
from .codepoints import InvalidLeadByteError
from .codepoints import code_point_len, try_code_point_len
from . import chars
from . import codepoints

__version__ = "0.1.0"

# Silence Pyflakes warnings about unused imports.
assert [UTF8Char, UTF8Chars, UTF8Str, utf8_chars]
assert [VARIATION_SELECTOR, ZERO_WIDTH_JOINER]
assert [InvalidLeadByteError]
assert [code_point_len, try_code_point_len]
assert [chars, codepoints]

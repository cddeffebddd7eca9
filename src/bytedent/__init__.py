# topmark:header:start
#
#   project      : ByteDent
#   file         : __init__.py
#   file_relpath : src/bytedent/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteDent package.

ByteDent removes the common leading whitespace shared by every non-blank line
of a text block, like `textwrap.dedent`, but works on raw byte buffers: it can
detect the indent without touching the input, write into a fixed-capacity
destination (reporting truncation), rewrite a buffer in place, and honor an
explicit length bound on text that is not NUL-terminated.

Examples:
    >>> from bytedent import dedent, find_common_indent
    >>> dedent(b"  a\\n    b\\n")
    b'a\\n  b\\n'
    >>> find_common_indent(b"\\tx\\n\\ty").indent
    b'\\t'
"""

from __future__ import annotations

from bytedent.core.rewriter import dedent, dedent_inplace, dedent_into, dedented_size
from bytedent.core.scanner import CommonIndent, find_common_indent, indent_size

__all__ = [
    "CommonIndent",
    "dedent",
    "dedent_inplace",
    "dedent_into",
    "dedented_size",
    "find_common_indent",
    "indent_size",
]

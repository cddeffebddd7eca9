# topmark:header:start
#
#   project      : ByteDent
#   file         : __init__.py
#   file_relpath : src/bytedent/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core indentation detection and stripping.

This package has no knowledge of files, configuration or the CLI. It works on
byte buffers only:

- `bytedent.core.text`: bounded views and span helpers.
- `bytedent.core.scanner`: the indent scanner (detect-only mode).
- `bytedent.core.rewriter`: the dedent rewriter (buffer, in-place, growable).
"""

from __future__ import annotations

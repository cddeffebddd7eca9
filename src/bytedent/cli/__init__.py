# topmark:header:start
#
#   project      : ByteDent
#   file         : __init__.py
#   file_relpath : src/bytedent/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for ByteDent.

The ``bytedent`` console script points at `bytedent.cli.main.cli`; the
subcommands live in `bytedent.cli.commands`. Nothing is imported here so that
library users importing `bytedent` never pay for Click.
"""

from __future__ import annotations

__all__: list[str] = []

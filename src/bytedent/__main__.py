# topmark:header:start
#
#   project      : ByteDent
#   file         : __main__.py
#   file_relpath : src/bytedent/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ByteDent via ``python -m bytedent``.

It delegates directly to :func:`bytedent.cli.main.cli`, so the module and the
``bytedent`` console script behave the same.

Examples:
    Dedent a template and print the result::

        python -m bytedent dedent template.txt
"""

from __future__ import annotations

from bytedent.cli.main import cli

if __name__ == "__main__":
    cli()

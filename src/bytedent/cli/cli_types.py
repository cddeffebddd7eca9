# topmark:header:start
#
#   project      : ByteDent
#   file         : cli_types.py
#   file_relpath : src/bytedent/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for ByteDent.

`EnumChoiceParam` lets an option accept the values of a string `Enum`
(case-insensitively, with shell completion inherited from `click.Choice`) and
hands the command the enum member instead of the raw string.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import click

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for command reports.

    Members:
      DEFAULT: Human-friendly text; may be colored.
      JSON: One JSON document, never colored.
    """

    DEFAULT = "default"
    JSON = "json"


class EnumChoiceParam(click.Choice, Generic[E]):
    """`click.Choice` over the values of ``enum_cls`` that converts to members."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.name = enum_cls.__name__.lower()

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        if isinstance(value, self.enum_cls):
            return value
        choice: str = super().convert(value, param, ctx)
        return self.enum_cls(choice)

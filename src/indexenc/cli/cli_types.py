# topmark:header:start
#
#   project      : IndexEnc
#   file         : cli_types.py
#   file_relpath : src/indexenc/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click parameter types for the IndexEnc CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from indexenc.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

KE = TypeVar("KE", bound=KeyedStrEnum)


class KeyedEnumParam(ParamTypeBase, Generic[KE]):
    """A Click parameter type that parses a token into a `KeyedStrEnum` member.

    Matching goes through `KeyedStrEnum.parse`, so keys, member names and
    aliases are all accepted, case-insensitively.
    """

    enum_cls: type[KE]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[KE]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = list(self.enum_cls.keys())

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | KE | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> KE | None:
        """Convert a command-line token to an enum member."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: KE | None = self.enum_cls.parse(str(value))
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(key) for key in self.choices if key.startswith(prefix)]

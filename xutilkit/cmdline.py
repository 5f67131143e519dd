"""Parsing command-line options into resource settings.

Options may be abbreviated to any unambiguous prefix. Arguments that are
not recognised options are kept, in order, in the returned argument list.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

__all__ = ["OptionKind", "OptionDesc", "ParsedCommand", "CommandParseError", "parse_command"]


class OptionKind(Enum):
    """How an option takes its value."""

    NO_ARG = 0
    """The value is the one given in the option table."""
    IS_ARG = 1
    """The value is the option argument itself."""
    STICKY_ARG = 2
    """The value is the rest of the argument after the option."""
    SEP_ARG = 3
    """The value is the next argument."""
    RES_ARG = 4
    """The next argument is a complete ``name: value`` resource line."""
    SKIP_ARG = 5
    """The option and the next argument are left unparsed."""
    SKIP_LINE = 6
    """The option and all remaining arguments are left unparsed."""
    SKIP_N_ARGS = 7
    """The option and the next ``value`` arguments are left unparsed."""


@dataclass(frozen=True)
class OptionDesc:
    """One entry of an option table."""

    option: str
    specifier: str | None
    kind: OptionKind
    value: str | int | None = None


@dataclass
class ParsedCommand:
    """Resources set from the command line and the arguments left over.

    ``argv`` keeps the program name first.
    """

    resources: dict[str, str | None] = field(default_factory=dict)
    argv: list[str] = field(default_factory=list)


class CommandParseError(ValueError):
    """Raised when an option table entry cannot be applied."""

    def __init__(self, option: OptionDesc, message: str) -> None:
        super().__init__(
            f'Error parsing argument "{option.option}" ({option.specifier}); {message}'
        )
        self.option = option


def _resource_name(prefix: str, specifier: str | None) -> str:
    spec = specifier or ""
    if spec.startswith((".", "*")):
        return prefix + spec
    return f"{prefix}.{spec}"


def _put_line(resources: dict[str, str | None], line: str) -> None:
    name, colon, value = line.partition(":")
    if not colon:
        return
    name = name.strip()
    if name:
        resources[name] = value.lstrip(" \t").rstrip("\n")


def _match(options: Sequence[OptionDesc], arg: str) -> tuple[int, bool] | None:
    """Find the option ``arg`` selects; return (index, full match) or ``None``."""
    matches = 0
    found = -1
    for index, desc in enumerate(options):
        if arg.startswith(desc.option):
            if len(arg) == len(desc.option) or desc.kind in (
                OptionKind.STICKY_ARG,
                OptionKind.IS_ARG,
            ):
                return index, True
        elif desc.option.startswith(arg):
            matches += 1
            found = index
    if matches == 1:
        return found, False
    return None


def parse_command(
    options: Sequence[OptionDesc],
    prefix: str,
    argv: Sequence[str],
) -> ParsedCommand:
    """Parse ``argv`` (program name first) against an option table.

    Resource names are formed from ``prefix`` and each option's specifier.
    """
    args = list(argv)
    result = ParsedCommand()
    if not args:
        return result
    resources = result.resources
    rest = result.argv
    rest.append(args[0])
    count = len(args)
    i = 1
    while i < count:
        arg = args[i]
        hit = _match(options, arg)
        if hit is None:
            rest.append(arg)
            i += 1
            continue
        index, full = hit
        desc = options[index]
        has_next = i + 1 < count
        kind = desc.kind
        name = _resource_name(prefix, desc.specifier)

        if kind is OptionKind.NO_ARG:
            resources[name] = None if desc.value is None else str(desc.value)
        elif kind is OptionKind.IS_ARG:
            resources[name] = arg
        elif kind is OptionKind.STICKY_ARG:
            resources[name] = arg[len(desc.option):] if full else ""
        elif kind is OptionKind.SEP_ARG:
            if has_next:
                i += 1
                resources[name] = args[i]
            else:
                rest.append(arg)
        elif kind is OptionKind.RES_ARG:
            if has_next:
                i += 1
                _put_line(resources, args[i])
            else:
                rest.append(arg)
        elif kind is OptionKind.SKIP_ARG:
            rest.append(arg)
            if has_next:
                i += 1
                rest.append(args[i])
        elif kind is OptionKind.SKIP_LINE:
            rest.extend(args[i:])
            break
        elif kind is OptionKind.SKIP_N_ARGS:
            if not isinstance(desc.value, int) or desc.value < 0:
                raise CommandParseError(desc, "invalid argument count")
            take = min(1 + desc.value, count - i)
            rest.extend(args[i:i + take])
            i += take - 1
        else:
            raise CommandParseError(desc, "unknown kind")
        i += 1
    return result
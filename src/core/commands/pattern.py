"""Matches command-line input against declarative command patterns.

A pattern is literal text with named placeholders and an optional trailing
clause, for example::

    create stream <stream-id> [ttl <ttl-in-seconds>]

Matching a line of input against it yields the value bound to each
placeholder name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..errors import InvalidPattern, PatternMismatch
from ..models import Arguments

LOGGER = logging.getLogger(__name__)

PLACEHOLDER_BEGINNING = "<"
PLACEHOLDER_ENDING = ">"
OPTIONAL_PART_BEGINNING = "["
OPTIONAL_PART_ENDING = "]"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    name: str


Token = Union[Literal, Placeholder]


@dataclass(frozen=True)
class OptionalField:
    """A placeholder of the optional clause and the literal that introduces it."""

    delimiter: str
    name: str


@dataclass(frozen=True)
class CompiledPattern:
    pattern: str
    mandatory: Tuple[Token, ...]
    optional: Tuple[OptionalField, ...] = ()
    has_optional_clause: bool = False

    @property
    def is_full_pattern(self) -> bool:
        return not self.has_optional_clause

    @property
    def names(self) -> Tuple[str, ...]:
        mandatory = tuple(t.name for t in self.mandatory if isinstance(t, Placeholder))
        return mandatory + tuple(f.name for f in self.optional)

    @property
    def literal_prefix(self) -> str:
        """Literal text before the first placeholder."""
        if self.mandatory and isinstance(self.mandatory[0], Literal):
            return self.mandatory[0].text
        return ""

    def match(self, text: str) -> Arguments:
        return _match(self, text)


def tokenize(pattern: str, text: str) -> List[Token]:
    """Split pattern text into alternating literal and placeholder tokens.

    `pattern` is only used for error messages; `text` is the part being split.
    Empty literals are never emitted.
    """
    tokens: List[Token] = []
    pos = 0
    while pos < len(text):
        start = text.find(PLACEHOLDER_BEGINNING, pos)
        stray = text.find(PLACEHOLDER_ENDING, pos)
        if stray != -1 and (start == -1 or stray < start):
            raise InvalidPattern(pattern, f"unexpected '{PLACEHOLDER_ENDING}' at {stray}")
        if start == -1:
            tokens.append(Literal(text[pos:]))
            break
        if start > pos:
            tokens.append(Literal(text[pos:start]))
        end = text.find(PLACEHOLDER_ENDING, start)
        if end == -1:
            raise InvalidPattern(pattern, f"unclosed '{PLACEHOLDER_BEGINNING}' at {start}")
        name = text[start + 1 : end]
        if not name:
            raise InvalidPattern(pattern, "placeholder name must not be empty")
        if PLACEHOLDER_BEGINNING in name:
            raise InvalidPattern(pattern, f"nested '{PLACEHOLDER_BEGINNING}' in placeholder {name!r}")
        if tokens and isinstance(tokens[-1], Placeholder):
            raise InvalidPattern(
                pattern, f"placeholders <{tokens[-1].name}> and <{name}> need literal text between them"
            )
        tokens.append(Placeholder(name))
        pos = end + 1
    return tokens


def _split_optional_clause(pattern: str, raw: str) -> str:
    """Strip the brackets off the optional suffix, keeping inter-group whitespace."""
    parts: List[str] = []
    depth = 0
    outside = ""
    for char in raw:
        if char == OPTIONAL_PART_BEGINNING:
            if depth:
                raise InvalidPattern(pattern, "optional clauses cannot be nested")
            if outside.strip():
                raise InvalidPattern(pattern, f"unexpected text {outside.strip()!r} after optional clause")
            parts.append(outside)
            outside = ""
            depth = 1
        elif char == OPTIONAL_PART_ENDING:
            if not depth:
                raise InvalidPattern(pattern, f"unexpected '{OPTIONAL_PART_ENDING}'")
            depth = 0
        elif depth:
            parts.append(char)
        else:
            outside += char
    if depth:
        raise InvalidPattern(pattern, f"unclosed '{OPTIONAL_PART_BEGINNING}'")
    if outside.strip():
        raise InvalidPattern(pattern, f"unexpected text {outside.strip()!r} after optional clause")
    return "".join(parts)


def _optional_fields(pattern: str, tokens: Sequence[Token]) -> Tuple[OptionalField, ...]:
    fields: List[OptionalField] = []
    delimiter = ""
    for token in tokens:
        if isinstance(token, Literal):
            delimiter = token.text
        else:
            fields.append(OptionalField(delimiter=delimiter, name=token.name))
            delimiter = ""
    if delimiter:
        raise InvalidPattern(pattern, "optional clause must end with a placeholder")
    return tuple(fields)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> CompiledPattern:
    """Tokenize a pattern into its mandatory tokens and optional fields."""
    if OPTIONAL_PART_ENDING in pattern.split(OPTIONAL_PART_BEGINNING, 1)[0]:
        raise InvalidPattern(pattern, f"unexpected '{OPTIONAL_PART_ENDING}'")

    optional_start = pattern.find(OPTIONAL_PART_BEGINNING)
    if optional_start == -1:
        # Input is trimmed before matching, so the pattern is too.
        mandatory = tokenize(pattern, pattern.strip())
        compiled = CompiledPattern(pattern=pattern, mandatory=tuple(mandatory))
    else:
        head = pattern[:optional_start].lstrip()
        mandatory_part = head.rstrip()
        separator = head[len(mandatory_part) :]
        clause = separator + _split_optional_clause(pattern, pattern[optional_start:])
        mandatory = tokenize(pattern, mandatory_part)
        optional = _optional_fields(pattern, tokenize(pattern, clause))
        compiled = CompiledPattern(
            pattern=pattern,
            mandatory=tuple(mandatory),
            optional=optional,
            has_optional_clause=True,
        )

    names = compiled.names
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise InvalidPattern(pattern, f"duplicate placeholder names: {', '.join(duplicates)}")
    LOGGER.debug(
        "Compiled pattern %r: mandatory=%s optional=%s",
        pattern,
        compiled.mandatory,
        compiled.optional,
    )
    return compiled


def match_pattern(pattern: str, text: str) -> Arguments:
    """Match `text` against `pattern` and return the bound arguments.

    Delimiters are matched at their first occurrence with no escaping, so a
    value cannot contain a later delimiter: against
    `create stream <id> [ttl <ttl>] [desc <desc>]`, the input
    `create stream s desc hot ttl data` binds `desc="hot"` and `ttl="data"`.

    Raises:
        PatternMismatch: the input does not conform to the pattern.
        InvalidPattern: the pattern itself is malformed.
    """
    return compile_pattern(pattern).match(text)


def _scan(
    tokens: Sequence[Token],
    text: str,
    cursor: int,
    pattern: str,
    args: Dict[str, str],
    bind_tail: bool,
) -> Tuple[int, Optional[str]]:
    """Walk `tokens` over `text` from `cursor`, binding placeholder values.

    A trailing placeholder binds the rest of the input when `bind_tail` is set;
    otherwise its name is returned unbound for the caller to resolve.
    """
    for index, token in enumerate(tokens):
        if isinstance(token, Literal):
            if not text.startswith(token.text, cursor):
                raise PatternMismatch(pattern, text)
            cursor += len(token.text)
            continue

        if index == len(tokens) - 1:
            if not bind_tail:
                return cursor, token.name
            if cursor >= len(text):
                raise PatternMismatch(pattern, text)
            args[token.name] = text[cursor:]
            return len(text), None

        # Placeholders never sit next to each other, so the next token is a literal.
        delimiter = tokens[index + 1].text  # type: ignore[union-attr]
        end = text.find(delimiter, cursor)
        if end == -1 or end == cursor:
            raise PatternMismatch(pattern, text)
        args[token.name] = text[cursor:end]
        cursor = end
    return cursor, None


def _find_delimiter(remaining: str, delimiter: str) -> Optional[int]:
    if not delimiter:
        return 0 if remaining else None
    offset = remaining.find(delimiter)
    return offset if offset != -1 else None


def _order_optional(
    fields: Sequence[OptionalField], remaining: str
) -> List[OptionalField]:
    """Keep the fields whose delimiter occurs in `remaining`, ordered by first occurrence."""
    found = []
    for field in fields:
        offset = _find_delimiter(remaining, field.delimiter)
        if offset is not None:
            found.append(((offset, bool(field.delimiter)), field))
    # An empty delimiter can only introduce the first field of the scan.
    found.sort(key=lambda item: item[0])
    return [field for _, field in found]


def _match(compiled: CompiledPattern, raw_input: str) -> Arguments:
    text = raw_input.strip()
    pattern = compiled.pattern
    args: Dict[str, str] = {}

    cursor, tail = _scan(
        compiled.mandatory,
        text,
        0,
        pattern,
        args,
        bind_tail=compiled.is_full_pattern,
    )
    if compiled.is_full_pattern:
        return Arguments(args, raw_input)

    if tail is not None:
        remaining = text[cursor:]
        if not remaining:
            args[tail] = ""
            return Arguments(args, raw_input)
        offsets = [
            offset
            for offset in (remaining.find(f.delimiter) for f in compiled.optional if f.delimiter)
            if offset != -1
        ]
        value = remaining[: min(offsets)] if offsets else remaining
        if not value:
            raise PatternMismatch(pattern, text)
        args[tail] = value
        cursor += len(value)

    ordered = _order_optional(compiled.optional, text[cursor:])
    if ordered:
        tokens: List[Token] = []
        for field in ordered:
            if field.delimiter:
                tokens.append(Literal(field.delimiter))
            tokens.append(Placeholder(field.name))
        _scan(tokens, text, cursor, pattern, args, bind_tail=True)

    LOGGER.debug("Matched %r against %r: %s", text, pattern, args)
    return Arguments(args, raw_input)

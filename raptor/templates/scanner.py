"""Tag scanner for the template pipeline.

Each pipeline stage walks the template from one '{{' to the next and tries
to recognise its own tag at that position. Text between tags is copied
through untouched, and a stage never re-scans its own substitutions.

Block tags ({{#each}}, {{#if}}) close at the first matching close tag;
blocks of the same kind do not nest.
"""

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

OPEN = "{{"

# Path characters. Inside #each bodies '@' is also allowed (@index, @first, @last).
PATH = r"[a-zA-Z0-9_.]+"
LOOP_PATH = r"[a-zA-Z0-9_.@]+"

PARTIAL_RE = re.compile(r"\{\{>\s*([a-zA-Z0-9/_-]+)\s*\}\}")
EACH_OPEN_RE = re.compile(r"\{\{#each\s+(" + PATH + r")\s*\}\}")
EACH_CLOSE = "{{/each}}"
IF_CLOSE = "{{/if}}"
ELSE = "{{else}}"
HELPER_RE = re.compile(r"\{\{\s*([a-zA-Z0-9_]+)\s+([^}]+?)\s*\}\}")


def if_open_pattern(path: str = PATH) -> re.Pattern:
    return re.compile(r"\{\{#if\s+(" + path + r")\s*\}\}")


def raw_var_pattern(path: str = PATH) -> re.Pattern:
    return re.compile(r"\{\{\{\s*(" + path + r")\s*\}\}\}")


def escaped_var_pattern(path: str = PATH) -> re.Pattern:
    return re.compile(r"\{\{\s*(" + path + r")\s*\}\}")


IF_OPEN_RE = if_open_pattern()
LOOP_IF_OPEN_RE = if_open_pattern(LOOP_PATH)
RAW_VAR_RE = raw_var_pattern()
LOOP_RAW_VAR_RE = raw_var_pattern(LOOP_PATH)
ESCAPED_VAR_RE = escaped_var_pattern()
LOOP_ESCAPED_VAR_RE = escaped_var_pattern(LOOP_PATH)


@dataclass(frozen=True)
class Block:
    """A block tag found in a template.

    start/end span the whole block, open tag to close tag inclusive.
    alternate is the {{else}} branch, or None if there is none.
    """

    start: int
    end: int
    path: str
    body: str
    alternate: str | None = None


def iter_tags(text: str, *patterns: re.Pattern) -> Iterator[re.Match]:
    """Yield tag matches left to right without overlap.

    At every '{{' the patterns are tried in order; the first that matches
    wins and scanning resumes after it. Otherwise scanning resumes one
    character later, so '{{{' is also tried as a '{{' at its second brace.
    """
    pos = 0
    while True:
        start = text.find(OPEN, pos)
        if start == -1:
            return
        for pattern in patterns:
            match = pattern.match(text, start)
            if match is not None:
                yield match
                pos = match.end()
                break
        else:
            pos = start + 1


def iter_blocks(
    text: str,
    opening: re.Pattern,
    closing: str,
    separator: str | None = None,
) -> Iterator[Block]:
    """Yield blocks opened by `opening` and closed by the next `closing`.

    If separator is given, the body is split at its first occurrence into
    body and alternate. An opening tag with no closing tag after it is
    not a block and stays literal text.
    """
    pos = 0
    while True:
        start = text.find(OPEN, pos)
        if start == -1:
            return
        match = opening.match(text, start)
        if match is None:
            pos = start + 1
            continue

        close = text.find(closing, match.end())
        if close == -1:
            pos = start + 1
            continue

        body = text[match.end():close]
        alternate = None
        if separator is not None:
            split = body.find(separator)
            if split != -1:
                body, alternate = body[:split], body[split + len(separator):]

        end = close + len(closing)
        yield Block(start=start, end=end, path=match.group(1), body=body, alternate=alternate)
        pos = end


def substitute(text: str, spans: Iterator, replace: Callable) -> str:
    """Rebuild text, replacing each span (a Match or Block) with replace(span)."""
    pieces: list[str] = []
    last = 0
    for span in spans:
        start, end = _bounds(span)
        pieces.append(text[last:start])
        pieces.append(replace(span))
        last = end
    pieces.append(text[last:])
    return "".join(pieces)


def _bounds(span) -> tuple[int, int]:
    if isinstance(span, Block):
        return span.start, span.end
    return span.start(), span.end()

#!/usr/bin/env python3
"""
Low-level wikitext scanning shared by the bots.

It locates comment blocks (``<!-- ... -->``) and template invocations
(``{{Name|...}}``) inside raw page text and returns their offsets, so that
edits never rely on single-line regexes that break multi-line bodies or
templates nested as parameter values.

Template boundaries are found with a brace-depth counter: ``{{`` opens a
level, ``}}`` closes one, and the invocation ends when the depth returns to
zero. A template that is still open at the end of the text is reported with
:class:`StructuralParseError` and the page must be left alone.

Nothing in this module talks to a wiki; every function is a pure
transformation of the text it is given.
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re
import string
from dataclasses import dataclass
from enum import Enum

COMMENT_RE = re.compile(r'<!--.*?(?:-->|\Z)', re.DOTALL)
TEMPLATE_NAME_RE = re.compile(r'\{\{\s*([^{}|<>\[\]\n]+?)\s*(?=\||\}\}|\n)')


class WikitextError(Exception):
    """Base class for wikitext scanning errors."""


class StructuralParseError(WikitextError):
    """A template is opened but never closed."""

    def __init__(self, name: str, offset: int):
        super().__init__(f'Unterminated template {{{{{name}}}}} at offset {offset}')
        self.name = name
        self.offset = offset


class Reason(str, Enum):
    """Why a page was or was not changed."""

    NOT_FOUND = 'not_found'
    NO_CHANGE = 'no_change'
    POLICY_DECLINED = 'policy_declined'
    APPROVED = 'approved'
    DRAFT = 'draft'
    HAS_SOURCES = 'has_sources'
    NO_SOURCES = 'no_sources'
    UNTERMINATED = 'unterminated'


@dataclass(frozen=True)
class Span:
    """Start and end offsets of a construct inside a document."""

    start: int
    end: int

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f'Invalid span: end ({self.end}) must be greater than start ({self.start})')

    def __contains__(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def contains(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    def text(self, doc: str) -> str:
        return doc[self.start:self.end]


@dataclass(frozen=True)
class TemplateInvocation:
    """A parsed template call: its name and raw top-level parameter fragments."""

    name: str
    params: tuple[str, ...]
    span: Span
    text: str

    @classmethod
    def from_span(cls, doc: str, span: Span) -> TemplateInvocation:
        text = span.text(doc)
        name, params = parse_template(text)
        return cls(name=name, params=tuple(params), span=span, text=text)


@dataclass(frozen=True)
class Change:
    """One applied modification, rendered for summaries and console output."""

    action: str
    target: str
    replacement: str | None = None

    def __str__(self) -> str:
        if self.replacement is not None:
            return f'{self.target} → {self.replacement}'
        return f'{self.target} {self.action}'


# =========================================================================
# Comments
# =========================================================================

def find_comment_spans(doc: str) -> list[Span]:
    """Return the spans of all comment blocks; comments never nest."""
    return [Span(m.start(), m.end()) for m in COMMENT_RE.finditer(doc)]


def is_inside_any(offset: int, spans) -> bool:
    return any(offset in span for span in spans)


def strip_comments(doc: str) -> str:
    return COMMENT_RE.sub('', doc)


# =========================================================================
# Templates
# =========================================================================

def case_insensitive_first_letter(name: str) -> str:
    """Return a regex pattern for the name with case-insensitive first letter."""
    if name and name[0] in string.ascii_letters:
        return '[' + name[0].upper() + name[0].lower() + ']' + re.escape(name[1:])
    if name and name[0].upper() != name[0].lower():
        return '[' + re.escape(name[0].upper()) + re.escape(name[0].lower()) + ']' + re.escape(name[1:])
    return re.escape(name)


def _template_start_regex(names) -> re.Pattern:
    # Longest aliases first so that alternation prefers the full name.
    aliases = sorted({n.strip() for n in names if n and n.strip()}, key=len, reverse=True)
    if not aliases:
        raise ValueError('At least one template name is required')
    pattern = '|'.join(case_insensitive_first_letter(a).replace(r'\ ', r'[ _]') for a in aliases)
    return re.compile(r'\{\{\s*(' + pattern + r')(?=\s*(?:\||\}\}|<!--))')


def match_braces(doc: str, start: int, comments=()) -> int:
    """
    Return the offset just past the ``}}`` that closes the ``{{`` at start.

    Braces inside the given comment spans are not counted. Returns -1 when
    the document ends before the depth returns to zero.
    """
    comment_ends = {span.start: span.end for span in comments}
    depth = 0
    i = start
    length = len(doc)
    while i < length - 1:
        if i in comment_ends:
            i = comment_ends[i]
            continue
        pair = doc[i:i + 2]
        if pair == '{{':
            depth += 1
            i += 2
        elif pair == '}}':
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    return -1


def find_template_spans(doc: str, names, inside_comments: bool = False) -> list[Span]:
    """
    Find invocations of any of the given template aliases.

    By default only live invocations are returned; with ``inside_comments``
    only the ones that start inside a comment block are.
    """
    comments = find_comment_spans(doc)
    spans = []
    for match in _template_start_regex(names).finditer(doc):
        commented = is_inside_any(match.start(), comments)
        if commented != inside_comments:
            continue
        end = match_braces(doc, match.start(), comments)
        if end == -1:
            raise StructuralParseError(match.group(1), match.start())
        spans.append(Span(match.start(), end))
    return spans


def find_templates(doc: str, names, inside_comments: bool = False) -> list[TemplateInvocation]:
    return [TemplateInvocation.from_span(doc, span)
            for span in find_template_spans(doc, names, inside_comments)]


def outermost(spans) -> list[Span]:
    """Drop spans nested inside another span of the same list."""
    result = []
    for span in sorted(spans, key=lambda s: (s.start, -s.end)):
        if result and result[-1].contains(span):
            continue
        result.append(span)
    return result


def top_level_pipes(text: str) -> list[int]:
    """
    Return offsets of the pipes that separate the parameters of the
    invocation in text, skipping pipes of nested templates, links and
    comments.
    """
    comment_ends = {span.start: span.end for span in find_comment_spans(text)}
    pipes = []
    braces = 0
    brackets = 0
    i = 0
    while i < len(text):
        if i in comment_ends:
            i = comment_ends[i]
            continue
        pair = text[i:i + 2]
        if pair == '{{':
            braces += 1
            i += 2
            continue
        if pair == '}}':
            braces -= 1
            i += 2
            continue
        if pair == '[[':
            brackets += 1
            i += 2
            continue
        if pair == ']]' and brackets:
            brackets -= 1
            i += 2
            continue
        if text[i] == '|' and braces == 1 and brackets == 0:
            pipes.append(i)
        i += 1
    return pipes


def parse_template(text: str) -> tuple[str, list[str]]:
    """Split an invocation into its trimmed name and raw parameter fragments."""
    body_end = len(text) - 2 if text.endswith('}}') else len(text)
    pipes = top_level_pipes(text)
    name_end = pipes[0] if pipes else body_end
    name = text[2:name_end].strip()
    params = []
    for index, pipe in enumerate(pipes):
        fragment_end = pipes[index + 1] if index + 1 < len(pipes) else body_end
        params.append(text[pipe + 1:fragment_end])
    return name, params


def template_names(doc: str) -> list[str]:
    """Return the names of all live templates, nested ones included."""
    return [m.group(1).strip() for m in TEMPLATE_NAME_RE.finditer(strip_comments(doc))]


# =========================================================================
# Removal
# =========================================================================

def remove_spans(doc: str, spans) -> str:
    """
    Remove the given spans from the document.

    A span standing on a line of its own takes its line break with it; an
    inline span only takes the horizontal whitespace that follows it.
    """
    if not spans:
        return doc

    text = doc
    for span in sorted(outermost(spans), key=lambda s: s.start, reverse=True):
        start, end = span.start, span.end
        line_start = text.rfind('\n', 0, start) + 1
        own_line = not text[line_start:start].strip()
        while end < len(text) and text[end] in ' \t':
            end += 1
        if own_line:
            start = line_start
            if end < len(text) and text[end] == '\n':
                end += 1
        text = text[:start] + text[end:]

    # Collapse the blank lines left behind.
    text = re.sub(r'\n{3,}', '\n\n', text)
    return text.strip()

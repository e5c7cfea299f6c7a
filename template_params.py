#!/usr/bin/env python3
"""
Parameter editing for a single template invocation.

Tasks:
1.  rename_parameters: renames old parameter names to new ones, keeping the
    leading pipe, the whitespace style and the value as written.
2.  delete_parameters: removes whole ``name = value`` fragments, even when
    the value is empty or spans several lines.
3.  edit_templates: applies both to every invocation of a template in a page.

Only top-level parameters are touched; a parameter with the same name inside
a nested template (for example a {{convert}} used as a value) is left alone,
and a pipe inside a comment never separates parameters.
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re

from wikitext import (
    Change,
    find_comment_spans,
    find_template_spans,
    is_inside_any,
    outermost,
    top_level_pipes,
)


def rename_parameters(invocation_text: str, rename_rules: dict) -> tuple[str, list[Change]]:
    """Rename parameter keys; matching is case-insensitive on the key only."""
    text = invocation_text
    applied = []

    for old_param, new_param in rename_rules.items():
        # The key may be preceded by whitespace and followed by one line break before '='.
        pattern = re.compile(
            r'(\|[ \t]*\n?[ \t]*)' + re.escape(old_param) + r'([ \t]*\n?[ \t]*=)', re.IGNORECASE)
        pipes = set(top_level_pipes(text))
        count = 0

        def replace_key(match):
            nonlocal count
            if match.start() not in pipes:
                return match.group(0)
            count += 1
            return f'{match.group(1)}{new_param}{match.group(2)}'

        text = pattern.sub(replace_key, text)
        if count:
            applied.append(Change('renamed', old_param, new_param))

    return text, applied


def _fragment_end(text: str, pipes: list[int], start: int) -> int:
    """Return where the parameter starting at the pipe at start ends."""
    for pipe in pipes:
        if pipe > start:
            return pipe
    return len(text) - 2 if text.endswith('}}') else len(text)


def _delete_simple(text: str, name: str) -> tuple[str, int]:
    """Pass 1: values without pipes, braces or brackets."""
    pattern = re.compile(
        r'\|\s*' + re.escape(name) + r'\s*=[^|{}\[\]]*(?=\||\}\}\Z)', re.IGNORECASE)
    pipes = set(top_level_pipes(text))
    comments = find_comment_spans(text)
    count = 0

    def drop(match):
        nonlocal count
        # A value running into a comment is left for the depth-aware pass.
        if match.start() not in pipes or is_inside_any(match.end(), comments):
            return match.group(0)
        count += 1
        return ''

    return pattern.sub(drop, text), count


def _delete_nested(text: str, name: str) -> tuple[str, int]:
    """Pass 2: values holding nested templates, links or several lines."""
    pattern = re.compile(r'\|\s*' + re.escape(name) + r'\s*=', re.IGNORECASE)
    count = 0
    while True:
        pipes = top_level_pipes(text)
        top_level = set(pipes)
        match = next((m for m in pattern.finditer(text) if m.start() in top_level), None)
        if match is None:
            break
        end = _fragment_end(text, pipes, match.start())
        text = text[:match.start()] + text[end:]
        count += 1
    return text, count


def delete_parameters(invocation_text: str, delete_names) -> tuple[str, list[Change]]:
    """
    Remove parameters together with their values.

    The simple single-line pass runs first; the depth-aware pass only runs
    for names the first pass did not find. Each name is reported once.
    """
    text = invocation_text
    applied = []

    for name in delete_names:
        text, count = _delete_simple(text, name)
        if not count:
            text, count = _delete_nested(text, name)
        if count:
            applied.append(Change('deleted', name))

    return text, applied


def edit_templates(doc: str, names, rename_rules: dict, delete_names) -> tuple[str, list[Change]]:
    """
    Rename and delete parameters in every live invocation of the templates.

    Raises StructuralParseError before changing anything if one of the
    invocations is not closed.
    """
    spans = outermost(find_template_spans(doc, names))
    text = doc
    changes = []

    # Walk backwards so the offsets of earlier spans stay valid.
    for span in reversed(spans):
        invocation = span.text(text)
        new_invocation, renamed = rename_parameters(invocation, rename_rules)
        new_invocation, deleted = delete_parameters(new_invocation, delete_names)
        if new_invocation != invocation:
            text = text[:span.start] + new_invocation + text[span.end:]
            changes = renamed + deleted + changes

    return text, changes

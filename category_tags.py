#!/usr/bin/env python3
"""
Finding, removing, inserting and retargeting category links in wikitext.

A category link that only exists inside a comment block is treated as
"commented out", which is a different state from "absent": reviewers often
disable a category by wrapping it in ``<!-- -->``. Inserting such a category
brings the commented link back instead of appending a second one.

Insertion places the new link right after the last live category link, or
after a blank line at the end of the page when there is none.
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

from bot_data import CATEGORY_NAMESPACES
from wikitext import Reason, Span, find_comment_spans, is_inside_any


@dataclass(frozen=True)
class CategoryReference:
    """A category link as written in the page."""

    name: str
    text: str
    span: Span
    namespace: str
    sort_key: str | None = None
    commented: bool = False


class CategoryRemoval(NamedTuple):
    text: str
    applied: bool
    reason: Reason


class CategoryInsertion(NamedTuple):
    text: str
    already_active: bool
    uncommented: bool


def _namespaces_pattern(namespaces) -> str:
    return '|'.join(re.escape(ns) for ns in namespaces)


def _link_regex(namespaces) -> re.Pattern:
    return re.compile(
        r'\[\[\s*(' + _namespaces_pattern(namespaces) + r')\s*:\s*([^\]|\n]+?)\s*(?:\|([^\]]*))?\]\]',
        re.IGNORECASE)


def category_regex(name: str, namespaces=CATEGORY_NAMESPACES) -> re.Pattern:
    """Compile a regex matching links to one category, with or without sort key."""
    escaped = re.escape(name.strip()).replace(r'\ ', '[ _]')
    return re.compile(
        r'\[\[\s*(' + _namespaces_pattern(namespaces) + r')\s*:\s*' + escaped + r'\s*(?:\|([^\]]*))?\]\]',
        re.IGNORECASE)


def format_category(name: str, namespace: str = CATEGORY_NAMESPACES[0], sort_key: str | None = None) -> str:
    if sort_key is not None:
        return f'[[{namespace}:{name}|{sort_key}]]'
    return f'[[{namespace}:{name}]]'


def find_categories(doc: str, inside_comments: bool = False, namespaces=CATEGORY_NAMESPACES) -> list[CategoryReference]:
    """Return the live category links, or the commented ones with inside_comments."""
    comments = find_comment_spans(doc)
    refs = []
    for match in _link_regex(namespaces).finditer(doc):
        commented = is_inside_any(match.start(), comments)
        if commented != inside_comments:
            continue
        refs.append(CategoryReference(
            name=match.group(2).strip(),
            text=match.group(0),
            span=Span(match.start(), match.end()),
            namespace=match.group(1),
            sort_key=match.group(3),
            commented=commented,
        ))
    return refs


def has_category(doc: str, name: str, include_commented: bool = False, namespaces=CATEGORY_NAMESPACES) -> bool:
    """Check for a category link; commented-out links only count if asked for."""
    comments = find_comment_spans(doc)
    for match in category_regex(name, namespaces).finditer(doc):
        if include_commented or not is_inside_any(match.start(), comments):
            return True
    return False


def remove_category(doc: str, name: str, namespaces=CATEGORY_NAMESPACES) -> CategoryRemoval:
    """Remove every live link to the category together with the whitespace after it."""
    pattern = re.compile(category_regex(name, namespaces).pattern + r'\s*', re.IGNORECASE)
    comments = find_comment_spans(doc)
    if not any(not is_inside_any(m.start(), comments) for m in pattern.finditer(doc)):
        return CategoryRemoval(doc, False, Reason.NOT_FOUND)

    new_doc = pattern.sub(lambda m: m.group(0) if is_inside_any(m.start(), comments) else '', doc)
    # Do not leave trailing whitespace behind a link that ended the page.
    if doc == doc.rstrip():
        new_doc = new_doc.rstrip()

    if new_doc == doc:
        return CategoryRemoval(doc, False, Reason.NO_CHANGE)
    return CategoryRemoval(new_doc, True, Reason.APPROVED)


def insert_category(doc: str, name: str, namespace: str = CATEGORY_NAMESPACES[0],
                    namespaces=CATEGORY_NAMESPACES) -> CategoryInsertion:
    """
    Make the category active on the page.

    A live link means nothing to do. A commented-out link is taken out of
    its comment and put back in place of that comment. Otherwise a new link
    is inserted after the last live category link.
    """
    pattern = category_regex(name, namespaces)
    comments = find_comment_spans(doc)

    if any(not is_inside_any(m.start(), comments) for m in pattern.finditer(doc)):
        return CategoryInsertion(doc, True, False)

    holding = [c for c in comments if pattern.search(c.text(doc))]
    if holding:
        # Reuse the link as it was written, sort key included.
        live_tag = pattern.search(holding[0].text(doc)).group(0)
        strip_re = re.compile(r'\s*' + pattern.pattern + r'\s*', re.IGNORECASE)
        text = doc
        for comment in reversed(holding):
            body = strip_re.sub('\n', comment.text(text))
            inner = body[4:-3] if body.endswith('-->') else body[4:]
            replacement = body if inner.strip() else ''
            if comment is holding[0]:
                replacement = live_tag + ('\n' + replacement if replacement else '')
            text = text[:comment.start] + replacement + text[comment.end:]
        return CategoryInsertion(text, False, True)

    tag = format_category(name, namespace)
    live_refs = find_categories(doc, namespaces=namespaces)
    if live_refs:
        end = live_refs[-1].span.end
        text = doc[:end] + '\n' + tag + doc[end:]
    else:
        text = doc.rstrip() + '\n\n' + tag
    return CategoryInsertion(text, False, False)


def replace_category(doc: str, old: str, new: str, namespaces=CATEGORY_NAMESPACES) -> tuple[str, bool]:
    """
    Retarget live links of one category to another, keeping sort keys.

    When the new category is already on the page the old links are dropped.
    """
    comments = find_comment_spans(doc)
    old_re = category_regex(old, namespaces)
    if not any(not is_inside_any(m.start(), comments) for m in old_re.finditer(doc)):
        return doc, False

    if has_category(doc, new, namespaces=namespaces):
        strip_re = re.compile(old_re.pattern + r'[ \t]*\n?', re.IGNORECASE)

        def retarget(match):
            if is_inside_any(match.start(), comments):
                return match.group(0)
            return ''
    else:
        strip_re = old_re

        def retarget(match):
            if is_inside_any(match.start(), comments):
                return match.group(0)
            return format_category(new, match.group(1), match.group(2))

    text = strip_re.sub(retarget, doc)
    return text, text != doc

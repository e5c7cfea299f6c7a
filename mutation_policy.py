#!/usr/bin/env python3
"""
Per-page decisions on whether a mutation should be committed.

Every policy is a pure function of the page text and its metadata (title
and, where needed, the category list fetched by the caller). It returns a
:class:`MutationDecision`:

* APPLY  - the change is allowed (``draft``, ``has_sources``, ``approved``).
* SKIP   - a normal "nothing to do" outcome (``not_found``, ``no_change``,
           ``no_sources``, ``policy_declined``).
* REJECT - the page could not be parsed safely (``unterminated``).

The mutation functions at the bottom combine the scanner, the editors and
the policies. They return the new text and a :class:`ChangeReport`; the
original text is returned untouched unless the whole transformation
succeeded.
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from bot_data import (
    DRAFT_TEMPLATE_MARKERS,
    DRAFT_TITLE_PREFIXES,
    FOOTBALL_INFOBOX_TEMPLATES,
    FOOTBALLER_CATEGORY_PATTERN,
    PARAMETER_RENAMES,
    PARAMETERS_TO_DELETE,
    RETARGET_SOURCE_CATEGORY,
    RETARGET_TARGET_CATEGORY,
    UNSOURCED_TEMPLATES,
)
from category_tags import has_category, replace_category
from template_params import edit_templates
from wikitext import (
    Change,
    Reason,
    StructuralParseError,
    find_template_spans,
    find_templates,
    remove_spans,
    strip_comments,
    template_names,
)

REF_RE = re.compile(r'<ref(?:\s[^>]*)?>.*?</ref\s*>|<ref\s[^>]*/>', re.IGNORECASE | re.DOTALL)


class Decision(Enum):
    APPLY = 'apply'
    SKIP = 'skip'
    REJECT = 'reject'


@dataclass(frozen=True)
class MutationDecision:
    decision: Decision
    reason: Reason
    detail: str | None = None

    @property
    def approved(self) -> bool:
        return self.decision is Decision.APPLY


@dataclass(frozen=True)
class PageMetadata:
    """What the caller knows about the page besides its text."""

    title: str
    categories: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChangeReport:
    applied: bool
    reason: Reason
    decision: Decision
    changes: tuple[Change, ...] = field(default_factory=tuple)

    @classmethod
    def skipped(cls, decision: MutationDecision) -> ChangeReport:
        return cls(applied=False, reason=decision.reason, decision=decision.decision)


def _approve(reason: Reason = Reason.APPROVED) -> MutationDecision:
    return MutationDecision(Decision.APPLY, reason)


def _skip(reason: Reason) -> MutationDecision:
    return MutationDecision(Decision.SKIP, reason)


def _reject(error: StructuralParseError) -> MutationDecision:
    return MutationDecision(Decision.REJECT, Reason.UNTERMINATED, str(error))


# =========================================================================
# Page classification
# =========================================================================

def has_references(content: str) -> bool:
    """Check for <ref>...</ref> or <ref .../> outside comments."""
    return bool(REF_RE.search(strip_comments(content)))


def draft_templates(content: str, markers=DRAFT_TEMPLATE_MARKERS) -> list[str]:
    """Return the live templates whose name marks the page as a stub."""
    return [name for name in template_names(content)
            if any(marker in name.lower() for marker in markers)]


def is_draft(title: str, content: str, prefixes=DRAFT_TITLE_PREFIXES, markers=DRAFT_TEMPLATE_MARKERS) -> bool:
    if any(title.startswith(prefix) for prefix in prefixes):
        return True
    return bool(draft_templates(content, markers))


# =========================================================================
# Policies
# =========================================================================

def unsourced_removal_policy(content: str, metadata: PageMetadata,
                             templates=UNSOURCED_TEMPLATES) -> MutationDecision:
    """Allow removing unsourced templates from drafts and from pages with <ref> tags."""
    try:
        if not find_template_spans(content, templates):
            return _skip(Reason.NOT_FOUND)
    except StructuralParseError as e:
        return _reject(e)

    if is_draft(metadata.title, content):
        return _approve(Reason.DRAFT)
    if has_references(content):
        return _approve(Reason.HAS_SOURCES)
    # The template is still accurate.
    return _skip(Reason.NO_SOURCES)


def infobox_rename_policy(content: str, metadata: PageMetadata,
                          infoboxes=FOOTBALL_INFOBOX_TEMPLATES,
                          rename_rules=PARAMETER_RENAMES,
                          delete_names=PARAMETERS_TO_DELETE) -> MutationDecision:
    """Allow the edit when a football infobox has a parameter to rename or delete."""
    try:
        if not find_template_spans(content, infoboxes):
            return _skip(Reason.NOT_FOUND)
        _, changes = edit_templates(content, infoboxes, rename_rules, delete_names)
    except StructuralParseError as e:
        return _reject(e)

    if changes:
        return _approve()
    return _skip(Reason.NO_CHANGE)


def matches_domain(categories, pattern: str = FOOTBALLER_CATEGORY_PATTERN) -> bool:
    regex = re.compile(pattern, re.IGNORECASE)
    return any(regex.search(category) for category in categories)


def category_retarget_policy(content: str, metadata: PageMetadata,
                             source=RETARGET_SOURCE_CATEGORY,
                             pattern: str = FOOTBALLER_CATEGORY_PATTERN) -> MutationDecision:
    """Allow retargeting only for pages whose categories match the target domain."""
    if not has_category(content, source):
        return _skip(Reason.NOT_FOUND)
    if matches_domain(metadata.categories, pattern):
        return _approve()
    return _skip(Reason.POLICY_DECLINED)


# =========================================================================
# Mutations
# =========================================================================

def remove_unsourced_templates(content: str, metadata: PageMetadata,
                               templates=UNSOURCED_TEMPLATES) -> tuple[str, ChangeReport]:
    """
    Remove every live unsourced template when the policy allows it.

    Raises StructuralParseError if one of the templates is not closed.
    """
    found = find_templates(content, templates)
    decision = unsourced_removal_policy(content, metadata, templates)
    if not decision.approved:
        return content, ChangeReport.skipped(decision)

    new_content = remove_spans(content, [invocation.span for invocation in found])
    if new_content == content:
        return content, ChangeReport(False, Reason.NO_CHANGE, Decision.SKIP)

    changes = tuple(Change('removed', invocation.name) for invocation in found)
    return new_content, ChangeReport(True, decision.reason, decision.decision, changes)


def update_infobox(content: str, metadata: PageMetadata,
                   infoboxes=FOOTBALL_INFOBOX_TEMPLATES,
                   rename_rules=PARAMETER_RENAMES,
                   delete_names=PARAMETERS_TO_DELETE) -> tuple[str, ChangeReport]:
    """
    Rename and delete football infobox parameters.

    Raises StructuralParseError if the infobox is not closed.
    """
    # Scan first so that an unterminated infobox raises instead of being skipped.
    find_template_spans(content, infoboxes)
    decision = infobox_rename_policy(content, metadata, infoboxes, rename_rules, delete_names)
    if not decision.approved:
        return content, ChangeReport.skipped(decision)

    new_content, changes = edit_templates(content, infoboxes, rename_rules, delete_names)
    if new_content == content:
        return content, ChangeReport(False, Reason.NO_CHANGE, Decision.SKIP)
    return new_content, ChangeReport(True, decision.reason, decision.decision, tuple(changes))


def retarget_category(content: str, metadata: PageMetadata,
                      source=RETARGET_SOURCE_CATEGORY,
                      target=RETARGET_TARGET_CATEGORY,
                      pattern: str = FOOTBALLER_CATEGORY_PATTERN) -> tuple[str, ChangeReport]:
    """Replace the source category with the target one on pages of the target domain."""
    decision = category_retarget_policy(content, metadata, source, pattern)
    if not decision.approved:
        return content, ChangeReport.skipped(decision)

    new_content, applied = replace_category(content, source, target)
    if not applied:
        return content, ChangeReport(False, Reason.NO_CHANGE, Decision.SKIP)
    change = Change('replaced', source, target)
    return new_content, ChangeReport(True, decision.reason, decision.decision, (change,))

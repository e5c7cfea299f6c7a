#!/usr/bin/env python3
"""
Mapping English WikiProject talk page banners to Turkish {{Vikiproje}} banners.

The English talk page template list is turned into Turkish project names
with the WIKIPROJECT_MAPPINGS table: first by exact template name, then by
looking for the subject of a known project (its name without "WikiProject ")
inside the template name.
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import re

from bot_data import WIKIPROJECT_BANNER, WIKIPROJECT_MAPPINGS
from wikitext import strip_comments

WIKIPROJECT_TEMPLATE_RE = re.compile(r'WikiProject|^WP[A-Z]|WPBIO')


def is_wikiproject_template(title: str) -> bool:
    """Check whether an English template title is a WikiProject banner."""
    name = title.split(':', 1)[-1].strip() if title.startswith('Template:') else title.strip()
    return bool(WIKIPROJECT_TEMPLATE_RE.search(name))


def map_wikiprojects(en_templates, mapping=WIKIPROJECT_MAPPINGS) -> list[str]:
    """Return the Turkish project names for the English banners, without duplicates."""
    projects = []
    for template in en_templates:
        name = template.replace('Template:', '', 1).strip()
        project = mapping.get(name)
        if project is None:
            for en_project, tr_project in mapping.items():
                subject = en_project.lower().replace('wikiproject ', '')
                if subject in name.lower():
                    project = tr_project
                    break
        if project and project not in projects:
            projects.append(project)
    return projects


def make_banners(projects, banner: str = WIKIPROJECT_BANNER) -> list[str]:
    return [f'{{{{{banner}|Proje={project}|sınıf=|önem=}}}}' for project in projects]


def has_wikiproject_banner(text: str, banner: str = WIKIPROJECT_BANNER) -> bool:
    """Check for a live banner; a mention inside a comment does not count."""
    return banner.lower() in strip_comments(text).lower()


def prepend_banners(text: str, banners) -> str:
    """Put the banners at the top of the talk page."""
    block = '\n'.join(banners)
    if text.strip():
        return f'{block}\n\n{text}'
    return block

#!/usr/bin/env python3
"""
Wikidata sitelink lookups used to find the same article or category on
another language edition.

Titles are looked up in batches with ``wbgetentities``; each batch returns,
for every title found on the source wiki, its item ID and the title of the
linked page on the target wiki (or None when the target wiki has none).
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import time

import pywikibot
import requests

from bot_data import USER_AGENT, WIKIDATA_API, WIKIDATA_BATCH_DELAY, WIKIDATA_BATCH_SIZE
from utils import chunked

session = requests.Session()
session.headers.update({'User-Agent': USER_AGENT})


def _query(params: dict) -> dict:
    response = session.get(WIKIDATA_API, params={**params, 'format': 'json'}, timeout=30)
    response.raise_for_status()
    return response.json()


def get_sitelinks(titles, source_site: str, target_site: str) -> dict:
    """
    Map source wiki titles to (item ID, target wiki title or None).

    Titles without a Wikidata item are left out of the result. A batch that
    fails is logged and skipped.
    """
    results = {}
    batches = list(chunked(titles, WIKIDATA_BATCH_SIZE))
    for index, batch in enumerate(batches):
        try:
            data = _query({
                'action': 'wbgetentities',
                'sites': source_site,
                'titles': '|'.join(batch),
                'props': 'sitelinks',
                'sitefilter': f'{source_site}|{target_site}',
            })
        except requests.RequestException as e:
            pywikibot.error(f'Could not fetch sitelinks from Wikidata: {e}')
            continue

        for qid, entity in data.get('entities', {}).items():
            if 'missing' in entity:
                continue
            sitelinks = entity.get('sitelinks', {})
            source_title = sitelinks.get(source_site, {}).get('title')
            target_title = sitelinks.get(target_site, {}).get('title')
            if source_title:
                results[source_title] = (qid, target_title)

        # Be polite between batches.
        if index < len(batches) - 1:
            time.sleep(WIKIDATA_BATCH_DELAY)
    return results


def get_sitelink(title: str, source_site: str, target_site: str) -> str | None:
    """Return the target wiki title linked to one source wiki title."""
    _, target_title = get_sitelinks([title], source_site, target_site).get(title, (None, None))
    return target_title


def strip_namespace(title: str) -> str:
    return title.split(':', 1)[-1]

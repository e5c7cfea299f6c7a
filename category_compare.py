#!/usr/bin/env python3
"""
The "category_compare" script lists the subcategories of an English category
that have no Turkish equivalent on Wikidata.

For each missing subcategory it also checks how many of its own
subcategories, and how many of a sample of its articles, already exist in
Turkish. Missing categories with the most Turkish content are listed first,
since they are the easiest to create.

Parameters supported:
-category:        Turkish category; the English one is found through Wikidata.
-encategory:      English category to compare (without namespace prefix).
-sample:          Number of articles checked in each missing category (default: 50).
-verbose          Also list missing categories that have no Turkish content yet.
-export:          Save the results to a JSON file.

Usage:
python pwb.py category_compare -lang:tr -family:wikipedia "-category:Türk futbolcular"
python pwb.py category_compare -lang:tr "-encategory:Turkish footballers" -export:compare.json
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import json
from datetime import datetime, timezone

import pywikibot

from utils import percentage
from wikidata import get_sitelink, get_sitelinks, strip_namespace

SAMPLE_SIZE = 50


def count_with_sitelink(titles, source_site, target_site):
    """Count the titles that have a page on the target wiki."""
    if not titles:
        return 0
    sitelinks = get_sitelinks(titles, source_site, target_site)
    return sum(1 for _, target in sitelinks.values() if target)


def category_coverage(en_site, tr_site, title, sample_size=SAMPLE_SIZE):
    """Return how much of an English category's content exists in Turkish."""
    category = pywikibot.Category(en_site, title)
    subcategories = [cat.title() for cat in category.subcategories()]
    articles = [page.title() for page in category.articles(namespaces=[0], total=sample_size)]

    subcategories_tr = count_with_sitelink(subcategories, en_site.dbName(), tr_site.dbName())
    articles_tr = count_with_sitelink(articles, en_site.dbName(), tr_site.dbName())
    return {
        'subcategory_count': len(subcategories),
        'subcategories_with_turkish': subcategories_tr,
        'subcategory_percentage': percentage(subcategories_tr, len(subcategories)),
        'article_count': len(articles),
        'articles_with_turkish': articles_tr,
        'article_percentage': percentage(articles_tr, len(articles)),
    }


def potential(item):
    return item.get('subcategories_with_turkish', 0) + item.get('articles_with_turkish', 0)


def compare_category(en_site, tr_site, en_category_name, sample_size=SAMPLE_SIZE):
    """Sort the subcategories of an English category by their Turkish equivalents."""
    category = pywikibot.Category(en_site, en_category_name)
    subcategories = [cat.title() for cat in category.subcategories()]
    pywikibot.info(f'{len(subcategories)} subcategories found in {category.title()}')

    sitelinks = get_sitelinks(subcategories, en_site.dbName(), tr_site.dbName())

    existing, missing, no_wikidata = [], [], []
    for title in subcategories:
        if title not in sitelinks:
            no_wikidata.append(strip_namespace(title))
            continue
        qid, tr_title = sitelinks[title]
        if tr_title:
            existing.append({'english': strip_namespace(title), 'turkish': strip_namespace(tr_title),
                             'wikidata_id': qid})
        else:
            missing.append({'english': strip_namespace(title), 'wikidata_id': qid})

    for index, item in enumerate(missing, 1):
        pywikibot.info(f"[{index}/{len(missing)}] Checking the content of {item['english']}")
        item.update(category_coverage(en_site, tr_site, item['english'], sample_size))

    return {
        'total': len(subcategories),
        'missing_in_turkish': sorted(missing, key=potential, reverse=True),
        'exists_in_turkish': sorted(existing, key=lambda item: item['english']),
        'no_wikidata': sorted(no_wikidata),
    }


def print_results(results, verbose=False):
    pywikibot.info('=' * 60)
    pywikibot.info(f"{'Subcategories in English:':<35}{results['total']}")
    pywikibot.info(f"{'With a Turkish equivalent:':<35}{len(results['exists_in_turkish'])}")
    pywikibot.info(f"{'Without a Turkish equivalent:':<35}{len(results['missing_in_turkish'])}")
    pywikibot.info(f"{'Not on Wikidata:':<35}{len(results['no_wikidata'])}")
    pywikibot.info('=' * 60)

    shown = [item for item in results['missing_in_turkish'] if verbose or potential(item)]
    hidden = len(results['missing_in_turkish']) - len(shown)
    for index, item in enumerate(shown, 1):
        pywikibot.info(f"{index:>3}. {item['english']} ({item['wikidata_id']})")
        if item['subcategory_count']:
            pywikibot.info(f"     Subcategories: {item['subcategories_with_turkish']}/{item['subcategory_count']}"
                           f" in Turkish ({item['subcategory_percentage']}%)")
        if item['article_count']:
            pywikibot.info(f"     Articles: {item['articles_with_turkish']}/{item['article_count']}"
                           f" in Turkish ({item['article_percentage']}%)")
    if hidden:
        pywikibot.info(f'{hidden} missing categories have no Turkish content yet. Use -verbose to list them.')


def export_results(filename, en_category_name, results):
    """Save the comparison to a JSON file."""
    data = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'english_category': en_category_name,
        **results,
    }
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    pywikibot.info(f'Results saved to {filename}')


def main(*args: str) -> None:
    """
    Process command line arguments and compare the categories.

    :param args: command line arguments
    """
    tr_name = en_name = export_file = None
    sample_size = SAMPLE_SIZE
    verbose = False

    local_args = pywikibot.handle_args(args)

    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option == 'category':
            tr_name = value
        elif option == 'encategory':
            en_name = value
        elif option == 'sample':
            try:
                sample_size = int(value)
            except ValueError:
                pywikibot.error(f'-sample expects a number, not "{value}".')
                return
        elif option == 'export':
            export_file = value
        elif option == 'verbose':
            verbose = True
        else:
            pywikibot.warning(f'Unknown option: {arg}')

    if not tr_name and not en_name:
        pywikibot.bot.suggest_help(missing_parameters=['-category or -encategory'])
        return

    site = pywikibot.Site()
    en_site = pywikibot.Site('en', site.family)

    if not en_name:
        tr_category = pywikibot.Category(site, tr_name)
        en_title = get_sitelink(tr_category.title(), site.dbName(), en_site.dbName())
        if not en_title:
            pywikibot.error(f'{tr_category.title()} has no English equivalent on Wikidata.')
            return
        en_name = strip_namespace(en_title)
        pywikibot.info(f"{'English category:':<25}{en_name}")

    results = compare_category(en_site, site, en_name, sample_size)
    print_results(results, verbose)

    if export_file:
        try:
            export_results(export_file, en_name, results)
        except OSError as e:
            pywikibot.error(f'Could not write {export_file}: {e}')


if __name__ == '__main__':
    main()

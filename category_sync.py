#!/usr/bin/env python3
"""
A bot to add a Turkish category to the articles that are in the matching
English category but not in the Turkish one.

For every Turkish category:
1.  the English category is found through Wikidata;
2.  the articles of the English category are mapped to their Turkish
    articles through Wikidata sitelinks;
3.  the Turkish articles that are not in the Turkish category get it. When
    the category link is only commented out (<!-- [[Kategori:X]] -->), the
    comment is removed and the link is made active again.

Parameters supported:
-always           The bot won't ask for confirmation when putting a page
-category:        Turkish category to complete (without namespace prefix).
-list:            Read Turkish category names from a text file, one per line.
-summary:         Set the action summary message for the edit.

Usage:
python pwb.py category_sync -lang:tr -family:wikipedia "-category:Türk futbolcular"
python pwb.py category_sync -lang:tr -family:wikipedia -list:categories.txt -simulate
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import pywikibot
from pywikibot import pagegenerators
from pywikibot.bot import (
    ConfigParserBot,
    ExistingPageBot,
    SingleSiteBot,
)

from category_tags import insert_category
from utils import get_summary_messages, read_list_file, shorten_summary, turkish_sort_key
from wikidata import get_sitelink, get_sitelinks, strip_namespace


def find_missing_articles(site, en_site, category_name):
    """Return the Turkish articles of the English category that lack the Turkish one."""
    tr_category = pywikibot.Category(site, category_name)
    en_title = get_sitelink(tr_category.title(), site.dbName(), en_site.dbName())
    if not en_title:
        pywikibot.warning(f'{tr_category.title()} has no English equivalent on Wikidata.')
        return []
    pywikibot.info(f"{'    - English category:':<25}{en_title}")

    en_category = pywikibot.Category(en_site, strip_namespace(en_title))
    en_articles = [page.title() for page in en_category.articles(namespaces=[0])]
    pywikibot.info(f"{'    - English articles:':<25}{len(en_articles)}")

    sitelinks = get_sitelinks(en_articles, en_site.dbName(), site.dbName())
    tr_articles = {target for _, target in sitelinks.values() if target}
    pywikibot.info(f"{'    - With Turkish page:':<25}{len(tr_articles)}")

    members = {page.title() for page in tr_category.articles(namespaces=[0])}
    missing = sorted(tr_articles - members, key=turkish_sort_key)
    pywikibot.info(f"{'    - Missing category:':<25}{len(missing)}")
    return missing


class CategorySyncBot(
    SingleSiteBot,
    ConfigParserBot,
    ExistingPageBot,
):
    """A bot to add (or uncomment) a category on the given pages."""

    use_redirects = False

    update_options = {
        'summary': None,
        'always': False,
        'category': None,
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.summary_msgs = get_summary_messages(self.site.code)
        self.category_ns = self.site.namespace(14)

    def treat_page(self) -> None:
        """Load the given page, add the category, and save it."""
        page = self.current_page
        result = insert_category(page.text, self.opt.category, namespace=self.category_ns)

        if result.already_active:
            pywikibot.info(f'{page.title()} is already in the category.')
            self.counter['already active'] += 1
            return

        key = 'category_uncommented' if result.uncommented else 'category_added'
        summary = self.opt.summary or shorten_summary(
            self.summary_msgs['bot_prefix']
            + self.summary_msgs[key].format(ns=self.category_ns, name=self.opt.category))

        if self.put_current(result.text, summary=summary):
            self.counter['uncommented' if result.uncommented else 'added'] += 1


def main(*args: str) -> None:
    """
    Process command line arguments and invoke bot.

    :param args: command line arguments
    """
    options = {}
    categories = []
    local_args = pywikibot.handle_args(args)

    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option == 'category':
            if not value:
                value = pywikibot.input('Please enter a category name')
            categories.append(value)
        elif option == 'list':
            try:
                categories += read_list_file(value)
            except OSError as e:
                pywikibot.error(f'Could not read the category list "{value}": {e}')
                return
        elif option == 'summary':
            options[option] = value
        else:
            options[option] = True

    if not categories:
        pywikibot.bot.suggest_help(missing_parameters=['-category or -list'])
        return

    site = pywikibot.Site()
    en_site = pywikibot.Site('en', site.family)

    for index, name in enumerate(categories, 1):
        name = pywikibot.Category(site, name).title(with_ns=False)
        pywikibot.info(f'[{index}/{len(categories)}] {name}')
        missing = find_missing_articles(site, en_site, name)
        if not missing:
            continue

        gen = pagegenerators.PreloadingGenerator(pagegenerators.PagesFromTitlesGenerator(missing, site))
        bot = CategorySyncBot(generator=gen, site=site, category=name, **options)
        bot.run()


if __name__ == '__main__':
    main()

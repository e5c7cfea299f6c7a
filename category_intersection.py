#!/usr/bin/env python3
"""
The "category_intersection" script finds the articles that are members of
two categories at the same time. Both member lists are fetched in parallel.

It can list the common articles, export them to a JSON file and, with
-remove:, take a category off every article in the intersection.

Parameters supported:
-cat1:            First category (without namespace prefix). Required.
-cat2:            Second category (without namespace prefix). Required.
-verbose          List all common articles instead of the first 10.
-urls             Show the URL of every listed article.
-export:          Save the results to a JSON file.
-remove:          Remove this category from every common article.
-always           Don't ask for confirmation before removing, nor per page.
-summary:         Set the action summary message for the removal edits.

Usage:
python pwb.py category_intersection -lang:tr -family:wikipedia "-cat1:Yaşayan insanlar" "-cat2:Türk futbolcular" -verbose
python pwb.py category_intersection -lang:tr "-cat1:A" "-cat2:B" "-remove:B" -always
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pywikibot
from pywikibot import pagegenerators
from pywikibot.bot import (
    ConfigParserBot,
    ExistingPageBot,
    SingleSiteBot,
)

from category_tags import remove_category
from utils import article_url, common_titles, get_summary_messages, shorten_summary
from wikitext import Reason

PREVIEW_SIZE = 10


def fetch_members(site, category_name):
    """Return the titles of the articles in a category."""
    category = pywikibot.Category(site, category_name)
    titles = [page.title() for page in category.articles(namespaces=[0])]
    pywikibot.info(f'Fetched {len(titles)} articles from {category.title()}')
    return titles


def find_intersection(site, first, second):
    """Fetch both member lists concurrently and return them with their intersection."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        first_future = executor.submit(fetch_members, site, first)
        second_future = executor.submit(fetch_members, site, second)
        members1, members2 = first_future.result(), second_future.result()
    return members1, members2, common_titles(members1, members2)


def print_results(site, first, second, members1, members2, common, verbose=False, show_urls=False):
    pywikibot.info('=' * 60)
    pywikibot.info(f"{'Category 1 (' + first + '):':<45}{len(members1)} articles")
    pywikibot.info(f"{'Category 2 (' + second + '):':<45}{len(members2)} articles")
    pywikibot.info(f"{'Common articles:':<45}{len(common)} articles")
    pywikibot.info('=' * 60)

    if not common:
        pywikibot.info('No common articles found.')
        return

    shown = common if verbose else common[:PREVIEW_SIZE]
    for index, title in enumerate(shown, 1):
        pywikibot.info(f'{index:>3}. {title}')
        if show_urls:
            pywikibot.info(f'     {article_url(title, site.code)}')

    if len(common) > len(shown):
        pywikibot.info(f'... and {len(common) - len(shown)} more. Use -verbose to list all of them.')


def export_results(filename, site, first, second, members1, members2, common):
    """Save the intersection to a JSON file."""
    data = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'category1': {'name': first, 'count': len(members1)},
        'category2': {'name': second, 'count': len(members2)},
        'common': {
            'count': len(common),
            'articles': [{'title': title, 'url': article_url(title, site.code)} for title in common],
        },
    }
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    pywikibot.info(f'Results saved to {filename}')


class CategoryRemoverBot(
    SingleSiteBot,
    ConfigParserBot,
    ExistingPageBot,
):
    """A bot to remove one category from the given pages."""

    use_redirects = False

    update_options = {
        'summary': None,
        'category': None,
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.summary_msgs = get_summary_messages(self.site.code)
        self.category_ns = self.site.namespace(14)

    def treat_page(self) -> None:
        """Load the given page, remove the category, and save it."""
        page = self.current_page
        new_text, applied, reason = remove_category(page.text, self.opt.category)

        if not applied:
            # The category may come from a template rather than a link in the text.
            if reason is Reason.NOT_FOUND:
                pywikibot.warning(f'{page.title()}: no [[{self.category_ns}:{self.opt.category}]] link in the text.')
            self.counter[reason.value] += 1
            return

        summary = self.opt.summary or shorten_summary(
            self.summary_msgs['bot_prefix'] + self.summary_msgs['category_removed'].format(
                ns=self.category_ns, name=self.opt.category))
        if self.put_current(new_text, summary=summary):
            self.counter['removed'] += 1


def main(*args: str) -> None:
    """
    Process command line arguments and find the intersection.

    :param args: command line arguments
    """
    options = {}
    first = second = to_remove = export_file = None
    verbose = show_urls = False

    local_args = pywikibot.handle_args(args)

    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option == 'cat1':
            first = value
        elif option == 'cat2':
            second = value
        elif option == 'remove':
            to_remove = value
        elif option == 'export':
            export_file = value
        elif option == 'verbose':
            verbose = True
        elif option == 'urls':
            show_urls = True
        elif option == 'summary':
            options[option] = value
        else:
            options[option] = True

    if not first or not second:
        pywikibot.error('Both -cat1 and -cat2 parameters are required.')
        return

    site = pywikibot.Site()
    pywikibot.info(f'Looking for articles in both "{first}" and "{second}" on {site}. Please wait...')
    members1, members2, common = find_intersection(site, first, second)

    print_results(site, first, second, members1, members2, common, verbose, show_urls)

    if export_file:
        try:
            export_results(export_file, site, first, second, members1, members2, common)
        except OSError as e:
            pywikibot.error(f'Could not write {export_file}: {e}')

    if not to_remove or not common:
        return

    if not options.get('always') and not pywikibot.input_yn(
            f'Remove "{to_remove}" from {len(common)} articles?', default=False, automatic_quit=False):
        pywikibot.info('Cancelled.')
        return

    gen = pagegenerators.PreloadingGenerator(pagegenerators.PagesFromTitlesGenerator(common, site))
    bot = CategoryRemoverBot(generator=gen, site=site, category=to_remove, **options)
    bot.run()


if __name__ == '__main__':
    main()

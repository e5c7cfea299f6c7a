#!/usr/bin/env python3
"""
A bot to move footballers out of a generic maintenance category.

Pages tagged with [[Kategori:Bilgi kutusu bulunmayan kişiler]] (people
without an infobox) are retargeted to [[Kategori:Bilgi kutusu bulunmayan
futbolcular]] (footballers without an infobox) when one of their categories
matches the footballer pattern (/futbolcu/i). Other pages are left alone.

The categories and the pattern are configured in `bot_data.py`.

Parameters supported:
-always           The bot won't ask for confirmation when putting a page
-list:            Read page titles from a text file, one per line ('#' lines are ignored).
-summary:         Set the action summary message for the edit.

Usage:
python pwb.py category_retarget -lang:tr -family:wikipedia "-cat:Bilgi kutusu bulunmayan kişiler"
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

from bot_data import RETARGET_SOURCE_CATEGORY, RETARGET_TARGET_CATEGORY
from mutation_policy import PageMetadata, retarget_category
from utils import get_summary_messages, read_list_file, shorten_summary
from wikitext import Reason


class CategoryRetargetBot(
    SingleSiteBot,  # A bot only working on one site
    ConfigParserBot,  # A bot which reads options from scripts.ini setting file
    ExistingPageBot,  # CurrentPageBot which only treats existing pages
):
    """A bot to retarget a maintenance category for footballers."""

    use_redirects = False  # treats non-redirects only

    update_options = {
        'summary': None,
        'always': False,
        'source': RETARGET_SOURCE_CATEGORY,
        'target': RETARGET_TARGET_CATEGORY,
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.summary_msgs = get_summary_messages(self.site.code)
        self.category_ns = self.site.namespace(14)

    def treat_page(self) -> None:
        """Load the given page and its categories, retarget the category, and save it."""
        page = self.current_page

        # The categories are fetched from the wiki, so templates adding them count too.
        categories = tuple(cat.title(with_ns=False) for cat in page.categories())
        pywikibot.info(f"{'    - Categories:':<25}{len(categories)}")

        metadata = PageMetadata(title=page.title(), categories=categories)
        new_text, report = retarget_category(
            page.text, metadata, source=self.opt.source, target=self.opt.target)

        self.counter[report.reason.value] += 1
        if report.reason is Reason.POLICY_DECLINED:
            pywikibot.info(f'Skipping {page.title()}: not a footballer.')
            return
        if not report.applied:
            pywikibot.info(f'No changes were needed on {page.title()} ({report.reason.value})')
            return

        summary = self.opt.summary or shorten_summary(
            self.summary_msgs['bot_prefix'] + self.summary_msgs['retarget'].format(
                ns=self.category_ns, old=self.opt.source, new=self.opt.target))
        if self.put_current(new_text, summary=summary):
            self.counter['retargeted'] += 1


def main(*args: str) -> None:
    """
    Process command line arguments and invoke bot.

    :param args: command line arguments
    """
    options = {}
    titles = []
    # Process global arguments to determine desired site
    local_args = pywikibot.handle_args(args)

    # This factory processes command line arguments for page generators
    gen_factory = pagegenerators.GeneratorFactory()
    local_args = gen_factory.handle_args(local_args)

    # Parse command line arguments
    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option in ('summary', 'source', 'target'):
            if not value:
                value = pywikibot.input('Please enter a value for ' + arg)
            options[option] = value
        elif option == 'list':
            try:
                titles = read_list_file(value)
            except OSError as e:
                pywikibot.error(f'Could not read the page list "{value}": {e}')
                return
        else:
            options[option] = True

    extra_gen = pagegenerators.PagesFromTitlesGenerator(titles, pywikibot.Site()) if titles else None
    gen = gen_factory.getCombinedGenerator(gen=extra_gen, preload=True)

    if not pywikibot.bot.suggest_help(missing_generator=not gen):
        bot = CategoryRetargetBot(generator=gen, **options)
        bot.run()


if __name__ == '__main__':
    main()

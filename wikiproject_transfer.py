#!/usr/bin/env python3
"""
A bot to copy WikiProject banners from English Wikipedia talk pages to the
talk pages of the matching Turkish articles.

For every Turkish article:
1.  the English article is found through Wikidata;
2.  the WikiProject banners on its English talk page are read and mapped to
    Turkish projects (WIKIPROJECT_MAPPINGS in `bot_data.py`);
3.  the matching {{Vikiproje|Proje=...|sınıf=|önem=}} banners are put at the
    top of the Turkish talk page, unless it already has a Vikiproje banner.

The following parameters are supported:

-always           The bot won't ask for confirmation when putting a page.

-list:            Read Turkish article titles from a text file, one per line.
                  Blank lines and lines starting with '#' are ignored.

-export:          Save a JSON log of the processed articles.

-summary:         Overwrite the default summary.

Use the global -simulate option to see the banners without saving them.

Example:
--------

    python pwb.py wikiproject_transfer -lang:tr -family:wikipedia -list:articles.txt -simulate

&params;
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import json
from datetime import datetime, timezone

import pywikibot
from pywikibot import pagegenerators
from pywikibot.bot import (
    ConfigParserBot,
    ExistingPageBot,
    SingleSiteBot,
)

from talk_banners import (
    has_wikiproject_banner,
    is_wikiproject_template,
    make_banners,
    map_wikiprojects,
    prepend_banners,
)
from utils import get_summary_messages, read_list_file
from wikidata import get_sitelink

docuReplacements = {'&params;': pagegenerators.parameterHelp}  # noqa: N816


class WikiProjectTransferBot(
    SingleSiteBot,
    ConfigParserBot,
    ExistingPageBot,
):
    """A bot to add Turkish WikiProject banners based on the English talk page."""

    use_redirects = False

    update_options = {
        'summary': None,
        'export': None,  # JSON log file
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.summary_msgs = get_summary_messages(self.site.code)
        self.en_site = pywikibot.Site('en', self.site.family)
        self.entries = []

    def english_wikiprojects(self, en_title):
        """Return the WikiProject templates used on the English talk page."""
        talk = pywikibot.Page(self.en_site, en_title).toggleTalkPage()
        if not talk.exists():
            return []
        return [template.title(with_ns=False) for template in talk.templates()
                if is_wikiproject_template(template.title(with_ns=False))]

    def log_entry(self, title, status, **kwargs):
        self.counter[status] += 1
        self.entries.append({'tr': title, 'status': status, **kwargs})

    def treat_page(self) -> None:
        """Find the English banners of the page and add them to its Turkish talk page."""
        page = self.current_page
        title = page.title()

        en_title = get_sitelink(title, self.site.dbName(), self.en_site.dbName())
        if not en_title:
            pywikibot.info(f"{'    - English:':<25}none")
            self.log_entry(title, 'no_english', en=None)
            return
        pywikibot.info(f"{'    - English:':<25}{en_title}")

        en_projects = self.english_wikiprojects(en_title)
        if not en_projects:
            pywikibot.info(f"{'    - WikiProjects:':<25}none")
            self.log_entry(title, 'no_wikiproject', en=en_title)
            return
        pywikibot.info(f"{'    - WikiProjects:':<25}{', '.join(en_projects[:3])}")

        banners = make_banners(map_wikiprojects(en_projects))
        if not banners:
            pywikibot.info(f'No Turkish project matches the banners of {en_title}.')
            self.log_entry(title, 'no_mapping', en=en_title, en_wikiprojects=en_projects)
            return

        talk = page.toggleTalkPage()
        old_text = talk.text if talk.exists() else ''
        if has_wikiproject_banner(old_text):
            pywikibot.info(f'{talk.title()} already has a {{{{Vikiproje}}}} banner.')
            self.log_entry(title, 'skipped', en=en_title)
            return

        for banner in banners:
            pywikibot.info(f'    {banner}')

        summary = self.opt.summary or self.summary_msgs['bot_prefix'] + self.summary_msgs['wikiproject']
        saved = self.userPut(talk, old_text, prepend_banners(old_text, banners), summary=summary)
        self.log_entry(title, 'added' if saved else 'not_saved', en=en_title,
                       en_wikiprojects=en_projects, banners=banners)

    def teardown(self) -> None:
        """Print the statistics of the run and write the log file."""
        pywikibot.info('=' * 60)
        pywikibot.info(f"{'Banners added:':<35}{self.counter['added']}")
        pywikibot.info(f"{'Already had a banner:':<35}{self.counter['skipped']}")
        pywikibot.info(f"{'No English article:':<35}{self.counter['no_english']}")
        pywikibot.info(f"{'No English WikiProject:':<35}{self.counter['no_wikiproject']}")
        pywikibot.info(f"{'No Turkish project:':<35}{self.counter['no_mapping']}")
        pywikibot.info('=' * 60)

        if not self.opt.export:
            return
        data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'summary': dict(self.counter),
            'entries': self.entries,
        }
        try:
            with open(self.opt.export, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            pywikibot.error(f'Could not write {self.opt.export}: {e}')
        else:
            pywikibot.info(f'Log saved to {self.opt.export}')


def main(*args: str) -> None:
    """
    Process command line arguments and invoke bot.

    :param args: command line arguments
    """
    options = {}
    titles = []
    local_args = pywikibot.handle_args(args)

    gen_factory = pagegenerators.GeneratorFactory()
    local_args = gen_factory.handle_args(local_args)

    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option in ('summary', 'export'):
            if not value:
                value = pywikibot.input('Please enter a value for ' + arg)
            options[option] = value
        elif option == 'list':
            try:
                titles = read_list_file(value)
            except OSError as e:
                pywikibot.error(f'Could not read the page list "{value}": {e}')
                return
            pywikibot.info(f'{len(titles)} articles read from {value}')
        else:
            options[option] = True

    extra_gen = pagegenerators.PagesFromTitlesGenerator(titles, pywikibot.Site()) if titles else None
    gen = gen_factory.getCombinedGenerator(gen=extra_gen, preload=True)

    if not pywikibot.bot.suggest_help(missing_generator=not gen):
        bot = WikiProjectTransferBot(generator=gen, **options)
        bot.run()


if __name__ == '__main__':
    main()

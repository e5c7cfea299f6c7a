#!/usr/bin/env python3
"""
A bot to remove "unsourced" maintenance templates ({{Kaynaksız}} and its
aliases) from articles where they are no longer accurate.

A template is removed only when:
1.  the page is a draft: its title starts with a draft prefix (Taslak:) or it
    carries a stub template such as {{Taslak}} or {{Fizik-taslak}}; or
2.  the article cites at least one source with a <ref> tag.

Anything inside <!-- comments --> is ignored for both checks. Articles with
no <ref> tags keep their template. The template aliases and draft markers
are configured in `bot_data.py`.

The following parameters are supported:

-always           The bot won't ask for confirmation when putting a page.

-list:            Read page titles from a text file, one per line. Blank lines
                  and lines starting with '#' are ignored.

-reason:          Append custom text to the default summary.

-summary:         Overwrite the default summary.

Without a page generator the bot works on the pages of the tracking category
[[Kategori:Kaynaksız maddeler]].

Example:
--------

Process every page in the tracking category, without saving (dry run):

    python pwb.py unsourced_remover -lang:tr -family:wikipedia "-cat:Kaynaksız maddeler" -simulate

&params;
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

from bot_data import UNSOURCED_CATEGORY
from mutation_policy import PageMetadata, draft_templates, remove_unsourced_templates
from utils import get_summary_messages, read_list_file, shorten_summary
from wikitext import Reason, StructuralParseError

# This is required for the text that is shown when you run this script
# with the parameter -help.
docuReplacements = {'&params;': pagegenerators.parameterHelp}  # noqa: N816


class UnsourcedRemoverBot(
    SingleSiteBot,  # A bot only working on one site
    ConfigParserBot,  # A bot which reads options from scripts.ini setting file
    ExistingPageBot,  # CurrentPageBot which only treats existing pages
):
    """A bot to remove unsourced templates from drafts and sourced articles."""

    use_redirects = False  # treats non-redirects only

    update_options = {
        'reason': None,  # append custom text to the default summary
        'summary': None,  # overwrite the default summary
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.summary_msgs = get_summary_messages(self.site.code)

    def treat_page(self) -> None:
        """Load the given page, remove its unsourced templates if allowed, and save it."""
        page = self.current_page
        text = page.text
        metadata = PageMetadata(title=page.title())

        try:
            new_text, report = remove_unsourced_templates(text, metadata)
        except StructuralParseError as e:
            pywikibot.error(f'{page.title()}: {e}. The page was left unchanged.')
            self.counter['unterminated'] += 1
            return

        if report.reason is Reason.DRAFT:
            found = draft_templates(text)
            if found:
                pywikibot.info(f"{'    - Stub templates:':<25}{', '.join(found)}")

        pywikibot.info(f"{'    - Decision:':<25}{report.decision.value} ({report.reason.value})")
        self.counter[report.reason.value] += 1

        if not report.applied:
            return

        removed = len(report.changes)
        pywikibot.info(f"{'    - Removed:':<25}{', '.join(str(c) for c in report.changes)}")
        self.counter['templates removed'] += removed
        self.put_current(new_text, summary=self.generate_edit_summary(report.reason, removed))

    def generate_edit_summary(self, reason: Reason, count: int) -> str:
        """Generate a language-aware edit summary."""
        msgs = self.summary_msgs

        if self.opt.summary:
            return self.opt.summary

        key = 'unsourced_draft' if reason is Reason.DRAFT else 'unsourced_sources'
        summary = msgs['bot_prefix'] + msgs[key].format(count=count)
        if self.opt.reason:
            summary += f': {self.opt.reason}'
        return shorten_summary(summary)

    def teardown(self) -> None:
        """Print the statistics of the run."""
        pywikibot.info('=' * 60)
        pywikibot.info(f"{'Templates removed:':<35}{self.counter['templates removed']}")
        pywikibot.info(f"{'  from drafts:':<35}{self.counter[Reason.DRAFT.value]} pages")
        pywikibot.info(f"{'  from sourced articles:':<35}{self.counter[Reason.HAS_SOURCES.value]} pages")
        pywikibot.info(f"{'No template found:':<35}{self.counter[Reason.NOT_FOUND.value]}")
        pywikibot.info(f"{'No <ref> tags (kept):':<35}{self.counter[Reason.NO_SOURCES.value]}")
        pywikibot.info(f"{'Unterminated templates:':<35}{self.counter['unterminated']}")
        pywikibot.info('=' * 60)


def main(*args: str) -> None:
    """
    Process command line arguments and invoke bot.

    If args is an empty list, sys.argv is used.

    :param args: command line arguments
    """
    options = {}
    titles = []
    # Process global arguments to determine desired site
    local_args = pywikibot.handle_args(args)

    # This factory is responsible for processing command line arguments
    # that are also used by other scripts and that determine on which pages
    # to work on.
    gen_factory = pagegenerators.GeneratorFactory()

    # Process pagegenerators arguments
    local_args = gen_factory.handle_args(local_args)

    # Parse your own command line arguments
    for arg in local_args:
        arg, _, value = arg.partition(':')
        option = arg[1:]
        if option in ('summary', 'reason'):
            if not value:
                value = pywikibot.input('Please enter a value for ' + arg)
            options[option] = value
        elif option == 'list':
            if not value:
                pywikibot.error('The -list parameter requires a file name.')
                return
            try:
                titles = read_list_file(value)
            except OSError as e:
                pywikibot.error(f'Could not read the page list: {e}')
                return
            pywikibot.info(f'{len(titles)} pages read from {value}')
        # take the remaining options as booleans.
        else:
            options[option] = True

    extra_gen = None
    if titles:
        extra_gen = pagegenerators.PagesFromTitlesGenerator(titles, pywikibot.Site())

    # The preloading option is responsible for downloading multiple
    # pages from the wiki simultaneously.
    gen = gen_factory.getCombinedGenerator(gen=extra_gen, preload=True)
    if not gen:
        category = pywikibot.Category(pywikibot.Site(), UNSOURCED_CATEGORY)
        pywikibot.info(f'No pages given; using {category.title()}')
        gen = pagegenerators.PreloadingGenerator(category.articles())

    # check if further help is needed
    if not pywikibot.bot.suggest_help(missing_generator=not gen):
        bot = UnsourcedRemoverBot(generator=gen, **options)
        bot.run()


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
A bot to update the parameters of the football player infobox
({{Futbolcu bilgi kutusu}} and its aliases) on Turkish Wikipedia.

Parameter names and the parameters to drop are configured in `bot_data.py`
(PARAMETER_RENAMES and PARAMETERS_TO_DELETE).

Parameters supported:
-always           The bot won't ask for confirmation when putting a page
-list:            Read page titles from a text file, one per line ('#' lines are ignored).
-summary:         Set the action summary message for the edit.

Tasks:
1.  rename: updates old parameter names with the new ones, keeping the
    values and the whitespace style as they are (e.g. adı -> ad).
2.  delete: removes deprecated parameters together with their values,
    even when the value is empty or spans several lines (e.g. kilo).

Notes: Only parameters of the infobox itself are changed; a template used as
a parameter value is never touched. Pages whose infobox is not closed are
skipped.

Usage:
python pwb.py infobox_param_updater -lang:tr -family:wikipedia -transcludes:Futbolcu_bilgi_kutusu
"""
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from __future__ import annotations

import pywikibot
from pywikibot import pagegenerators
from pywikibot.bot import (
    SingleSiteBot,
    ConfigParserBot,
    ExistingPageBot,
)

from mutation_policy import PageMetadata, update_infobox
from utils import get_summary_messages, read_list_file, shorten_summary
from wikitext import StructuralParseError


class InfoboxParamUpdaterBot(
    SingleSiteBot,
    ConfigParserBot,
    ExistingPageBot,
):
    """A bot to rename and delete football infobox parameters."""

    use_redirects = False

    update_options = {
        'summary': None,
        'always': False,
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.summary_msgs = get_summary_messages(self.site.code)

    def treat_page(self) -> None:
        """Load the given page, update its infobox, and save it."""
        page = self.current_page

        try:
            new_text, report = update_infobox(page.text, PageMetadata(title=page.title()))
        except StructuralParseError as e:
            pywikibot.error(f'{page.title()}: {e}. The infobox end could not be found.')
            self.counter['unterminated'] += 1
            return

        if not report.applied:
            pywikibot.info(f'No changes were needed on {page.title()} ({report.reason.value})')
            self.counter[report.reason.value] += 1
            return

        # Count every applied change per rule, e.g. "adı → ad" or "kilo deleted".
        for change in report.changes:
            pywikibot.info(f'    - {change}')
            self.counter[str(change)] += 1

        summary = self.opt.summary or shorten_summary(
            self.summary_msgs['bot_prefix']
            + self.summary_msgs['infobox'].format(
                changes=self.summary_msgs['separator'].join(str(c) for c in report.changes)))

        # Save the page with the generated summary
        if self.put_current(new_text, summary=summary, minor=True):
            self.counter['modified'] += 1


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
        if option == 'summary':
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

    # Create a generator for pages
    gen = gen_factory.getCombinedGenerator(gen=extra_gen, preload=True)

    # Create and run the bot
    if not pywikibot.bot.suggest_help(missing_generator=not gen):
        bot = InfoboxParamUpdaterBot(generator=gen, **options)
        bot.run()  # Runs the bot


if __name__ == '__main__':
    main()

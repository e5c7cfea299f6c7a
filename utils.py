#!/usr/bin/env python3
# -*- coding: utf-8  -*-
'''
This script provides helper functions shared by the trwiki bots:
reading page and category lists from text files, intersecting title lists,
sorting titles in Turkish alphabetical order and building article URLs.
The script is open for further contributions.
'''
#
# Authors: (C) trwiki maintenance bot contributors, 2025
# License: Distributed under the terms of the MIT license.
#
from urllib.parse import quote

from bot_data import SUMMARY_MESSAGES

TURKISH_ALPHABET = 'abcçdefgğhıijklmnoöprsştuüvyz'
_ALPHABET_ORDER = {char: index for index, char in enumerate(TURKISH_ALPHABET)}


# A function to read one item per line, skipping blank lines and '#' comments
def read_list_file(filename):
    with open(filename, encoding='utf-8') as f:
        lines = (line.strip() for line in f)
        return [line for line in lines if line and not line.startswith('#')]


# A function to lowercase text with the Turkish dotted and dotless i
def turkish_lower(text):
    return text.replace('I', 'ı').replace('İ', 'i').lower()


# A function to sort titles the way a Turkish reader expects
def turkish_sort_key(title):
    return [(_ALPHABET_ORDER.get(char, len(TURKISH_ALPHABET) + ord(char)), char)
            for char in turkish_lower(title)]


# A function to find the titles present in both lists, in Turkish alphabetical order
def common_titles(first, second):
    second_set = set(second)
    common = {title for title in first if title in second_set}
    return sorted(common, key=turkish_sort_key)


# A function to split a list into consecutive batches
def chunked(items, size):
    items = list(items)
    for start in range(0, len(items), size):
        yield items[start:start + size]


# A function to build the article URL of a title on a language edition
def article_url(title, lang='tr'):
    return f"https://{lang}.wikipedia.org/wiki/{quote(title.replace(' ', '_'))}"


# A function to get the edit summary messages of a site language, falling back to English
def get_summary_messages(code):
    messages = SUMMARY_MESSAGES['en'].copy()
    messages.update(SUMMARY_MESSAGES.get(code, {}))
    return messages


# A function to shorten an edit summary that exceeds the character limit
def shorten_summary(summary, limit=499):
    if len(summary) <= limit:
        return summary
    return summary[:limit - 1] + '…'


# A function to give the rounded share of a part in a whole, 0 for an empty whole
def percentage(part, whole):
    if not whole:
        return 0
    return round(part * 100 / whole)

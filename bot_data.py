# -*- coding: utf-8 -*-

"""
This file serves as the central configuration hub for the trwiki bots.

It contains the data that controls what the bots look for and what they
change, separating configuration from the operational logic in the scripts
and in the wikitext engine.

Note:
Template names are matched case-sensitively except for the first letter,
the same way MediaWiki resolves template titles. Add every redirect of a
template you want the bots to recognize.
"""

# Namespace names used when matching category links. The first one is used
# when the bots write a new link.
CATEGORY_NAMESPACES = ['Kategori', 'Category']

# --- Unsourced template removal (unsourced_remover.py) ---

# {{Kaynaksız}} and its redirects and close relatives.
UNSOURCED_TEMPLATES = [
    'Kaynaksız',
    'Kaynak yok',
    'Kaynak belirtilmeli',
    'Kaynak eksik',
    'Unreferenced',
    'Unsourced',
    'Refimprove',
    'Kaynak az',
    'Daha fazla kaynak',
    'Daha fazla dipnot',
]

# Title prefixes that mark a page as a draft.
DRAFT_TITLE_PREFIXES = ['Taslak:', 'Draft:']

# A template whose name contains one of these marks the page as a stub,
# e.g. {{Taslak}}, {{Türk-biyo-taslak}}, {{Fizik-taslak}}, {{Bio-stub}}.
DRAFT_TEMPLATE_MARKERS = ['taslak', 'stub']

# Category holding the pages tagged with an unsourced template.
UNSOURCED_CATEGORY = 'Kaynaksız maddeler'

# --- Football infobox parameters (infobox_param_updater.py) ---

FOOTBALL_INFOBOX_TEMPLATES = [
    'Futbolcu bilgi kutusu',
    'Futbolcu bilgi',
    'Futbolcu',
    'Futbol oyuncusu',
    'Football player infobox',
    'Infobox football biography',
]

# Old parameter name (lowercase) -> new parameter name.
PARAMETER_RENAMES = {
    'adı': 'ad',
    'altyapıyıl': 'altyapıyıl1',
    'altyapı': 'altyapıkulübü1',
    'altyapıkulübü': 'altyapıkulübü1',
    'altyapıkulüp': 'altyapıkulübü1',
    'boy': 'boyu',
    'altyapıkulüp1': 'altyapıkulübü1',
    'altyapıkulüp2': 'altyapıkulübü2',
    'altyapıkulüp3': 'altyapıkulübü3',
    'doğduğuyer': 'doğumyeri',
    'isim': 'ad',
    'tam adı': 'tamadı',
}

# Parameters removed together with their values, even when empty.
PARAMETERS_TO_DELETE = ['toplammaç', 'toplamgol', 'kilo', 'toplammillimaç', 'toplammilligol']

# --- Category retargeting (category_retarget.py) ---

RETARGET_SOURCE_CATEGORY = 'Bilgi kutusu bulunmayan kişiler'
RETARGET_TARGET_CATEGORY = 'Bilgi kutusu bulunmayan futbolcular'

# A page is retargeted when one of its categories matches this pattern
# (case-insensitive).
FOOTBALLER_CATEGORY_PATTERN = r'futbolcu'

# --- WikiProject banners (wikiproject_transfer.py) ---

# English WikiProject banner -> Turkish project name for {{Vikiproje|Proje=...}}.
WIKIPROJECT_MAPPINGS = {
    # Science
    'WikiProject Science': 'Bilim',
    'WikiProject Biology': 'Biyoloji',
    'WikiProject Medicine': 'Tıp',
    'WikiProject Chemistry': 'Kimya',
    'WikiProject Physics': 'Fizik',
    'WikiProject Mathematics': 'Matematik',
    'WikiProject Technology': 'Teknoloji',
    'WikiProject Computer science': 'Bilgisayar',
    'WikiProject Astronomy': 'Astronomi',
    'WikiProject History of Science': 'Bilim tarihi',
    # People
    'WikiProject Biography': 'Biyografi',
    'WPBIO': 'Biyografi',
    'WPBiography': 'Biyografi',
    # Geography
    'WikiProject Geography': 'Coğrafya',
    'WikiProject Cities': 'Yerleşim',
    'WikiProject Countries': 'Ülkeler',
    'WikiProject Turkey': 'Türkiye',
    # History
    'WikiProject History': 'Tarih',
    'WikiProject Military history': 'Askeri tarih',
    # Arts
    'WikiProject Film': 'Film',
    'WikiProject Music': 'Müzik',
    'WikiProject Literature': 'Edebiyat',
    # Sports
    'WikiProject Football': 'Futbol',
    'WikiProject Sports': 'Spor',
    # Other
    'WikiProject Politics': 'Siyaset',
    'WikiProject Religion': 'Din',
    'WikiProject Philosophy': 'Felsefe',
    'WikiProject Education': 'Eğitim',
    'WikiProject Companies': 'Şirketler',
}

WIKIPROJECT_BANNER = 'Vikiproje'

# --- Wikidata ---

WIKIDATA_API = 'https://www.wikidata.org/w/api.php'
WIKIDATA_BATCH_SIZE = 50
# Seconds to wait between two Wikidata batches.
WIKIDATA_BATCH_DELAY = 0.4
USER_AGENT = 'TrwikiMaintenanceBots/1.0 (https://tr.wikipedia.org/wiki/Kullanıcı:TrwikiBot)'

# Language-specific messages for generating edit summaries.
# Falls back to 'en' if the site language is not defined here.
SUMMARY_MESSAGES = {
    'en': {
        'bot_prefix': 'Bot: ',
        'unsourced_draft': 'Removed {count} unsourced template(s) from a draft',
        'unsourced_sources': 'Removed {count} unsourced template(s) (the article has <ref> tags)',
        'infobox': 'Updated football infobox parameters: {changes}',
        'retarget': 'Footballer: [[:{ns}:{old}]] → [[:{ns}:{new}]]',
        'category_removed': 'Removed [[:{ns}:{name}]]',
        'category_added': 'Added [[:{ns}:{name}]]',
        'category_uncommented': 'Uncommented and activated [[:{ns}:{name}]]',
        'wikiproject': 'Added WikiProject banners',
        'separator': '; ',
    },
    'tr': {
        'bot_prefix': 'Bot: ',
        'unsourced_draft': 'Taslak maddeden {count} kaynaksız şablonu kaldırıldı',
        'unsourced_sources': '{count} kaynaksız şablonu kaldırıldı (maddede <ref> etiketi mevcut)',
        'infobox': 'Futbolcu bilgi kutusu parametreleri güncellendi: {changes}',
        'retarget': 'Futbolcu olduğu için [[:{ns}:{old}]] → [[:{ns}:{new}]] değiştirildi',
        'category_removed': '[[:{ns}:{name}]] kategorisi kaldırıldı',
        'category_added': '[[:{ns}:{name}]] kategorisi eklendi',
        'category_uncommented': '[[:{ns}:{name}]] kategorisi yorumdan çıkarıldı ve aktif hale getirildi',
        'wikiproject': 'Vikiproje şablonları eklendi',
        'separator': '; ',
    },
}

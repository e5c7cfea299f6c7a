"""Category link lookup, removal, insertion and retargeting tests."""

from __future__ import annotations

import pytest

from category_tags import (
    find_categories,
    format_category,
    has_category,
    insert_category,
    remove_category,
    replace_category,
)
from wikitext import Reason


def test_find_categories_separates_commented_links():
    doc = 'Metin\n[[Kategori:Türk futbolcular|Ali]]\n<!-- [[Kategori:Yaşayan insanlar]] -->'
    (live,) = find_categories(doc)
    assert live.name == 'Türk futbolcular'
    assert live.sort_key == 'Ali'
    assert live.namespace == 'Kategori'
    (commented,) = find_categories(doc, inside_comments=True)
    assert commented.name == 'Yaşayan insanlar'
    assert commented.commented


def test_commented_category_is_not_present_by_default():
    doc = 'Metin.\n<!-- [[Kategori:Türk futbolcular]] -->'
    assert not has_category(doc, 'Türk futbolcular')
    assert has_category(doc, 'Türk futbolcular', include_commented=True)


def test_has_category_accepts_english_namespace_and_underscores():
    assert has_category('[[Category:Türk_futbolcular]]', 'Türk futbolcular')


def test_format_category():
    assert format_category('A') == '[[Kategori:A]]'
    assert format_category('A', 'Category', 'x') == '[[Category:A|x]]'


def test_remove_category_is_idempotent():
    doc = 'Metin.\n\n[[Kategori:A]]\n[[Kategori:B]]'
    first = remove_category(doc, 'B')
    assert first.text == 'Metin.\n\n[[Kategori:A]]'
    assert first.applied
    assert first.reason is Reason.APPROVED

    second = remove_category(first.text, 'B')
    assert second.text == first.text
    assert not second.applied
    assert second.reason is Reason.NOT_FOUND


def test_remove_category_with_sort_key():
    result = remove_category('Metin.\n[[Kategori:B|x]]\n[[Kategori:A]]', 'B')
    assert result.text == 'Metin.\n[[Kategori:A]]'


def test_remove_category_leaves_commented_link():
    doc = 'Metin.\n<!-- [[Kategori:B]] -->'
    result = remove_category(doc, 'B')
    assert result.text == doc
    assert result.reason is Reason.NOT_FOUND

    live_and_commented = 'Metin.\n[[Kategori:B]]\n<!-- [[Kategori:B]] -->'
    assert remove_category(live_and_commented, 'B').text == 'Metin.\n<!-- [[Kategori:B]] -->'


def test_insert_category_after_last_category():
    doc = 'Metin.\n\n[[Kategori:A]]\n{{Futbol-taslak}}'
    result = insert_category(doc, 'B')
    assert result.text == 'Metin.\n\n[[Kategori:A]]\n[[Kategori:B]]\n{{Futbol-taslak}}'
    assert not result.already_active
    assert not result.uncommented


def test_insert_category_at_end_of_page():
    assert insert_category('Metin.\n', 'B').text == 'Metin.\n\n[[Kategori:B]]'


def test_insert_active_category_changes_nothing():
    doc = 'Metin.\n[[Kategori:B]]'
    result = insert_category(doc, 'B')
    assert result.text == doc
    assert result.already_active


def test_insert_uncomments_instead_of_duplicating():
    doc = 'Metin.\n<!-- [[Kategori:B]] -->\n[[Kategori:A]]'
    result = insert_category(doc, 'B')
    assert result.text == 'Metin.\n[[Kategori:B]]\n[[Kategori:A]]'
    assert result.uncommented
    assert len([c for c in find_categories(result.text) if c.name == 'B']) == 1


def test_insert_uncomment_keeps_sort_key():
    result = insert_category('Metin.\n<!--[[Kategori:B|Ali]]-->', 'B')
    assert result.text == 'Metin.\n[[Kategori:B|Ali]]'


def test_insert_uncomment_keeps_other_comment_text():
    result = insert_category('Metin.\n<!-- [[Kategori:B]] eski not -->', 'B')
    assert has_category(result.text, 'B')
    assert 'eski not' in result.text
    assert '<!--' in result.text


@pytest.mark.parametrize('doc', ['Metin.', 'Metin.\n\n[[Kategori:A]]'])
def test_insert_then_remove_restores_document(doc):
    inserted = insert_category(doc, 'B').text
    assert remove_category(inserted, 'B').text == doc


def test_replace_category_keeps_sort_key():
    doc = 'Metin.\n[[Kategori:Eski|Ali]]'
    assert replace_category(doc, 'Eski', 'Yeni') == ('Metin.\n[[Kategori:Yeni|Ali]]', True)


def test_replace_category_drops_old_when_new_is_present():
    doc = 'X\n[[Kategori:Eski]]\n[[Kategori:Yeni]]'
    assert replace_category(doc, 'Eski', 'Yeni') == ('X\n[[Kategori:Yeni]]', True)


def test_replace_category_ignores_commented_link():
    doc = 'X\n<!-- [[Kategori:Eski]] -->'
    assert replace_category(doc, 'Eski', 'Yeni') == (doc, False)

"""Infobox parameter renaming and deletion tests."""

from __future__ import annotations

import pytest

from bot_data import FOOTBALL_INFOBOX_TEMPLATES, PARAMETER_RENAMES, PARAMETERS_TO_DELETE
from template_params import delete_parameters, edit_templates, rename_parameters
from wikitext import Change, StructuralParseError


def edit(doc):
    return edit_templates(doc, FOOTBALL_INFOBOX_TEMPLATES, PARAMETER_RENAMES, PARAMETERS_TO_DELETE)


def test_rename_single_parameter():
    text, changes = edit('{{Futbolcu bilgi kutusu|adı = Ali}}')
    assert text == '{{Futbolcu bilgi kutusu|ad = Ali}}'
    assert changes == [Change('renamed', 'adı', 'ad')]


def test_rename_keeps_whitespace_layout():
    doc = '{{Futbolcu bilgi kutusu\n| adı        = Ali\n| doğduğuyer = İstanbul\n}}'
    text, changes = edit(doc)
    assert text == '{{Futbolcu bilgi kutusu\n| ad        = Ali\n| doğumyeri = İstanbul\n}}'
    assert [str(c) for c in changes] == ['adı → ad', 'doğduğuyer → doğumyeri']


def test_rename_is_case_insensitive_on_key():
    text, _ = rename_parameters('{{X|Adı=Ali}}', {'adı': 'ad'})
    assert text == '{{X|ad=Ali}}'


def test_rename_needs_whole_key():
    text, changes = rename_parameters('{{X|boyu = 1.80}}', {'boy': 'boyu'})
    assert text == '{{X|boyu = 1.80}}'
    assert changes == []


def test_rename_skips_nested_template_parameters():
    doc = '{{Futbolcu bilgi kutusu|ad=Ali|kulüp={{Kulüp|boy=x}}}}'
    text, changes = rename_parameters(doc, {'boy': 'boyu'})
    assert text == doc
    assert changes == []


def test_delete_simple_value():
    text, changes = delete_parameters('{{Futbolcu bilgi kutusu|ad=Ali|kilo=70|boyu=1.80}}', ['kilo'])
    assert text == '{{Futbolcu bilgi kutusu|ad=Ali|boyu=1.80}}'
    assert changes == [Change('deleted', 'kilo')]


def test_delete_empty_value():
    text, _ = delete_parameters('{{X|kilo=|ad=Ali}}', ['kilo'])
    assert text == '{{X|ad=Ali}}'


def test_delete_last_parameter_on_its_own_line():
    text, _ = delete_parameters('{{X\n| ad = Ali\n| kilo = 70\n}}', ['kilo'])
    assert text == '{{X\n| ad = Ali\n}}'


def test_delete_value_with_nested_template():
    text, changes = delete_parameters('{{X|kilo={{convert|70|kg}}|ad=Ali}}', ['kilo'])
    assert text == '{{X|ad=Ali}}'
    assert changes == [Change('deleted', 'kilo')]


def test_delete_reports_each_name_once():
    text, changes = delete_parameters('{{X|kilo=1|kilo=2}}', ['kilo'])
    assert text == '{{X}}'
    assert changes == [Change('deleted', 'kilo')]


def test_commented_infobox_is_left_alone():
    doc = '<!-- {{Futbolcu bilgi kutusu|adı=X}} -->'
    assert edit(doc) == (doc, [])


def test_commented_parameter_inside_live_infobox_is_kept():
    doc = '{{Futbolcu bilgi kutusu\n| ad = Ali <!-- | kilo = 70 -->\n| boyu = 1.80\n}}\nMetin.'
    assert edit(doc) == (doc, [])


def test_commented_old_key_inside_live_infobox_is_not_renamed():
    doc = '{{Futbolcu bilgi kutusu\n| ad = Ali <!-- eski: |adı = Ali -->\n}}'
    assert edit(doc) == (doc, [])


def test_rename_with_braces_inside_comment():
    text, changes = edit('{{Futbolcu bilgi kutusu|adı=Ali <!-- {{ --> }}\nMetin.')
    assert text == '{{Futbolcu bilgi kutusu|ad=Ali <!-- {{ --> }}\nMetin.'
    assert changes == [Change('renamed', 'adı', 'ad')]


def test_delete_value_ending_in_comment_with_pipe():
    text, changes = delete_parameters('{{X\n| kilo = 70 <!-- kg | lb -->\n| ad = Ali\n}}', ['kilo'])
    assert text == '{{X\n| ad = Ali\n}}'
    assert changes == [Change('deleted', 'kilo')]


def test_unterminated_infobox_raises():
    with pytest.raises(StructuralParseError):
        edit('{{Futbolcu bilgi kutusu|adı = Ali\nMetin.')

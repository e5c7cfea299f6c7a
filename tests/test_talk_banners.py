"""WikiProject banner mapping tests."""

from __future__ import annotations

from talk_banners import (
    has_wikiproject_banner,
    is_wikiproject_template,
    make_banners,
    map_wikiprojects,
    prepend_banners,
)


def test_is_wikiproject_template():
    assert is_wikiproject_template('Template:WikiProject Biography')
    assert is_wikiproject_template('WPBIO')
    assert is_wikiproject_template('WPFootball')
    assert not is_wikiproject_template('Talk header')


def test_map_wikiprojects_exact_and_deduplicated():
    templates = ['WikiProject Biography', 'WikiProject Football', 'WPBIO', 'Talk header']
    assert map_wikiprojects(templates) == ['Biyografi', 'Futbol']


def test_map_wikiprojects_by_subject():
    assert map_wikiprojects(['Template:WikiProject Physics/Taskforces']) == ['Fizik']


def test_make_banners():
    assert make_banners(['Futbol']) == ['{{Vikiproje|Proje=Futbol|sınıf=|önem=}}']


def test_has_wikiproject_banner_ignores_comments():
    assert has_wikiproject_banner('{{vikiproje|Proje=Futbol}}')
    assert not has_wikiproject_banner('<!-- {{Vikiproje}} -->\nTartışma')


def test_prepend_banners():
    assert prepend_banners('Eski tartışma', ['{{A}}', '{{B}}']) == '{{A}}\n{{B}}\n\nEski tartışma'
    assert prepend_banners('', ['{{A}}']) == '{{A}}'

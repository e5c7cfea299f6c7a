"""Policy decisions and the mutations built on them."""

from __future__ import annotations

import pytest

from mutation_policy import (
    Decision,
    PageMetadata,
    category_retarget_policy,
    has_references,
    infobox_rename_policy,
    is_draft,
    matches_domain,
    remove_unsourced_templates,
    retarget_category,
    unsourced_removal_policy,
    update_infobox,
)
from wikitext import Change, Reason, StructuralParseError

ARTICLE = PageMetadata(title='X')


class TestUnsourcedRemoval:
    def test_sourced_article_loses_template(self):
        doc = '{{Kaynaksız}}\nSome text with <ref>cite</ref>.'
        decision = unsourced_removal_policy(doc, ARTICLE)
        assert decision.decision is Decision.APPLY
        assert decision.reason is Reason.HAS_SOURCES

        text, report = remove_unsourced_templates(doc, ARTICLE)
        assert text == 'Some text with <ref>cite</ref>.'
        assert report.applied
        assert report.changes == (Change('removed', 'Kaynaksız'),)

    def test_article_without_refs_keeps_template(self):
        doc = '{{Kaynaksız}}\nSome text, no refs.'
        decision = unsourced_removal_policy(doc, ARTICLE)
        assert decision.decision is Decision.SKIP
        assert decision.reason is Reason.NO_SOURCES

        text, report = remove_unsourced_templates(doc, ARTICLE)
        assert text == doc
        assert not report.applied
        assert report.reason is Reason.NO_SOURCES

    def test_draft_title(self):
        text, report = remove_unsourced_templates('{{Kaynaksız}}\nMetin.', PageMetadata(title='Taslak:X'))
        assert text == 'Metin.'
        assert report.reason is Reason.DRAFT

    def test_stub_template_marks_draft(self):
        text, report = remove_unsourced_templates('{{Kaynaksız}}\nMetin.\n{{Fizik-taslak}}', ARTICLE)
        assert text == 'Metin.\n{{Fizik-taslak}}'
        assert report.reason is Reason.DRAFT

    def test_commented_ref_is_not_a_source(self):
        doc = '{{Kaynaksız}}\nMetin <!-- <ref>x</ref> -->.'
        assert unsourced_removal_policy(doc, ARTICLE).reason is Reason.NO_SOURCES

    def test_self_closing_ref_is_a_source(self):
        assert has_references('Metin.<ref name="a"/>')

    def test_commented_template_is_not_found(self):
        doc = '<!-- {{Kaynaksız}} -->\nMetin.<ref>x</ref>'
        text, report = remove_unsourced_templates(doc, ARTICLE)
        assert text == doc
        assert report.reason is Reason.NOT_FOUND

    def test_every_alias_is_removed(self):
        doc = '{{Kaynaksız}}\n{{Unreferenced|date=2020}}\nMetin<ref>a</ref>'
        text, report = remove_unsourced_templates(doc, ARTICLE)
        assert text == 'Metin<ref>a</ref>'
        assert [c.target for c in report.changes] == ['Kaynaksız', 'Unreferenced']

    def test_comment_with_closing_braces_inside_template(self):
        doc = '{{Kaynaksız|not=<!-- eski }} -->}}\nMetin <ref>a</ref>.'
        text, report = remove_unsourced_templates(doc, ARTICLE)
        assert text == 'Metin <ref>a</ref>.'
        assert report.changes == (Change('removed', 'Kaynaksız'),)

    def test_unterminated_template(self):
        doc = '{{Kaynaksız|tarih=2020\nMetin.<ref>x</ref>'
        decision = unsourced_removal_policy(doc, ARTICLE)
        assert decision.decision is Decision.REJECT
        assert decision.reason is Reason.UNTERMINATED
        with pytest.raises(StructuralParseError):
            remove_unsourced_templates(doc, ARTICLE)

    def test_policy_is_deterministic(self):
        doc = '{{Kaynaksız}}\nMetin.<ref>x</ref>'
        assert unsourced_removal_policy(doc, ARTICLE) == unsourced_removal_policy(doc, ARTICLE)


def test_is_draft():
    assert is_draft('Draft:X', 'Metin.')
    assert is_draft('X', '{{Bio-stub}}')
    assert not is_draft('X', '<!-- {{Taslak}} -->')


class TestInfobox:
    def test_rename(self):
        text, report = update_infobox('{{Futbolcu bilgi kutusu|adı = Ali}}', ARTICLE)
        assert text == '{{Futbolcu bilgi kutusu|ad = Ali}}'
        assert report.applied
        assert report.reason is Reason.APPROVED
        assert report.changes == (Change('renamed', 'adı', 'ad'),)

    def test_up_to_date_infobox(self):
        doc = '{{Futbolcu bilgi kutusu|ad = Ali}}'
        decision = infobox_rename_policy(doc, ARTICLE)
        assert decision.reason is Reason.NO_CHANGE
        assert update_infobox(doc, ARTICLE)[0] == doc

    def test_no_infobox(self):
        _, report = update_infobox('Metin.', ARTICLE)
        assert report.reason is Reason.NOT_FOUND
        assert report.decision is Decision.SKIP

    def test_comment_with_braces_inside_infobox(self):
        text, report = update_infobox('{{Futbolcu bilgi kutusu|adı=Ali <!-- {{ --> }}\nMetin.', ARTICLE)
        assert text == '{{Futbolcu bilgi kutusu|ad=Ali <!-- {{ --> }}\nMetin.'
        assert report.applied

    def test_commented_parameter_inside_infobox(self):
        doc = '{{Futbolcu bilgi kutusu\n| ad = Ali <!-- | kilo = 70 -->\n| boyu = 1.80\n}}\nMetin.'
        text, report = update_infobox(doc, ARTICLE)
        assert text == doc
        assert report.reason is Reason.NO_CHANGE


class TestCategoryRetarget:
    doc = 'Metin.\n[[Kategori:Bilgi kutusu bulunmayan kişiler]]'

    def test_footballer_is_retargeted(self):
        metadata = PageMetadata(title='X', categories=('Türk futbolcular', 'Yaşayan insanlar'))
        text, report = retarget_category(self.doc, metadata)
        assert text == 'Metin.\n[[Kategori:Bilgi kutusu bulunmayan futbolcular]]'
        assert report.applied

    def test_other_people_are_left_alone(self):
        metadata = PageMetadata(title='X', categories=('Türk şarkıcılar',))
        text, report = retarget_category(self.doc, metadata)
        assert text == self.doc
        assert report.reason is Reason.POLICY_DECLINED

    def test_source_category_missing(self):
        metadata = PageMetadata(title='X', categories=('Türk futbolcular',))
        assert category_retarget_policy('Metin.', metadata).reason is Reason.NOT_FOUND


def test_matches_domain_is_case_insensitive():
    assert matches_domain(['Galatasaray SK futbolcuları'])
    assert matches_domain(['Futbolcular'])
    assert not matches_domain(['Türk şarkıcılar'])

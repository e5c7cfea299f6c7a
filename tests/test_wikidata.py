"""Wikidata sitelink lookups with the HTTP session mocked out."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import requests

import wikidata


def response(entities):
    mock = MagicMock()
    mock.json.return_value = {'entities': entities}
    return mock


@patch('wikidata.time.sleep')
@patch('wikidata.session')
def test_get_sitelinks_maps_titles(mock_session, mock_sleep):
    mock_session.get.return_value = response({
        'Q1': {'sitelinks': {'trwiki': {'title': 'Hakan Şükür'}, 'enwiki': {'title': 'Hakan Şükür'}}},
        'Q2': {'sitelinks': {'trwiki': {'title': 'Arda Turan'}}},
        '-1': {'missing': ''},
    })

    result = wikidata.get_sitelinks(['Hakan Şükür', 'Arda Turan', 'Yok'], 'trwiki', 'enwiki')

    assert result == {'Hakan Şükür': ('Q1', 'Hakan Şükür'), 'Arda Turan': ('Q2', None)}
    params = mock_session.get.call_args.kwargs['params']
    assert params['titles'] == 'Hakan Şükür|Arda Turan|Yok'
    assert params['sitefilter'] == 'trwiki|enwiki'
    mock_sleep.assert_not_called()


@patch('wikidata.time.sleep')
@patch('wikidata.session')
def test_get_sitelinks_batches_and_waits(mock_session, mock_sleep):
    mock_session.get.return_value = response({})
    wikidata.get_sitelinks([f'Madde {n}' for n in range(60)], 'enwiki', 'trwiki')
    assert mock_session.get.call_count == 2
    mock_sleep.assert_called_once_with(wikidata.WIKIDATA_BATCH_DELAY)


@patch('wikidata.pywikibot.error')
@patch('wikidata.session')
def test_failed_request_is_logged_and_skipped(mock_session, mock_error):
    mock_session.get.side_effect = requests.ConnectionError('down')
    assert wikidata.get_sitelinks(['Ankara'], 'trwiki', 'enwiki') == {}
    mock_error.assert_called_once()


@patch('wikidata.session')
def test_get_sitelink(mock_session):
    mock_session.get.return_value = response({
        'Q3': {'sitelinks': {'trwiki': {'title': 'Kategori:Türk futbolcular'},
                             'enwiki': {'title': 'Category:Turkish footballers'}}},
    })
    assert wikidata.get_sitelink('Kategori:Türk futbolcular', 'trwiki', 'enwiki') == 'Category:Turkish footballers'


def test_strip_namespace():
    assert wikidata.strip_namespace('Category:Turkish footballers') == 'Turkish footballers'
    assert wikidata.strip_namespace('Ankara') == 'Ankara'

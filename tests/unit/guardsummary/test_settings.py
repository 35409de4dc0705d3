from unittest.mock import MagicMock
from unittest.mock import patch

from guardsummary.settings import get_default_labels
from guardsummary.settings import get_default_show_summary


def _settings(values: dict) -> MagicMock:
    mock_settings = MagicMock()
    mock_settings.get.side_effect = lambda key, default=None: values.get(key, default)
    return mock_settings


def test_default_labels_when_unset():
    with patch('guardsummary.settings.settings', _settings({})):
        assert get_default_labels() == ('rules', 'data')


def test_labels_from_settings():
    values = {'RULES_FILE': 'rules.guard', 'DATA_FILE': 'template.yaml'}
    with patch('guardsummary.settings.settings', _settings(values)):
        assert get_default_labels() == ('rules.guard', 'template.yaml')


def test_default_show_summary_when_unset():
    with patch('guardsummary.settings.settings', _settings({})):
        assert get_default_show_summary() == ['fail']


def test_show_summary_from_string():
    values = {'SHOW_SUMMARY': 'pass,fail'}
    with patch('guardsummary.settings.settings', _settings(values)):
        assert get_default_show_summary() == ['pass,fail']


def test_show_summary_from_list():
    values = {'SHOW_SUMMARY': ['skip', 'fail']}
    with patch('guardsummary.settings.settings', _settings(values)):
        assert get_default_show_summary() == ['skip', 'fail']

"""Tests for the Transifex credential check."""

from unittest.mock import Mock, patch

import requests

from services.transifex_api import TransifexAPI

API_URL = 'https://transifex.test/api/2/projects/'


@patch('requests.get')
def test_verify_success(mock_get):
    mock_get.return_value = Mock(status_code=200)

    api = TransifexAPI('me', 'secret', api_url=API_URL, timeout=5)

    assert api.verify_credentials() is True
    args, kwargs = mock_get.call_args
    assert args[0] == API_URL
    assert kwargs['auth'] == ('me', 'secret')
    assert kwargs['timeout'] == 5


@patch('requests.get')
def test_verify_rejected(mock_get):
    mock_get.return_value = Mock(status_code=401)
    assert TransifexAPI('me', 'wrong', api_url=API_URL).verify_credentials() is False


@patch('requests.get')
def test_verify_server_error(mock_get):
    mock_get.return_value = Mock(status_code=503)
    assert TransifexAPI('me', 'secret', api_url=API_URL).verify_credentials() is False


@patch('requests.get')
def test_verify_timeout(mock_get):
    mock_get.side_effect = requests.Timeout('Request timed out')
    assert TransifexAPI('me', 'secret', api_url=API_URL).verify_credentials() is False


@patch('requests.get')
def test_verify_empty_credentials_makes_no_request(mock_get):
    assert TransifexAPI('', 'secret').verify_credentials() is False
    assert TransifexAPI('me', None).verify_credentials() is False
    mock_get.assert_not_called()

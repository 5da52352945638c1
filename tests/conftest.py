"""
Shared fixtures for the Assinafy client tests.

Requests never leave the process: resources get a Mock session whose
``request`` returns real ``requests.Response`` objects built here.
"""

import json
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

BASE_URL = 'https://api.test.assinafy.com.br/v1/'

REASONS = {
    200: 'OK',
    204: 'No Content',
    400: 'Bad Request',
    401: 'Unauthorized',
    404: 'Not Found',
    422: 'Unprocessable Entity',
    500: 'Internal Server Error',
}


def make_response(body=None, status_code=200, content=None, method='GET', url=BASE_URL):
    """Build a real Response with a JSON body or raw content."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = REASONS.get(status_code, '')
    response.url = url
    response.request = requests.Request(method, url).prepare()
    if content is not None:
        response._content = content
    elif body is not None:
        response._content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'
    else:
        response._content = b''
    return response


def envelope(data, status=200, message=None):
    body = {'status': status, 'data': data}
    if message:
        body['message'] = message
    return body


@pytest.fixture
def session():
    """A Mock session that answers every call with an empty success envelope."""
    mock_session = Mock(spec=requests.Session)
    mock_session.headers = {}
    mock_session.request.return_value = make_response(envelope({'id': '123'}))
    return mock_session


def called_url(mock_session):
    """URL of the last request sent through the mock session."""
    args, _ = mock_session.request.call_args
    return args[1]


def called_method(mock_session):
    args, _ = mock_session.request.call_args
    return args[0]

"""Tests for the invoke task collection."""

import os
from unittest import mock

import pytest
import requests
from invoke import Context

from token_creator.build.api_client import APIResponse
from token_creator.build.tasks import serve as serve_tasks
from token_creator.build.tasks import token as token_tasks
from token_creator.tasks import namespace


def test_namespace_exposes_tasks():
    assert set(namespace.task_names) >= {'token', 'serve', 'health'}


def test_token_task_forwards_options():
    with mock.patch.object(token_tasks, 'token_cli_main', return_value=0) as cli_main:
        token_tasks.token(Context(), json=True, debug=True, env_file='staging.env')

    cli_main.assert_called_once_with(['--json', '--debug', '--env-file', 'staging.env'])


def test_token_task_exits_on_failure():
    with mock.patch.object(token_tasks, 'token_cli_main', return_value=1):
        with pytest.raises(SystemExit) as exc_info:
            token_tasks.token(Context())

    assert exc_info.value.code == 1


def test_serve_task_sets_address():
    with mock.patch.dict(os.environ, {}), \
            mock.patch.object(serve_tasks, 'server_main', return_value=0) as server_main:
        serve_tasks.serve(Context(), port=8080, host='0.0.0.0')

        assert os.environ['PORT'] == '8080'
        assert os.environ['HOST'] == '0.0.0.0'

    server_main.assert_called_once_with([])


def test_health_task_reports_server(capsys):
    response = APIResponse(
        status_code=200,
        data={'status': 'OK', 'timestamp': '2024-01-01T00:00:00.000Z',
              'firebase': {'projectId': 'demo-project', 'authDomain': 'demo-project.firebaseapp.com'}},
        headers={'content-type': 'application/json'},
    )
    with mock.patch.object(serve_tasks.RemoteAPITestClient, 'health', return_value=response):
        assert serve_tasks.health(Context(), url='http://localhost:3000') is True

    out = capsys.readouterr().out
    assert '✅ Server at http://localhost:3000 is healthy' in out
    assert 'Project: demo-project' in out


def test_health_task_exits_when_unreachable(capsys):
    with mock.patch.object(serve_tasks.RemoteAPITestClient, 'health',
                           side_effect=requests.ConnectionError('refused')):
        with pytest.raises(SystemExit) as exc_info:
            serve_tasks.health(Context(), url='http://localhost:3999')

    assert exc_info.value.code == 1
    assert 'not reachable' in capsys.readouterr().err


def test_health_task_exits_on_non_json_response(capsys):
    response = APIResponse(
        status_code=200,
        data='<html>some other server</html>',
        headers={'content-type': 'text/html'},
    )
    with mock.patch.object(serve_tasks.RemoteAPITestClient, 'health', return_value=response):
        with pytest.raises(SystemExit) as exc_info:
            serve_tasks.health(Context(), url='http://localhost:3000')

    assert exc_info.value.code == 1
    assert 'did not return JSON' in capsys.readouterr().err

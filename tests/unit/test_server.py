"""Tests for the firebase-token-server entry point."""

import os
from unittest import mock

import pytest

from token_creator.run.api import server
from token_creator.run.config.logging import resolve_log_level


@pytest.fixture
def quiet_bootstrap():
    with mock.patch.object(server, 'bootstrap_logging'):
        yield


@pytest.fixture
def exported_server_env(monkeypatch, server_env):
    for name, value in server_env.items():
        monkeypatch.setenv(name, value)
    monkeypatch.delenv('PORT', raising=False)
    monkeypatch.delenv('HOST', raising=False)
    return server_env


@pytest.fixture
def env_file(tmp_path):
    return str(tmp_path / 'no.env')


def test_banner_lists_endpoints(server_config, capsys):
    server.print_banner(server_config)

    out = capsys.readouterr().out
    assert '🌐 Server running at: http://localhost:3000' in out
    assert '📦 Firebase Project: demo-project' in out
    assert '🏠 Auth Domain: demo-project.firebaseapp.com' in out
    assert 'http://localhost:3000/health' in out
    assert 'http://localhost:3000/api/config' in out


def test_main_runs_uvicorn_with_configured_address(quiet_bootstrap, exported_server_env, env_file,
                                                    monkeypatch, capsys):
    monkeypatch.setenv('PORT', '8080')

    with mock.patch.object(server.uvicorn, 'run') as run:
        exit_code = server.main(['--env-file', env_file])

    assert exit_code == 0
    run.assert_called_once()
    _, kwargs = run.call_args
    assert kwargs['host'] == '127.0.0.1'
    assert kwargs['port'] == 8080
    assert '🌐 Server running at: http://localhost:8080' in capsys.readouterr().out


def test_main_exits_1_on_missing_variables(quiet_bootstrap, monkeypatch, server_env, env_file, capsys):
    for name in server_env:
        monkeypatch.delenv(name, raising=False)

    with mock.patch.object(server.uvicorn, 'run') as run:
        exit_code = server.main(['--env-file', env_file])

    assert exit_code == 1
    run.assert_not_called()
    err = capsys.readouterr().err
    for name in server_env:
        assert f'   - {name}' in err


def test_main_exits_1_on_invalid_port(quiet_bootstrap, exported_server_env, env_file, monkeypatch, capsys):
    monkeypatch.setenv('PORT', 'not-a-port')

    with mock.patch.object(server.uvicorn, 'run') as run:
        exit_code = server.main(['--env-file', env_file])

    assert exit_code == 1
    run.assert_not_called()
    assert 'PORT' in capsys.readouterr().err


def test_log_level_from_env_file_applies(exported_server_env, tmp_path):
    env_file = tmp_path / '.env'
    env_file.write_text('LOG_LEVEL=DEBUG\n')
    levels_at_bootstrap = []

    def record_level(name):
        levels_at_bootstrap.append(resolve_log_level())

    with mock.patch.dict(os.environ), \
            mock.patch.object(server, 'bootstrap_logging', side_effect=record_level), \
            mock.patch.object(server.uvicorn, 'run'):
        os.environ.pop('LOG_LEVEL', None)
        exit_code = server.main(['--env-file', str(env_file)])

    assert exit_code == 0
    assert levels_at_bootstrap == ['DEBUG']

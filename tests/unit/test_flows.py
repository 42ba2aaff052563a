"""Tests for the regular and admin token flows."""

import jwt

from token_creator.run.auth.flows import (
    ADMIN_USER_FLOW,
    REGULAR_USER_FLOW,
    IdTokenResult,
    create_id_token,
)

NOW_MS = 1700000000123


def clock():
    return NOW_MS


def test_regular_flow_shape():
    request = REGULAR_USER_FLOW.build_request(NOW_MS)

    assert request.user_id == 'test-user-1700000000123'
    assert request.claims == {'admin': False, 'email': 'test@example.com', 'name': 'Test User'}


def test_admin_flow_shape():
    request = ADMIN_USER_FLOW.build_request(NOW_MS)

    assert request.user_id == 'admin-user-1700000000123'
    assert request.claims == {'admin': True, 'email': 'admin@example.com', 'name': 'Admin User'}


def test_build_request_copies_claims():
    request = REGULAR_USER_FLOW.build_request(NOW_MS)
    request.claims['admin'] = True

    assert REGULAR_USER_FLOW.claims['admin'] is False


def test_create_id_token_mints_then_exchanges(fake_minter, fake_exchanger):
    result = create_id_token(REGULAR_USER_FLOW, fake_minter, fake_exchanger, clock=clock)

    assert result is not None
    assert result.user_id == 'test-user-1700000000123'
    assert result.claims == REGULAR_USER_FLOW.claims
    assert fake_minter.calls == [('test-user-1700000000123', REGULAR_USER_FLOW.claims)]
    assert fake_exchanger.calls == ['custom-test-user-1700000000123']
    assert result.id_token.startswith('id-token-for-custom-test-user-')


def test_mint_failure_skips_exchange(make_minter, fake_exchanger):
    minter = make_minter(fail_prefixes=['test-user-'])

    assert create_id_token(REGULAR_USER_FLOW, minter, fake_exchanger, clock=clock) is None
    assert fake_exchanger.calls == []


def test_exchange_failure_yields_none(fake_minter, make_exchanger):
    exchanger = make_exchanger(fail_tokens=['custom-admin-user-1700000000123'])

    assert create_id_token(ADMIN_USER_FLOW, fake_minter, exchanger, clock=clock) is None


def test_result_hash_and_dict():
    result = IdTokenResult(id_token='abc', user_id='test-user-1', claims={'admin': False})

    assert len(result.token_hash) == 16
    assert result.to_dict() == {
        'user_id': 'test-user-1',
        'claims': {'admin': False},
        'hash': result.token_hash,
        'token': 'abc',
    }


def test_decoded_claims_skips_signature_verification():
    token = jwt.encode({'user_id': 'test-user-1', 'admin': True}, 'some-other-secret', algorithm='HS256')
    result = IdTokenResult(id_token=token, user_id='test-user-1')

    assert result.decoded_claims() == {'user_id': 'test-user-1', 'admin': True}

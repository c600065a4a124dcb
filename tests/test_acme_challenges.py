"""Tests for cf_dns01.acme_challenges."""

from unittest.mock import MagicMock

import josepy
import pytest
from acme import challenges

from cf_dns01.acme_challenges import preparation_from_challenge, preparations_from_order
from cf_dns01.models import ChallengePreparation


def _make_mock_dns01_challenge(validation="fake-validation"):
    """Create a mock DNS-01 challenge body."""
    chall = MagicMock()
    chall.chall = MagicMock(spec=challenges.DNS01)
    chall.response_and_validation.return_value = (MagicMock(), validation)
    return chall


def _make_mock_authz(domain, *challenge_bodies):
    """Create a mock AuthorizationResource."""
    authz = MagicMock()
    authz.body.identifier.value = domain
    authz.body.challenges = challenge_bodies
    return authz


def _http01_challenge():
    chall = MagicMock()
    chall.chall = MagicMock(spec=challenges.HTTP01)
    return chall


def test_preparation_from_challenge_uses_account_key():
    key = MagicMock(spec=josepy.JWKRSA)
    challb = _make_mock_dns01_challenge("validation-123")

    prep = preparation_from_challenge("example.com", challb, key)

    assert prep == ChallengePreparation(target="_acme-challenge.example.com", value="validation-123")
    challb.response_and_validation.assert_called_once_with(key)


def test_preparation_from_challenge_wildcard_strips_star_prefix():
    prep = preparation_from_challenge("*.example.com", _make_mock_dns01_challenge(), MagicMock(spec=josepy.JWKRSA))

    assert prep.target == "_acme-challenge.example.com"


def test_preparations_from_order_picks_dns01_challenges():
    key = MagicMock(spec=josepy.JWKRSA)
    order = MagicMock()
    order.authorizations = [
        _make_mock_authz("example.com", _http01_challenge(), _make_mock_dns01_challenge("v-apex")),
        _make_mock_authz("www.example.com", _make_mock_dns01_challenge("v-www")),
    ]

    preps = preparations_from_order(order, key)

    assert preps == [
        ChallengePreparation(target="_acme-challenge.example.com", value="v-apex"),
        ChallengePreparation(target="_acme-challenge.www.example.com", value="v-www"),
    ]


def test_preparations_from_order_raises_when_no_dns01_challenge():
    order = MagicMock()
    order.authorizations = [_make_mock_authz("example.com", _http01_challenge())]

    with pytest.raises(ValueError, match="No DNS-01 challenge found for domain example.com"):
        preparations_from_order(order, MagicMock(spec=josepy.JWKRSA))

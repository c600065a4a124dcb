"""Turn DNS-01 challenges from an ``acme`` order into solver preparations."""

from __future__ import annotations

import josepy
from acme import challenges, messages

from cf_dns01.models import ChallengePreparation


def preparation_from_challenge(
    domain: str,
    challb: messages.ChallengeBody,
    account_key: josepy.JWK,
) -> ChallengePreparation:
    """Build the preparation for one DNS-01 challenge of ``domain``."""
    # RFC 8555 §8.4: *.example.com is validated at _acme-challenge.example.com
    base_domain = domain.removeprefix("*.")
    _response, validation = challb.response_and_validation(account_key)
    return ChallengePreparation(target=f"_acme-challenge.{base_domain}", value=validation)


def preparations_from_order(
    order_resource: messages.OrderResource,
    account_key: josepy.JWK,
) -> list[ChallengePreparation]:
    """Pick the DNS-01 challenge of every authorization in the order."""
    result: list[ChallengePreparation] = []
    for authz in order_resource.authorizations:
        domain = authz.body.identifier.value
        for challb in authz.body.challenges:
            if isinstance(challb.chall, challenges.DNS01):
                result.append(preparation_from_challenge(domain, challb, account_key))
                break
        else:
            raise ValueError(f"No DNS-01 challenge found for domain {domain}")
    return result

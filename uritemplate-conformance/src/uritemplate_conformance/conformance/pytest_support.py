"""pytest glue for `DynamicTestRegistry`.

Typical use from a test module:

    REGISTRY = DynamicTestRegistry.from_specifications(specs)

    def pytest_generate_tests(metafunc):
        parametrize_identities(metafunc, REGISTRY)

    def test_expansion(identity):
        assert_outcome(REGISTRY.run(identity, expand))

Registry errors raised while building `REGISTRY` surface as a collection
error for the module, so a broken vector file yields no tests and a single
diagnostic.
"""

from __future__ import annotations

from typing import Any

import pytest

from uritemplate_conformance.conformance.outcome import Outcome
from uritemplate_conformance.conformance.registry import DynamicTestRegistry

DEFAULT_ARGNAME = "identity"


def parametrize_identities(
    metafunc: Any,
    registry: DynamicTestRegistry,
    *,
    argname: str = DEFAULT_ARGNAME,
) -> bool:
    """Register one test case per identity, using the identity as the test id.

    Returns False when the test function does not request `argname`.
    """

    if argname not in metafunc.fixturenames:
        return False
    identities = list(registry.list_identities())
    metafunc.parametrize(argname, identities, ids=identities)
    return True


def assert_outcome(outcome: Outcome) -> None:
    if not outcome.passed:
        pytest.fail(outcome.format(), pytrace=False)

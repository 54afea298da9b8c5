"""Dynamic test registry.

Bridges a data-driven list of `TestSpecification`s and a test runner that
expects a fixed, enumerable set of named zero-argument test entries. The
registry is filled exactly once by `load()` and is read-only afterwards, so
`resolve()`/`run()` may be called from several threads without locking.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from uritemplate_conformance.conformance.identity import synthesize_identity
from uritemplate_conformance.conformance.outcome import Error, Fail, Outcome, Pass
from uritemplate_conformance.spec.vectors import TestSpecification

logger = logging.getLogger(__name__)

Expander = Callable[[str, Mapping[str, Any]], str]
Extractor = Callable[[str, str], Optional[Mapping[str, Any]]]

STATE_LOADING = "loading"
STATE_FROZEN = "frozen"


class RegistryError(RuntimeError):
    pass


class EmptyInputError(RegistryError):
    pass


class DuplicateIdentifierError(RegistryError):
    pass


class AlreadyLoadedError(RegistryError):
    pass


class UnknownIdentityError(RegistryError):
    pass


class NotLoadedError(UnknownIdentityError):
    pass


class DynamicTestRegistry:
    def __init__(self) -> None:
        self._state = STATE_LOADING
        self._identities: Tuple[str, ...] = ()
        self._by_identity: Mapping[str, TestSpecification] = MappingProxyType({})

    @classmethod
    def from_specifications(
        cls, specifications: Sequence[TestSpecification]
    ) -> "DynamicTestRegistry":
        return cls().load(specifications)

    @property
    def state(self) -> str:
        return self._state

    @property
    def frozen(self) -> bool:
        return self._state == STATE_FROZEN

    def load(self, specifications: Sequence[TestSpecification]) -> "DynamicTestRegistry":
        """Register every specification and freeze the registry.

        Nothing is registered unless the whole sequence is accepted.
        """

        if self._state != STATE_LOADING:
            raise AlreadyLoadedError("registry is already loaded; load() may only be called once")

        specs = list(specifications)
        if not specs:
            raise EmptyInputError("no test specifications to load")

        by_identity: Dict[str, TestSpecification] = {}
        order: list[str] = []
        for idx, spec in enumerate(specs):
            if not isinstance(spec, TestSpecification):
                raise TypeError(f"specifications[{idx}] must be a TestSpecification")
            identity = synthesize_identity(spec.identifier)
            existing = by_identity.get(identity)
            if existing is not None:
                logger.error(
                    "identity collision: %r and %r both map to %s",
                    existing.identifier,
                    spec.identifier,
                    identity,
                )
                raise DuplicateIdentifierError(
                    f"duplicate test identity {identity!r}: "
                    f"{existing.identifier!r} and {spec.identifier!r}"
                )
            by_identity[identity] = spec
            order.append(identity)

        self._identities = tuple(order)
        self._by_identity = MappingProxyType(by_identity)
        self._state = STATE_FROZEN
        logger.info("registry frozen with %d test identities", len(order))
        return self

    def list_identities(self) -> Tuple[str, ...]:
        self._require_frozen()
        return self._identities

    def resolve(self, identity: str) -> TestSpecification:
        self._require_frozen()
        spec = self._by_identity.get(identity)
        if spec is None:
            raise UnknownIdentityError(f"unknown test identity: {identity!r}")
        return spec

    def run(self, identity: str, expand: Expander) -> Outcome:
        """Expand the bound specification and compare with its expected values.

        Exceptions from `expand` are reported as `Error`; registry errors
        (unknown identity, not loaded) propagate.
        """

        spec = self.resolve(identity)
        try:
            actual = expand(spec.template, spec.bindings_copy())
        except Exception as e:
            logger.warning("%s: expander raised %s", identity, type(e).__name__)
            return Error(identity=identity, cause=e, description=spec.description)

        if spec.accepts(actual):
            return Pass(identity=identity)
        return Fail(
            identity=identity,
            actual=actual,
            expected=spec.expected,
            description=spec.description,
        )

    def run_extraction(self, identity: str, extract: Extractor, expand: Expander) -> Outcome:
        """Extract variables from every expected URI and expand them back.

        A URI passes when `extract` matches it and re-expanding the extracted
        variables yields one of the expected URIs.
        """

        spec = self.resolve(identity)
        for uri in spec.expected:
            try:
                variables = extract(spec.template, uri)
                if variables is None:
                    return Fail(
                        identity=identity,
                        actual=None,
                        expected=(uri,),
                        description=spec.description,
                        reason="extraction did not match",
                    )
                actual = expand(spec.template, dict(variables))
            except Exception as e:
                logger.warning("%s: extraction of %r raised %s", identity, uri, type(e).__name__)
                return Error(identity=identity, cause=e, description=spec.description)

            if not spec.accepts(actual):
                return Fail(
                    identity=identity,
                    actual=actual,
                    expected=spec.expected,
                    description=spec.description,
                    reason=f"round trip of {uri!r} via {dict(variables)!r}",
                )
        return Pass(identity=identity)

    def _require_frozen(self) -> None:
        if self._state != STATE_FROZEN:
            raise NotLoadedError("registry has no test identities until load() completes")

    def __bool__(self) -> bool:
        return self.frozen

    def __len__(self) -> int:
        return len(self.list_identities())

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_identities())

    def __contains__(self, identity: object) -> bool:
        return self.frozen and identity in self._by_identity

"""Tests for the explicit instance registry."""

import logging

import pytest

from dokind import (
    Applicative,
    CapabilityNotFound,
    Either,
    Eq,
    ForEither,
    ForIO,
    ForIor,
    ForOption,
    ForState,
    Functor,
    IO,
    Ior,
    Monad,
    MonadError,
    Option,
    Some,
    State,
)
from dokind.registry import Registry
from dokind.std import NATURAL_EQ


def test_resolve_exact_pair(registry: Registry) -> None:
    assert registry.resolve(MonadError, ForOption) is Option.monad_error()
    assert registry.resolve(Monad, ForState) is State.monad()


def test_resolve_accepts_stronger_capability_for_same_witness(registry: Registry) -> None:
    """A MonadError instance satisfies Functor, Applicative and Monad requests."""

    functor = registry.resolve(Functor, ForIO)
    applicative = registry.resolve(Applicative, ForIO)
    monad = registry.resolve(Monad, ForIO)

    assert functor is applicative is monad is IO.monad_error()


def test_resolve_never_searches_other_witnesses(registry: Registry) -> None:
    """Ior is registered as a Functor only; no Monad is borrowed from elsewhere."""

    with pytest.raises(CapabilityNotFound) as exc_info:
        registry.resolve(Monad, ForIor)

    assert exc_info.value.capability is Monad
    assert exc_info.value.witness is ForIor


def test_capability_not_found_is_a_lookup_error() -> None:
    with pytest.raises(LookupError):
        Registry().resolve(Functor, ForOption)


def test_register_returns_a_new_registry() -> None:
    empty = Registry()

    populated = empty.register(Monad, ForOption, Option.monad())

    assert len(empty) == 0
    assert len(populated) == 1
    assert (Monad, ForOption) in populated
    assert (Monad, ForOption) not in empty


def test_register_rejects_instance_missing_capability() -> None:
    with pytest.raises(TypeError, match="does not implement"):
        Registry().register(Monad, ForIor, Ior.functor())  # type: ignore[arg-type]


def test_register_rejects_instance_for_other_witness() -> None:
    with pytest.raises(TypeError, match="targets"):
        Registry().register(Monad, ForEither, Option.monad())


def test_register_rejects_non_capability_class() -> None:
    with pytest.raises(TypeError, match="not a capability"):
        Registry().register(int, ForOption, Option.monad())  # type: ignore[arg-type]


def test_value_capabilities_register_under_plain_types() -> None:
    registry = Registry().register(Eq, int, NATURAL_EQ)

    assert registry.resolve(Eq, int).eqv(2, 2)


def test_reregistering_replaces_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    first = Option.eq(NATURAL_EQ)
    second = Option.eq(NATURAL_EQ)
    registry = Registry().register(Eq, Option, first)

    with caplog.at_level(logging.WARNING, logger="dokind.registry"):
        registry = registry.register(Eq, Option, second)

    assert registry.resolve(Eq, Option) is second
    assert any("Replacing" in record.getMessage() for record in caplog.records)


def test_contains_uses_resolution_rules(registry: Registry) -> None:
    assert registry.contains(Functor, ForEither)
    assert not registry.contains(Monad, ForIor)


def test_membership_is_exact_while_contains_resolves() -> None:
    registry = Registry().register(Monad, ForIO, IO.monad())

    assert (Monad, ForIO) in registry
    assert (Functor, ForIO) not in registry
    assert registry.contains(Functor, ForIO)


def test_standard_registry_is_fresh_on_each_call(registry: Registry) -> None:
    from dokind.registry import standard_registry

    other = standard_registry()

    assert other is not registry
    assert list(other) == list(registry)


def test_polymorphic_program_uses_resolved_instance(registry: Registry) -> None:
    def increment(functor: Functor, fa):
        return functor.map(fa, lambda n: n + 1)

    assert increment(registry.resolve(Functor, ForOption), Some(1)) == Some(2)
    assert increment(registry.resolve(Functor, ForEither), Either.right(1)) == Either.right(2)


def test_repr_lists_registered_pairs() -> None:
    registry = Registry().register(Monad, ForOption, Option.monad())

    assert repr(registry) == "Registry(Monad[ForOption])"

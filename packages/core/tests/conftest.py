"""Shared fixtures for fieldrules tests."""

from __future__ import annotations

import pytest

from fieldrules import AnnotatedMetadataProvider, ValidatorVerifier, build_default_registry


@pytest.fixture
def registry():
    """Fresh registry with the built-in validators."""
    return build_default_registry()


@pytest.fixture
def metadata():
    return AnnotatedMetadataProvider()


@pytest.fixture
def verifier(registry, metadata):
    """Verifier with default config sharing the ``registry`` fixture."""
    return ValidatorVerifier(registry=registry, metadata=metadata)

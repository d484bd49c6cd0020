# topmark:header:start
#
#   project      : FavMark
#   file         : test_idempotency_property.py
#   file_relpath : tests/inject/test_idempotency_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the managed-block replacement.

For any generated metadata body:
1) replacing twice equals replacing once,
2) every property FavMark does not own survives with its text intact, and
3) exactly one managed block remains, holding the only ``icons`` and
   ``manifest`` properties at top level.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from favmark.inject.markers import END_LINE, START_LINE, replace_managed_block
from favmark.inject.remover import remove_property
from favmark.inject.scanner import find_property_start
from tests.strategies_favmark import MetadataBody, s_metadata_body

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)
@given(body=s_metadata_body())
def test_replace_is_idempotent(body: MetadataBody) -> None:
    """Applying the replacement to its own output is a no-op."""
    once = replace_managed_block(body.text)

    assert replace_managed_block(once) == once


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)
@given(body=s_metadata_body())
def test_unmanaged_properties_survive(body: MetadataBody) -> None:
    """Properties other than ``icons``/``manifest`` keep their exact text and order."""
    result = replace_managed_block(body.text)

    pos = 0
    for line in body.kept_lines:
        found = result.find(line, pos)
        assert found >= 0, line
        pos = found + len(line)


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)
@given(body=s_metadata_body())
def test_single_managed_block(body: MetadataBody) -> None:
    """One block remains and nothing outside it defines the managed properties."""
    result = replace_managed_block(body.text)

    assert result.count(START_LINE) == 1
    assert result.count(END_LINE) == 1
    outside = result[: result.index(START_LINE)]
    assert find_property_start(outside, "icons") is None
    assert find_property_start(outside, "manifest") is None


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=100,
)
@given(body=s_metadata_body())
def test_remove_property_is_stable(body: MetadataBody) -> None:
    """Removing a property from its own removal result changes nothing."""
    once = remove_property(body.text, "manifest")

    assert remove_property(once, "manifest") == once
    assert find_property_start(once, "manifest") is None

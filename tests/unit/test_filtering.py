"""Tests for the common-parameter filter."""

from __future__ import annotations

from helpparity.constants import EXCLUDED_PARAMETERS
from helpparity.core.filtering import exclude
from tests.conftest import make_parameter


def test_excluded_set_contents():
    for name in ("Verbose", "Debug", "ErrorAction", "WarningVariable", "Confirm", "WhatIf"):
        assert name in EXCLUDED_PARAMETERS
    assert "Name" not in EXCLUDED_PARAMETERS


def test_matching_is_case_insensitive():
    assert exclude(["verbose", "WHATIF", "Target"]) == ["Target"]


def test_order_is_preserved():
    names = ["zeta", "Verbose", "alpha", "Confirm", "mid"]
    assert exclude(names) == ["zeta", "alpha", "mid"]


def test_idempotent():
    names = ["OutVariable", "Path", "ErrorAction", "Force"]
    once = exclude(names)
    assert exclude(once) == once


def test_filters_descriptors_by_name():
    parameters = [make_parameter("Debug", type_name="Switch"), make_parameter("Path")]
    assert [p.name for p in exclude(parameters)] == ["Path"]


def test_custom_exclusion_set():
    assert exclude(["help", "Verbose"], excluded_names={"HELP"}) == ["Verbose"]


def test_empty_input():
    assert exclude([]) == []

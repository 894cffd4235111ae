"""Tests for parameter descriptors and set collapsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from helpparity.domain.parameters import (
    ParameterDescriptor,
    ParameterEntry,
    collapse_parameters,
    find_parameter,
)
from tests.conftest import make_parameter


class TestCollapseParameters:
    def test_one_descriptor_per_name(self):
        entries = [
            ParameterEntry("Task", "String", "ByName", mandatory=True),
            ParameterEntry("Task", "String", "ByPath", mandatory=False),
            ParameterEntry("Path", "String", "ByPath", mandatory=True),
        ]
        collapsed = collapse_parameters(entries)
        assert [p.name for p in collapsed] == ["Path", "Task"]
        task = collapsed[1]
        assert task.parameter_sets == {"ByName": True, "ByPath": False}
        assert task.is_mandatory

    def test_first_occurrence_fixes_spelling_and_type(self):
        entries = [
            ParameterEntry("Target", "String", "A"),
            ParameterEntry("TARGET", "Int", "B", mandatory=True),
        ]
        (descriptor,) = collapse_parameters(entries)
        assert descriptor.name == "Target"
        assert descriptor.type_name == "String"
        assert descriptor.parameter_sets == {"A": False, "B": True}

    def test_repeated_set_keeps_mandatory(self):
        entries = [
            ParameterEntry("x", "String", "A", mandatory=True),
            ParameterEntry("x", "String", "A", mandatory=False),
        ]
        assert collapse_parameters(entries)[0].parameter_sets == {"A": True}

    def test_optional_everywhere(self):
        entries = [ParameterEntry("x", "String", s) for s in ("A", "B")]
        assert not collapse_parameters(entries)[0].is_mandatory

    def test_sorted_case_insensitively(self):
        entries = [ParameterEntry(n, "String", "A") for n in ("beta", "Alpha", "gamma")]
        assert [p.name for p in collapse_parameters(entries)] == ["Alpha", "beta", "gamma"]

    def test_empty(self):
        assert collapse_parameters([]) == []


class TestDescriptor:
    def test_key_is_casefolded(self):
        assert make_parameter("ComputerName").key == "computername"

    def test_name_required(self):
        with pytest.raises(ValidationError):
            ParameterDescriptor(name="", type_name="String")

    def test_frozen(self):
        descriptor = make_parameter("x")
        with pytest.raises(ValidationError):
            descriptor.name = "y"

    def test_find_parameter(self):
        parameters = [make_parameter("Path"), make_parameter("Force", type_name="Switch")]
        assert find_parameter(parameters, "force").type_name == "Switch"
        assert find_parameter(parameters, "missing") is None

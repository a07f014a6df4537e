# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
"""
Property-based tests for the template definition registry.

These tests use Hypothesis to verify correctness properties of the entity
catalog, the definition table and parameter validation.

Properties tested:
- Entity membership: only declared names are valid, and the two checks agree
- Referential integrity: every definition targets a declared entity
- Disjoint parameters: no parameter is both required and optional
- Stable lookups: repeated lookups return the same definition
- Parameter validation: exactly the absent required and undeclared supplied
  names are reported
"""

import string
from typing import List

from hypothesis import given, settings, assume
from hypothesis import strategies as st

from stratus.template.definition import Definition, definition_key
from stratus.template.definitions import BUILTIN_DEFINITIONS
from stratus.template.entities import ENTITIES, is_invalid_entity, is_valid_entity
from stratus.template.registry import default_registry


# =============================================================================
# Hypothesis Strategies for generating test data
# =============================================================================


param_names = st.from_regex(r"[a-z][a-z0-9-]{0,12}", fullmatch=True)


@st.composite
def supplied_params(draw, definition: Definition) -> List[str]:
    """Generate a mix of declared and arbitrary parameter names."""
    declared = []
    if definition.params:
        declared = draw(st.lists(st.sampled_from(definition.params), max_size=len(definition.params)))
    arbitrary = draw(st.lists(param_names, max_size=4))
    return declared + arbitrary


# =============================================================================
# Entity catalog
# =============================================================================


class TestEntityMembership:
    """
    *For any* string, is_valid_entity is true iff the string is declared, and
    is_invalid_entity is always its negation.
    """

    @given(name=st.text(max_size=30))
    @settings(max_examples=200)
    def test_undeclared_strings_are_invalid(self, name: str):
        assume(name not in ENTITIES)

        assert is_valid_entity(name) is False
        assert is_invalid_entity(name) is True

    @given(name=st.text(alphabet=string.ascii_lowercase + string.digits, max_size=25))
    @settings(max_examples=200)
    def test_checks_agree(self, name: str):
        assert is_valid_entity(name) != is_invalid_entity(name)
        assert is_valid_entity(name) == (name in ENTITIES)

    @given(name=st.sampled_from(sorted(ENTITIES)))
    def test_declared_names_are_valid(self, name: str):
        assert is_valid_entity(name)
        assert not is_invalid_entity(name)


# =============================================================================
# Definition table
# =============================================================================


class TestDefinitionTable:

    @given(definition=st.sampled_from(BUILTIN_DEFINITIONS))
    def test_definition_entities_are_declared(self, definition: Definition):
        assert is_valid_entity(definition.entity)

    @given(definition=st.sampled_from(BUILTIN_DEFINITIONS))
    def test_required_and_extra_params_are_disjoint(self, definition: Definition):
        assert not set(definition.required_params) & set(definition.extra_params)

    @given(definition=st.sampled_from(BUILTIN_DEFINITIONS))
    def test_lookups_are_stable(self, definition: Definition):
        registry = default_registry()

        first = registry.lookup(definition.key)
        second = registry.lookup(definition_key(definition.action, definition.entity))

        assert first is second
        assert first == definition

    @given(key=st.text(max_size=40))
    @settings(max_examples=200)
    def test_unregistered_keys_are_not_found(self, key: str):
        registry = default_registry()
        assume(key not in {d.key for d in BUILTIN_DEFINITIONS})

        assert registry.lookup(key) is None


# =============================================================================
# Parameter validation
# =============================================================================


class TestParameterValidation:
    """
    *For any* definition and supplied parameter names, validation reports
    exactly the required names not supplied and the supplied names not
    declared, and succeeds iff both are empty.
    """

    @given(data=st.data())
    @settings(max_examples=200)
    def test_reports_exactly_missing_and_unrecognized(self, data):
        definition = data.draw(st.sampled_from(BUILTIN_DEFINITIONS))
        supplied = data.draw(supplied_params(definition))

        result = definition.validate_params(supplied)

        expected_missing = [p for p in definition.required_params if p not in supplied]
        expected_unrecognized = sorted(set(supplied) - set(definition.params))
        assert result.missing_params == expected_missing
        assert result.unrecognized_params == expected_unrecognized
        assert result.is_valid == (not expected_missing and not expected_unrecognized)

    @given(definition=st.sampled_from(BUILTIN_DEFINITIONS))
    def test_required_params_alone_are_valid(self, definition: Definition):
        assert definition.validate_params(definition.required_params).is_valid

    @given(required=st.lists(param_names, max_size=8))
    def test_repeated_required_params_are_collapsed(self, required: List[str]):
        definition = Definition(
            action="create",
            entity="instance",
            api="ec2",
            required_params=required + required,
        )

        assert definition.required_params == tuple(dict.fromkeys(required))

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
"""Unit tests for the Definition model."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from stratus.template.definition import Definition, definition_key
from stratus.template.exceptions import (
    MissingRequiredParameterError,
    UnrecognizedParameterError,
)
from stratus.template.registry import default_registry


@pytest.fixture
def keypair_definition():
    return Definition(action="create", entity="keypair", api="ec2", required_params=["name"])


@pytest.fixture
def tag_definition():
    return Definition(
        action="create",
        entity="tag",
        api="ec2",
        required_params=["resource", "key", "value"],
    )


class TestDefinitionKey:
    """Test definition_key construction."""

    def test_concatenates_action_and_entity(self):
        assert definition_key("create", "instance") == "createinstance"

    def test_lowercases_both_parts(self):
        assert definition_key("Create", "Instance") == "createinstance"

    def test_definition_exposes_its_key(self, keypair_definition):
        assert keypair_definition.key == "createkeypair"


class TestDefinitionModel:
    """Test construction-time invariants of Definition."""

    def test_builtin_keypair_definition(self):
        definition = default_registry().lookup("createkeypair")

        assert definition == Definition(
            action="create",
            entity="keypair",
            api="ec2",
            required_params=("name",),
            extra_params=(),
        )

    def test_duplicate_required_params_are_collapsed(self):
        definition = Definition(
            action="create",
            entity="instance",
            api="ec2",
            required_params=["image", "count", "count", "type", "subnet"],
            extra_params=["keypair", "ip", "keypair"],
        )

        assert definition.required_params == ("image", "count", "type", "subnet")
        assert definition.extra_params == ("keypair", "ip")

    def test_builtin_instance_definition_has_no_duplicates(self):
        definition = default_registry().lookup("createinstance")

        assert definition.required_params == ("image", "count", "type", "subnet")
        assert "keypair" in definition.extra_params

    def test_overlapping_params_rejected(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Definition(
                action="create",
                entity="volume",
                api="ec2",
                required_params=["size"],
                extra_params=["size"],
            )
        assert "both required and optional" in str(exc_info.value)

    def test_unknown_entity_rejected(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            Definition(action="delete", entity="wormhole", api="ec2")
        assert "wormhole" in str(exc_info.value)

    @pytest.mark.parametrize("action", ["Create", "create instance", "", "1create"])
    def test_invalid_action_rejected(self, action):
        with pytest.raises(PydanticValidationError):
            Definition(action=action, entity="instance", api="ec2")

    @pytest.mark.parametrize("param", ["", "with space", "name=value", "-leading"])
    def test_invalid_param_name_rejected(self, param):
        with pytest.raises(PydanticValidationError):
            Definition(action="create", entity="instance", api="ec2", required_params=[param])

    def test_unknown_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            Definition(action="create", entity="instance", api="ec2", optional_params=["x"])

    def test_definition_is_frozen(self, keypair_definition):
        with pytest.raises(PydanticValidationError):
            keypair_definition.api = "s3"

    def test_params_lists_required_first(self):
        definition = default_registry().lookup("detachvolume")
        assert definition.params == ("device", "id", "instance", "force")


class TestValidateParams:
    """Test Definition.validate_params."""

    def test_complete_params_are_valid(self, keypair_definition):
        result = keypair_definition.validate_params({"name"})

        assert result.is_valid
        assert result.errors == []
        assert result.missing_params == []
        assert result.unrecognized_params == []

    def test_missing_params_reported_in_declaration_order(self, tag_definition):
        result = tag_definition.validate_params({"resource"})

        assert not result.is_valid
        assert result.missing_params == ["key", "value"]
        assert result.unrecognized_params == []

    def test_unrecognized_param_reported(self, keypair_definition):
        result = keypair_definition.validate_params({"name", "region"})

        assert not result.is_valid
        assert result.missing_params == []
        assert result.unrecognized_params == ["region"]

    def test_missing_and_unrecognized_reported_together(self, tag_definition):
        result = tag_definition.validate_params(["resource", "kye", "colour"])

        assert result.missing_params == ["key", "value"]
        assert result.unrecognized_params == ["colour", "kye"]
        assert len(result.errors) == 4

    def test_optional_params_are_accepted(self):
        definition = default_registry().lookup("createsubnet")
        result = definition.validate_params({"cidr", "vpc", "name"})
        assert result.is_valid

    def test_close_match_is_suggested(self, keypair_definition):
        result = keypair_definition.validate_params({"nme"})

        unrecognized = result.errors_of_type("unrecognized_parameter")
        assert len(unrecognized) == 1
        assert "Did you mean 'name'?" in unrecognized[0].message

    def test_single_string_is_one_param(self, keypair_definition):
        assert keypair_definition.validate_params("name").is_valid

    def test_definition_without_params(self):
        definition = default_registry().lookup("createinternetgateway")

        assert definition.validate_params(set()).is_valid
        assert definition.validate_params({"vpc"}).unrecognized_params == ["vpc"]


class TestDispatchRequest:
    """Test conversion to dispatch requests."""

    def test_valid_values_produce_request(self, keypair_definition):
        request = keypair_definition.to_dispatch_request({"name": "mykey"})

        assert request == {
            "Api": "ec2",
            "Action": "create",
            "Entity": "keypair",
            "Params": {"name": "mykey"},
        }

    def test_missing_values_raise(self, tag_definition):
        with pytest.raises(MissingRequiredParameterError) as exc_info:
            tag_definition.to_dispatch_request({"resource": "i-1234"})
        assert [e.field for e in exc_info.value.errors] == ["key", "value"]

    def test_unrecognized_values_raise(self, keypair_definition):
        with pytest.raises(UnrecognizedParameterError):
            keypair_definition.to_dispatch_request({"name": "mykey", "region": "us-west-2"})

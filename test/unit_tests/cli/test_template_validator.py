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
"""Unit tests for TemplateCommandValidator."""

import pytest

from stratus.cli.validators.template_validator import UNKNOWN_API, TemplateCommandValidator
from stratus.template.registry import default_registry
from stratus.template.validation import (
    MISSING_REQUIRED_PARAMETER,
    UNKNOWN_DEFINITION,
    UNKNOWN_ENTITY,
    UNRECOGNIZED_PARAMETER,
)


@pytest.fixture
def validator():
    return TemplateCommandValidator()


class TestValidateCommand:

    def test_valid_command(self, validator):
        result = validator.validate_command("create", "keypair", ["name"])
        assert result.is_valid

    def test_valid_command_with_optional_params(self, validator):
        result = validator.validate_command(
            "create", "instance",
            ["image", "count", "type", "subnet", "keypair", "securitygroup"],
        )
        assert result.is_valid

    def test_undeclared_instance_params_rejected(self, validator):
        result = validator.validate_command(
            "create", "instance",
            ["image", "count", "type", "subnet", "name", "role"],
        )
        assert result.unrecognized_params == ["name", "role"]

    def test_entity_and_action_case_is_normalized(self, validator):
        result = validator.validate_command("Create", "Keypair", ["name"])
        assert result.is_valid

    def test_mixed_case_unknown_entity_reported_in_lower_case(self, validator):
        result = validator.validate_command("create", "WormHole", [])

        assert [e.error_type for e in result.errors] == [UNKNOWN_ENTITY, UNKNOWN_DEFINITION]
        assert "'wormhole'" in result.errors[0].message

    def test_unknown_entity_and_definition_reported_together(self, validator):
        result = validator.validate_command("delete", "wormhole", ["id"])

        assert not result.is_valid
        assert [e.error_type for e in result.errors] == [UNKNOWN_ENTITY, UNKNOWN_DEFINITION]
        assert "wormhole" in result.errors[0].message
        assert "deletewormhole" in result.errors[1].message

    def test_unsupported_action_for_known_entity(self, validator):
        result = validator.validate_command("start", "bucket", ["name"])

        assert [e.error_type for e in result.errors] == [UNKNOWN_DEFINITION]
        assert "Entities supporting 'start': alarm, instance" in result.errors[0].message

    def test_unknown_action(self, validator):
        result = validator.validate_command("launch", "instance", [])

        assert [e.error_type for e in result.errors] == [UNKNOWN_DEFINITION]
        assert "Entities supporting" not in result.errors[0].message

    def test_none_entity_is_known_but_has_no_definitions(self, validator):
        result = validator.validate_command("create", "none", [])

        assert [e.error_type for e in result.errors] == [UNKNOWN_DEFINITION]

    def test_parameter_errors_collected(self, validator):
        result = validator.validate_command("create", "instance", ["image", "cont", "zone"])

        assert result.missing_params == ["count", "type", "subnet"]
        assert result.unrecognized_params == ["cont", "zone"]
        assert {e.error_type for e in result.errors} == {
            MISSING_REQUIRED_PARAMETER,
            UNRECOGNIZED_PARAMETER,
        }

    def test_uses_given_registry(self):
        validator = TemplateCommandValidator(default_registry().subset(["createtag"]))

        assert validator.validate_command("create", "tag", ["resource", "key", "value"]).is_valid
        assert not validator.validate_command("create", "keypair", ["name"]).is_valid


class TestValidateEntity:

    def test_known_entity(self, validator):
        assert validator.validate_entity("subnet").is_valid

    def test_unknown_entity(self, validator):
        result = validator.validate_entity("wormhole")
        assert result.errors[0].field == "entity"
        assert result.errors[0].error_type == UNKNOWN_ENTITY


class TestRegistryChecks:

    def test_builtin_registry_is_consistent(self, validator):
        assert validator.validate().is_valid

    def test_builtin_apis_are_boto3_services(self, validator):
        result = validator.validate_api_namespaces()
        assert result.is_valid, [str(e) for e in result.errors]

    def test_unknown_api_namespace_reported(self):
        validator = TemplateCommandValidator(
            default_registry().subset(["createkeypair", "createbucket", "deletebucket"])
        )

        result = validator.validate_api_namespaces(known_services=["ec2"])

        assert len(result.errors) == 1
        assert result.errors[0].field == "s3"
        assert result.errors[0].error_type == UNKNOWN_API
        assert "createbucket, deletebucket" in result.errors[0].message


class TestSummary:

    def test_valid_summary(self, validator):
        result = validator.validate_command("create", "keypair", ["name"])
        assert validator.get_validation_errors_summary(result) == "Command is valid."

    def test_invalid_summary_lists_every_error(self, validator):
        result = validator.validate_command("create", "tag", ["resource", "colour"])

        summary = validator.get_validation_errors_summary(result)

        lines = summary.splitlines()
        assert lines[0] == "Command validation failed with the following errors:"
        assert len(lines) == 4
        assert lines[1].startswith("  - key: Missing required parameter 'key'")
        assert lines[3].startswith("  - colour: Unrecognized parameter 'colour'")

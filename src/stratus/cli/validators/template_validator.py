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
Validator for template commands.

This module checks a single template command (an action, an entity and the
names of the parameters supplied for it) against a definition registry.
Entity, definition and parameter problems are all reported together so the
user sees every issue with a command at once.
"""

from typing import Iterable, Optional

import boto3

from stratus.template.definition import definition_key
from stratus.template.entities import is_invalid_entity
from stratus.template.registry import DefinitionRegistry, default_registry
from stratus.template.validation import (
    UNKNOWN_DEFINITION,
    UNKNOWN_ENTITY,
    ValidationResult,
)
from stratus.cli.validators.validator import Validator
from stratus.cli.utils import setup_logger

logger = setup_logger(__name__)

UNKNOWN_API = "unknown_api"


class TemplateCommandValidator(Validator):
    """
    Validator for template commands.

    Holds the registry commands are checked against. The registry is passed
    in explicitly; when omitted, the built-in registry is used.
    """

    def __init__(self, registry: Optional[DefinitionRegistry] = None):
        """Initialize the TemplateCommandValidator."""
        super().__init__()
        self.registry = registry if registry is not None else default_registry()

    def validate(self) -> ValidationResult:
        """
        Validate the registry itself.

        Returns:
            ValidationResult of the registry's referential integrity check.
        """
        return self.registry.self_check()

    def validate_entity(self, entity: str) -> ValidationResult:
        """
        Validate that an entity name belongs to the entity catalog.

        Args:
            entity: The entity token to check.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        result = ValidationResult()
        if is_invalid_entity(entity):
            result.add_error(
                field="entity",
                message=f"Unknown entity '{entity}'",
                error_type=UNKNOWN_ENTITY,
            )
        return result

    def validate_command(
        self,
        action: str,
        entity: str,
        params: Iterable[str] = (),
    ) -> ValidationResult:
        """
        Validate a template command.

        This method validates:
        - The entity is in the entity catalog
        - A definition exists for the action/entity pair
        - Every required parameter of that definition is supplied
        - Every supplied parameter is declared by that definition

        Parameter checks only run when a definition is found. Action and
        entity tokens are lowercased first, the same way definition keys are.

        Args:
            action: The action verb.
            entity: The entity name.
            params: Names of the supplied parameters.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        action = action.lower()
        entity = entity.lower()
        result = self.validate_entity(entity)

        key = definition_key(action, entity)
        definition = self.registry.lookup(key)
        if definition is None:
            message = f"Unknown definition '{key}': no '{action}' action for entity '{entity}'"
            supported = self.registry.entities_for(action)
            if supported:
                message += f". Entities supporting '{action}': {', '.join(supported)}"
            result.add_error(
                field="definition",
                message=message,
                error_type=UNKNOWN_DEFINITION,
            )
        else:
            result.merge(definition.validate_params(params))

        if not result.is_valid:
            logger.debug(f"Command '{key}' failed validation with {len(result.errors)} errors")

        return result

    def validate_api_namespaces(
        self,
        known_services: Optional[Iterable[str]] = None,
    ) -> ValidationResult:
        """
        Validate that every API namespace in the registry is a known AWS service.

        Args:
            known_services: Service names to check against. Defaults to the
                services bundled with boto3, which are read from local data.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        if known_services is None:
            known_services = boto3.Session().get_available_services()
        services = set(known_services)

        result = ValidationResult()
        for api in self.registry.apis():
            if api not in services:
                keys = [d.key for d in self.registry.by_api(api)]
                result.add_error(
                    field=api,
                    message=f"API namespace '{api}' is not a known AWS service "
                            f"(used by {', '.join(keys)})",
                    error_type=UNKNOWN_API,
                )
        return result

    def get_validation_errors_summary(
        self,
        result: ValidationResult,
        subject: str = "Command",
    ) -> str:
        """
        Get a human-readable summary of validation errors.

        Args:
            result: The ValidationResult to summarize.
            subject: What was validated, used as the first word of the summary.

        Returns:
            A formatted string containing all validation errors.
        """
        if result.is_valid:
            return f"{subject} is valid."

        lines = [f"{subject} validation failed with the following errors:"]
        for error in result.errors:
            lines.append(f"  - {error.field}: {error.message}")

        return "\n".join(lines)

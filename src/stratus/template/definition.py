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
Pydantic model for template command definitions.

A Definition is the contract for one (action, entity) pair: which provider
API implements it, which parameters must be supplied and which may be
supplied. Definitions are frozen once built.
"""

import difflib
import re
from typing import Any, Dict, Iterable, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from stratus.template.entities import is_invalid_entity
from stratus.template.validation import (
    MISSING_REQUIRED_PARAMETER,
    UNRECOGNIZED_PARAMETER,
    ValidationResult,
)


# Regex patterns for validation
ACTION_PATTERN = re.compile(r"^[a-z][a-z0-9]*$")
API_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")
PARAM_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9._-]*$")


def definition_key(action: str, entity: str) -> str:
    """
    Build the registry key for an action/entity pair.

    Args:
        action: The action verb, e.g. "create".
        entity: The entity name, e.g. "instance".

    Returns:
        The lowercased action followed by the lowercased entity, with no
        separator (e.g. "createinstance").
    """
    return f"{action.lower()}{entity.lower()}"


class Definition(BaseModel):
    """Contract for one supported template command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    action: str = Field(
        ...,
        min_length=1,
        description="Action verb (e.g., create, delete, attach)",
    )
    entity: str = Field(
        ...,
        min_length=1,
        description="Target entity, a member of the entity catalog",
    )
    api: str = Field(
        ...,
        min_length=1,
        description="Provider API namespace implementing the action (e.g., ec2, s3)",
    )
    required_params: Tuple[str, ...] = Field(
        default=(),
        description="Parameters that must be supplied, in display order",
    )
    extra_params: Tuple[str, ...] = Field(
        default=(),
        description="Parameters that may be supplied, in display order",
    )

    @field_validator("action")
    @classmethod
    def validate_action(cls, v: str) -> str:
        """Validate that the action is a lowercase identifier."""
        if not ACTION_PATTERN.match(v):
            raise ValueError(
                f"Invalid action: '{v}'. "
                "Actions must be lowercase letters and digits, starting with a letter."
            )
        return v

    @field_validator("entity")
    @classmethod
    def validate_entity(cls, v: str) -> str:
        """Validate that the entity is declared in the entity catalog."""
        if is_invalid_entity(v):
            raise ValueError(f"Unknown entity: '{v}'")
        return v

    @field_validator("api")
    @classmethod
    def validate_api(cls, v: str) -> str:
        if not API_PATTERN.match(v):
            raise ValueError(
                f"Invalid API namespace: '{v}'. "
                "API namespaces must be lowercase letters, digits and hyphens."
            )
        return v

    @field_validator("required_params", "extra_params")
    @classmethod
    def validate_param_names(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """
        Validate parameter names and drop repeated ones.

        The first occurrence of a name keeps its position; later repeats
        carry no meaning and are removed.
        """
        for name in v:
            if not PARAM_NAME_PATTERN.match(name):
                raise ValueError(f"Invalid parameter name: '{name}'")
        return tuple(dict.fromkeys(v))

    @model_validator(mode="after")
    def validate_disjoint_params(self) -> "Definition":
        """Validate that no parameter is both required and optional."""
        overlap = [name for name in self.required_params if name in self.extra_params]
        if overlap:
            raise ValueError(
                f"Parameters {overlap} of '{self.key}' are declared both "
                f"required and optional"
            )
        return self

    @property
    def key(self) -> str:
        return definition_key(self.action, self.entity)

    @property
    def params(self) -> Tuple[str, ...]:
        """All declared parameters, required first."""
        return self.required_params + self.extra_params

    def validate_params(self, supplied: Iterable[str]) -> ValidationResult:
        """
        Check a set of supplied parameter names against this definition.

        Every problem is collected: each missing required parameter and each
        supplied parameter that is neither required nor optional gets its own
        error.

        Args:
            supplied: Names of the parameters given for the command.

        Returns:
            ValidationResult; missing_params lists absent required parameters in
            declaration order and unrecognized_params lists unknown names sorted.
        """
        if isinstance(supplied, str):
            supplied = [supplied]
        supplied_names = set(supplied)
        result = ValidationResult()

        for name in self.required_params:
            if name not in supplied_names:
                result.add_error(
                    field=name,
                    message=f"Missing required parameter '{name}' for "
                            f"'{self.action} {self.entity}'",
                    error_type=MISSING_REQUIRED_PARAMETER,
                )

        declared = set(self.params)
        for name in sorted(supplied_names - declared):
            message = f"Unrecognized parameter '{name}' for '{self.action} {self.entity}'"
            suggestions = difflib.get_close_matches(name, self.params, n=1)
            if suggestions:
                message += f". Did you mean '{suggestions[0]}'?"
            result.add_error(
                field=name,
                message=message,
                error_type=UNRECOGNIZED_PARAMETER,
            )

        return result

    def to_dispatch_request(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Convert resolved parameter values into a request for the API dispatch layer.

        Args:
            values: Parameter values keyed by parameter name.

        Returns:
            Dict with the API namespace, action, entity and parameters.

        Raises:
            TemplateDefinitionError: If the values do not satisfy this definition.
        """
        self.validate_params(values.keys()).raise_for_errors()

        return {
            "Api": self.api,
            "Action": self.action,
            "Entity": self.entity,
            "Params": dict(values),
        }

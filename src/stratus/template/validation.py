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
Structured validation results for template commands.

Validation never stops at the first problem: every check appends to a
ValidationResult so that callers can show the complete list of problems
for a command in one pass.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Type

from stratus.template.exceptions import (
    MissingRequiredParameterError,
    TemplateDefinitionError,
    UnknownDefinitionError,
    UnknownEntityError,
    UnrecognizedParameterError,
)

# Error types
UNKNOWN_DEFINITION = "unknown_definition"
UNKNOWN_ENTITY = "unknown_entity"
MISSING_REQUIRED_PARAMETER = "missing_required_parameter"
UNRECOGNIZED_PARAMETER = "unrecognized_parameter"

# Checked in this order when converting a result into an exception
ERROR_TYPE_EXCEPTIONS: Dict[str, Type[TemplateDefinitionError]] = {
    UNKNOWN_ENTITY: UnknownEntityError,
    UNKNOWN_DEFINITION: UnknownDefinitionError,
    MISSING_REQUIRED_PARAMETER: MissingRequiredParameterError,
    UNRECOGNIZED_PARAMETER: UnrecognizedParameterError,
}


@dataclass
class ValidationError:
    """
    Represents a validation error with field name and error message.

    Attributes:
        field: The name of the field that failed validation. For parameter
            errors this is the parameter name itself.
        message: A human-readable error message describing the validation failure.
        error_type: The type/category of the validation error.
    """
    field: str
    message: str
    error_type: str = "validation_error"

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message, "error_type": self.error_type}


@dataclass
class ValidationResult:
    """
    Result of a validation operation.

    Attributes:
        is_valid: True if validation passed, False otherwise.
        errors: List of validation errors if validation failed.
    """
    is_valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def add_error(self, field: str, message: str, error_type: str = "validation_error") -> None:
        """Add a validation error to the result."""
        self.errors.append(ValidationError(field=field, message=message, error_type=error_type))
        self.is_valid = False

    def merge(self, other: "ValidationResult") -> None:
        """Merge another validation result into this one."""
        if not other.is_valid:
            self.is_valid = False
            self.errors.extend(other.errors)

    def errors_of_type(self, error_type: str) -> List[ValidationError]:
        return [error for error in self.errors if error.error_type == error_type]

    @property
    def missing_params(self) -> List[str]:
        """Names of missing required parameters, in declaration order."""
        return [error.field for error in self.errors_of_type(MISSING_REQUIRED_PARAMETER)]

    @property
    def unrecognized_params(self) -> List[str]:
        """Names of supplied parameters the definition does not declare."""
        return [error.field for error in self.errors_of_type(UNRECOGNIZED_PARAMETER)]

    def raise_for_errors(self) -> None:
        """
        Raise an exception carrying every error if validation failed.

        The exception class follows the most fundamental error kind present:
        unknown entity, then unknown definition, then missing parameters,
        then unrecognized parameters. All errors are attached regardless.

        Raises:
            TemplateDefinitionError: A subclass matching the errors, if any.
        """
        if self.is_valid:
            return

        exception_class = TemplateDefinitionError
        for error_type, candidate in ERROR_TYPE_EXCEPTIONS.items():
            if self.errors_of_type(error_type):
                exception_class = candidate
                break

        message = "; ".join(str(error) for error in self.errors)
        raise exception_class(message, errors=self.errors)

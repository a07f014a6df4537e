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
"""Exceptions raised by the template definition registry."""

from typing import List, Optional


class TemplateDefinitionError(Exception):
    """Base exception for template definition errors.

    Attributes:
        errors: The structured validation errors behind this exception, if any.
    """

    def __init__(self, message: str, errors: Optional[List] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class UnknownDefinitionError(TemplateDefinitionError):
    """Exception raised when no definition exists for an action/entity pair."""

    pass


class UnknownEntityError(TemplateDefinitionError):
    """Exception raised when an entity name is not in the entity catalog."""

    pass


class MissingRequiredParameterError(TemplateDefinitionError):
    """Exception raised when required parameters are absent from a command."""

    pass


class UnrecognizedParameterError(TemplateDefinitionError):
    """Exception raised when a command carries parameters its definition does not declare."""

    pass


class DuplicateDefinitionError(TemplateDefinitionError):
    """Exception raised when two definitions share the same key."""

    pass


class DefinitionsFileError(TemplateDefinitionError):
    """Exception raised when a definitions file cannot be loaded."""

    pass

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
"""Template definition registry: entity catalog, definitions and validation."""

from stratus.template.definition import Definition, definition_key
from stratus.template.entities import ENTITIES, Entity, is_invalid_entity, is_valid_entity
from stratus.template.exceptions import (
    DefinitionsFileError,
    DuplicateDefinitionError,
    MissingRequiredParameterError,
    TemplateDefinitionError,
    UnknownDefinitionError,
    UnknownEntityError,
    UnrecognizedParameterError,
)
from stratus.template.registry import DefinitionRegistry, default_registry
from stratus.template.validation import ValidationError, ValidationResult

__all__ = [
    "Definition",
    "DefinitionRegistry",
    "DefinitionsFileError",
    "DuplicateDefinitionError",
    "ENTITIES",
    "Entity",
    "MissingRequiredParameterError",
    "TemplateDefinitionError",
    "UnknownDefinitionError",
    "UnknownEntityError",
    "UnrecognizedParameterError",
    "ValidationError",
    "ValidationResult",
    "default_registry",
    "definition_key",
    "is_invalid_entity",
    "is_valid_entity",
]

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
Pydantic models for definitions files (v1.0).

A definitions file adds definitions to the built-in table, replaces
built-in definitions that share a key, or removes built-in definitions.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stratus.template.definition import Definition


class DefinitionsFileConfig(BaseModel):
    """Contents of a definitions file."""

    model_config = ConfigDict(extra="forbid")

    version: str = Field(
        default="1.0",
        description="Definitions file schema version",
    )
    definitions: List[Definition] = Field(
        default_factory=list,
        description="Definitions to add or replace",
    )
    exclude: List[str] = Field(
        default_factory=list,
        description="Keys of built-in definitions to remove",
    )

    @model_validator(mode="after")
    def validate_unique_keys(self) -> "DefinitionsFileConfig":
        """Validate that the file does not declare the same key twice."""
        seen = set()
        for definition in self.definitions:
            if definition.key in seen:
                raise ValueError(f"Definition '{definition.key}' is declared more than once")
            seen.add(definition.key)

        excluded_and_defined = sorted(seen.intersection(self.exclude))
        if excluded_and_defined:
            raise ValueError(
                f"Definitions {excluded_and_defined} are both defined and excluded"
            )
        return self

    def to_config_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization."""
        return self.model_dump(mode="json")

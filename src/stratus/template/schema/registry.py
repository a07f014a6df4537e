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
"""Registry for definitions file schema versions."""

from typing import Dict, Type

from pydantic import BaseModel

from .v1_0 import model as v1_0_model

# Direct version-to-model mapping
SCHEMA_REGISTRY: Dict[str, Type[BaseModel]] = {
    "1.0": v1_0_model.DefinitionsFileConfig,
}

LATEST_VERSION = "1.0"

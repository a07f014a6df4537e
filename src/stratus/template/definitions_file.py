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
Loading of YAML definitions files.

A definitions file customizes the registry used by the CLI. It is read once,
before the registry is built; the registry itself never touches the file
system.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from stratus.template.exceptions import DefinitionsFileError
from stratus.template.registry import DefinitionRegistry, default_registry
from stratus.template.schema.registry import LATEST_VERSION, SCHEMA_REGISTRY

logger = logging.getLogger(__name__)

DEFINITIONS_FILE_ENV_VAR = "STRATUS_DEFINITIONS_FILE"


def load_definitions_file(path: Union[str, Path]):
    """
    Load and validate a definitions file.

    Args:
        path: Path to the YAML definitions file.

    Returns:
        The parsed definitions file model for the file's schema version.

    Raises:
        DefinitionsFileError: If the file is missing, is not valid YAML, has an
            unsupported version or does not match the schema.
    """
    definitions_file = Path(path)
    if not definitions_file.exists():
        raise DefinitionsFileError(f"Definitions file not found: {path}")

    try:
        with open(definitions_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DefinitionsFileError(f"Invalid YAML in definitions file: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise DefinitionsFileError(f"Cannot read definitions file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DefinitionsFileError(
            f"Definitions file {path} must contain a mapping at the top level"
        )

    # YAML reads an unquoted 1.0 as a float
    version = str(data.get("version", LATEST_VERSION))
    data["version"] = version

    model = SCHEMA_REGISTRY.get(version)
    if model is None:
        raise DefinitionsFileError(
            f"Unsupported definitions file version '{version}'. "
            f"Supported versions: {sorted(SCHEMA_REGISTRY)}"
        )

    try:
        config = model(**data)
    except PydanticValidationError as e:
        messages = []
        for error in e.errors():
            field_path = ".".join(str(loc) for loc in error["loc"]) or "definitions file"
            messages.append(f"  - {field_path}: {error['msg']}")
        logger.error(f"Definitions file {path} failed validation")
        raise DefinitionsFileError(
            "Definitions file validation failed with the following errors:\n"
            + "\n".join(messages)
        ) from e

    logger.debug(
        f"Loaded {len(config.definitions)} definitions and "
        f"{len(config.exclude)} exclusions from {path}"
    )
    return config


def build_registry(
    path: Optional[Union[str, Path]] = None,
    base: Optional[DefinitionRegistry] = None,
) -> DefinitionRegistry:
    """
    Build the registry to use, applying a definitions file when one is configured.

    Args:
        path: Definitions file path. If None, the STRATUS_DEFINITIONS_FILE
            environment variable is consulted.
        base: Registry to customize. Defaults to the built-in registry.

    Returns:
        The base registry when no definitions file is configured, otherwise a
        new registry with the file's definitions merged in and its exclusions
        removed.

    Raises:
        DefinitionsFileError: If the definitions file cannot be applied.
    """
    if base is None:
        base = default_registry()

    if path is None:
        path = os.environ.get(DEFINITIONS_FILE_ENV_VAR) or None
    if path is None:
        return base

    config = load_definitions_file(path)

    registry = base.merge(config.definitions)
    missing = [key for key in config.exclude if key not in registry]
    if missing:
        raise DefinitionsFileError(
            f"Cannot exclude unknown definitions: {missing}"
        )
    return registry.without(config.exclude)

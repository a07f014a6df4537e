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
Registry of template command definitions.

A DefinitionRegistry is built once from a sequence of definitions and is
read-only afterwards. Consumers receive the registry they should use instead
of reaching for module-level state, so tests can build a registry holding
only the definitions they care about.
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional

from stratus.template.definition import Definition, definition_key
from stratus.template.definitions import BUILTIN_DEFINITIONS
from stratus.template.entities import is_invalid_entity
from stratus.template.exceptions import DuplicateDefinitionError, UnknownDefinitionError
from stratus.template.validation import UNKNOWN_ENTITY, ValidationResult

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """Immutable mapping from definition keys to definitions."""

    def __init__(self, definitions: Iterable[Definition] = ()):
        """
        Build a registry.

        Args:
            definitions: The definitions to register.

        Raises:
            DuplicateDefinitionError: If two definitions share the same key.
        """
        table = {}
        for definition in definitions:
            if definition.key in table:
                raise DuplicateDefinitionError(
                    f"Definition '{definition.key}' is declared more than once"
                )
            table[definition.key] = definition

        self._definitions = MappingProxyType(table)
        logger.debug(f"Built definition registry with {len(table)} definitions")

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __repr__(self) -> str:
        return f"DefinitionRegistry({len(self._definitions)} definitions)"

    def lookup(self, key: str) -> Optional[Definition]:
        """
        Look up a definition by its exact key.

        Args:
            key: A definition key such as "createinstance".

        Returns:
            The definition, or None when no definition has this key. Callers
            must treat None as a validation failure.
        """
        return self._definitions.get(key)

    def lookup_command(self, action: str, entity: str) -> Optional[Definition]:
        """Look up the definition for an action/entity pair."""
        return self.lookup(definition_key(action, entity))

    def get(self, key: str) -> Definition:
        """
        Return the definition for a key.

        Raises:
            UnknownDefinitionError: If no definition has this key.
        """
        definition = self.lookup(key)
        if definition is None:
            raise UnknownDefinitionError(f"Unknown definition '{key}'")
        return definition

    def keys(self) -> List[str]:
        return list(self._definitions)

    def definitions(self) -> List[Definition]:
        return list(self._definitions.values())

    def actions(self) -> List[str]:
        """All actions, sorted."""
        return sorted({d.action for d in self._definitions.values()})

    def apis(self) -> List[str]:
        """All API namespaces, sorted."""
        return sorted({d.api for d in self._definitions.values()})

    def entities_for(self, action: str) -> List[str]:
        """Entities that support the given action, sorted."""
        return sorted(d.entity for d in self._definitions.values() if d.action == action)

    def by_api(self, api: str) -> List[Definition]:
        """Definitions owned by the given API namespace, in registration order."""
        return [d for d in self._definitions.values() if d.api == api]

    def subset(self, keys: Iterable[str]) -> "DefinitionRegistry":
        """
        Build a registry restricted to the given keys.

        Raises:
            UnknownDefinitionError: If any key is not registered.
        """
        return DefinitionRegistry(self.get(key) for key in dict.fromkeys(keys))

    def without(self, keys: Iterable[str]) -> "DefinitionRegistry":
        """
        Build a registry with the given keys removed.

        Raises:
            UnknownDefinitionError: If any key is not registered.
        """
        excluded = set()
        for key in keys:
            self.get(key)
            excluded.add(key)
        return DefinitionRegistry(
            d for key, d in self._definitions.items() if key not in excluded
        )

    def merge(self, definitions: Iterable[Definition]) -> "DefinitionRegistry":
        """
        Build a registry with additional definitions.

        Definitions whose key is already registered replace the existing ones.

        Raises:
            DuplicateDefinitionError: If the new definitions repeat a key among themselves.
        """
        additions = DefinitionRegistry(definitions)
        table = dict(self._definitions)
        for key in additions:
            if key in table:
                logger.info(f"Overriding built-in definition '{key}'")
            table[key] = additions.get(key)
        return DefinitionRegistry(table.values())

    def self_check(self) -> ValidationResult:
        """
        Verify referential integrity of the registry.

        Checks that every definition targets an entity from the entity
        catalog and is registered under the key its action and entity produce.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        result = ValidationResult()

        for key, definition in self._definitions.items():
            if is_invalid_entity(definition.entity):
                result.add_error(
                    field=key,
                    message=f"Definition targets unknown entity '{definition.entity}'",
                    error_type=UNKNOWN_ENTITY,
                )
            expected_key = definition_key(definition.action, definition.entity)
            if key != expected_key:
                result.add_error(
                    field=key,
                    message=f"Definition is registered under '{key}' "
                            f"but its action and entity give '{expected_key}'",
                    error_type="key_mismatch",
                )

        return result


@lru_cache(maxsize=None)
def default_registry() -> DefinitionRegistry:
    """Return the registry of built-in definitions, built on first use."""
    return DefinitionRegistry(BUILTIN_DEFINITIONS)

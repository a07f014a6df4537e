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
CLI commands for template command definitions.

This module provides Click commands for validating a template command
against the definition registry, listing and describing definitions,
checking the registry's integrity and listing the entity catalog.
"""

import json
import logging
from typing import Dict, Iterable, List, Optional, Tuple

import click
from tabulate import tabulate

from stratus.cli.utils import enable_debug_logging
from stratus.cli.validators.template_validator import TemplateCommandValidator
from stratus.template.definition import Definition, definition_key
from stratus.template.definitions_file import build_registry
from stratus.template.entities import ENTITIES
from stratus.template.exceptions import DefinitionsFileError
from stratus.template.registry import DefinitionRegistry


logger = logging.getLogger(__name__)


def _get_registry(ctx: click.Context) -> DefinitionRegistry:
    """
    Build the registry for the current invocation.

    Uses the definitions file given to the root command, if any.

    Raises:
        click.ClickException: If the definitions file cannot be applied.
    """
    definitions_file = (ctx.obj or {}).get("definitions_file")
    try:
        return build_registry(definitions_file)
    except DefinitionsFileError as e:
        raise click.ClickException(str(e))


def _parse_params(tokens: Iterable[str]) -> Dict[str, str]:
    """
    Split NAME=VALUE tokens into a parameter mapping.

    Args:
        tokens: Command-line tokens, each of the form NAME=VALUE.

    Returns:
        Parameter values keyed by name. A repeated name keeps its last value.

    Raises:
        click.BadParameter: If a token has no '=' or an empty name.
    """
    params: Dict[str, str] = {}
    for token in tokens:
        name, sep, value = token.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"Expected NAME=VALUE, got '{token}'",
                param_hint="PARAMS",
            )
        if name in params:
            logger.warning(f"Parameter '{name}' given more than once; using the last value")
        params[name] = value
    return params


def _format_definition_table(definition: Definition) -> str:
    """
    Format a definition as a table for display.

    Args:
        definition: The definition to format.

    Returns:
        Formatted table string.
    """
    table_data = [
        ["Key", definition.key],
        ["Action", definition.action],
        ["Entity", definition.entity],
        ["Api", definition.api],
        ["RequiredParams", ", ".join(definition.required_params) or "-"],
        ["ExtraParams", ", ".join(definition.extra_params) or "-"],
    ]
    return tabulate(table_data, headers=["Field", "Value"], tablefmt="presto")


def _definition_to_json_dict(definition: Definition) -> dict:
    data = definition.model_dump(mode="json")
    data["key"] = definition.key
    return data


def _filter_definitions(
    registry: DefinitionRegistry,
    api: Optional[str],
    action: Optional[str],
    entity: Optional[str],
) -> List[Definition]:
    return [
        d for d in registry.definitions()
        if (api is None or d.api == api)
        and (action is None or d.action == action)
        and (entity is None or d.entity == entity)
    ]


# =============================================================================
# Validate Command
# =============================================================================


@click.command("validate")
@click.argument("action", required=True)
@click.argument("entity", required=True)
@click.argument("params", nargs=-1)
@click.option(
    "--output",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text or json)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def template_validate(
    ctx: click.Context,
    action: str,
    entity: str,
    params: Tuple[str, ...],
    output: str,
    debug: bool,
):
    """
    Validate a template command before it is executed.

    Checks that ENTITY is a known entity, that ACTION is supported for it,
    that every required parameter is given and that every given parameter
    is recognized. All problems are reported together.

    .. dropdown:: Usage Examples
       :open:

       .. code-block:: bash

          # Validate an instance creation
          stratus validate create instance image=ami-12345 count=1 type=t2.micro subnet=subnet-1

          # Validate and print the dispatch request as JSON
          stratus validate create keypair name=mykey --output json
    """
    if debug:
        enable_debug_logging()

    registry = _get_registry(ctx)
    values = _parse_params(params)

    validator = TemplateCommandValidator(registry)
    result = validator.validate_command(action, entity, values.keys())

    if output == "json":
        payload = {
            "key": definition_key(action, entity),
            "valid": result.is_valid,
            "errors": [error.to_dict() for error in result.errors],
        }
        if result.is_valid:
            definition = registry.lookup_command(action, entity)
            payload["request"] = definition.to_dispatch_request(values)
        click.echo(json.dumps(payload, indent=2))
        if not result.is_valid:
            ctx.exit(1)
        return

    if not result.is_valid:
        raise click.ClickException(validator.get_validation_errors_summary(result))

    definition = registry.lookup_command(action, entity)
    click.secho(f"✓ '{action} {entity}' is valid", fg="green")
    click.echo(f"Api: {definition.api}")


# =============================================================================
# Definitions Commands
# =============================================================================


@click.group("definitions")
def definitions():
    """Inspect template command definitions."""


@definitions.command("list")
@click.option(
    "--api",
    type=str,
    help="Only show definitions owned by this API namespace",
)
@click.option(
    "--action",
    type=str,
    help="Only show definitions for this action",
)
@click.option(
    "--entity",
    type=str,
    help="Only show definitions for this entity",
)
@click.option(
    "--output",
    type=click.Choice(["json", "table"]),
    default="table",
    help="Output format (json or table)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def definitions_list(
    ctx: click.Context,
    api: Optional[str],
    action: Optional[str],
    entity: Optional[str],
    output: str,
    debug: bool,
):
    """
    List template command definitions.

    .. dropdown:: Usage Examples
       :open:

       .. code-block:: bash

          # List every definition
          stratus definitions list

          # List the ec2 create definitions as JSON
          stratus definitions list --api ec2 --action create --output json
    """
    if debug:
        enable_debug_logging()

    registry = _get_registry(ctx)
    selected = _filter_definitions(registry, api, action, entity)

    if not selected:
        click.echo("No definitions found.")
        return

    if output == "json":
        click.echo(json.dumps([_definition_to_json_dict(d) for d in selected], indent=2))
        return

    click.echo(f"📋 Definitions ({len(selected)} found)")
    click.echo()
    table_data = [
        [
            d.key,
            d.action,
            d.entity,
            d.api,
            ", ".join(d.required_params),
            ", ".join(d.extra_params),
        ]
        for d in selected
    ]
    click.echo(tabulate(
        table_data,
        headers=["Key", "Action", "Entity", "Api", "Required", "Optional"],
        tablefmt="presto",
    ))


@definitions.command("describe")
@click.argument("action", required=True)
@click.argument("entity", required=True)
@click.option(
    "--output",
    type=click.Choice(["json", "table"]),
    default="table",
    help="Output format (json or table)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def definitions_describe(
    ctx: click.Context,
    action: str,
    entity: str,
    output: str,
    debug: bool,
):
    """
    Describe the definition of one template command.

    .. dropdown:: Usage Examples
       :open:

       .. code-block:: bash

          # Describe the parameters of "create instance"
          stratus definitions describe create instance
    """
    if debug:
        enable_debug_logging()

    registry = _get_registry(ctx)
    definition = registry.lookup_command(action, entity)
    if definition is None:
        raise click.ClickException(
            f"Unknown definition '{definition_key(action, entity)}'"
        )

    if output == "json":
        click.echo(json.dumps(_definition_to_json_dict(definition), indent=2))
    else:
        click.echo(_format_definition_table(definition))


@definitions.command("check")
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def definitions_check(ctx: click.Context, debug: bool):
    """
    Check the integrity of the definition registry.

    Verifies that every definition targets a known entity, is registered
    under its own key and belongs to an AWS service known to boto3.
    """
    if debug:
        enable_debug_logging()

    registry = _get_registry(ctx)
    validator = TemplateCommandValidator(registry)

    result = validator.validate()
    result.merge(validator.validate_api_namespaces())

    if not result.is_valid:
        raise click.ClickException(
            validator.get_validation_errors_summary(result, subject="Registry")
        )

    click.secho(f"✓ {len(registry)} definitions are consistent", fg="green")


# =============================================================================
# Entities Command
# =============================================================================


@click.command("entities")
@click.option(
    "--output",
    type=click.Choice(["json", "table"]),
    default="table",
    help="Output format (json or table)",
)
@click.pass_context
def entities_list(ctx: click.Context, output: str):
    """
    List the entities template commands can target.

    The count column shows how many definitions target each entity.
    """
    registry = _get_registry(ctx)
    names = sorted(ENTITIES)

    if output == "json":
        click.echo(json.dumps(names, indent=2))
        return

    counts: Dict[str, int] = {name: 0 for name in names}
    for definition in registry.definitions():
        counts[definition.entity] += 1

    click.echo(tabulate(
        [[name, counts[name]] for name in names],
        headers=["Entity", "Definitions"],
        tablefmt="presto",
    ))

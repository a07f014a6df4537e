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
from typing import Optional

import click

from stratus import __version__
from stratus.cli.commands.template import (
    definitions,
    entities_list,
    template_validate,
)
from stratus.template.definitions_file import DEFINITIONS_FILE_ENV_VAR


@click.group()
@click.version_option(__version__, prog_name="stratus")
@click.option(
    "--definitions-file",
    type=click.Path(dir_okay=False),
    envvar=DEFINITIONS_FILE_ENV_VAR,
    help="YAML file adding to, replacing or removing built-in definitions",
)
@click.pass_context
def cli(ctx: click.Context, definitions_file: Optional[str]):
    """Validate and inspect cloud infrastructure template commands."""
    ctx.ensure_object(dict)
    ctx.obj["definitions_file"] = definitions_file


cli.add_command(template_validate)
cli.add_command(definitions)
cli.add_command(entities_list)


if __name__ == "__main__":
    cli()

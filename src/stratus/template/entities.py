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
Entity catalog for template commands.

Every entity token that appears in a template statement must be one of the
names declared here. The vocabulary is closed: names outside of it are never
valid, and nothing adds to it at runtime.
"""

from enum import Enum
from typing import Any, FrozenSet


class Entity(str, Enum):
    """Resource entities a template command can target."""

    NONE = "none"

    ACCESSKEY = "accesskey"
    ALARM = "alarm"
    SCALINGGROUP = "scalinggroup"
    BUCKET = "bucket"
    DATABASE = "database"
    DBSUBNETGROUP = "dbsubnetgroup"
    ELASTICIP = "elasticip"
    FUNCTION = "function"
    GROUP = "group"
    INSTANCE = "instance"
    IMAGE = "image"
    INTERNETGATEWAY = "internetgateway"
    KEYPAIR = "keypair"
    LAUNCHCONFIGURATION = "launchconfiguration"
    LISTENER = "listener"
    LOADBALANCER = "loadbalancer"
    POLICY = "policy"
    QUEUE = "queue"
    RECORD = "record"
    ROLE = "role"
    ROUTE = "route"
    ROUTETABLE = "routetable"
    S3OBJECT = "s3object"
    SCALINGPOLICY = "scalingpolicy"
    SECURITYGROUP = "securitygroup"
    SNAPSHOT = "snapshot"
    SUBNET = "subnet"
    SUBSCRIPTION = "subscription"
    TAG = "tag"
    TARGETGROUP = "targetgroup"
    TOPIC = "topic"
    USER = "user"
    VOLUME = "volume"
    VPC = "vpc"
    ZONE = "zone"


ENTITIES: FrozenSet[str] = frozenset(entity.value for entity in Entity)


def is_valid_entity(name: Any) -> bool:
    """
    Check whether a name belongs to the entity catalog.

    Args:
        name: The entity name to check. Any value is accepted; values that
            are not strings are never valid.

    Returns:
        True if the name is a declared entity (including "none"), False otherwise.
    """
    return isinstance(name, str) and name in ENTITIES


def is_invalid_entity(name: Any) -> bool:
    """Negation of is_valid_entity."""
    return not is_valid_entity(name)

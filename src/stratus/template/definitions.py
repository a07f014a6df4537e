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
"""Built-in template command definitions, grouped by provider API."""

from typing import Sequence, Tuple

from stratus.template.definition import Definition


def _define(
    action: str,
    entity: str,
    api: str,
    required: Sequence[str] = (),
    extra: Sequence[str] = (),
) -> Definition:
    return Definition(
        action=action,
        entity=entity,
        api=api,
        required_params=tuple(required),
        extra_params=tuple(extra),
    )


_WAIT_PARAMS = ("id", "state", "timeout")


EC2_DEFINITIONS: Tuple[Definition, ...] = (
    # VPC and networking
    _define("create", "vpc", "ec2", ["cidr"], ["name"]),
    _define("delete", "vpc", "ec2", ["id"]),
    _define("create", "subnet", "ec2", ["cidr", "vpc"], ["availabilityzone", "name"]),
    _define("update", "subnet", "ec2", ["id"], ["public"]),
    _define("delete", "subnet", "ec2", ["id"]),
    _define("create", "internetgateway", "ec2"),
    _define("delete", "internetgateway", "ec2", ["id"]),
    _define("attach", "internetgateway", "ec2", ["id", "vpc"]),
    _define("detach", "internetgateway", "ec2", ["id", "vpc"]),
    _define("create", "routetable", "ec2", ["vpc"]),
    _define("delete", "routetable", "ec2", ["id"]),
    _define("attach", "routetable", "ec2", ["id", "subnet"]),
    _define("detach", "routetable", "ec2", ["association"]),
    _define("create", "route", "ec2", ["cidr", "gateway", "table"]),
    _define("delete", "route", "ec2", ["cidr", "table"]),
    _define("create", "elasticip", "ec2", ["domain"]),
    _define("delete", "elasticip", "ec2", [], ["id", "ip"]),
    _define(
        "attach", "elasticip", "ec2", ["id"],
        ["instance", "networkinterface", "privateip", "allow-reassociation"],
    ),
    _define("detach", "elasticip", "ec2", ["association"]),
    # Instances
    _define(
        "create", "instance", "ec2", ["image", "count", "type", "subnet"],
        ["keypair", "ip", "userdata", "securitygroup", "lock"],
    ),
    _define("update", "instance", "ec2", ["id"], ["type", "lock"]),
    _define("delete", "instance", "ec2", ["id"]),
    _define("start", "instance", "ec2", ["id"]),
    _define("stop", "instance", "ec2", ["id"]),
    _define("check", "instance", "ec2", _WAIT_PARAMS),
    _define("create", "keypair", "ec2", ["name"]),
    _define("delete", "keypair", "ec2", ["id"]),
    _define("create", "tag", "ec2", ["resource", "key", "value"]),
    _define("delete", "tag", "ec2", ["resource", "key", "value"]),
    # Security groups
    _define("create", "securitygroup", "ec2", ["description", "name", "vpc"]),
    _define(
        "update", "securitygroup", "ec2", ["cidr", "id", "protocol"],
        ["inbound", "outbound", "portrange"],
    ),
    _define("delete", "securitygroup", "ec2", ["id"]),
    _define("check", "securitygroup", "ec2", _WAIT_PARAMS),
    _define("attach", "securitygroup", "ec2", ["id", "instance"]),
    _define("detach", "securitygroup", "ec2", ["id", "instance"]),
    # Storage
    _define("create", "volume", "ec2", ["availabilityzone", "size"]),
    _define("delete", "volume", "ec2", ["id"]),
    _define("check", "volume", "ec2", _WAIT_PARAMS),
    _define("attach", "volume", "ec2", ["device", "id", "instance"]),
    _define("detach", "volume", "ec2", ["device", "id", "instance"], ["force"]),
    _define("create", "snapshot", "ec2", ["volume"], ["description"]),
    _define("delete", "snapshot", "ec2", ["id"]),
    _define(
        "copy", "snapshot", "ec2", ["source-id", "source-region"],
        ["description", "encrypted"],
    ),
    _define("create", "image", "ec2", ["instance", "name"], ["description", "reboot"]),
    _define(
        "copy", "image", "ec2", ["name", "source-id", "source-region"],
        ["description", "encrypted"],
    ),
    _define(
        "import", "image", "ec2", [],
        ["architecture", "bucket", "description", "license", "platform", "role", "s3object", "snapshot", "url"],
    ),
    _define("delete", "image", "ec2", ["id"], ["delete-snapshots"]),
)

ELBV2_DEFINITIONS: Tuple[Definition, ...] = (
    _define(
        "create", "loadbalancer", "elbv2", ["name", "subnets"],
        ["iptype", "scheme", "securitygroups"],
    ),
    _define("delete", "loadbalancer", "elbv2", ["id"]),
    _define("check", "loadbalancer", "elbv2", _WAIT_PARAMS),
    _define(
        "create", "listener", "elbv2",
        ["actiontype", "loadbalancer", "port", "protocol", "targetgroup"],
        ["certificate", "sslpolicy"],
    ),
    _define("delete", "listener", "elbv2", ["id"]),
    _define(
        "create", "targetgroup", "elbv2", ["name", "port", "protocol", "vpc"],
        [
            "healthcheckinterval",
            "healthcheckpath",
            "healthcheckport",
            "healthcheckprotocol",
            "healthchecktimeout",
            "healthythreshold",
            "unhealthythreshold",
            "matcher",
        ],
    ),
    _define("delete", "targetgroup", "elbv2", ["id"]),
    _define("attach", "instance", "elbv2", ["id", "targetgroup"], ["port"]),
    _define("detach", "instance", "elbv2", ["id", "targetgroup"]),
)

AUTOSCALING_DEFINITIONS: Tuple[Definition, ...] = (
    _define(
        "create", "launchconfiguration", "autoscaling", ["image", "name", "type"],
        ["keypair", "public", "role", "securitygroups", "spotprice", "userdata"],
    ),
    _define("delete", "launchconfiguration", "autoscaling", ["id"]),
    _define(
        "create", "scalinggroup", "autoscaling",
        ["launchconfiguration", "max-size", "min-size", "name", "subnets"],
        [
            "cooldown",
            "desired-capacity",
            "healthcheck-grace-period",
            "healthcheck-type",
            "new-instances-protected",
            "targetgroups",
        ],
    ),
    _define(
        "update", "scalinggroup", "autoscaling", ["name"],
        [
            "cooldown",
            "desired-capacity",
            "healthcheck-grace-period",
            "healthcheck-type",
            "launchconfiguration",
            "max-size",
            "min-size",
            "new-instances-protected",
            "subnets",
        ],
    ),
    _define("delete", "scalinggroup", "autoscaling", ["id"], ["force"]),
    _define("check", "scalinggroup", "autoscaling", ["count", "name", "timeout"]),
    _define(
        "create", "scalingpolicy", "autoscaling",
        ["adjustment-scaling", "adjustment-type", "name", "scalinggroup"],
        ["adjustment-magnitude", "cooldown"],
    ),
    _define("delete", "scalingpolicy", "autoscaling", ["id"]),
)

RDS_DEFINITIONS: Tuple[Definition, ...] = (
    _define(
        "create", "database", "rds",
        ["engine", "id", "password", "size", "type", "username"],
        [
            "autoupgrade",
            "availabilityzone",
            "backupretention",
            "cluster",
            "dbname",
            "dbsecuritygroups",
            "dbsubnetgroup",
            "encrypted",
            "iops",
            "license",
            "multiaz",
            "optiongroup",
            "parametergroup",
            "port",
            "public",
            "storagetype",
            "timezone",
            "vpcsecuritygroups",
        ],
    ),
    _define("delete", "database", "rds", ["id"], ["skipsnapshot", "snapshot"]),
    _define("check", "database", "rds", _WAIT_PARAMS),
    _define("create", "dbsubnetgroup", "rds", ["description", "name", "subnets"]),
    _define("delete", "dbsubnetgroup", "rds", ["id"]),
)

CLOUDWATCH_DEFINITIONS: Tuple[Definition, ...] = (
    _define(
        "create", "alarm", "cloudwatch",
        [
            "evaluation-periods",
            "metric",
            "name",
            "namespace",
            "operator",
            "period",
            "statistic-function",
            "threshold",
        ],
        [
            "alarm-actions",
            "description",
            "dimensions",
            "enabled",
            "insufficientdata-actions",
            "ok-actions",
            "unit",
        ],
    ),
    _define("delete", "alarm", "cloudwatch", ["name"]),
    _define("start", "alarm", "cloudwatch", ["names"]),
    _define("stop", "alarm", "cloudwatch", ["names"]),
    _define("attach", "alarm", "cloudwatch", ["action-arn", "name"]),
    _define("detach", "alarm", "cloudwatch", ["action-arn", "name"]),
)

IAM_DEFINITIONS: Tuple[Definition, ...] = (
    _define("create", "user", "iam", ["name"]),
    _define("delete", "user", "iam", ["name"]),
    _define("attach", "user", "iam", ["group", "name"]),
    _define("detach", "user", "iam", ["group", "name"]),
    _define("create", "accesskey", "iam", ["user"]),
    _define("delete", "accesskey", "iam", ["id"], ["user"]),
    _define("create", "group", "iam", ["name"]),
    _define("delete", "group", "iam", ["name"]),
    _define(
        "create", "role", "iam", ["name"],
        ["principal-account", "principal-service", "sleep-after"],
    ),
    _define("delete", "role", "iam", ["name"]),
    _define("attach", "role", "iam", ["instanceprofile", "name"]),
    _define("detach", "role", "iam", ["instanceprofile", "name"]),
    _define("create", "policy", "iam", ["action", "effect", "name", "resource"], ["description"]),
    _define("delete", "policy", "iam", ["arn"]),
    _define("attach", "policy", "iam", ["arn"], ["group", "role", "user"]),
    _define("detach", "policy", "iam", ["arn"], ["group", "role", "user"]),
)

S3_DEFINITIONS: Tuple[Definition, ...] = (
    _define("create", "bucket", "s3", ["name"]),
    _define("update", "bucket", "s3", ["name"], ["acl", "public-website", "redirect-hostname"]),
    _define("delete", "bucket", "s3", ["name"]),
    _define("create", "s3object", "s3", ["bucket", "file"], ["name"]),
    _define("update", "s3object", "s3", ["acl", "bucket", "name"]),
    _define("delete", "s3object", "s3", ["bucket", "name"]),
)

MESSAGING_DEFINITIONS: Tuple[Definition, ...] = (
    _define("create", "topic", "sns", ["name"]),
    _define("delete", "topic", "sns", ["id"]),
    _define("create", "subscription", "sns", ["endpoint", "protocol", "topic"]),
    _define("delete", "subscription", "sns", ["id"]),
    _define(
        "create", "queue", "sqs", ["name"],
        [
            "delay",
            "max-msg-size",
            "msg-wait",
            "policy",
            "redrive-policy",
            "retention-period",
            "visibility-timeout",
        ],
    ),
    _define("delete", "queue", "sqs", ["url"]),
)

ROUTE53_DEFINITIONS: Tuple[Definition, ...] = (
    _define(
        "create", "zone", "route53", ["callerreference", "name"],
        ["comment", "delegationsetid", "isprivate", "vpcid", "vpcregion"],
    ),
    _define("delete", "zone", "route53", ["id"]),
    _define("create", "record", "route53", ["name", "ttl", "type", "value", "zone"], ["comment"]),
    _define("delete", "record", "route53", ["name", "ttl", "type", "value", "zone"]),
)

LAMBDA_DEFINITIONS: Tuple[Definition, ...] = (
    _define(
        "create", "function", "lambda", ["handler", "name", "role", "runtime"],
        ["bucket", "description", "memory", "object", "objectversion", "publish", "timeout", "zipfile"],
    ),
    _define("delete", "function", "lambda", ["id"], ["version"]),
)

BUILTIN_DEFINITIONS: Tuple[Definition, ...] = (
    EC2_DEFINITIONS
    + ELBV2_DEFINITIONS
    + AUTOSCALING_DEFINITIONS
    + RDS_DEFINITIONS
    + CLOUDWATCH_DEFINITIONS
    + IAM_DEFINITIONS
    + S3_DEFINITIONS
    + MESSAGING_DEFINITIONS
    + ROUTE53_DEFINITIONS
    + LAMBDA_DEFINITIONS
)

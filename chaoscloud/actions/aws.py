"""
AWS fault injection actions.
"""
from collections import OrderedDict

from botocore.client import BaseClient

from chaoscloud.common import Response, AWS_STATE_RUNNING, AWS_STATE_STOPPED
from chaoscloud.execute.execute import AwsChannel
from chaoscloud.guard import (
    ActionExecutor,
    Flag,
    OperationRequest,
    ResourceKind,
    Transition,
)
from chaoscloud.helpers import split_list
from chaoscloud.probes import aws as probes

from typing import Callable


def start_instances(client: BaseClient,
                    request: OperationRequest) -> None:
    client.start_instances(InstanceIds=split_list(request.flags["instances"]))


def stop_instances(client: BaseClient,
                   request: OperationRequest) -> None:
    client.stop_instances(InstanceIds=split_list(request.flags["instances"]))


def reboot_instances(client: BaseClient,
                     request: OperationRequest) -> None:
    client.reboot_instances(InstanceIds=split_list(request.flags["instances"]))


def _any_instance_in(state: str) -> Callable:
    def flipped(observed, request):
        return any(observed.get(instance) == state
                   for instance in split_list(request.flags["instances"]))
    return flipped


EC2 = ResourceKind(
    "aws", "ec2",
    flags=[Flag("instances", "the instances list, split by comma")],
    transitions=[
        Transition("start", "start aws instances",
                   probes.describe_instances_status, start_instances,
                   inverse="stop",
                   flipped=_any_instance_in(AWS_STATE_RUNNING),
                   required=["instances"]),
        Transition("stop", "stop aws instances",
                   probes.describe_instances_status, stop_instances,
                   inverse="start",
                   flipped=_any_instance_in(AWS_STATE_STOPPED),
                   required=["instances"]),
        Transition("reboot", "reboot aws instances",
                   probes.describe_instances_status, reboot_instances,
                   required=["instances"]),
    ],
    short_desc="do some aws ec2 Operations, like stop, start, reboot",
    example="""
# stop instances which instance id is i-x,i-y
chaoscloud aws ec2 --accessKeyId xxx --accessKeySecret yyy --regionId us-west-2 --type stop --instances i-x,i-y

# start instances which instance id is i-x,i-y
chaoscloud aws ec2 --accessKeyId xxx --accessKeySecret yyy --regionId us-west-2 --type start --instances i-x,i-y

# reboot instances which instance id is i-x,i-y
chaoscloud aws ec2 --accessKeyId xxx --accessKeySecret yyy --regionId us-west-2 --type reboot --instances i-x,i-y""",
    list_flags=["instances"])


KINDS = OrderedDict([(EC2.name, EC2)])


def ec2(operation_type: str, instances: str, region_id: str,
        access_key_id: str = None, access_key_secret: str = None,
        uid: str = None) -> Response:
    """
    Start, stop or reboot EC2 instances.

    Running instances asked to start are stopped and stopped instances asked
    to stop are started, so repeating a call reverts the previous one.

    :param operation_type: start, stop or reboot. Required.
    :type operation_type: str
    :param instances: Comma separated instance ids. Required.
    :type instances: str
    :param region_id: i.e. us-west-2. Required.
    :type region_id: str
    :param access_key_id: Optional. (Default: env ACCESS_KEY_ID)
    :type access_key_id: str
    :param access_key_secret: Optional. (Default: env ACCESS_KEY_SECRET)
    :type access_key_secret: str
    :param uid: Experiment identifier for log correlation.
        Optional. (Default: None)
    :type uid: str
    :return: Response
    """
    executor = ActionExecutor(EC2, AwsChannel())
    return executor.exec(uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "instances": instances,
    })

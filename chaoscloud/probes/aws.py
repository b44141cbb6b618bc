from botocore.client import BaseClient

from chaoscloud.guard import OperationRequest
from chaoscloud.helpers import split_list

from typing import Dict


def describe_instances_status(client: BaseClient,
                              request: OperationRequest) -> Dict[str, str]:
    """
    Map each requested EC2 instance id to its state name (i.e. running,
    stopped).

    IncludeAllInstances is required, otherwise EC2 only reports running
    instances.

    :param client: A boto3 EC2 client
    :param request: The OperationRequest
    :type request: chaoscloud.guard.OperationRequest
    :return: Dict[str, str]
    """
    instances = split_list(request.flags["instances"])
    response = client.describe_instance_status(InstanceIds=instances,
                                               IncludeAllInstances=True)
    status_map = {}
    for status in response.get("InstanceStatuses", []):
        status_map[status["InstanceId"]] = status["InstanceState"]["Name"]
    return status_map

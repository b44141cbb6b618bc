"""
Read-only Aliyun ECS OpenAPI probes.

Each probe issues a single describe call and returns a RemoteStatus mapping
keyed by resource identifier. Probes never mutate remote state and never cache
results.
"""
import json

from alibabacloud_ecs20140526 import models as ecs_models
from alibabacloud_ecs20140526.client import Client as EcsClient
from logzero import logger

from chaoscloud.common import (
    ALIYUN_STATUS_IN_USE,
    DEFAULT_CHAOS_ALIYUN_PAGE_SIZE,
)
from chaoscloud.guard import OperationRequest
from chaoscloud.helpers import split_list

from typing import Callable, Dict, List


def _paged(describe: Callable, build_request: Callable,
           items_of: Callable) -> List:
    """
    Collect every item of a paginated describe call.

    :param describe: The client method (i.e. client.describe_disks)
    :param build_request: Builds the request model for a page number.
    :param items_of: Extracts the item list from a response body.
    :return: List
    """
    items = []
    page_number = 1
    while True:
        body = describe(build_request(page_number)).body
        page = items_of(body) or []
        items.extend(page)
        if not page or len(items) >= (body.total_count or 0):
            return items
        page_number += 1


def describe_instances_status(client: EcsClient,
                              request: OperationRequest) -> Dict[str, str]:
    """
    Map each requested instance id to its status (i.e. Running, Stopped).
    """
    instances = split_list(request.flags["instances"])

    def build_request(page_number):
        return ecs_models.DescribeInstanceStatusRequest(
            region_id=request.identity.region_id,
            instance_id=instances,
            page_number=page_number,
            page_size=DEFAULT_CHAOS_ALIYUN_PAGE_SIZE
        )

    status_map = {}
    for instance_status in _paged(
            client.describe_instance_status, build_request,
            lambda body: body.instance_statuses.instance_status):
        status_map[instance_status.instance_id] = instance_status.status
    return status_map


def describe_disks_status(client: EcsClient,
                          request: OperationRequest) -> Dict[str, str]:
    """
    Map each disk of the instance to its status (i.e. In_use, Available).
    """
    def build_request(page_number):
        return ecs_models.DescribeDisksRequest(
            region_id=request.identity.region_id,
            instance_id=request.flags["instanceId"],
            page_number=page_number,
            page_size=DEFAULT_CHAOS_ALIYUN_PAGE_SIZE
        )

    status_map = {}
    for disk in _paged(client.describe_disks, build_request,
                       lambda body: body.disks.disk):
        status_map[disk.disk_id] = disk.status
    return status_map


def describe_network_interface_status(
        client: EcsClient, request: OperationRequest) -> Dict[str, str]:
    describe_request = ecs_models.DescribeNetworkInterfacesRequest(
        region_id=request.identity.region_id,
        instance_id=request.flags["instanceId"] or None,
        network_interface_id=[request.flags["networkInterfaceId"]]
    )
    response = client.describe_network_interfaces(describe_request)
    status_map = {}
    for network_interface in \
            response.body.network_interface_sets.network_interface_set:
        status_map[network_interface.network_interface_id] = \
            network_interface.status
    return status_map


def _describe_network_interface_attribute(client: EcsClient,
                                          request: OperationRequest):
    describe_request = ecs_models.DescribeNetworkInterfaceAttributeRequest(
        region_id=request.identity.region_id,
        network_interface_id=request.flags["networkInterfaceId"]
    )
    return client.describe_network_interface_attribute(describe_request).body


def describe_private_ip_status(client: EcsClient,
                               request: OperationRequest) -> Dict[str, str]:
    """
    Map every private IP currently assigned to the network interface,
    primary included, to InUse. Unassigned addresses are absent.
    """
    body = _describe_network_interface_attribute(client, request)
    status_map = {}
    if body.private_ip_address:
        status_map[body.private_ip_address] = ALIYUN_STATUS_IN_USE
    if body.private_ip_sets and body.private_ip_sets.private_ip_set:
        for private_ip in body.private_ip_sets.private_ip_set:
            status_map[private_ip.private_ip_address] = ALIYUN_STATUS_IN_USE
    return status_map


def _describe_instances(client: EcsClient, region_id: str,
                        instance_id: str) -> List:
    describe_request = ecs_models.DescribeInstancesRequest(
        region_id=region_id,
        instance_ids=json.dumps([instance_id])
    )
    response = client.describe_instances(describe_request)
    return response.body.instances.instance


def describe_instance_public_ips(
        client: EcsClient, request: OperationRequest) -> Dict[str, List[str]]:
    """
    Map the instance id to the list of public IPs currently allocated to it.
    """
    status_map = {}
    for instance in _describe_instances(client, request.identity.region_id,
                                        request.flags["instanceId"]):
        ip_list = []
        if instance.public_ip_address and \
                instance.public_ip_address.ip_address:
            ip_list = list(instance.public_ip_address.ip_address)
        status_map[instance.instance_id] = ip_list
    return status_map


def describe_eip_addresses(client: EcsClient,
                           request: OperationRequest) -> Dict[str, str]:
    """
    Map each EIP address matching the allocation id to its status (i.e. InUse,
    Available).
    """
    describe_request = ecs_models.DescribeEipAddressesRequest(
        region_id=request.identity.region_id,
        allocation_id=request.flags["allocationId"],
        eip_address=request.flags["publicIpAddress"]
    )
    response = client.describe_eip_addresses(describe_request)
    status_map = {}
    for eip_address in response.body.eip_addresses.eip_address:
        status_map[eip_address.ip_address] = eip_address.status
    return status_map


def describe_security_groups(
        client: EcsClient, request: OperationRequest) -> Dict[str, List[str]]:
    """
    Map the security group owner (network interface id when given, otherwise
    instance id) to the security group ids it belongs to.
    """
    network_interface_id = request.flags["networkInterfaceId"]
    if network_interface_id:
        body = _describe_network_interface_attribute(client, request)
        group_ids = []
        if body.security_group_ids and \
                body.security_group_ids.security_group_id:
            group_ids = list(body.security_group_ids.security_group_id)
        return {network_interface_id: group_ids}

    status_map = {}
    for instance in _describe_instances(client, request.identity.region_id,
                                        request.flags["instanceId"]):
        group_ids = []
        if instance.security_group_ids and \
                instance.security_group_ids.security_group_id:
            group_ids = list(instance.security_group_ids.security_group_id)
        status_map[instance.instance_id] = group_ids
    logger.debug("security groups by instance: %s", status_map)
    return status_map


def describe_vswitches_status(client: EcsClient,
                              request: OperationRequest) -> Dict[str, str]:
    def build_request(page_number):
        return ecs_models.DescribeVSwitchesRequest(
            region_id=request.identity.region_id,
            v_switch_id=request.flags["vSwitchId"] or None,
            page_number=page_number,
            page_size=DEFAULT_CHAOS_ALIYUN_PAGE_SIZE
        )

    status_map = {}
    for v_switch in _paged(client.describe_vswitches, build_request,
                           lambda body: body.v_switches.v_switch):
        status_map[v_switch.v_switch_id] = v_switch.status
    return status_map

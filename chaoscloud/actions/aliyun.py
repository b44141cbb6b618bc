"""
Aliyun fault injection actions.

Each resource kind below is a table of Transitions consumed by
chaoscloud.guard.ActionExecutor. The module level functions (ecs, disk, ...)
are the entry points used from a Chaos Toolkit experiment. They build a fresh
AliyunChannel per call.

Invoking the same action twice toggles the resource. For example, calling
ecs(operation_type="stop", ...) stops running instances and starts them again
on the next call, once they are reported Stopped.
"""
from collections import OrderedDict

from alibabacloud_ecs20140526 import models as ecs_models
from alibabacloud_ecs20140526.client import Client as EcsClient

from chaoscloud.common import (
    Response,
    ALIYUN_STATUS_AVAILABLE,
    ALIYUN_STATUS_DISK_IN_USE,
    ALIYUN_STATUS_IN_USE,
    ALIYUN_STATUS_RUNNING,
    ALIYUN_STATUS_STOPPED,
    ChaosCloudError,
    ResponseCode,
)
from chaoscloud.execute.execute import AliyunChannel
from chaoscloud.guard import (
    ActionExecutor,
    Flag,
    OperationRequest,
    ResourceKind,
    Transition,
)
from chaoscloud.helpers import split_list
from chaoscloud.probes import aliyun as probes

from typing import Callable, Dict


# ecs
def start_instances(client: EcsClient,
                    request: OperationRequest) -> None:
    client.start_instances(ecs_models.StartInstancesRequest(
        region_id=request.identity.region_id,
        instance_id=split_list(request.flags["instances"])
    ))


def stop_instances(client: EcsClient,
                   request: OperationRequest) -> None:
    client.stop_instances(ecs_models.StopInstancesRequest(
        region_id=request.identity.region_id,
        instance_id=split_list(request.flags["instances"])
    ))


def reboot_instances(client: EcsClient,
                     request: OperationRequest) -> None:
    client.reboot_instances(ecs_models.RebootInstancesRequest(
        region_id=request.identity.region_id,
        instance_id=split_list(request.flags["instances"])
    ))


def _any_instance_in(status: str) -> Callable:
    def flipped(observed, request):
        return any(observed.get(instance) == status
                   for instance in split_list(request.flags["instances"]))
    return flipped


ECS = ResourceKind(
    "aliyun", "ecs",
    flags=[Flag("instances", "the instances list, split by comma")],
    transitions=[
        Transition("start", "start aliyun instances",
                   probes.describe_instances_status, start_instances,
                   inverse="stop",
                   flipped=_any_instance_in(ALIYUN_STATUS_RUNNING),
                   required=["instances"]),
        Transition("stop", "stop aliyun instances",
                   probes.describe_instances_status, stop_instances,
                   inverse="start",
                   flipped=_any_instance_in(ALIYUN_STATUS_STOPPED),
                   required=["instances"]),
        Transition("reboot", "reboot aliyun instances",
                   probes.describe_instances_status, reboot_instances,
                   required=["instances"]),
    ],
    short_desc="do some aliyun ecs Operations, like stop, start, reboot",
    example="""
# stop instances which instance id is i-x,i-y
chaoscloud aliyun ecs --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type stop --instances i-x,i-y

# start instances which instance id is i-x,i-y
chaoscloud aliyun ecs --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type start --instances i-x,i-y

# reboot instances which instance id is i-x,i-y
chaoscloud aliyun ecs --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type reboot --instances i-x,i-y""",
    list_flags=["instances"])


def _status_of(flag: str, status: str, negate: bool = False) -> Callable:
    """
    Flip predicate over a single identifier's status.
    """
    def flipped(observed, request):
        matches = observed.get(request.flags[flag]) == status
        return not matches if negate else matches
    return flipped


# disk
def attach_disk(client: EcsClient,
                request: OperationRequest) -> None:
    client.attach_disk(ecs_models.AttachDiskRequest(
        instance_id=request.flags["instanceId"],
        disk_id=request.flags["diskId"]
    ))


def detach_disk(client: EcsClient,
                request: OperationRequest) -> None:
    client.detach_disk(ecs_models.DetachDiskRequest(
        instance_id=request.flags["instanceId"],
        disk_id=request.flags["diskId"],
        delete_with_instance=False
    ))


DISK = ResourceKind(
    "aliyun", "disk",
    flags=[Flag("diskId", "the diskId"),
           Flag("instanceId", "the instanceId")],
    transitions=[
        Transition("detach", "detach aliyun disk",
                   probes.describe_disks_status, detach_disk,
                   inverse="attach",
                   flipped=_status_of("diskId", ALIYUN_STATUS_DISK_IN_USE,
                                      negate=True),
                   required=["diskId", "instanceId"]),
        Transition("attach", "attach aliyun disk",
                   probes.describe_disks_status, attach_disk,
                   inverse="detach",
                   flipped=_status_of("diskId", ALIYUN_STATUS_DISK_IN_USE),
                   required=["diskId", "instanceId"]),
    ],
    short_desc="do some aliyun disk Operations, like detach, attach",
    example="""
# detach disk y from instance i-x
chaoscloud aliyun disk --accessKeyId xxx --accessKeySecret yyy --regionId cn-hangzhou --type detach --instanceId i-x --diskId y

# attach disk y to instance i-x
chaoscloud aliyun disk --accessKeyId xxx --accessKeySecret yyy --regionId cn-hangzhou --type attach --instanceId i-x --diskId y""")


# networkInterface
def attach_network_interface(client: EcsClient,
                             request: OperationRequest) -> None:
    client.attach_network_interface(ecs_models.AttachNetworkInterfaceRequest(
        region_id=request.identity.region_id,
        network_interface_id=request.flags["networkInterfaceId"],
        instance_id=request.flags["instanceId"]
    ))


def detach_network_interface(client: EcsClient,
                             request: OperationRequest) -> None:
    client.detach_network_interface(ecs_models.DetachNetworkInterfaceRequest(
        region_id=request.identity.region_id,
        network_interface_id=request.flags["networkInterfaceId"],
        instance_id=request.flags["instanceId"]
    ))


NETWORK_INTERFACE = ResourceKind(
    "aliyun", "networkInterface",
    flags=[Flag("networkInterfaceId", "the networkInterfaceId"),
           Flag("instanceId", "the ecs instanceId")],
    transitions=[
        Transition("detach", "detach aliyun network interface",
                   probes.describe_network_interface_status,
                   detach_network_interface,
                   inverse="attach",
                   flipped=_status_of("networkInterfaceId",
                                      ALIYUN_STATUS_IN_USE, negate=True),
                   required=["networkInterfaceId", "instanceId"]),
        Transition("attach", "attach aliyun network interface",
                   probes.describe_network_interface_status,
                   attach_network_interface,
                   inverse="detach",
                   flipped=_status_of("networkInterfaceId",
                                      ALIYUN_STATUS_IN_USE),
                   required=["networkInterfaceId", "instanceId"]),
    ],
    short_desc="do some aliyun networkInterface Operations, like attach, "
               "detach",
    example="""
# detach network interface y from instance i-x
chaoscloud aliyun networkInterface --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type detach --instanceId i-x --networkInterfaceId y

# attach network interface y to instance i-x
chaoscloud aliyun networkInterface --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type attach --instanceId i-x --networkInterfaceId y""")


# privateIp
def assign_private_ip_addresses(client: EcsClient,
                                request: OperationRequest) -> None:
    client.assign_private_ip_addresses(
        ecs_models.AssignPrivateIpAddressesRequest(
            region_id=request.identity.region_id,
            network_interface_id=request.flags["networkInterfaceId"],
            private_ip_address=split_list(request.flags["privateIpAddress"])
        ))


def unassign_private_ip_addresses(client: EcsClient,
                                  request: OperationRequest) -> None:
    client.unassign_private_ip_addresses(
        ecs_models.UnassignPrivateIpAddressesRequest(
            region_id=request.identity.region_id,
            network_interface_id=request.flags["networkInterfaceId"],
            private_ip_address=split_list(request.flags["privateIpAddress"])
        ))


def _any_private_ip(in_use: bool) -> Callable:
    def flipped(observed, request):
        return any((observed.get(ip) == ALIYUN_STATUS_IN_USE) == in_use
                   for ip in split_list(request.flags["privateIpAddress"]))
    return flipped


PRIVATE_IP = ResourceKind(
    "aliyun", "privateIp",
    flags=[Flag("networkInterfaceId", "the networkInterfaceId"),
           Flag("privateIpAddress", "the privateIpAddress list, split by "
                "comma")],
    transitions=[
        Transition("unassign", "unassign aliyun private Ip",
                   probes.describe_private_ip_status,
                   unassign_private_ip_addresses,
                   inverse="assign",
                   flipped=_any_private_ip(in_use=False),
                   required=["networkInterfaceId", "privateIpAddress"]),
        Transition("assign", "assign aliyun private Ip",
                   probes.describe_private_ip_status,
                   assign_private_ip_addresses,
                   inverse="unassign",
                   flipped=_any_private_ip(in_use=True),
                   required=["networkInterfaceId", "privateIpAddress"]),
    ],
    short_desc="do some aliyun private Ip Operations, like unassign",
    example="""
# unassign private ip 172.16.0.2 from network interface y
chaoscloud aliyun privateIp --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type unassign --networkInterfaceId y --privateIpAddress 172.16.0.2""",
    list_flags=["privateIpAddress"])


# publicIp
def release_public_ip_address(client: EcsClient,
                              request: OperationRequest) -> None:
    client.release_public_ip_address(ecs_models.ReleasePublicIpAddressRequest(
        public_ip_address=request.flags["publicIpAddress"],
        instance_id=request.flags["instanceId"]
    ))


def allocate_public_ip_address(client: EcsClient,
                               request: OperationRequest) -> None:
    client.allocate_public_ip_address(
        ecs_models.AllocatePublicIpAddressRequest(
            ip_address=request.flags["publicIpAddress"],
            instance_id=request.flags["instanceId"]
        ))


def unassociate_eip_address(client: EcsClient,
                            request: OperationRequest) -> None:
    client.unassociate_eip_address(ecs_models.UnassociateEipAddressRequest(
        allocation_id=request.flags["allocationId"],
        instance_id=request.flags["instanceId"],
        region_id=request.identity.region_id
    ))


def associate_eip_address(client: EcsClient,
                          request: OperationRequest) -> None:
    client.associate_eip_address(ecs_models.AssociateEipAddressRequest(
        allocation_id=request.flags["allocationId"],
        instance_id=request.flags["instanceId"],
        region_id=request.identity.region_id
    ))


def _public_ip_allocated(allocated: bool) -> Callable:
    def flipped(observed, request):
        ips = observed.get(request.flags["instanceId"], [])
        return (request.flags["publicIpAddress"] in ips) == allocated
    return flipped


PUBLIC_IP_FIELDS = ["publicIpAddress", "instanceId"]
EIP_FIELDS = ["allocationId", "instanceId", "publicIpAddress"]

PUBLIC_IP = ResourceKind(
    "aliyun", "publicIp",
    flags=[Flag("allocationId", "the allocationId"),
           Flag("publicIpAddress", "the PublicIpAddress"),
           Flag("instanceId", "the instanceId")],
    transitions=[
        Transition("release", "release aliyun public Ip",
                   probes.describe_instance_public_ips,
                   release_public_ip_address,
                   inverse="associate",
                   flipped=_public_ip_allocated(False),
                   required=PUBLIC_IP_FIELDS),
        Transition("associate", "allocate aliyun public Ip",
                   probes.describe_instance_public_ips,
                   allocate_public_ip_address,
                   inverse="release",
                   flipped=_public_ip_allocated(True),
                   required=PUBLIC_IP_FIELDS),
        Transition("unassociateEip", "unassociate aliyun Eip Address",
                   probes.describe_eip_addresses, unassociate_eip_address,
                   inverse="associateEip",
                   flipped=_status_of("publicIpAddress", ALIYUN_STATUS_IN_USE,
                                      negate=True),
                   required=EIP_FIELDS),
        Transition("associateEip", "associate aliyun Eip Address",
                   probes.describe_eip_addresses, associate_eip_address,
                   inverse="unassociateEip",
                   flipped=_status_of("publicIpAddress",
                                      ALIYUN_STATUS_IN_USE),
                   required=EIP_FIELDS),
    ],
    short_desc="do some aliyun public Ip Operations, like release, "
               "unassociateEip",
    example="""
# release public ip 1.1.1.1 of instance i-x
chaoscloud aliyun publicIp --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type release --instanceId i-x --publicIpAddress 1.1.1.1

# unassociate eip y (address 1.1.1.1) from instance i-x
chaoscloud aliyun publicIp --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type unassociateEip --instanceId i-x --allocationId y --publicIpAddress 1.1.1.1""")


# securityGroup
def _security_group_target(request: OperationRequest) -> Dict[str, str]:
    network_interface_id = request.flags["networkInterfaceId"]
    if network_interface_id:
        return {"region_id": request.identity.region_id,
                "network_interface_id": network_interface_id}
    return {"instance_id": request.flags["instanceId"]}


def join_security_group(client: EcsClient,
                        request: OperationRequest) -> None:
    client.join_security_group(ecs_models.JoinSecurityGroupRequest(
        security_group_id=request.flags["securityGroupId"],
        **_security_group_target(request)
    ))


def leave_security_group(client: EcsClient,
                         request: OperationRequest) -> None:
    client.leave_security_group(ecs_models.LeaveSecurityGroupRequest(
        security_group_id=request.flags["securityGroupId"],
        **_security_group_target(request)
    ))


def _security_group_joined(joined: bool) -> Callable:
    def flipped(observed, request):
        owner = request.flags["networkInterfaceId"] or \
            request.flags["instanceId"]
        group_ids = observed.get(owner, [])
        return (request.flags["securityGroupId"] in group_ids) == joined
    return flipped


def validate_security_group_owner(flags: Dict[str, str]) -> None:
    if flags["instanceId"] and flags["networkInterfaceId"]:
        raise ChaosCloudError(ResponseCode.PARAMETER_INVALID,
                              "instanceId and networkInterfaceId can not "
                              "exist both")
    if not flags["instanceId"] and not flags["networkInterfaceId"]:
        raise ChaosCloudError(ResponseCode.PARAMETER_LESS, "instanceId")


SECURITY_GROUP = ResourceKind(
    "aliyun", "securityGroup",
    flags=[Flag("securityGroupId", "the SecurityGroupId"),
           Flag("instanceId", "the ecs instanceId"),
           Flag("networkInterfaceId", "the networkInterfaceId")],
    transitions=[
        Transition("remove", "remove instance from aliyun securityGroup",
                   probes.describe_security_groups, leave_security_group,
                   inverse="join",
                   flipped=_security_group_joined(False),
                   required=["securityGroupId"]),
        Transition("join", "add instance to aliyun securityGroup",
                   probes.describe_security_groups, join_security_group,
                   inverse="remove",
                   flipped=_security_group_joined(True),
                   required=["securityGroupId"]),
    ],
    short_desc="do some aliyun securityGroupId Operations, like remove, join",
    example="""
# remove instance i-x from security group s-x
chaoscloud aliyun securityGroup --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type remove --securityGroupId s-x --instanceId i-x

# add network interface n-x to security group s-x
chaoscloud aliyun securityGroup --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type join --securityGroupId s-x --networkInterfaceId n-x""",
    validate=validate_security_group_owner)


# vSwitch
def create_vswitch(client: EcsClient,
                   request: OperationRequest) -> None:
    client.create_vswitch(ecs_models.CreateVSwitchRequest(
        region_id=request.identity.region_id,
        zone_id=request.flags["zoneId"],
        cidr_block=request.flags["cidrBlock"],
        vpc_id=request.flags["vpcId"]
    ))


def delete_vswitch(client: EcsClient,
                   request: OperationRequest) -> None:
    client.delete_vswitch(ecs_models.DeleteVSwitchRequest(
        region_id=request.identity.region_id,
        v_switch_id=request.flags["vSwitchId"]
    ))


V_SWITCH = ResourceKind(
    "aliyun", "vSwitch",
    flags=[Flag("vSwitchId", "the VSwitchId"),
           Flag("zoneId", "the zoneId the vSwitch is created in"),
           Flag("cidrBlock", "the cidrBlock of the vSwitch"),
           Flag("vpcId", "the vpcId the vSwitch belongs to")],
    transitions=[
        Transition("delete", "delete aliyun vSwitch",
                   probes.describe_vswitches_status, delete_vswitch,
                   inverse="create",
                   flipped=_status_of("vSwitchId", ALIYUN_STATUS_AVAILABLE,
                                      negate=True),
                   required=["vSwitchId"]),
        Transition("create", "create aliyun vSwitch",
                   probes.describe_vswitches_status, create_vswitch,
                   inverse="delete",
                   flipped=_status_of("vSwitchId", ALIYUN_STATUS_AVAILABLE),
                   required=["zoneId", "cidrBlock", "vpcId"]),
    ],
    short_desc="do some aliyun VSwitch Operations, like delete",
    example="""
# delete vSwitch vsw-x
chaoscloud aliyun vSwitch --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type delete --vSwitchId vsw-x

# create a vSwitch in vpc vpc-x
chaoscloud aliyun vSwitch --accessKeyId xxx --accessKeySecret yyy --regionId cn-qingdao --type create --zoneId cn-qingdao-b --cidrBlock 172.16.0.0/24 --vpcId vpc-x""")


KINDS = OrderedDict((kind.name, kind) for kind in [
    ECS, DISK, NETWORK_INTERFACE, PRIVATE_IP, PUBLIC_IP, SECURITY_GROUP,
    V_SWITCH
])


def _run(kind: ResourceKind, uid: str, flags: Dict[str, str]) -> Response:
    executor = ActionExecutor(kind, AliyunChannel())
    return executor.exec(uid, flags)


def ecs(operation_type: str, instances: str, region_id: str,
        access_key_id: str = None, access_key_secret: str = None,
        uid: str = None) -> Response:
    """
    Start, stop or reboot ECS instances.

    Running instances asked to start are stopped and stopped instances asked
    to stop are started, so repeating a call reverts the previous one.

    :param operation_type: start, stop or reboot. Required.
    :type operation_type: str
    :param instances: Comma separated instance ids. Required.
    :type instances: str
    :param region_id: The region the instances live in. Required.
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
    return _run(ECS, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "instances": instances,
    })


def disk(operation_type: str, disk_id: str, instance_id: str, region_id: str,
         access_key_id: str = None, access_key_secret: str = None,
         uid: str = None) -> Response:
    """
    Detach a disk from an instance, or attach it.

    A disk reported In_use is detached when asked to attach, and a disk that
    is not In_use is attached when asked to detach. Detaching never deletes
    the disk.

    :param operation_type: detach or attach. Required.
    :type operation_type: str
    :param disk_id: Required.
    :type disk_id: str
    :param instance_id: The instance the disk is (or was) attached to.
        Required.
    :type instance_id: str
    :param region_id: Required.
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
    return _run(DISK, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "diskId": disk_id,
        "instanceId": instance_id,
    })


def network_interface(operation_type: str, network_interface_id: str,
                      instance_id: str, region_id: str,
                      access_key_id: str = None,
                      access_key_secret: str = None,
                      uid: str = None) -> Response:
    """
    Detach an elastic network interface from an instance, or attach it.

    :param operation_type: detach or attach. Required.
    :type operation_type: str
    :param network_interface_id: Required.
    :type network_interface_id: str
    :param instance_id: Required.
    :type instance_id: str
    :param region_id: Required.
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
    return _run(NETWORK_INTERFACE, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "networkInterfaceId": network_interface_id,
        "instanceId": instance_id,
    })


def private_ip(operation_type: str, network_interface_id: str,
               private_ip_address: str, region_id: str,
               access_key_id: str = None, access_key_secret: str = None,
               uid: str = None) -> Response:
    """
    Unassign secondary private IPs from a network interface, or assign them
    back.

    :param operation_type: unassign or assign. Required.
    :type operation_type: str
    :param network_interface_id: Required.
    :type network_interface_id: str
    :param private_ip_address: Comma separated private IPs. Required.
    :type private_ip_address: str
    :param region_id: Required.
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
    return _run(PRIVATE_IP, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "networkInterfaceId": network_interface_id,
        "privateIpAddress": private_ip_address,
    })


def public_ip(operation_type: str, instance_id: str, public_ip_address: str,
              region_id: str, allocation_id: str = None,
              access_key_id: str = None, access_key_secret: str = None,
              uid: str = None) -> Response:
    """
    Release/associate a public IP, or unassociate/associate an EIP.

    :param operation_type: release, associate, unassociateEip or
        associateEip. Required.
    :type operation_type: str
    :param instance_id: Required.
    :type instance_id: str
    :param public_ip_address: The public IP or EIP address. Required.
    :type public_ip_address: str
    :param region_id: Required.
    :type region_id: str
    :param allocation_id: The EIP allocation id. Required by the *Eip
        operations. Optional otherwise. (Default: None)
    :type allocation_id: str
    :param access_key_id: Optional. (Default: env ACCESS_KEY_ID)
    :type access_key_id: str
    :param access_key_secret: Optional. (Default: env ACCESS_KEY_SECRET)
    :type access_key_secret: str
    :param uid: Experiment identifier for log correlation.
        Optional. (Default: None)
    :type uid: str
    :return: Response
    """
    return _run(PUBLIC_IP, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "allocationId": allocation_id,
        "publicIpAddress": public_ip_address,
        "instanceId": instance_id,
    })


def security_group(operation_type: str, security_group_id: str,
                   region_id: str, instance_id: str = None,
                   network_interface_id: str = None,
                   access_key_id: str = None, access_key_secret: str = None,
                   uid: str = None) -> Response:
    """
    Remove an instance or network interface from a security group, or join it.

    Exactly one of instance_id and network_interface_id must be given.

    :param operation_type: remove or join. Required.
    :type operation_type: str
    :param security_group_id: Required.
    :type security_group_id: str
    :param region_id: Required.
    :type region_id: str
    :param instance_id: Optional. (Default: None)
    :type instance_id: str
    :param network_interface_id: Optional. (Default: None)
    :type network_interface_id: str
    :param access_key_id: Optional. (Default: env ACCESS_KEY_ID)
    :type access_key_id: str
    :param access_key_secret: Optional. (Default: env ACCESS_KEY_SECRET)
    :type access_key_secret: str
    :param uid: Experiment identifier for log correlation.
        Optional. (Default: None)
    :type uid: str
    :return: Response
    """
    return _run(SECURITY_GROUP, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "securityGroupId": security_group_id,
        "instanceId": instance_id,
        "networkInterfaceId": network_interface_id,
    })


def vswitch(operation_type: str, region_id: str, v_switch_id: str = None,
            zone_id: str = None, cidr_block: str = None, vpc_id: str = None,
            access_key_id: str = None, access_key_secret: str = None,
            uid: str = None) -> Response:
    """
    Delete or create a vSwitch.

    Deleting needs v_switch_id. Creating needs zone_id, cidr_block and vpc_id.

    A delete recovers by creating the vSwitch again, so pass all four to
    delete as well. Once any of zone_id, cidr_block or vpc_id is given, a
    delete without the other two fails as a missing parameter before anything
    is described. A delete given none of them fails the same way only when it
    has to recover, after the describe call.

    :param operation_type: delete or create. Required.
    :type operation_type: str
    :param region_id: Required.
    :type region_id: str
    :param v_switch_id: Required to delete. (Default: None)
    :type v_switch_id: str
    :param zone_id: Required to create. (Default: None)
    :type zone_id: str
    :param cidr_block: Required to create. (Default: None)
    :type cidr_block: str
    :param vpc_id: Required to create. (Default: None)
    :type vpc_id: str
    :param access_key_id: Optional. (Default: env ACCESS_KEY_ID)
    :type access_key_id: str
    :param access_key_secret: Optional. (Default: env ACCESS_KEY_SECRET)
    :type access_key_secret: str
    :param uid: Experiment identifier for log correlation.
        Optional. (Default: None)
    :type uid: str
    :return: Response
    """
    return _run(V_SWITCH, uid, {
        "accessKeyId": access_key_id,
        "accessKeySecret": access_key_secret,
        "regionId": region_id,
        "type": operation_type,
        "vSwitchId": v_switch_id,
        "zoneId": zone_id,
        "cidrBlock": cidr_block,
        "vpcId": vpc_id,
    })

"""
The describe-before-mutate transition guard.

Every resource kind is a table of Transitions. Executing an operation is the
same five steps for every kind:

1. resolve and validate the flags (pure, no I/O)
2. build a provider client through the injected channel
3. probe the current remote status (read-only describe call)
4. decide whether the requested operation or its inverse must run
5. issue exactly one mutating call

Repeating the same operation therefore toggles the resource between the two
states instead of failing on an already-satisfied request, which lets one
entry point both inject and recover a fault.

The probe and the mutation are not atomic. Remote state may change in
between, and success only means the provider accepted the mutating call.
"""
from collections import OrderedDict, namedtuple
from logzero import logger

from chaoscloud.common import (
    ChaosCloudError,
    Response,
    ResponseCode,
    fail,
    success,
    DEFAULT_CHAOS_ACCESS_KEY_ID_ENV,
    DEFAULT_CHAOS_ACCESS_KEY_SECRET_ENV,
)
from chaoscloud.execute.execute import Channel, ResourceIdentity
from chaoscloud.helpers import lookup_flag, split_list

from typing import Callable, Dict, List

Flag = namedtuple('Flag', ['name', 'desc'])

OperationRequest = namedtuple('OperationRequest', ['kind', 'operation',
                                                   'identity', 'flags'])

COMMON_FLAGS = [
    Flag("accessKeyId", "the accessKeyId, if not provided, get from env "
         "{}".format(DEFAULT_CHAOS_ACCESS_KEY_ID_ENV)),
    Flag("accessKeySecret", "the accessKeySecret, if not provided, get from "
         "env {}".format(DEFAULT_CHAOS_ACCESS_KEY_SECRET_ENV)),
    Flag("regionId", "the regionId"),
]


class Transition(object):
    """
    One supported operation of a resource kind.

    :param name: The operation type, as passed in the 'type' flag.
    :param desc: Human readable description of the mutating call. Used in logs
        and failure messages (i.e. "stop aliyun instances").
    :param probe: Read-only call returning the RemoteStatus mapping.
        Signature: probe(client, request) -> Dict
    :param mutate: The mutating provider call.
        Signature: mutate(client, request) -> None
    :param inverse: Name of the operation executed instead when the observed
        state already reflects this one. None if the operation has no inverse.
    :param flipped: Predicate telling whether the observed state already
        reflects this operation. Signature: flipped(observed, request) -> bool
    :param required: Flags (beyond the common ones) this operation needs.
    """

    def __init__(self, name: str, desc: str, probe: Callable,
                 mutate: Callable, inverse: str = None,
                 flipped: Callable = None, required: List[str] = ()):
        self.name = name
        self.desc = desc
        self.probe = probe
        self.mutate = mutate
        self.inverse = inverse
        self.flipped = flipped
        self.required = list(required)

    def __repr__(self):
        return "Transition({!r})".format(self.name)


class ResourceKind(object):
    """
    The per resource kind table driving the guard.

    :param provider: "aliyun" or "aws"
    :param name: The action name (i.e. ecs, disk)
    :param flags: Resource specific flags. The credentials, regionId and type
        flags are added for every kind.
    :param transitions: Supported operations.
    :param short_desc: One line description of the action.
    :param example: Example command lines shown in the CLI help.
    :param validate: Optional extra check over the resolved flags, raising
        ChaosCloudError. Signature: validate(flags) -> None
    :param list_flags: Flags holding comma separated identifiers. A value
        without any identifier in it (i.e. " , ") counts as missing.
    """

    def __init__(self, provider: str, name: str, flags: List[Flag],
                 transitions: List[Transition], short_desc: str,
                 example: str = "", validate: Callable = None,
                 list_flags: List[str] = ()):
        self.provider = provider
        self.name = name
        self.transitions = OrderedDict((t.name, t) for t in transitions)
        self.short_desc = short_desc
        self.example = example
        self.validate = validate
        self.list_flags = set(list_flags)
        self.resource_flags = list(flags)
        self.flags = COMMON_FLAGS + [
            Flag("type", "the operation of {}, support {}".format(
                name, ", ".join(self.operations)))
        ] + self.resource_flags

    @property
    def operations(self) -> List[str]:
        return list(self.transitions.keys())

    def resolve(self, flags: Dict[str, str]) -> OperationRequest:
        """
        Validate flags and build the OperationRequest. Performs no I/O.
        """
        access_key_id = lookup_flag(flags, "accessKeyId",
                                    env=DEFAULT_CHAOS_ACCESS_KEY_ID_ENV,
                                    required=True)
        access_key_secret = lookup_flag(flags, "accessKeySecret",
                                        env=DEFAULT_CHAOS_ACCESS_KEY_SECRET_ENV,
                                        required=True)
        region_id = lookup_flag(flags, "regionId", required=True)
        operation = lookup_flag(flags, "type", required=True)

        transition = self.transitions.get(operation)
        if transition is None:
            logger.error("%s type %s is not supported", self.name, operation)
            raise ChaosCloudError(
                ResponseCode.PARAMETER_INVALID,
                "type is not support(support {})".format(
                    ", ".join(self.operations)))

        values = {flag.name: lookup_flag(flags, flag.name)
                  for flag in self.resource_flags}
        self.require(transition, values)
        self.require_given_inverse(transition, values)
        if self.validate:
            self.validate(values)

        identity = ResourceIdentity(access_key_id, access_key_secret,
                                    region_id)
        return OperationRequest(self.name, operation, identity, values)

    def require(self, transition: Transition, values: Dict[str, str]):
        for name in transition.required:
            value = lookup_flag(values, name, required=True)
            if name in self.list_flags and not split_list(value):
                logger.error("%s holds no identifier!", name)
                raise ChaosCloudError(ResponseCode.PARAMETER_LESS, name)

    def require_given_inverse(self, transition: Transition,
                              values: Dict[str, str]):
        """
        Check the inverse operation's own flags up front once any of them
        is given, so a partial set fails before the probe.
        """
        if not transition.inverse:
            return
        inverse = self.transitions[transition.inverse]
        extra = [name for name in inverse.required
                 if name not in transition.required]
        if any(values.get(name) for name in extra):
            self.require(inverse, values)

    def decide(self, transition: Transition, observed: Dict,
               request: OperationRequest) -> Transition:
        """
        Pick the literal transition or its inverse from the observed state.

        A multi-identifier request flips as a whole as soon as a single
        identifier is found in the flipped state.
        """
        if transition.inverse and transition.flipped(observed, request):
            inverse = self.transitions[transition.inverse]
            logger.info("%s %s already satisfied, executing %s instead",
                        self.name, transition.name, inverse.name)
            self.require(inverse, request.flags)
            return inverse
        return transition


class ActionExecutor(object):
    """
    Runs the guard for one resource kind over an injected channel.
    """

    def __init__(self, kind: ResourceKind, channel: Channel = None):
        self.kind = kind
        self.channel = channel

    @property
    def name(self) -> str:
        return self.kind.name

    def set_channel(self, channel: Channel):
        self.channel = channel

    def exec(self, uid: str, flags: Dict[str, str]) -> Response:
        """
        Execute the requested operation (or its inverse).

        :param uid: Experiment identifier, used for log correlation only.
        :type uid: str
        :param flags: Flag name to value mapping.
        :type flags: Dict[str, str]
        :return: Response
        """
        if self.channel is None:
            logger.error("[%s] %s executor has no channel", uid, self.name)
            return fail(ResponseCode.CHANNEL_NIL)

        try:
            request = self.kind.resolve(flags)
            transition = self.kind.transitions[request.operation]
            client = self.channel.client(request.identity)
            observed = self._probe(uid, transition, client, request)
            chosen = self.kind.decide(transition, observed, request)
            self._mutate(uid, chosen, client, request)
        except ChaosCloudError as e:
            logger.error("[%s] %s %s", uid, self.name, e.response.message)
            return e.response
        return success()

    def _probe(self, uid, transition, client, request) -> Dict:
        try:
            observed = transition.probe(client, request)
        except Exception as e:
            logger.error("[%s] describe %s %s status failed, err: %s", uid,
                         self.kind.provider, self.name, e)
            raise ChaosCloudError(
                ResponseCode.PARAMETER_REQUEST_FAILED,
                "describe {} status failed".format(self.name))
        logger.debug("[%s] observed %s status: %s", uid, self.name, observed)
        return observed

    def _mutate(self, uid, transition, client, request):
        logger.info("[%s] %s", uid, transition.desc)
        try:
            transition.mutate(client, request)
        except Exception as e:
            logger.exception(e)
            raise ChaosCloudError(
                ResponseCode.MUTATION_FAILED,
                "{} failed, err: {}".format(transition.desc, e))

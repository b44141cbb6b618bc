from collections import namedtuple
from enum import Enum


class ResponseCode(Enum):
    """
    All response classifications an action can report.
    """
    OK = 200
    # A required flag is blank after environment fallback
    PARAMETER_LESS = 47001
    # An operation type (or flag combination) the resource kind does not
    # support
    PARAMETER_INVALID = 47002
    # The read-only status probe failed
    PARAMETER_REQUEST_FAILED = 48001
    # The executor was called before a channel was set
    CHANNEL_NIL = 56000
    # The provider client could not be constructed
    CLIENT_UNAVAILABLE = 56002
    # The mutating provider call failed
    MUTATION_FAILED = 56003


MESSAGES = {
    ResponseCode.OK: "success",
    ResponseCode.PARAMETER_LESS: "less parameter: `{}`",
    ResponseCode.PARAMETER_INVALID: "invalid parameter: {}",
    ResponseCode.PARAMETER_REQUEST_FAILED: "request failed: {}",
    ResponseCode.CHANNEL_NIL: "channel is nil",
    ResponseCode.CLIENT_UNAVAILABLE: "client unavailable: {}",
    ResponseCode.MUTATION_FAILED: "{}",
}

Response = namedtuple('Response', ['code', 'success', 'message'])


def success() -> Response:
    return Response(ResponseCode.OK.value, True, MESSAGES[ResponseCode.OK])


def fail(code: ResponseCode, *args) -> Response:
    """
    Build a failed Response for a classification.

    :param code: The failure classification.
    :type code: ResponseCode
    :param *args: Values substituted into the classification's message.
    :return: Response
    """
    return Response(code.value, False, MESSAGES[code].format(*args))


class ChaosCloudError(Exception):
    """
    Raised at the point a failure is detected. ActionExecutor.exec converts it
    into a failed Response.
    """
    def __init__(self, code: ResponseCode, *args):
        self.code = code
        self.response = fail(code, *args)
        super().__init__(self.response.message)


# Chaos defaults
# Please keep defaults in lexically acending order by name
DEFAULT_CHAOS_ACCESS_KEY_ID_ENV = "ACCESS_KEY_ID"
DEFAULT_CHAOS_ACCESS_KEY_SECRET_ENV = "ACCESS_KEY_SECRET"
DEFAULT_CHAOS_ALIYUN_ENDPOINT = "ecs.{}.aliyuncs.com"
# Largest page DescribeInstanceStatus and DescribeVSwitches accept
DEFAULT_CHAOS_ALIYUN_PAGE_SIZE = 50
# Seconds
DEFAULT_CHAOS_CONNECT_TIMEOUT = 5
DEFAULT_CHAOS_READ_TIMEOUT = 10

# Provider status strings
ALIYUN_STATUS_AVAILABLE = "Available"
ALIYUN_STATUS_DISK_IN_USE = "In_use"
ALIYUN_STATUS_IN_USE = "InUse"
ALIYUN_STATUS_RUNNING = "Running"
ALIYUN_STATUS_STOPPED = "Stopped"
AWS_STATE_RUNNING = "running"
AWS_STATE_STOPPED = "stopped"

import os
from logzero import logger

from chaoscloud.common import ChaosCloudError, ResponseCode

from typing import Dict, List


def lookup_flag(flags: Dict[str, str], name: str, env: str = None,
                required: bool = False) -> str:
    """
    Get a flag value, falling back to an environment variable when blank.

    :param flags: Flag name to value mapping. Missing and None values are
        treated as blank.
    :type flags: Dict[str, str]
    :param name: The flag name (i.e. accessKeyId)
    :type name: str
    :param env: The environment variable consulted when the flag is blank.
        Optional. (Default: None)
    :type env: str
    :param required: Raise a missing parameter error when the value is still
        blank? Optional. (Default: False)
    :type required: bool
    :return: str
    """
    value = flags.get(name) or ""
    if not value and env:
        value = os.environ.get(env, "")
        if not value:
            logger.error("could not get %s from env or parameter!", env)
    if not value and required:
        logger.error("%s is required!", name)
        raise ChaosCloudError(ResponseCode.PARAMETER_LESS, name)
    return value


def split_list(value: str) -> List[str]:
    """
    Split a comma separated list of identifiers, dropping blank entries.

    :param value: i.e. "i-x,i-y"
    :type value: str
    :return: List[str]
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]

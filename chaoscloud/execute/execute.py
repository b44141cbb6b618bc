import abc

from collections import namedtuple

import boto3
from botocore.config import Config as BotoConfig
from alibabacloud_ecs20140526.client import Client as EcsClient
from alibabacloud_tea_openapi import models as open_api_models
from logzero import logger

from chaoscloud.common import (
    ChaosCloudError,
    ResponseCode,
    DEFAULT_CHAOS_ALIYUN_ENDPOINT,
    DEFAULT_CHAOS_CONNECT_TIMEOUT,
    DEFAULT_CHAOS_READ_TIMEOUT,
)

ResourceIdentity = namedtuple('ResourceIdentity', ['access_key_id',
                                                   'access_key_secret',
                                                   'region_id'])


class Channel(abc.ABC):
    """
    Transport used by an ActionExecutor to reach a cloud provider.

    A channel builds one fresh, region bound client per invocation. Clients
    are never pooled or reused across invocations.
    """

    def __init__(self, connect_timeout: int = DEFAULT_CHAOS_CONNECT_TIMEOUT,
                 read_timeout: int = DEFAULT_CHAOS_READ_TIMEOUT):
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    def client(self, identity: ResourceIdentity):
        try:
            return self._create_client(identity)
        except Exception as e:
            logger.error("create %s client failed, err: %s", self.name, e)
            raise ChaosCloudError(ResponseCode.CLIENT_UNAVAILABLE,
                                  "create {} client failed".format(self.name))

    @property
    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError('users must define name to use this base '
                                  'class')

    @abc.abstractmethod
    def _create_client(self, identity: ResourceIdentity):
        raise NotImplementedError('users must define _create_client to use '
                                  'this base class')


class AliyunChannel(Channel):
    name = "aliyun"

    @staticmethod
    def endpoint(region_id: str) -> str:
        return DEFAULT_CHAOS_ALIYUN_ENDPOINT.format(region_id)

    def _create_client(self, identity: ResourceIdentity) -> EcsClient:
        # Tea timeouts are expressed in milliseconds
        config = open_api_models.Config(
            access_key_id=identity.access_key_id,
            access_key_secret=identity.access_key_secret,
            region_id=identity.region_id,
            endpoint=self.endpoint(identity.region_id),
            connect_timeout=self.connect_timeout * 1000,
            read_timeout=self.read_timeout * 1000
        )
        return EcsClient(config)


class AwsChannel(Channel):
    name = "aws"

    def _create_client(self, identity: ResourceIdentity):
        session = boto3.session.Session(
            aws_access_key_id=identity.access_key_id,
            aws_secret_access_key=identity.access_key_secret,
            region_name=identity.region_id
        )
        config = BotoConfig(connect_timeout=self.connect_timeout,
                            read_timeout=self.read_timeout,
                            retries={'total_max_attempts': 1})
        return session.client('ec2', config=config)

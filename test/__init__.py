from types import SimpleNamespace
from unittest import mock

from chaoscloud.execute.execute import Channel


def ns(**kwargs):
    """Attribute bag standing in for SDK response models.

    ns(body=ns(status="InUse")).body.status == "InUse"
    """
    return SimpleNamespace(**kwargs)


class FakeChannel(Channel):
    """Channel handing out a pre-built client and counting constructions."""
    name = "fake"

    def __init__(self, client=None):
        super().__init__()
        self.fake_client = client if client is not None else mock.Mock()
        self.identities = []

    def _create_client(self, identity):
        self.identities.append(identity)
        return self.fake_client


class BrokenChannel(Channel):
    name = "broken"

    def _create_client(self, identity):
        raise ValueError("bad credentials shape")


CREDENTIALS = {
    "accessKeyId": "id",
    "accessKeySecret": "secret",
    "regionId": "cn-hangzhou",
}


def flags(**kwargs):
    """Credentials and region plus the given flags."""
    result = dict(CREDENTIALS)
    result.update(kwargs)
    return result

import boto3
import pytest
from botocore.stub import Stubber

from chaoscloud.actions import aws
from chaoscloud.common import ResponseCode
from chaoscloud.guard import ActionExecutor
from test import FakeChannel, flags

STATE_CODES = {"running": 16, "stopped": 80}


@pytest.fixture(autouse=True)
def no_credentials_env(monkeypatch):
    monkeypatch.delenv("ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("ACCESS_KEY_SECRET", raising=False)


@pytest.fixture
def ec2():
    client = boto3.client("ec2", region_name="us-west-2",
                          aws_access_key_id="id",
                          aws_secret_access_key="secret")
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def expect_states(stubber, **states):
    stubber.add_response(
        "describe_instance_status",
        {"InstanceStatuses": [
            {"InstanceId": instance_id,
             "InstanceState": {"Code": STATE_CODES[state], "Name": state}}
            for instance_id, state in states.items()
        ]},
        {"InstanceIds": list(states), "IncludeAllInstances": True})


def execute(client, **values):
    return ActionExecutor(aws.EC2, FakeChannel(client)).exec(
        "uid", flags(regionId="us-west-2", **values))


def test_stop_running_instances(ec2):
    client, stubber = ec2
    expect_states(stubber, **{"i-1": "running", "i-2": "running"})
    stubber.add_response("stop_instances", {"StoppingInstances": []},
                         {"InstanceIds": ["i-1", "i-2"]})
    rtn = execute(client, type="stop", instances="i-1,i-2")
    assert rtn.success
    assert rtn.code == ResponseCode.OK.value


def test_stop_stopped_instances_starts_them(ec2):
    client, stubber = ec2
    expect_states(stubber, **{"i-1": "stopped"})
    stubber.add_response("start_instances", {"StartingInstances": []},
                         {"InstanceIds": ["i-1"]})
    assert execute(client, type="stop", instances="i-1").success


def test_start_running_instances_stops_them(ec2):
    client, stubber = ec2
    expect_states(stubber, **{"i-1": "running"})
    stubber.add_response("stop_instances", {"StoppingInstances": []},
                         {"InstanceIds": ["i-1"]})
    assert execute(client, type="start", instances="i-1").success


def test_reboot(ec2):
    client, stubber = ec2
    expect_states(stubber, **{"i-1": "running"})
    stubber.add_response("reboot_instances", {}, {"InstanceIds": ["i-1"]})
    assert execute(client, type="reboot", instances="i-1").success


def test_describe_failure_does_not_mutate(ec2):
    client, stubber = ec2
    stubber.add_client_error("describe_instance_status",
                             service_error_code="AuthFailure",
                             http_status_code=401)
    rtn = execute(client, type="stop", instances="i-1")
    assert rtn.success is False
    assert rtn.code == ResponseCode.PARAMETER_REQUEST_FAILED.value


def test_mutation_failure(ec2):
    client, stubber = ec2
    expect_states(stubber, **{"i-1": "running"})
    stubber.add_client_error("stop_instances",
                             service_error_code="IncorrectInstanceState",
                             service_message="not in a stoppable state")
    rtn = execute(client, type="stop", instances="i-1")
    assert rtn.code == ResponseCode.MUTATION_FAILED.value
    assert rtn.message.startswith("stop aws instances failed")
    assert "IncorrectInstanceState" in rtn.message


def test_unknown_type(ec2):
    client, _ = ec2
    rtn = execute(client, type="hibernate", instances="i-1")
    assert rtn.code == ResponseCode.PARAMETER_INVALID.value
    assert "start, stop, reboot" in rtn.message


def test_ec2_entry_point(monkeypatch, ec2):
    client, stubber = ec2
    expect_states(stubber, **{"i-1": "running"})
    stubber.add_response("stop_instances", {"StoppingInstances": []},
                         {"InstanceIds": ["i-1"]})
    monkeypatch.setattr(aws, "AwsChannel", lambda: FakeChannel(client))
    rtn = aws.ec2("stop", "i-1", "us-west-2", access_key_id="id",
                  access_key_secret="secret")
    assert rtn.success


def test_ec2_entry_point_missing_instances(monkeypatch):
    channel = FakeChannel()
    monkeypatch.setattr(aws, "AwsChannel", lambda: channel)
    rtn = aws.ec2("stop", "", "us-west-2", access_key_id="id",
                  access_key_secret="secret")
    assert rtn.message == "less parameter: `instances`"
    assert channel.identities == []


def test_instances_without_identifiers_are_missing():
    channel = FakeChannel()
    rtn = ActionExecutor(aws.EC2, channel).exec(
        "uid", flags(regionId="us-west-2", type="stop", instances=" , "))
    assert rtn.code == ResponseCode.PARAMETER_LESS.value
    assert rtn.message == "less parameter: `instances`"
    assert channel.identities == []
    assert channel.fake_client.mock_calls == []

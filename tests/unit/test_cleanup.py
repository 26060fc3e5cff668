"""Tests for the untagged-instance cleanup workflow."""

import logging
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ConnectionClosedError, SSLError

from tests.unit.fakes.fake_inventory import FakeInventoryFactory, make_instance
from voiceadmin.inventory.cleanup import CleanupState, UntaggedInstanceCleanup
from voiceadmin.providers.aws.compute import EC2Inventory
from voiceadmin.providers.aws.regions import RegionDirectory
from voiceadmin.providers.exceptions import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderTimeoutError,
)
from voiceadmin.skill import speech

NAMED = [{"Key": "Name", "Value": "web"}]
EMPTY_NAME = [{"Key": "Name", "Value": ""}]


@pytest.fixture
def cleanup(fake_inventory: FakeInventoryFactory) -> UntaggedInstanceCleanup:
    return UntaggedInstanceCleanup(inventory_factory=fake_inventory)


class TestNoRegion:
    @pytest.mark.parametrize("region", [None, ""])
    def test_no_region_is_informational(self, cleanup, fake_inventory, region) -> None:
        outcome = cleanup.run(region)

        assert outcome.state is CleanupState.DONE
        assert outcome.message == speech.NO_REGION_SELECTED
        assert outcome.region_id is None
        assert fake_inventory.calls == []
        assert fake_inventory.created_regions == []


class TestTermination:
    def test_terminates_untagged_in_provider_order(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["us-west-2"] = [
            make_instance("i-3"),
            make_instance("i-1"),
            make_instance("i-2"),
        ]

        outcome = cleanup.run("Oregon")

        assert outcome.state is CleanupState.DONE
        assert outcome.message == "3 untagged instances were found and terminated."
        assert outcome.region_id == "us-west-2"
        assert outcome.terminated_ids == ["i-3", "i-1", "i-2"]
        assert fake_inventory.calls == [
            ("list", "us-west-2"),
            ("terminate", "us-west-2", ["i-3", "i-1", "i-2"]),
        ]

    def test_batch_is_exactly_the_untagged_subset(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["ap-northeast-2"] = [
            make_instance("i-a", NAMED),
            make_instance("i-b", EMPTY_NAME),
            make_instance("i-c", [{"Key": "Env", "Value": ""}]),
            make_instance("i-d", []),
            make_instance("i-e", EMPTY_NAME + [{"Key": "Env", "Value": "prod"}]),
            make_instance("i-f"),
        ]

        outcome = cleanup.run("Seoul")

        assert fake_inventory.terminate_calls() == [
            ("terminate", "ap-northeast-2", ["i-b", "i-d", "i-f"])
        ]
        assert outcome.terminated_ids == ["i-b", "i-d", "i-f"]

    def test_single_instance_message(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["us-east-1"] = [make_instance("i-1")]

        outcome = cleanup.run("Virginia")

        assert outcome.message == "1 untagged instance was found and terminated."

    def test_unknown_region_uses_default(self, cleanup, fake_inventory) -> None:
        cleanup.run("Atlantis")

        assert fake_inventory.calls == [("list", "us-east-1")]

    def test_custom_region_directory(self, fake_inventory) -> None:
        cleanup = UntaggedInstanceCleanup(
            inventory_factory=fake_inventory,
            region_directory=RegionDirectory(extra_regions={"Ireland": "eu-west-1"}),
        )

        cleanup.run("Ireland")

        assert fake_inventory.calls == [("list", "eu-west-1")]


class TestNothingToTerminate:
    def test_all_tagged(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["us-east-1"] = [
            make_instance("i-1", NAMED),
            make_instance("i-2", [{"Key": "Owner", "Value": "ops"}]),
        ]

        outcome = cleanup.run("Virginia")

        assert outcome.state is CleanupState.DONE
        assert outcome.message == "I could not find any untagged instances."
        assert fake_inventory.terminate_calls() == []

    def test_zero_running_instances_is_stable(self, cleanup, fake_inventory) -> None:
        for _ in range(3):
            outcome = cleanup.run("Tokyo")
            assert outcome.state is CleanupState.DONE
            assert outcome.message == speech.NO_UNTAGGED_INSTANCES

        assert fake_inventory.terminate_calls() == []
        assert fake_inventory.calls == [("list", "ap-northeast-1")] * 3

    def test_second_run_after_cleanup_finds_nothing(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["us-west-1"] = [make_instance("i-1"), make_instance("i-2", NAMED)]

        first = cleanup.run("California")
        second = cleanup.run("California")

        assert first.terminated_ids == ["i-1"]
        assert second.message == speech.NO_UNTAGGED_INSTANCES
        assert len(fake_inventory.terminate_calls()) == 1


class TestFailures:
    @pytest.mark.parametrize(
        "error",
        [
            ProviderAPIError("denied", error_code="UnauthorizedOperation"),
            ProviderConnectionError("unreachable"),
            ProviderTimeoutError("timed out"),
        ],
    )
    def test_list_failure_never_terminates(self, cleanup, fake_inventory, error) -> None:
        fake_inventory.instances["ap-northeast-1"] = [make_instance("i-1")]
        fake_inventory.list_errors["ap-northeast-1"] = error

        outcome = cleanup.run("Tokyo")

        assert outcome.state is CleanupState.ERRORED
        assert outcome.message == speech.LIST_FAILED
        assert outcome.terminated_ids == []
        assert fake_inventory.calls == [("list", "ap-northeast-1")]

    def test_terminate_failure_does_not_relist(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["ap-southeast-1"] = [make_instance("i-1"), make_instance("i-2")]
        fake_inventory.terminate_errors["ap-southeast-1"] = ProviderAPIError(
            "partial failure", error_code="InvalidInstanceID.NotFound"
        )

        outcome = cleanup.run("Singapore")

        assert outcome.state is CleanupState.ERRORED
        assert outcome.message == speech.TERMINATE_FAILED
        assert outcome.terminated_ids == []
        assert fake_inventory.calls == [
            ("list", "ap-southeast-1"),
            ("terminate", "ap-southeast-1", ["i-1", "i-2"]),
        ]

    def test_failures_are_logged(self, cleanup, fake_inventory, caplog) -> None:
        fake_inventory.list_errors["us-west-2"] = ProviderAPIError(
            "denied", error_code="UnauthorizedOperation"
        )

        with caplog.at_level(logging.WARNING):
            cleanup.run("Oregon")

        assert "UnauthorizedOperation" in caplog.text
        assert "us-west-2" in caplog.text

    @pytest.mark.parametrize(
        "error",
        [
            ConnectionClosedError(endpoint_url="https://ec2.ap-northeast-1.amazonaws.com"),
            SSLError(endpoint_url="https://ec2.ap-northeast-1.amazonaws.com", error="bad"),
        ],
    )
    def test_transport_failure_from_ec2_is_spoken(self, error) -> None:
        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = error
        cleanup = UntaggedInstanceCleanup(
            inventory_factory=lambda region: EC2Inventory(
                region, boto3_client_factory=lambda *args, **kwargs: client
            )
        )

        outcome = cleanup.run("Tokyo")

        assert outcome.state is CleanupState.ERRORED
        assert outcome.message == speech.LIST_FAILED
        client.terminate_instances.assert_not_called()

    def test_inventory_construction_failure_is_spoken(self) -> None:
        def factory(region):
            raise ProviderConnectionError("cannot build client")

        outcome = UntaggedInstanceCleanup(inventory_factory=factory).run("Oregon")

        assert outcome.state is CleanupState.ERRORED
        assert outcome.message == speech.LIST_FAILED


class TestStates:
    def test_final_state_is_recorded(self, cleanup, fake_inventory) -> None:
        fake_inventory.instances["us-west-2"] = [make_instance("i-1")]

        cleanup.run("Oregon")

        assert cleanup.state is CleanupState.DONE

    def test_transitions_are_logged_to_injected_logger(self, fake_inventory, caplog) -> None:
        injected = logging.getLogger("test.cleanup")
        cleanup = UntaggedInstanceCleanup(inventory_factory=fake_inventory, logger=injected)
        fake_inventory.instances["us-west-2"] = [make_instance("i-1")]

        with caplog.at_level(logging.DEBUG, logger="test.cleanup"):
            cleanup.run("Oregon")

        messages = [r.getMessage() for r in caplog.records if r.name == "test.cleanup"]
        assert "Cleanup state awaiting_region -> listing" in messages
        assert "Cleanup state deciding -> terminating" in messages
        assert "Cleanup state terminating -> done" in messages


def test_find_untagged_does_not_terminate(cleanup, fake_inventory) -> None:
    fake_inventory.instances["us-west-2"] = [make_instance("i-1"), make_instance("i-2", NAMED)]

    assert cleanup.find_untagged("us-west-2") == ["i-1"]
    assert fake_inventory.terminate_calls() == []

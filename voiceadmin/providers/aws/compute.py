"""EC2 instance inventory for voiceadmin."""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.config import Config

from voiceadmin.core.interfaces import Instance
from voiceadmin.providers.aws.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    RUNNING_INSTANCE_FILTERS,
)
from voiceadmin.providers.aws.errors import handle_aws_errors

logger = logging.getLogger(__name__)


class EC2Inventory:
    """List and terminate running EC2 instances in a single region."""

    def __init__(
        self,
        region: str,
        boto3_client_factory: Any | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize EC2 inventory.

        Parameters
        ----------
        region : str
            AWS region for EC2 operations
        boto3_client_factory : Callable[..., Any] | None
            Optional factory for creating boto3 clients. If None, uses boto3.client
        timeout : float
            Connect and read timeout in seconds for every API call
        """
        self.region = region
        self.boto3_client_factory = boto3_client_factory or boto3.client
        with handle_aws_errors():
            self.ec2_client = self.boto3_client_factory(
                "ec2",
                region_name=region,
                config=Config(
                    connect_timeout=timeout,
                    read_timeout=timeout,
                    retries={"total_max_attempts": 1, "mode": "standard"},
                ),
            )

    def list_running_instances(self) -> list[Instance]:
        """List running instances in provider order.

        Returns
        -------
        list[Instance]
            Running instances, in reservation then instance order

        Raises
        ------
        ProviderCredentialsError
            If AWS credentials are not configured
        ProviderAPIError
            If the describe call is rejected
        ProviderConnectionError
            If the endpoint is unreachable or the call times out
        """
        instances: list[Instance] = []

        with handle_aws_errors():
            paginator = self.ec2_client.get_paginator("describe_instances")
            page_iterator = paginator.paginate(Filters=RUNNING_INSTANCE_FILTERS)

            for page in page_iterator:
                for reservation in page.get("Reservations", []):
                    for item in reservation.get("Instances", []):
                        if "InstanceId" not in item:
                            logger.warning(
                                "Skipping instance without InstanceId in %s", self.region
                            )
                            continue
                        instances.append(Instance.from_api(item))

        logger.debug("Found %d running instances in %s", len(instances), self.region)
        return instances

    def count_running_instances(self) -> int:
        """Return the number of running instances in the region."""
        return len(self.list_running_instances())

    def terminate_instances(self, instance_ids: list[str]) -> list[str]:
        """Terminate instances with a single bulk request.

        A provider error for any id fails the whole batch; partial
        termination is not reported separately.

        Parameters
        ----------
        instance_ids : list[str]
            Instance IDs to terminate, must not be empty

        Returns
        -------
        list[str]
            IDs acknowledged by the provider

        Raises
        ------
        ValueError
            If instance_ids is empty
        ProviderAPIError
            If the terminate call is rejected
        ProviderConnectionError
            If the endpoint is unreachable or the call times out
        """
        if not instance_ids:
            raise ValueError("instance_ids must not be empty")

        logger.info(
            "Terminating %d instances in %s: %s",
            len(instance_ids),
            self.region,
            ", ".join(instance_ids),
        )

        with handle_aws_errors():
            response = self.ec2_client.terminate_instances(InstanceIds=list(instance_ids))

        return [
            change["InstanceId"]
            for change in response.get("TerminatingInstances", [])
            if "InstanceId" in change
        ]

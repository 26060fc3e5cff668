"""CLI entry point for voiceadmin."""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Callable
from typing import Any

import fire

from voiceadmin.app import VoiceAdmin
from voiceadmin.cli.parsing import build_intent_event, load_event
from voiceadmin.constants import DEBUG_ENV_VAR
from voiceadmin.core.interfaces import InventoryProvider
from voiceadmin.inventory.cleanup import CleanupState
from voiceadmin.logging import configure_logging
from voiceadmin.providers import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderCredentialsError,
)
from voiceadmin.skill.dispatcher import SkillProtocolError
from voiceadmin.utils import log_and_print_error


class VoiceAdminCLI:
    """Operate the voice skill and its inventory from the command line.

    Parameters
    ----------
    inventory_factory : Callable[[str], InventoryProvider] | None
        Optional factory for inventory providers (for testing)
    config : dict[str, Any] | None
        Optional configuration overriding the YAML file
    """

    def __init__(
        self,
        inventory_factory: Callable[[str], InventoryProvider] | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        self._inventory_factory = inventory_factory
        self._config = config
        self._app: VoiceAdmin | None = None

    @property
    def app(self) -> VoiceAdmin:
        if self._app is None:
            self._app = VoiceAdmin(
                config=self._config, inventory_factory=self._inventory_factory
            )
        return self._app

    def invoke(self, event_file: str) -> str:
        """Dispatch an event file and print the response envelope as JSON.

        Parameters
        ----------
        event_file : str
            Path to a JSON or YAML voice platform event
        """
        response = self.app.handle_event(load_event(event_file))
        return json.dumps(response, indent=2)

    def ask(self, intent_name: str, region: str | None = None, **slots: str) -> str:
        """Dispatch a single intent and return the spoken text.

        Parameters
        ----------
        intent_name : str
            Intent to invoke (e.g. 'GetRegionIntent')
        region : str | None
            Spoken region to place in the session
        **slots : str
            Slot values, e.g. --Region=Tokyo
        """
        event = build_intent_event(intent_name, region=region, slots=slots)
        response = self.app.handle_event(event)
        return response["response"]["outputSpeech"]["text"]

    def count(self, region: str) -> int:
        """Count running instances.

        Parameters
        ----------
        region : str
            Spoken region name ('Oregon') or region id ('us-west-2')
        """
        return self.app.count(region)

    def untagged(self, region: str) -> list[str]:
        """List untagged running instances without terminating them.

        Parameters
        ----------
        region : str
            Spoken region name ('Oregon') or region id ('us-west-2')
        """
        ids = self.app.untagged(region)
        if not ids:
            print("No untagged instances found", file=sys.stderr)
        return ids

    def terminate_untagged(self, region: str) -> str:
        """Terminate all untagged running instances.

        Parameters
        ----------
        region : str
            Spoken region name ('Oregon') or region id ('us-west-2')
        """
        outcome = self.app.terminate_untagged(region)

        if outcome.state is CleanupState.ERRORED:
            log_and_print_error("%s", outcome.message)
            sys.exit(1)

        for instance_id in outcome.terminated_ids:
            print(instance_id)

        return outcome.message


def handle_credentials_error(debug_mode: bool) -> None:
    """Handle provider credentials error.

    Raises
    ------
    ProviderCredentialsError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print("Cloud credentials not found\n", file=sys.stderr)
    print("Configure your credentials:", file=sys.stderr)
    print("  aws configure\n", file=sys.stderr)
    print("Or set environment variables:", file=sys.stderr)
    print("  export AWS_ACCESS_KEY_ID=...", file=sys.stderr)
    print("  export AWS_SECRET_ACCESS_KEY=...", file=sys.stderr)
    sys.exit(1)


def handle_api_error(error: ProviderAPIError, debug_mode: bool) -> None:
    """Handle provider API error with context-specific messages.

    Parameters
    ----------
    error : ProviderAPIError
        The API error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderAPIError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    if error.error_code == "UnauthorizedOperation":
        print("Insufficient IAM permissions\n", file=sys.stderr)
        print("Contact your cloud administrator to grant:", file=sys.stderr)
        print("  - ec2:DescribeInstances", file=sys.stderr)
        print("  - ec2:TerminateInstances", file=sys.stderr)
    elif error.error_code in ["ExpiredToken", "RequestExpired", "ExpiredTokenException"]:
        print("Cloud credentials have expired\n", file=sys.stderr)
        print("Fix it:", file=sys.stderr)
        print("  aws sso login           # If using AWS SSO", file=sys.stderr)
        print("  aws configure           # Re-configure credentials", file=sys.stderr)
    else:
        print(f"Cloud API error: {error}", file=sys.stderr)

    sys.exit(1)


def handle_connection_error(error: ProviderConnectionError, debug_mode: bool) -> None:
    if debug_mode:
        raise

    print(f"Cannot reach the cloud provider: {error}", file=sys.stderr)
    sys.exit(1)


def handle_value_error(error: ValueError, debug_mode: bool) -> None:
    if debug_mode:
        raise

    print(f"Configuration error: {error}", file=sys.stderr)
    sys.exit(2)


def handle_protocol_error(error: SkillProtocolError, debug_mode: bool) -> None:
    if debug_mode:
        raise

    print(f"Request rejected: {error}", file=sys.stderr)
    sys.exit(2)


def main() -> None:
    """Entry point for Fire CLI with graceful error handling.

    Notes
    -----
    Fire maps VoiceAdminCLI methods to commands, e.g.
    ``voiceadmin count Oregon`` or ``voiceadmin invoke event.json``.
    """
    debug_mode = os.environ.get(DEBUG_ENV_VAR) == "1"
    configure_logging("DEBUG" if debug_mode else "INFO")

    try:
        fire.Fire(VoiceAdminCLI())
    except ProviderCredentialsError:
        handle_credentials_error(debug_mode)
    except ProviderAPIError as e:
        handle_api_error(e, debug_mode)
    except ProviderConnectionError as e:
        handle_connection_error(e, debug_mode)
    except SkillProtocolError as e:
        handle_protocol_error(e, debug_mode)
    except ValueError as e:
        handle_value_error(e, debug_mode)

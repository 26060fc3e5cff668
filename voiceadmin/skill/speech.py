"""Spoken text used by the skill."""

from __future__ import annotations

CARD_TITLE = "Alexa AWS Admin"

WELCOME = (
    "Welcome to the Alexa AWS Administration Center. "
    "Select a region to use by saying, set the region to Virginia."
)
WELCOME_REPROMPT = "Select a region by saying, set the region to Virginia."

REGION_SET = (
    "You set the region to {region}. You can now find out how many instances "
    "are running in this region by saying, how many instances are running?"
)
REGION_SET_REPROMPT = (
    "You can find out how many instances are running this region by saying, "
    "how many instances are running?"
)
REGION_UNKNOWN = "I'm not sure what region you selected. Please try again."
REGION_UNKNOWN_REPROMPT = (
    "I'm not sure what region you selected. You can set the selected region by saying, "
    "Set the region to Virginia."
)

CURRENT_REGION = "Your region is currently set to {region}."
NO_REGION_TO_REPORT = (
    "I'm not sure what region you would like to select. You can select a region by saying, "
    "Set the region to Virginia."
)
NO_REGION_SELECTED = (
    "I'm not sure what region you would like to use. Please select a region first by saying, "
    "Set the region to Virginia."
)

NO_INSTANCES_RUNNING = "There are currently no instances running."
ONE_INSTANCE_RUNNING = "There is currently 1 instance running."
INSTANCES_RUNNING = "There are currently {count} instances running."
COUNT_FAILED = (
    "Something went wrong while trying to count the running instances. Please try again."
)

LIST_FAILED = "Something went wrong while trying to find untagged instances. Please try again."
NO_UNTAGGED_INSTANCES = "I could not find any untagged instances."
TERMINATE_FAILED = (
    "Something went wrong while trying to terminate the untagged instances. Please try again."
)
ONE_UNTAGGED_TERMINATED = "1 untagged instance was found and terminated."
UNTAGGED_TERMINATED = "{count} untagged instances were found and terminated."


def running_instances(count: int) -> str:
    """Phrase the number of running instances."""
    if count == 1:
        return ONE_INSTANCE_RUNNING
    if count > 1:
        return INSTANCES_RUNNING.format(count=count)
    return NO_INSTANCES_RUNNING


def untagged_terminated(count: int) -> str:
    if count == 1:
        return ONE_UNTAGGED_TERMINATED
    return UNTAGGED_TERMINATED.format(count=count)

"""AWS-specific constants for EC2 inventory operations."""

DEFAULT_REGION = "us-east-1"
"""Region used when no spoken region is recognised.

Unrecognised or missing spoken names always resolve here, so a lookup
never fails.
"""

SPOKEN_REGIONS = {
    "Oregon": "us-west-2",
    "Virginia": "us-east-1",
    "California": "us-west-1",
    "Seoul": "ap-northeast-2",
    "Tokyo": "ap-northeast-1",
    "Singapore": "ap-southeast-1",
}
"""Mapping of spoken region names to AWS region identifiers.

Keys match the values of the skill's Region slot exactly, including case.
"""

RUNNING_STATE = "running"
"""EC2 instance state considered by count and cleanup operations."""

RUNNING_INSTANCE_FILTERS = [
    {"Name": "instance-state-name", "Values": [RUNNING_STATE]},
]
"""Server-side filter passed to describe_instances."""

DEFAULT_REQUEST_TIMEOUT_SECONDS = 10
"""Connect and read timeout for every EC2 API call.

The skill answers within a single voice turn, so a hung call is surfaced
as a failure instead of blocking the turn.
"""

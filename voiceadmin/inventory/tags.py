"""Classification of instances by their identifying tags."""

from __future__ import annotations

from typing import Any

NAME_TAG_KEY = "Name"


def is_untagged(instance: Any) -> bool:
    """Decide whether an instance lacks identifying tags.

    An instance is untagged when it has no tags at all, or when its only
    tag is ``Name`` with an empty value (the console's default). An empty
    ``Name`` alongside any other tag counts as tagged.

    Anything that does not look like a provider tag list classifies as
    tagged, so malformed data never selects an instance for termination.

    Parameters
    ----------
    instance : Instance
        Instance to classify

    Returns
    -------
    bool
        True if the instance is untagged
    """
    if instance is None:
        return False

    try:
        tags = instance.tags
        if tags is None:
            return True
        if not isinstance(tags, (list, tuple)):
            return False
        if len(tags) == 0:
            return True
        if len(tags) == 1:
            tag = tags[0]
            return tag.get("Key") == NAME_TAG_KEY and tag.get("Value") == ""
    except (AttributeError, TypeError, KeyError, IndexError):
        return False

    return False

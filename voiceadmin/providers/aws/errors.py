"""Translation of botocore exceptions into provider exceptions."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    PartialCredentialsError,
    ReadTimeoutError,
)

from voiceadmin.providers.exceptions import (
    ProviderAPIError,
    ProviderConnectionError,
    ProviderCredentialsError,
    ProviderTimeoutError,
)

logger = logging.getLogger(__name__)


@contextmanager
def handle_aws_errors() -> Iterator[None]:
    """Re-raise botocore exceptions as provider exceptions.

    The original botocore exception is kept as ``__cause__``.

    Raises
    ------
    ProviderCredentialsError
        If credentials are missing or partial
    ProviderTimeoutError
        If the connect or read timeout elapsed
    ProviderConnectionError
        If the endpoint could not be reached or the transport failed
    ProviderAPIError
        If the API returned an error response
    """
    try:
        yield
    except (NoCredentialsError, PartialCredentialsError) as e:
        raise ProviderCredentialsError(str(e)) from e
    except (ConnectTimeoutError, ReadTimeoutError) as e:
        raise ProviderTimeoutError(str(e)) from e
    except EndpointConnectionError as e:
        raise ProviderConnectionError(str(e)) from e
    except ClientError as e:
        error = e.response.get("Error", {})
        error_code = error.get("Code")
        logger.debug("AWS API error %s: %s", error_code, error.get("Message"))
        raise ProviderAPIError(
            message=error.get("Message") or str(e),
            error_code=error_code,
        ) from e
    except BotoCoreError as e:
        logger.debug("AWS transport error %s: %s", e.__class__.__name__, e)
        raise ProviderConnectionError(str(e)) from e

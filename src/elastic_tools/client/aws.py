"""AWS SigV4 request signing.

Stores hosted on Amazon OpenSearch Service (or the older Elasticsearch
Service) reject unsigned requests. When signing is enabled the headers of
each request are extended with a SigV4 header set computed by botocore.

Profile-based credentials need boto3: pip install elastic-tools[aws]
"""

import datetime
import logging
from hashlib import sha256
from typing import Mapping

import httpx
from botocore.auth import SIGV4_TIMESTAMP, SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from .config import ElasticConfig

logger = logging.getLogger("elastic-tools")

# Lazy import check for boto3
try:
    import boto3

    BOTO3_AVAILABLE = True
except ImportError:
    BOTO3_AVAILABLE = False
    boto3 = None  # type: ignore

# Headers a signature adds (or replaces) on a request
SIGNING_HEADERS = (
    "Authorization",
    "X-Amz-Date",
    "X-Amz-Content-SHA256",
    "X-Amz-Security-Token",
)


class _ClockedSigV4Auth(SigV4Auth):
    """SigV4Auth that signs at a given instant instead of reading the clock."""

    def __init__(self, credentials, service_name, region_name, now: datetime.datetime):
        super().__init__(credentials, service_name, region_name)
        self._now = now

    def add_auth(self, request):
        request.context["timestamp"] = self._now.strftime(SIGV4_TIMESTAMP)
        self._modify_request_before_signing(request)
        canonical_request = self.canonical_request(request)
        string_to_sign = self.string_to_sign(request, canonical_request)
        signature = self.signature(string_to_sign, request)
        self._inject_signature_to_request(request, signature)


def resolve_credentials(config: ElasticConfig) -> Credentials:
    """Get signing credentials for a configuration.

    Uses the configured key pair when present, otherwise asks boto3 for the
    configured profile (or the default credential chain).

    Raises:
        ImportError: If no key pair is configured and boto3 is not installed.
        ValueError: If no credentials can be found.
    """
    if config.has_static_credentials:
        return Credentials(
            config.aws_access_key_id,
            config.aws_secret_access_key,
            config.aws_session_token,
        )

    if not BOTO3_AVAILABLE:
        raise ImportError(
            "boto3 is required to resolve AWS credentials from a profile. "
            "Install with: pip install elastic-tools[aws]"
        )

    session = boto3.Session(
        profile_name=config.aws_profile,
        region_name=config.aws_region,
    )
    credentials = session.get_credentials()
    if credentials is None:
        raise ValueError(
            "AWS signing is enabled but no credentials were found. Set "
            "ELASTIC_AWS_ACCESS_KEY_ID/ELASTIC_AWS_SECRET_ACCESS_KEY or ELASTIC_AWS_PROFILE"
        )
    frozen = credentials.get_frozen_credentials()
    return Credentials(frozen.access_key, frozen.secret_key, frozen.token)


def _utc(now: datetime.datetime | None) -> datetime.datetime:
    if now is None:
        return datetime.datetime.now(datetime.timezone.utc)
    if now.tzinfo is None:
        return now
    return now.astimezone(datetime.timezone.utc)


def sign_headers(
    method: str,
    url: str,
    headers: Mapping[str, str],
    body: bytes,
    credentials: Credentials,
    region: str,
    service: str = "es",
    now: datetime.datetime | None = None,
) -> dict[str, str]:
    """Compute the SigV4 header set for a request.

    The result is deterministic for a given (method, url, headers, body,
    credentials, region, service, now).

    Args:
        method: HTTP method
        url: Fully qualified request URL
        headers: Headers that will be sent (all of them are signed)
        body: Encoded request body
        credentials: Signing credentials
        region: AWS region of the store
        service: Signing service name
        now: Signing instant (UTC). Defaults to the current time.

    Returns:
        The headers to add to the request, keyed as in ``SIGNING_HEADERS``
    """
    request = AWSRequest(method=method.upper(), url=url, headers=dict(headers), data=body)
    request.headers["X-Amz-Content-SHA256"] = sha256(body).hexdigest()

    signer = _ClockedSigV4Auth(credentials, service, region, _utc(now))
    signer.add_auth(request)

    return {name: request.headers[name] for name in SIGNING_HEADERS if name in request.headers}


def maybe_sign(
    config: ElasticConfig,
    headers: httpx.Headers,
    method: str,
    url: str,
    body: bytes,
    credentials: Credentials | None = None,
    now: datetime.datetime | None = None,
) -> httpx.Headers:
    """Add signing headers to ``headers`` if signing is enabled.

    Signing headers overwrite existing headers of the same name. With signing
    disabled the headers are returned unchanged.
    """
    if not config.signing_enabled:
        return headers

    credentials = credentials or resolve_credentials(config)
    signed = sign_headers(
        method,
        url,
        headers,
        body,
        credentials,
        config.aws_region,
        config.aws_service,
        now,
    )
    logger.debug(f"Signed {method} {url} for {config.aws_service} in {config.aws_region}")

    merged = httpx.Headers(headers)
    for name, value in signed.items():
        merged[name] = value
    return merged

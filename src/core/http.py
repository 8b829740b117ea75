"""Applies request configuration to outgoing HTTP calls."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .models import HttpRequestConfig

LOGGER = logging.getLogger(__name__)


def send_request(
    method: str,
    url: str,
    config: HttpRequestConfig = HttpRequestConfig.DEFAULT,
    session: Optional[requests.Session] = None,
    **kwargs: Any,
) -> requests.Response:
    """Send a request with the timeouts and TLS verification from `config`.

    Explicit `timeout` or `verify` keyword arguments take precedence.
    """
    kwargs.setdefault("timeout", config.timeout)
    kwargs.setdefault("verify", config.verify_ssl_cert)
    LOGGER.debug(
        "%s %s (timeout=%s, verify=%s)", method.upper(), url, kwargs["timeout"], kwargs["verify"]
    )
    sender = session if session is not None else requests
    return sender.request(method, url, **kwargs)

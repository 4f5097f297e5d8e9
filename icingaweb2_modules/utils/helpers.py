#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""Some helpers functions that doesn't belong anywhere else."""

import base64
import binascii
import ipaddress
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from icingaweb2_modules.exceptions import InvalidTLSMaterialError

PEM_HEADER = re.compile(r"(-+(BEGIN|END) [A-Z0-9 ]+-+)")
HOSTNAME = re.compile(
    r"^(?=.{1,253}\.?$)(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*\.?$"
)


def parse_tls_file(raw_content: str) -> bytes:
    """Parse TLS files from both plain text or base64 format."""
    if PEM_HEADER.match(raw_content.lstrip()):
        return raw_content.strip().encode("utf-8")
    # base64 tools wrap their output, line breaks are not part of the payload.
    try:
        decoded = base64.b64decode("".join(raw_content.split()), validate=True)
    except binascii.Error as e:
        raise InvalidTLSMaterialError("content is neither PEM nor base64 encoded") from e
    if not PEM_HEADER.match(decoded.decode("utf-8", errors="replace").lstrip()):
        raise InvalidTLSMaterialError("base64 content does not decode to a PEM block")
    return decoded.strip()


def validate_host(value: str) -> str:
    """Accepts an IP address or an RFC 1123 host name."""
    try:
        ipaddress.ip_address(value)
        return value
    except ValueError:
        pass
    if not HOSTNAME.match(value):
        raise ValueError(f"'{value}' is not a valid host name or IP address")
    return value


def validate_absolute_path(value: Path) -> Path:
    """Rejects relative paths."""
    if not value.is_absolute():
        raise ValueError(f"'{value}' is not an absolute path")
    return value


def join_patterns(value: str | Sequence[str]) -> str:
    """Renders a list of patterns as a comma separated string.

    Strings are returned unchanged.
    """
    if isinstance(value, str):
        return value
    return ",".join(value)


def compact(settings: Mapping[str, Any]) -> dict[str, Any]:
    """Drops the keys whose value is undefined."""
    return {key: value for key, value in settings.items() if value is not None}

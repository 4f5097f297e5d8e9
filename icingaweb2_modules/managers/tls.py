#!/usr/bin/env python3
# Copyright 2024 Canonical Ltd.
# See LICENSE file for licensing details.

"""The TLS Manager.

Resolves the TLS part of a database resource and the certificate files that
have to be written for it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from pydantic import SecretStr

from icingaweb2_modules.config.models import Icingaweb2Context
from icingaweb2_modules.core.paths import ModulePaths
from icingaweb2_modules.core.resources import TlsDescriptor, TlsFile
from icingaweb2_modules.core.structured_config import TLSParameters
from icingaweb2_modules.exceptions import InvalidTLSMaterialError
from icingaweb2_modules.utils.helpers import parse_tls_file

logger = logging.getLogger(__name__)

KEY_FILE_MODE = "0400"
CERT_FILE_MODE = "0644"


def check_private_key(content: bytes) -> None:
    """Fails if the content is not an unencrypted PEM private key."""
    try:
        serialization.load_pem_private_key(content, password=None, backend=default_backend())
    except (TypeError, ValueError) as e:
        raise InvalidTLSMaterialError("invalid private key") from e


def check_certificates(content: bytes) -> None:
    """Fails if the content is not a PEM certificate (or chain of certificates)."""
    try:
        x509.load_pem_x509_certificates(content)
    except ValueError as e:
        raise InvalidTLSMaterialError("invalid certificate") from e


class TLSManager:
    """Manager for building the TLS descriptor of a resource."""

    def __init__(self, context: Icingaweb2Context, paths: ModulePaths) -> None:
        self.context = context
        self.paths = paths

    def resolve(self, resource: str, params: TLSParameters) -> TlsDescriptor | None:
        """Builds the TLS descriptor of ::resource.

        Nothing is returned unless `use_tls` is set, whatever other TLS
        parameter is given.
        """
        if not params.use_tls:
            logger.debug(f"TLS disabled for {resource}")
            return None
        logger.debug(f"TLS *enabled* for {resource}, resolving key, certificate and CA files")

        files: list[TlsFile] = []
        key_file = self._material(
            params.tls_key.get_secret_value() if params.tls_key else None,
            params.tls_key_file or self.paths.key_file(resource),
            params.tls_key_file,
            KEY_FILE_MODE,
            check_private_key,
            files,
        )
        cert_file = self._material(
            params.tls_cert,
            params.tls_cert_file or self.paths.cert_file(resource),
            params.tls_cert_file,
            CERT_FILE_MODE,
            check_certificates,
            files,
        )
        cacert_file = self._material(
            params.tls_cacert,
            params.tls_cacert_file or self.paths.cacert_file(resource),
            params.tls_cacert_file,
            CERT_FILE_MODE,
            check_certificates,
            files,
        )

        return TlsDescriptor(
            key_file=key_file,
            cert_file=cert_file,
            cacert_file=cacert_file,
            capath=params.tls_capath,
            noverify=(
                params.tls_noverify
                if params.tls_noverify is not None
                else self.context.tls.noverify
            ),
            cipher=params.tls_cipher or self.context.tls.cipher,
            files=tuple(files),
        )

    def _material(
        self,
        content: str | None,
        target: Path,
        given: Path | None,
        mode: str,
        check: Callable[[bytes], None],
        files: list[TlsFile],
    ) -> Path | None:
        """Schedules the write of inline content, or passes the given path through."""
        if content is None:
            return given
        pem = parse_tls_file(content)
        check(pem)
        logger.debug(f"Scheduling write of {target}")
        files.append(TlsFile(path=target, content=SecretStr(pem.decode("utf-8") + "\n"), mode=mode))
        return target

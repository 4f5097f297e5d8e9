import datetime
from typing import NamedTuple

import factory
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from icingaweb2_modules.config.literals import DatabaseType
from icingaweb2_modules.core.structured_config import DirectorParameters, MonitoringParameters


class TLSMaterial(NamedTuple):
    key: str
    cert: str


def generate_tls_material() -> TLSMaterial:
    """A self signed certificate and its key, both PEM encoded."""
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "icingaweb2-test")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )
    return TLSMaterial(
        key=key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        ).decode("utf-8"),
        cert=cert.public_bytes(serialization.Encoding.PEM).decode("utf-8"),
    )


class DirectorParametersFactory(factory.Factory):
    class Meta:  # noqa
        model = DirectorParameters

    git_revision = "foobar"
    db_host = "localhost"
    db_name = "director"
    db_username = "director"
    db_password = "director"


class MonitoringParametersFactory(factory.Factory):
    class Meta:  # noqa
        model = MonitoringParameters

    ido_type = DatabaseType.MYSQL
    ido_host = "localhost"
    ido_db_name = "icinga2"
    ido_db_username = "icinga2"
    ido_db_password = "icinga2"

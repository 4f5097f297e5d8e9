import pytest

from icingaweb2_modules.config.models import Icingaweb2Context

from .helpers import TLSMaterial, generate_tls_material


@pytest.fixture
def context() -> Icingaweb2Context:
    return Icingaweb2Context()


@pytest.fixture(scope="session")
def tls_material() -> TLSMaterial:
    return generate_tls_material()

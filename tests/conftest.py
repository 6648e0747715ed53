import pytest

from hexgcm import GCMFacade, Options

# An example 32-byte hex key
ENCRYPTION_KEY = "76a91c59564bd56132304a9fd65913ac96012689f1ab39b9d04e941cda00f08f"

# An example 12-byte fixed nonce for deterministic encryption
FIXED_NONCE = "203095d2a50cdbd777b5d8d7"

PLAINTEXT = "Hello, World!"


@pytest.fixture
def options():
    return Options(key=ENCRYPTION_KEY, fixed_nonce=FIXED_NONCE)


@pytest.fixture
def facade(options):
    return GCMFacade.from_options(options)

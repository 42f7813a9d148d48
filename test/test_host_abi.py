import pytest

from cwcheck.host_abi import COSMWASM_1, DEFAULT_HOST_VERSION, get_host_abi


def test_get_host_abi_default():
    assert get_host_abi() is COSMWASM_1
    assert DEFAULT_HOST_VERSION == "cosmwasm-1"


def test_get_host_abi_unknown_version_hides_key_error():
    with pytest.raises(ValueError, match="Unknown host version: cosmwasm-0") as exc_info:
        get_host_abi("cosmwasm-0")
    assert exc_info.value.__suppress_context__
    assert exc_info.value.__cause__ is None

import pytest
import boa

from script.deploy import deploy_raffle
from script.deploy_mock import deploy_mock
from script.helper_config import get_network_config

NETWORK = "pyevm"
STARTING_BALANCE = 10**18  # 1 ETH


@pytest.fixture(scope="session")
def network_config():
    return get_network_config(NETWORK)


@pytest.fixture
def account():
    """The deployer, which is also the default sender"""
    boa.env.set_balance(boa.env.eoa, STARTING_BALANCE)
    return boa.env.eoa


@pytest.fixture
def players():
    """Three extra funded accounts"""
    addresses = [boa.env.generate_address() for _ in range(3)]
    for addr in addresses:
        boa.env.set_balance(addr, STARTING_BALANCE)
    return addresses


@pytest.fixture
def vrf_coordinator_mock(account):
    return deploy_mock(NETWORK)


@pytest.fixture
def raffle_contract(vrf_coordinator_mock):
    return deploy_raffle(NETWORK, coordinator=vrf_coordinator_mock)


@pytest.fixture
def entrance_fee(raffle_contract):
    return raffle_contract.getEntranceFee()

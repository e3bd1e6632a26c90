"""
Per-network deployment parameters for the Raffle and its VRF mock.
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
RAFFLE_SOURCE = PROJECT_ROOT / "src" / "raffle.vy"
VRF_COORDINATOR_MOCK_SOURCE = PROJECT_ROOT / "src" / "mocks" / "vrf_coordinator_v2_mock.vy"

DEVELOPMENT_CHAINS = ["pyevm", "anvil"]

BASE_FEE = 25 * 10**16  # 0.25 LINK per request
GAS_PRICE_LINK = 10**9  # LINK per gas, derived from the chain's gas price
VRF_SUB_FUND_AMOUNT = 20 * 10**18

# Chainlink VRF v2 on Sepolia, 30 gwei key hash
SEPOLIA_VRF_COORDINATOR = "0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625"
SEPOLIA_GAS_LANE = bytes.fromhex(
    "474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"
)

OPEN = 0
CALCULATING = 1


@dataclass(frozen=True)
class NetworkConfig:
    name: str
    chain_id: int
    entrance_fee: int
    gas_lane: bytes
    callback_gas_limit: int
    interval: int
    vrf_coordinator: str | None = None
    subscription_id: int = 0
    block_confirmations: int = 1


_LOCAL = dict(
    chain_id=31337,
    entrance_fee=10**16,  # 0.01 ETH
    gas_lane=SEPOLIA_GAS_LANE,  # ignored by the mock
    callback_gas_limit=500_000,
    interval=30,
)

NETWORK_CONFIG = {
    "pyevm": NetworkConfig(name="pyevm", **_LOCAL),
    "anvil": NetworkConfig(name="anvil", **_LOCAL),
    "sepolia": NetworkConfig(
        name="sepolia",
        chain_id=11155111,
        entrance_fee=10**16,
        gas_lane=SEPOLIA_GAS_LANE,
        callback_gas_limit=500_000,
        interval=30,
        vrf_coordinator=SEPOLIA_VRF_COORDINATOR,
        block_confirmations=6,
    ),
}


def is_development_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def get_network_config(network_name: str) -> NetworkConfig:
    """
    Look up the deployment parameters for a network.

    Live subscriptions are created in the Chainlink UI, so their id is read
    from ``<NETWORK>_VRF_SUBSCRIPTION_ID`` (e.g. ``SEPOLIA_VRF_SUBSCRIPTION_ID``)
    when it is set.

    Raises:
        KeyError: if the network has no entry.
    """
    try:
        config = NETWORK_CONFIG[network_name]
    except KeyError:
        raise KeyError(f"No raffle config for network '{network_name}'") from None

    subscription_id = os.getenv(f"{network_name.upper()}_VRF_SUBSCRIPTION_ID")
    if subscription_id:
        config = replace(config, subscription_id=int(subscription_id))
    return config

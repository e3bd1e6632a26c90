from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
import boa

from script.helper_config import (
    BASE_FEE,
    GAS_PRICE_LINK,
    VRF_COORDINATOR_MOCK_SOURCE,
    is_development_chain,
)


def deploy_mock(network_name: str) -> VyperContract | None:
    """Deploy the VRF coordinator mock. Live networks use the real coordinator."""
    if not is_development_chain(network_name):
        return None

    print("Local network detected! Deploying mocks...")
    mock = boa.load(
        str(VRF_COORDINATOR_MOCK_SOURCE),
        BASE_FEE,
        GAS_PRICE_LINK,
        name="VRFCoordinatorV2Mock",
    )
    print(f"Mock VRF Coordinator at: {mock.address}")
    print("Mocks Deployed !")
    print("-" * 64)
    return mock


def moccasin_main() -> VyperContract | None:
    return deploy_mock(get_active_network().name)

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
import boa
import os

from script.deploy_mock import deploy_mock
from script.helper_config import (
    RAFFLE_SOURCE,
    VRF_SUB_FUND_AMOUNT,
    get_network_config,
    is_development_chain,
)
from script.verify import verify


def deploy_raffle(network_name: str, coordinator: VyperContract | None = None) -> VyperContract:
    """
    Deploy the Raffle with the parameters configured for ``network_name``.

    On development chains the subscription is created and funded on the
    coordinator mock (deployed here when none is passed) and the Raffle is
    registered as its consumer. On live networks the coordinator and
    subscription come from config, and the Raffle is verified when
    ETHERSCAN_API_KEY is set.
    """
    config = get_network_config(network_name)
    development = is_development_chain(network_name)

    if development:
        if coordinator is None:
            coordinator = deploy_mock(network_name)
        vrf_coordinator = coordinator.address
        subscription_id = coordinator.createSubscription()
        # The mock accepts funding without LINK
        coordinator.fundSubscription(subscription_id, VRF_SUB_FUND_AMOUNT)
    else:
        if config.vrf_coordinator is None:
            raise ValueError(f"No VRF coordinator configured for {network_name}")
        if not config.subscription_id:
            raise ValueError(
                f"Set {network_name.upper()}_VRF_SUBSCRIPTION_ID to the id of a funded VRF subscription"
            )
        vrf_coordinator = config.vrf_coordinator
        subscription_id = config.subscription_id

    args = [
        vrf_coordinator,
        config.entrance_fee,
        config.gas_lane,
        subscription_id,
        config.callback_gas_limit,
        config.interval,
    ]
    raffle_contract = boa.load(str(RAFFLE_SOURCE), *args, name="Raffle")
    print(f"Raffle deployed at: {raffle_contract.address}")

    if development:
        coordinator.addConsumer(subscription_id, raffle_contract.address)
        print(f"Raffle added as consumer of subscription {subscription_id}")

    if not development and os.getenv("ETHERSCAN_API_KEY"):
        print(f"Verifying contract {raffle_contract.address} {args}")
        verify(raffle_contract)

    print("-" * 64)
    return raffle_contract


def moccasin_main() -> VyperContract:
    return deploy_raffle(get_active_network().name)

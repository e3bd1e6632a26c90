from moccasin.config import get_active_network


def verify(contract, active_network=None) -> bool:
    """
    Verify a deployed contract on the active network's block explorer.

    Returns True once the explorer accepts the source. Returns False when it
    reports the contract as already verified, or when verification fails for
    any other reason; the deployment itself stands either way, so the error
    is printed and can be retried with ``mox verify``.
    """
    if active_network is None:
        active_network = get_active_network()

    print(f"Verifying contract : {contract.address}")
    try:
        result = active_network.moccasin_verify(contract)
        result.wait_for_verification()
    except Exception as e:
        if "already verified" in str(e).lower():
            print("Already verified")
        else:
            print(f"Verification failed for {contract.address}: {e!r}")
        return False

    print("Verified contract")
    return True

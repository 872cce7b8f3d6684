from eth_utils import to_wei
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts import MBATToken

# One billion tokens, 18 decimals
INITIAL_SUPPLY = to_wei(1_000_000_000, "ether")


def deploy_mbat_token() -> VyperContract:
    """
    Deploys the MBAT token with the whole initial supply minted to the deployer.

    Every call deploys a new contract.

    Returns:
        VyperContract: The deployed MBAT token contract instance.
    """
    mbat_token: VyperContract = MBATToken.deploy(INITIAL_SUPPLY)
    active_network = get_active_network()
    if active_network.has_explorer() and active_network.is_local_or_forked_network() is False:
        result = active_network.moccasin_verify(mbat_token)
        result.wait_for_verification()

    print(f"MBAT Token deployed at: {mbat_token.address}")
    return mbat_token


def moccasin_main() -> VyperContract:
    """
    Main deployment function for Moccasin framework.

    Returns:
        VyperContract: The deployed MBAT token contract instance.
    """
    active_network = get_active_network()
    print(f"network: {active_network.name} , initial supply: {INITIAL_SUPPLY}")
    return deploy_mbat_token()

"""Known ERC-20 tokens per supported chain.

Used to fill in token decimals the caller did not provide and to list the
tokens whose balances are shown for a wallet. Addresses are stored in
EIP-55 form; lookups are case-insensitive.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from web3 import Web3

from walletsweep.chains import SupportedChain


@dataclass(frozen=True)
class TokenInfo:
    """Static metadata for a known token."""

    chain_id: int
    address: str
    symbol: str
    name: str
    decimals: int


# ======================
# Token Lists
# ======================

_TOKENS: dict[SupportedChain, tuple[tuple[str, str, str, int], ...]] = {
    SupportedChain.ETHEREUM: (
        ("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "USDC", "USD Coin", 6),
        ("0xdAC17F958D2ee523a2206206994597C13D831ec7", "USDT", "Tether USD", 6),
        ("0x6B175474E89094C44Da98b954EedeAC495271d0F", "DAI", "Dai Stablecoin", 18),
        ("0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", "WBTC", "Wrapped BTC", 8),
        ("0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", "WETH", "Wrapped Ether", 18),
    ),
    SupportedChain.OPTIMISM: (
        ("0x7F5c764cBc14f9669B88837ca1490cCa17c31607", "USDC", "USD Coin", 6),
        ("0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", "USDT", "Tether USD", 6),
        ("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", "DAI", "Dai Stablecoin", 18),
        ("0x68f180fcCe6836688e9084f035309E29Bf0A2095", "WBTC", "Wrapped BTC", 8),
        ("0x4200000000000000000000000000000000000006", "WETH", "Wrapped Ether", 18),
    ),
    SupportedChain.BSC: (
        ("0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56", "BUSD", "Binance USD", 18),
        ("0x55d398326f99059fF775485246999027B3197955", "USDT", "Tether USD", 18),
        ("0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d", "USDC", "USD Coin", 18),
        ("0x7130d2A12B9BCbFAe4f2634d864A1Ee1Ce3Ead9c", "BTCB", "Binance BTC", 18),
        ("0x2170Ed0880ac9A755fd29B2688956BD959F933F8", "ETH", "Ethereum Token", 18),
    ),
    SupportedChain.GNOSIS: (
        ("0xDDAfbb505ad214D7b80b1f830fcCc89B60fb7A83", "USDC", "USD Coin", 6),
        ("0x4ECaBa5870353805a9F068101A40E0f32ed605C6", "USDT", "Tether USD", 6),
        ("0xe91D153E0b41518A2Ce8Dd3D7944Fa863463a97d", "WXDAI", "Wrapped XDAI", 18),
        ("0x8e5bBbb09Ed1ebdE8674Cda39A0c169401db4252", "WBTC", "Wrapped BTC", 8),
        ("0x6A023CCd1ff6F2045C3309768eAd9E68F978f6e1", "WETH", "Wrapped Ether", 18),
    ),
    SupportedChain.POLYGON: (
        ("0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174", "USDC", "USD Coin", 6),
        ("0xc2132D05D31c914a87C6611C10748AEb04B58e8F", "USDT", "Tether USD", 6),
        ("0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063", "DAI", "Dai Stablecoin", 18),
        ("0x1BFD67037B42Cf73acF2047067bd4F2C47D9BfD6", "WBTC", "Wrapped BTC", 8),
        ("0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", "WMATIC", "Wrapped Matic", 18),
    ),
    SupportedChain.ARBITRUM: (
        ("0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8", "USDC", "USD Coin", 6),
        ("0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", "USDT", "Tether USD", 6),
        ("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", "DAI", "Dai Stablecoin", 18),
        ("0x2f2a2543B76A4166549F7aaB2e75Bef0aefC5B0f", "WBTC", "Wrapped BTC", 8),
        ("0x82aF49447D8a07e3bd95BD0d56f35241523fBab1", "WETH", "Wrapped Ether", 18),
    ),
    SupportedChain.AVALANCHE: (
        ("0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E", "USDC", "USD Coin", 6),
        ("0x9702230A8Ea53601f5cD2dc00fDBc13d4dF4A8c7", "USDT", "Tether USD", 6),
        ("0xd586E7F844cEa2F87f50152665BCbc2C279D8d70", "DAI", "Dai Stablecoin", 18),
        ("0x50b7545627a5162F82A992c33b87aDc75187B218", "WBTC", "Wrapped BTC", 8),
        ("0x49D5c2BdFfac6CE2BFdB6640F4F80f226bc10bAB", "WETH", "Wrapped Ether", 18),
        ("0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7", "WAVAX", "Wrapped AVAX", 18),
    ),
}


def _build_registry() -> Mapping[int, tuple[TokenInfo, ...]]:
    registry = {}
    for chain, entries in _TOKENS.items():
        registry[int(chain)] = tuple(
            TokenInfo(
                chain_id=int(chain),
                address=Web3.to_checksum_address(address.lower()),
                symbol=symbol,
                name=name,
                decimals=decimals,
            )
            for address, symbol, name, decimals in entries
        )
    return MappingProxyType(registry)


KNOWN_TOKENS: Mapping[int, tuple[TokenInfo, ...]] = _build_registry()


def get_known_tokens(chain_id: int) -> tuple[TokenInfo, ...]:
    """Get the known tokens for a chain (empty for unsupported chains)."""
    return KNOWN_TOKENS.get(chain_id, ())


def find_token(chain_id: int, address: str) -> Optional[TokenInfo]:
    """Look up a known token by contract address on a chain."""
    if not isinstance(address, str):
        return None
    wanted = address.lower()
    for token in get_known_tokens(chain_id):
        if token.address.lower() == wanted:
            return token
    return None

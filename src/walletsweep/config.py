"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from walletsweep.chains import SupportedChain


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Chain RPC Endpoints
    # ======================
    eth_rpc_url: str = Field(default="https://eth.llamarpc.com", description="Ethereum RPC URL")
    optimism_rpc_url: str = Field(
        default="https://mainnet.optimism.io", description="Optimism RPC URL"
    )
    bsc_rpc_url: str = Field(
        default="https://bsc-dataseed.binance.org", description="BSC RPC URL"
    )
    gnosis_rpc_url: str = Field(default="https://rpc.gnosischain.com", description="Gnosis RPC URL")
    matic_rpc_url: str = Field(default="https://polygon-rpc.com", description="Polygon RPC URL")
    arbitrum_rpc_url: str = Field(
        default="https://arb1.arbitrum.io/rpc", description="Arbitrum One RPC URL"
    )
    avax_rpc_url: str = Field(
        default="https://api.avax.network/ext/bc/C/rpc", description="Avalanche RPC URL"
    )
    rpc_timeout: float = Field(default=30.0, description="RPC request timeout in seconds")
    default_chain_id: int = Field(
        default=int(SupportedChain.ETHEREUM),
        description="Chain used when the wallet does not report one",
    )

    # ======================
    # Wallet
    # ======================
    wallet_rpc_url: Optional[str] = Field(
        default=None, description="JSON-RPC endpoint of an external wallet (e.g. http://127.0.0.1:1248)"
    )

    # ======================
    # Address Screening
    # ======================
    legacy_server_url: Optional[str] = Field(
        default=None, description="Server providing blacklist/whitelist checks"
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_rpc_url(self, chain_id: int) -> str:
        """Get RPC URL for a chain ID ("" if unsupported)."""
        rpc_map = {
            SupportedChain.ETHEREUM: self.eth_rpc_url,
            SupportedChain.OPTIMISM: self.optimism_rpc_url,
            SupportedChain.BSC: self.bsc_rpc_url,
            SupportedChain.GNOSIS: self.gnosis_rpc_url,
            SupportedChain.POLYGON: self.matic_rpc_url,
            SupportedChain.ARBITRUM: self.arbitrum_rpc_url,
            SupportedChain.AVALANCHE: self.avax_rpc_url,
        }
        return rpc_map.get(chain_id, "")

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "default_chain_id": self.default_chain_id,
            "rpc": {chain.name: self.redact_url(self.get_rpc_url(chain)) for chain in SupportedChain},
            "wallet_rpc_configured": bool(self.wallet_rpc_url),
            "screening_configured": bool(self.legacy_server_url),
        }

    @staticmethod
    def redact_url(url: str) -> str:
        """Redact credentials and API keys embedded in a URL."""
        if "://" in url and "@" in url:
            proto, rest = url.split("://", 1)
            if "@" in rest:
                creds, host = rest.rsplit("@", 1)
                if ":" in creds:
                    user, _ = creds.split(":", 1)
                    return f"{proto}://{user}:***@{host}"
        if "/v3/" in url:
            # Infura-style project keys
            base, _ = url.split("/v3/", 1)
            return f"{base}/v3/***"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

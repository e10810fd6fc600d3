"""FastAPI application for the swap adapters."""

import uvicorn
from fastapi import FastAPI

from swap_adapters.api.endpoints import router
from swap_adapters.balancer import VirtualBoostedPool, VirtualBoostedPools
from swap_adapters.config import load_settings

# Configuration from environment variables; an unknown network fails here
SETTINGS = load_settings()

app = FastAPI(
    title="Swap Adapters",
    description="Virtual boosted pool routing for Balancer V2",
    version="0.1.0",
)

app.state.settings = SETTINGS
app.state.adapter = VirtualBoostedPool(vault_address=SETTINGS.network_config.vault)
# Empty until the first batch of pool metadata is loaded
app.state.snapshot = VirtualBoostedPools()

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "network": SETTINGS.network.value,
        "virtual_pools": len(app.state.snapshot),
    }


def run() -> None:
    """Run the adapter API server.

    Configuration via environment variables:
    - SWAP_ADAPTERS_NETWORK: Network name (default: mainnet)
    - SWAP_ADAPTERS_HOST: Host to bind to (default: 0.0.0.0)
    - SWAP_ADAPTERS_PORT: Port to bind to (default: 8000)
    """
    uvicorn.run(
        "swap_adapters.api.main:app",
        host=SETTINGS.host,
        port=SETTINGS.port,
    )


if __name__ == "__main__":
    run()

from __future__ import annotations

DEFAULT_RPC_URL = "https://solana-rpc.publicnode.com"
RPC_URL_ENV     = "RPC_NODE"

# getProgramAccounts responses can be very large and slow to assemble
DEFAULT_TIMEOUT_S = 15 * 60

COMMITMENT = "processed"
ENCODING   = "base64+zstd"

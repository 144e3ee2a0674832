"""Configuration constants for devnet-deployments."""

# Environment variables read once at startup
ENV_RPC_URL = "DEVNET_RPC_URL"
ENV_INIT_CHECK_ADDRESS = "INIT_CHECK_ADDRESS"
ENV_PRIVATE_KEY = "DEVNET_PKEY"
ENV_DEPLOYMENTS_PATH = "DEPLOYMENTS_PATH"
ENV_PROXY_OWNER = "DEVNET_ACCOUNT_ADDRESS"
ENV_NO_VERIFY = "NO_VERIFY"
ENV_UPLOAD_VKEYS = "UPLOAD_VKEYS"
ENV_SCRIPTS_COMMAND = "DEPLOY_SCRIPTS_COMMAND"
ENV_POLL_INTERVAL = "READINESS_POLL_INTERVAL"
ENV_MAX_POLL_ATTEMPTS = "READINESS_MAX_ATTEMPTS"
ENV_RPC_TIMEOUT = "READINESS_RPC_TIMEOUT"

# Deploy scripts binary, invoked once per step
DEFAULT_SCRIPTS_COMMAND = ("cargo", "run", "-p", "scripts", "--")

# Readiness polling
DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_RPC_TIMEOUT = 5.0
EMPTY_CODE = "0x"

# Contract identifiers understood by `deploy-stylus --contract`
VERIFIER_CONTRACT = "verifier"
MERKLE_CONTRACT = "merkle"
DARKPOOL_CONTRACT = "darkpool-test-contract"

# Circuits whose verification keys are uploaded, in upload order
VKEY_CIRCUITS = (
    "valid-wallet-create",
    "valid-wallet-update",
    "valid-commitments",
    "valid-reblind",
    "valid-match-settle",
)

NO_VERIFY_FLAG = "--no-verify"

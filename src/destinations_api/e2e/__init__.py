"""End-to-end runner: configuration and CLI."""
from destinations_api.e2e.config import E2EConfig, load_e2e_config

__all__ = ["E2EConfig", "load_e2e_config"]

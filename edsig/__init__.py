"""Ed25519 key generation, signing and verification in pure Python, with field, scalar and group arithmetic."""

__version__ = "0.1.0"
__all__ = ["bench", "cli", "ed25519", "field", "group", "heap", "limbs", "scalar"]
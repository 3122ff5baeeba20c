"""In-memory on-chain identity: ERC-734 keys, ERC-735 claims and claim verification."""

__version__ = "0.0.1"
__all__ = ["errors", "structs", "identity"]
from .static_token_oracle import StaticTokenAuthOracle

__all__ = ["StaticTokenAuthOracle"]

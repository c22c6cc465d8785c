from .user import User, hash_reset_token

__all__ = ["User", "hash_reset_token"]

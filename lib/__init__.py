# =============================================================================
# lib/ - Shared Utilities
# =============================================================================
# Framework-agnostic helpers used by the service layer:
# - passwords.py: argon2 password hashing
# =============================================================================

"""Global configuration for shared-secrets."""

import os

# ---------- Finite-field prime (257-bit) ----------
# Every share produced by split_secret lives in F_p for this p, so it must
# never change between a split and the matching recover.  Any byte string
# shorter than 33 bytes encodes to an integer below it.
PRIME_257 = (
    "208351617316091241234326746312124448251235562226470491514186331217050270460481"
)

# ---------- Share text encoding ----------
SHARE_RADIX = 36
SHARE_SEPARATOR = ":"

# ---------- Cipher ----------
KEY_LENGTH = 32      # AES-256
NONCE_LENGTH = 12    # 96-bit GCM nonce, prepended to every ciphertext

# ---------- CLI file naming ----------
ENCRYPTED_SUFFIX = ".aes"
SHARES_SUFFIX = ".frg"

# ---------- Runtime settings (env overrides) ----------
LOG_LEVEL = os.environ.get("SHARED_SECRETS_LOG_LEVEL", "warning")
MAX_SHARES = int(os.environ.get("SHARED_SECRETS_MAX_SHARES", "255"))

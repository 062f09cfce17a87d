# Deterministic generator
DIGEST_SIZE = 32  # HMAC-SHA256 output, also the state size after the first draw
COUNTER_SIZE = 8  # counter encoding, big-endian

# Seeds
SEED_SIZE = 32
MIN_SALT_SIZE = 16
CLOCK_SEED_SIZE = 8

# Fixed Argon2id parameters for passphrase seeds
ARGON_TIME_COST = 3
ARGON_MEMORY_COST_KIB = 64 * 1024  # 64 MiB
ARGON_PARALLELISM = 4

# Keystream CSPRNG (XChaCha20)
KEY_SIZE = 32
NONCE_SIZE = 24
RESEED_INTERVAL = 1 << 20  # bytes served before pulling fresh upstream entropy

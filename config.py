# config.py
import os

# ======= Solvable builder budgets =======
OUTER_ATTEMPTS      = int(os.getenv("PCP_OUTER_ATTEMPTS", "100"))
PARTITION_TRIES     = int(os.getenv("PCP_PARTITION_TRIES", "50"))
PARTITION_ATTEMPTS  = int(os.getenv("PCP_PARTITION_ATTEMPTS", "100"))
TARGET_TRIES        = int(os.getenv("PCP_TARGET_TRIES", "60"))

# ======= Unsolvable builder =======
UNSOLVABLE_TILE_TRIES = int(os.getenv("PCP_UNSOLVABLE_TILE_TRIES", "50"))
# The unsolvable branch is taken when one stream draw exceeds this value.
UNSOLVABLE_THRESHOLD  = float(os.getenv("PCP_UNSOLVABLE_THRESHOLD", "0.6"))

# ======= Seeds =======
# "uuid" -> uuid4 string, "token" -> "seed-" + 8 base-36 characters.
SEED_STYLE = os.getenv("PCP_SEED_STYLE", "uuid").strip().lower() or "uuid"

# ======= Attempt log (empty disables it) =======
ATTEMPT_LOG = os.getenv("PCP_ATTEMPT_LOG", "")


class CFG:
    OUTER_ATTEMPTS     = OUTER_ATTEMPTS
    PARTITION_TRIES    = PARTITION_TRIES
    PARTITION_ATTEMPTS = PARTITION_ATTEMPTS
    TARGET_TRIES       = TARGET_TRIES

    UNSOLVABLE_TILE_TRIES = UNSOLVABLE_TILE_TRIES
    UNSOLVABLE_THRESHOLD  = UNSOLVABLE_THRESHOLD

    SEED_STYLE  = SEED_STYLE
    ATTEMPT_LOG = ATTEMPT_LOG

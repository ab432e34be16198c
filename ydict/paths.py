# ydict/paths.py

import os

# --- Base data paths ---
DATA_DIR = os.getenv("YDICT_DATA_DIR", "data")

# --- Dictionary files (index + definitions) ---
IDX_PATH = os.path.join(DATA_DIR, "dict100.idx")    # word table
DAT_PATH = os.path.join(DATA_DIR, "dict100.dat")    # length-prefixed markup blobs

# --- Optional debug dump of the loaded word table (empty = disabled) ---
IDX_DUMP_PATH = os.getenv("YDICT_IDX_DUMP", "")

# --- Default number of prefix suggestions ---
SUGGEST_LIMIT = 15

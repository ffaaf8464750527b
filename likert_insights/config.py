"""Configuration constants for the Likert frequency pipeline."""
from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

# Pick up a .env from the working directory before any value is read
load_dotenv(find_dotenv(usecwd=True))

# Number of points on the rating scale (codes 1..SCALE_SIZE)
SCALE_SIZE: int = int(os.getenv("LIKERT_SCALE_SIZE", "5"))

# Default seed for simulated survey data
SEED: int = int(os.getenv("LIKERT_SEED", "42"))

# Default number of simulated respondents
N_RESPONDENTS: int = int(os.getenv("LIKERT_N_RESPONDENTS", "500"))

# Binary grouping column used for the demographic split
DEMOGRAPHIC_COLUMN: str = os.getenv("LIKERT_DEMOGRAPHIC_COLUMN", "demographic")

# Where charts and the summary CSV are written
OUTPUT_DIR: str = os.getenv("LIKERT_OUTPUT_DIR", "outputs")

# Resolution of saved figures
FIG_DPI: int = int(os.getenv("LIKERT_FIG_DPI", "150"))

LOG_LEVEL: str = os.getenv("LIKERT_LOG_LEVEL", "INFO")

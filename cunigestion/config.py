from __future__ import annotations

import os

# Override with env vars, e.g.
#     DATABASE_URL=sqlite:////data/cunigestion.db
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./cunigestion.db")

LOG_LEVEL = os.getenv("CUNIGESTION_LOG_LEVEL", "INFO")

# Language used until a preference has been saved
DEFAULT_LANGUAGE = os.getenv("CUNIGESTION_LANGUAGE", "fr")

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_JOBS = Path(__file__).resolve().parent.parent / "data" / "jobs.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the job catalog lives and how its CSV is laid out.
    """

    jobs_path: Path = field(
        default_factory=lambda: Path(os.getenv("JOBS_CSV", str(_BUNDLED_JOBS)))
    )
    skills_separator: str = ";"


DEFAULT_CATALOG_CONFIG = CatalogConfig()

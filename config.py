"""
Configuration for the Hiking Survey core.

Values come from the environment (optionally a .env file) with sane defaults.
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).parent

# Storage
DATA_DIR = Path(os.environ.get("HIKING_SURVEY_DATA_DIR", BASE_DIR / "data"))
STORAGE_BACKEND = os.environ.get("HIKING_SURVEY_BACKEND", "json")
RESPONSES_FILE = "responses.json"

# Sentiment thresholds (inclusive boundaries belong to moderate)
POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1

# Seed data used when storage is empty. Order matters: seeding adds these
# one at a time, so the last one ends up first in the store.
SAMPLE_RESPONSES: List[str] = [
    "The outdoors is my happy place, so give me a trail and some boots and I feel great!",
    "I don't mind going for a walk, but hiking requires too much gear and planning.",
    "Hiking seems like a pretty good way to stay in shape.",
    "I love everything about hiking: the fresh air, the exercise, the feeling of accomplishment. When can we go next?",
    "There's a nice, paved trail near my house that I like, but I don't need to get out in the woods.",
    "I enjoy hard hikes. When my heart is pumping and I'm being challenged, I feel great.",
    "Last time I went hiking I got a thousand bug bites. You won't find me on a trail any time soon!",
]


def load_sample_responses(path: Optional[Path] = None) -> List[str]:
    """
    Load seed texts.

    Reads a YAML file with a top-level `samples:` list when one is given
    (or HIKING_SURVEY_SAMPLES_FILE is set), otherwise returns the built-in list.
    """
    if path is None:
        env_path = os.environ.get("HIKING_SURVEY_SAMPLES_FILE")
        if not env_path:
            return list(SAMPLE_RESPONSES)
        path = Path(env_path)

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    samples = data.get("samples", []) if isinstance(data, dict) else []
    return [str(s) for s in samples]

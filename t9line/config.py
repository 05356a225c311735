"""
t9line.config
=============
Loads config.json.
Falls back to sane defaults if the file is missing or partially specified.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path

# The package ships a default config.json alongside this file.
_PACKAGE_DIR = Path(__file__).parent
_DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.json"

ENV_VAR = "T9LINE_CONFIG"


DEFAULTS: dict = {
    "layout": "numpad",
    "corpus": str(_PACKAGE_DIR / "wordlists" / "en.tsv"),
    # Each digit plus the no-numpad fallbacks: uio → 456, jkl → 123
    "digit_keys": {
        "1": ["1", "j"],
        "2": ["2", "k"],
        "3": ["3", "l"],
        "4": ["4", "u"],
        "5": ["5", "i"],
        "6": ["6", "o"],
        "7": ["7"],
        "8": ["8"],
        "9": ["9"],
    },
    "passthrough": [" ", ".", ",", "!", "?", "'", '"', ":", ";", "(", ")", "@", "#"],
    "next_keys": ["down", "+"],
    "prev_keys": ["up", "-"],
    "backspace_keys": ["backspace", "*"],
    "exit_keys": ["esc", "ctrl+c"],
    "highlight": "reverse",
}


def load_config(path: str | Path | None = None) -> dict:
    """
    Load configuration from a JSON file and merge with defaults.

    Resolution order (first found wins):
        1. Explicit ``path`` argument
        2. ``T9LINE_CONFIG`` environment variable
        3. ``config.json`` in the current working directory
        4. Packaged default ``t9line/config.json``

    Returns a fully-populated config dict.
    """
    cfg = copy.deepcopy(DEFAULTS)

    candidates: list[Path] = []
    if path:
        candidates.append(Path(path))
    env = os.environ.get(ENV_VAR)
    if env:
        candidates.append(Path(env))
    candidates.append(Path.cwd() / "config.json")
    candidates.append(_DEFAULT_CONFIG_PATH)

    for candidate in candidates:
        if candidate.exists():
            try:
                with open(candidate, "r", encoding="utf-8") as f:
                    user = json.load(f)
                merged = copy.deepcopy(cfg)
                # Strip comment keys (keys starting with _)
                user = {k: v for k, v in user.items() if not k.startswith("_")}
                # Digit aliases merge per digit
                if "digit_keys" in user:
                    merged["digit_keys"].update(user.pop("digit_keys"))
                merged.update(user)
                # Resolve corpus relative to the config file's location
                if "corpus" in user and not Path(merged["corpus"]).is_absolute():
                    merged["corpus"] = str(candidate.parent / merged["corpus"])
                cfg = merged
            except Exception as e:
                print(f"[T9] Warning: could not parse {candidate}: {e}")
            break   # stop at first found

    return cfg

# config_manager.py - JSON settings for the CLI

import json
import os

from trigram_markov.text.normalizer import LetterCase, NormalizerConfig
from trigram_markov.utils.logger_utils import Log

DEFAULT_CONFIG_PATH = "trigram_markov.json"

DEFAULTS = {
    "max_length": 20,   # tokens per generated sentence (upper bound)
    "count": 5,         # sentences per run
    "case": LetterCase.ANY.value,
    "strip": False,     # built-in non alpha-numeric filter
    "filters": [],      # extra regex removal rules, applied after strip
    "drop_empty": False,
    "split": "line",    # corpus sentence separator: "line" or "cr"
}


class Config:
    def __init__(self, path=None, autosave=False):
        self.path = path or DEFAULT_CONFIG_PATH
        self.autosave = autosave
        self.data = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULTS.items()}
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            Log.warning(f"[Config] could not read {self.path}: {e}")
            return
        if not isinstance(raw, dict):
            Log.warning(f"[Config] {self.path} is not a JSON object, ignoring")
            return
        for k, v in raw.items():
            if k not in self.data:
                Log.warning(f"[Config] unknown option {k!r} ignored")
                continue
            try:
                self.set(k, v, save=False)
            except (TypeError, ValueError) as e:
                Log.warning(f"[Config] bad value for {k!r} ignored: {e}")

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def items(self):
        return self.data.items()

    def set(self, key, val, save=True):
        """
        Set an option, coercing val to the default's type.
        Raises KeyError for unknown keys, ValueError/TypeError for values that don't coerce.
        """
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        kind = type(DEFAULTS[key])
        if kind is bool and isinstance(val, str):
            flag = val.strip().lower()
            if flag in ("1", "true", "yes", "on"):
                val = True
            elif flag in ("0", "false", "no", "off", ""):
                val = False
            else:
                raise ValueError(f"not a boolean: {val!r}")
        elif kind is list:
            if isinstance(val, str):
                val = [val]
            elif isinstance(val, (list, tuple)) and all(isinstance(v, str) for v in val):
                val = list(val)
            else:
                raise TypeError(f"expected a string or list of strings, got {val!r}")
        elif kind is int and isinstance(val, bool):
            raise TypeError(f"expected an integer, got {val!r}")
        else:
            val = kind(val)
        self.data[key] = val
        if save and self.autosave:
            self.save()

    def to_normalizer_config(self) -> NormalizerConfig:
        return NormalizerConfig.build(
            filters=self.data.get("filters") or (),
            case=self.data.get("case", LetterCase.ANY.value),
            strip=bool(self.data.get("strip")),
            drop_empty=bool(self.data.get("drop_empty")),
        )

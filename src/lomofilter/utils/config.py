import os, json
from .logging import logger

CFG_DIR  = os.path.join(os.path.expanduser("~"), ".lomofilter")
CFG_PATH = os.path.join(CFG_DIR, "config.json")

DEFAULT_CFG = {
    "last_preset": "classic",
    "steepness": 10,
    "radius": 100,
    "output_path": "output.jpg",
    "legacy_radius_aliasing": False,
    "log_level": "INFO",
}

def read_config():
    if not os.path.exists(CFG_PATH):
        return DEFAULT_CFG.copy()
    try:
        with open(CFG_PATH, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", CFG_PATH, e)
        return DEFAULT_CFG.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", CFG_PATH)
        return DEFAULT_CFG.copy()
    # fill defaults for any missing or mistyped keys
    for k, v in DEFAULT_CFG.items():
        if k not in data:
            data[k] = v
        elif not _same_type(data[k], v):
            logger.warning("Ignoring config %s: %r is not valid for %s, using %r", CFG_PATH, data[k], k, v)
            data[k] = v
    return data

def _same_type(value, default):
    # bool is an int subclass, keep the two apart
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    return isinstance(value, type(default))

def write_config(cfg: dict):
    try:
        os.makedirs(os.path.dirname(CFG_PATH), exist_ok=True)
        with open(CFG_PATH, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)
    except OSError as e:
        logger.warning("Could not write config %s: %s", CFG_PATH, e)
        return False
    return True

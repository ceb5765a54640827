import os, glob, yaml
from .params import Params
from .logging import logger

PRESETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "presets")
USER_PRESETS_DIR = os.path.join(os.path.expanduser("~"), ".lomofilter", "presets")

def list_presets():
    files = []
    files += sorted(glob.glob(os.path.join(PRESETS_DIR, "*.yaml")))
    files += sorted(glob.glob(os.path.join(USER_PRESETS_DIR, "*.yaml")))
    return files

def _read(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Skipping preset %s: %s", path, e)
        return None

def _is_int(v):
    return isinstance(v, int) and not isinstance(v, bool)

def _valid(path, data):
    if not isinstance(data, dict) or "name" not in data:
        return False
    for section, key in (("curve", "steepness"), ("halo", "radius")):
        sec = data.get(section)
        if sec is None:
            continue
        if not isinstance(sec, dict) or (key in sec and not _is_int(sec[key])):
            logger.warning("Skipping preset %s: %s.%s must be an integer", path, section, key)
            return False
    return True

def preset_names():
    names = []
    for p in list_presets():
        data = _read(p)
        if _valid(p, data):
            names.append(data["name"])
    return sorted(set(names))

def load_preset_by_name(name: str) -> dict | None:
    # user presets come later in the list and win over bundled ones
    found = None
    for p in list_presets():
        data = _read(p)
        if _valid(p, data) and data.get("name") == name:
            found = data
    return found

def apply_preset_to_params(preset: dict, params: Params):
    if not preset: return params
    c = preset.get("curve") or {}
    params.steepness = int(c.get("steepness", params.steepness))
    h = preset.get("halo") or {}
    params.radius    = int(h.get("radius", params.radius))
    params.preset_name = preset.get("name", params.preset_name)
    logger.info("Applied preset %s (s=%d, radius=%d)", params.preset_name, params.steepness, params.radius)
    return params

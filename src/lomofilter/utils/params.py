from dataclasses import dataclass, asdict, replace
from threading import RLock

@dataclass
class Params:
    # color curve
    steepness: int = 10
    # halo, percent of half the shorter side
    radius: int = 100
    # write the pixel radius back into ``radius`` after each halo pass
    legacy_radius_aliasing: bool = False
    # preset
    preset_name: str = "classic"

class ParamStore:
    def __init__(self, p: Params = None):
        self._p = p if p is not None else Params()
        self._lock = RLock()
    def snapshot(self) -> Params:
        with self._lock:
            return replace(self._p)
    def update(self, **kw):
        with self._lock:
            for k,v in kw.items():
                if not hasattr(self._p, k):
                    raise AttributeError(f"unknown parameter: {k}")
                setattr(self._p, k, v)
    def to_dict(self):
        with self._lock:
            return asdict(self._p)

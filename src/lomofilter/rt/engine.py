from enum import Enum
from ..utils.params import ParamStore, Params
from ..utils.imageio import save_image
from ..utils.logging import logger
from .nodes import (lut_from_steepness, apply_channel_lut, effective_steepness,
                    halo_pixel_radius, halo_mask, apply_halo)

class ResultSource(Enum):
    UNSET = "unset"          # neither filter has run
    ORIGINAL = "original"    # seeded from the source by the halo filter
    COLOR = "color"          # produced by the color filter

class FilterSession:
    """Owns the source image and the result/display buffers of one editing session.

    The color filter always starts from the untouched source. The halo filter
    composes onto the latest color result, or onto the source when the color
    filter has not run yet. Buffers are swapped in only once fully computed.
    """

    def __init__(self, image, params=None):
        if isinstance(params, Params):
            params = ParamStore(params)
        self.params = params if params is not None else ParamStore()
        self._img = image
        self._result = None
        self._display = image
        self.result_source = ResultSource.UNSET
        self.halo_radius_px = None
        self._lut = None

    @property
    def image(self):
        return self._img

    @property
    def result(self):
        return self._result

    @property
    def display(self):
        return self._display

    @property
    def size(self):
        h, w = self._img.shape[:2]
        return w, h

    # ---------- color filter ----------
    def on_steepness_changed(self, value):
        self.params.update(steepness=int(value))
        return self.apply_color()

    def apply_color(self):
        s = effective_steepness(self.params.snapshot().steepness)
        self._lut = lut_from_steepness(s)
        out = apply_channel_lut(self._img, self._lut)
        self._result = out
        self.result_source = ResultSource.COLOR
        self._display = out
        logger.debug("color filter applied, s=%d", s)
        return out

    # ---------- halo filter ----------
    def on_radius_changed(self, value):
        self.params.update(radius=int(value))
        return self.apply_halo()

    def apply_halo(self):
        if self.result_source is ResultSource.UNSET:
            self._result = self._img.copy()
            self.result_source = ResultSource.ORIGINAL
        p = self.params.snapshot()
        w, h = self.size
        radius = halo_pixel_radius(w, h, p.radius)
        if p.legacy_radius_aliasing:
            self.params.update(radius=radius)
        self.halo_radius_px = radius
        out = apply_halo(self._result, halo_mask(w, h, radius))
        self._display = out
        logger.debug("halo filter applied, radius=%d%% -> %dpx", p.radius, radius)
        return out

    def save(self, path):
        return save_image(path, self._display)

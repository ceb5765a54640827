import cv2, numpy as np

S_MIN, S_MAX = 8, 20
RED_CHANNEL = 2          # BGR ordering from cv2.imread
HALO_BASE = 0.5          # brightness multiplier outside the disc

def effective_steepness(s):
    return int(min(max(int(s), S_MIN), S_MAX))

def lut_from_steepness(s):
    """Logistic contrast curve as a 256-entry uint8 table.

    Smaller ``s`` gives a steeper S-curve. Values below 8 behave like 8.
    """
    s = effective_steepness(s)
    x = np.arange(256, dtype=np.float64) / 256.0
    y = 256.0 * (1.0/(1.0+np.exp(-((x-0.5)/(s/100.0)))))
    # the top entries overshoot 255, clamp before the cast
    return np.clip(np.rint(y), 0, 255).astype(np.uint8)

def _check_bgr8(img):
    if img is None or img.ndim != 3 or img.shape[2] != 3:
        raise ValueError(f"expected a 3-channel image, got shape {getattr(img, 'shape', None)}")
    if img.dtype != np.uint8:
        raise ValueError(f"expected uint8 pixels, got {img.dtype}")

def apply_channel_lut(img_bgr, lut, channel=RED_CHANNEL):
    _check_bgr8(img_bgr)
    chans = list(cv2.split(img_bgr))
    chans[channel] = cv2.LUT(chans[channel], lut)
    return cv2.merge(chans)

def halo_pixel_radius(w, h, pct):
    # pct is relative to the shorter side's diameter, hence /200
    return max(1, int(min(w, h) * (pct/200.0)))

def halo_mask(w, h, radius):
    """Bright disc on a 0.5 field, box-blurred by a kernel the size of the disc radius."""
    radius = max(1, int(radius))
    yy, xx = np.ogrid[0:h, 0:w]
    cx, cy = w//2, h//2
    disc = (xx-cx)**2 + (yy-cy)**2 <= radius*radius
    mask = np.full((h, w, 3), HALO_BASE, dtype=np.float32)
    mask[disc] = 1.0
    # kernel must be odd to stay centred, even radii round up
    k = radius | 1
    return cv2.blur(mask, (k, k))

def apply_halo(img, mask):
    _check_bgr8(img)
    if mask.shape != img.shape:
        raise ValueError(f"mask shape {mask.shape} does not match image shape {img.shape}")
    f = img.astype(np.float32) * mask
    return np.clip(np.rint(f), 0, 255).astype(np.uint8)

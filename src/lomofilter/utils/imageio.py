import os, cv2
from .logging import logger

class ImageLoadError(Exception):
    pass

class ImageSaveError(Exception):
    pass

def load_image(path):
    """Decode ``path`` as a 3-channel BGR uint8 array."""
    img = cv2.imread(str(path), cv2.IMREAD_COLOR) if path else None
    if img is None or img.size == 0:
        raise ImageLoadError(f"Unable to open picture {path}")
    logger.info("Loaded %s (%dx%d)", path, img.shape[1], img.shape[0])
    return img

def save_image(path, img):
    path = str(path)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    if not cv2.imwrite(path, img):
        raise ImageSaveError(f"Unable to write picture {path}")
    logger.info("Saved %s", path)
    return path

"""Command line entry point: ``lomofilter [--preset NAME] picture``."""

import argparse, os, sys
import cv2
from .rt.engine import FilterSession
from .utils.config import read_config
from .utils.imageio import ImageLoadError, ImageSaveError, load_image
from .utils.logging import logger, set_level
from .utils.params import Params, ParamStore
from .utils.presets import load_preset_by_name, apply_preset_to_params, preset_names

ABOUT = "Lomography v1.0"

class UsageError(Exception):
    pass

class _Parser(argparse.ArgumentParser):
    # report malformed arguments through main's exit code instead of exit(2)
    def error(self, message):
        raise UsageError(message)

def build_parser(prog=None):
    parser = _Parser(
        prog=prog, description=ABOUT, add_help=False,
        epilog="Keys: 's' saves the displayed picture and quits, 'q' quits without saving.")
    parser.add_argument("-h", "--help", "--usage", "-?", dest="help", action="store_true",
                        help="print this message")
    parser.add_argument("--preset", metavar="NAME",
                        help="initial slider values from a named preset")
    parser.add_argument("filename", nargs="?", help="picture file")
    return parser

def params_from_config(cfg):
    return Params(steepness=int(cfg["steepness"]), radius=int(cfg["radius"]),
                  legacy_radius_aliasing=bool(cfg["legacy_radius_aliasing"]),
                  preset_name=cfg["last_preset"])

def _run_window(session, output_path):
    # Qt is only imported once a picture has been decoded
    from .ui.app import run_app
    return run_app(session, output_path=output_path, argv=sys.argv[:1])

def main(argv=None):
    prog = os.path.basename(sys.argv[0]) or "lomofilter"
    parser = build_parser(prog)
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage()
        print(f"{prog}: error: {e}")
        return 1
    if args.help or not args.filename:
        parser.print_help()
        return 1

    cfg = read_config()
    set_level(cfg["log_level"])
    params = params_from_config(cfg)
    if args.preset:
        preset = load_preset_by_name(args.preset)
        if preset is None:
            logger.error("Error: %s: unknown preset %s (available: %s)",
                         prog, args.preset, ", ".join(preset_names()) or "none")
            return 1
        apply_preset_to_params(preset, params)

    try:
        img = load_image(args.filename)
        session = FilterSession(img, ParamStore(params))
        return _run_window(session, cfg["output_path"])
    except (ImageLoadError, ImageSaveError, OSError, ValueError, cv2.error) as e:
        logger.error("Error: %s: %s", prog, e)
        return 1

if __name__ == "__main__":
    sys.exit(main())

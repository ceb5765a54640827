import cv2
from PySide6 import QtWidgets, QtGui, QtCore
from ..rt.engine import FilterSession
from ..utils.config import read_config, write_config
from ..utils.logging import logger

WINDOW_TITLE = "Lomography Filter"

class ImageWidget(QtWidgets.QLabel):
    def set_frame(self, bgr):
        rgb = cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)
        h,w,ch = rgb.shape
        qimg = QtGui.QImage(rgb.data, w, h, ch*w, QtGui.QImage.Format.Format_RGB888)
        # QImage borrows the numpy buffer, detach before it goes away
        self.setPixmap(QtGui.QPixmap.fromImage(qimg.copy()))

class MainWindow(QtWidgets.QWidget):
    def __init__(self, session: FilterSession, output_path="output.jpg"):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.session = session
        self.output_path = output_path
        self.saved_path = None
        self.error = None
        p = session.params.snapshot()

        self.preview = ImageWidget()

        # Sliders; values are set before wiring so startup shows the source image
        self.s_steep = self._slider(0, 20, p.steepness, "s")
        self.s_radius = self._slider(0, 100, p.radius, "radius")
        self.s_steep["slider"].valueChanged.connect(self.on_steepness)
        self.s_radius["slider"].valueChanged.connect(self.on_radius)

        hint = QtWidgets.QLabel("s: save and quit    q: quit")

        form = QtWidgets.QFormLayout()
        form.addRow(self.s_steep["label"], self.s_steep["slider"])
        form.addRow(self.s_radius["label"], self.s_radius["slider"])
        form.addRow(hint)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(self.preview)
        layout.addLayout(form)
        layout.setSizeConstraint(QtWidgets.QLayout.SizeConstraint.SetFixedSize)

        self.preview.set_frame(session.display)

    # ---------- helpers ----------
    def _slider(self, lo, hi, val, text):
        s = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        s.setRange(lo, hi); s.setValue(val)
        # sliders must not eat the s/q shortcuts
        s.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        return {"slider": s, "label": QtWidgets.QLabel(text)}

    def _fatal(self, exc):
        # Qt only prints exceptions raised in slots; stop the loop and let run_app report it
        self.error = exc
        self.close()

    # ---------- slider handlers ----------
    def on_steepness(self, v):
        try:
            self.preview.set_frame(self.session.on_steepness_changed(v))
        except Exception as exc:
            self._fatal(exc)

    def on_radius(self, v):
        try:
            self.preview.set_frame(self.session.on_radius_changed(v))
        except Exception as exc:
            self._fatal(exc)

    # ---------- keys ----------
    def keyPressEvent(self, e):
        key = e.text().lower()
        if key == "s":
            try:
                self.saved_path = self.session.save(self.output_path)
            except Exception as exc:
                self._fatal(exc)
                return
            self.close()
        elif key == "q":
            self.close()
        else:
            super().keyPressEvent(e)

    # ---------- persist last settings ----------
    def closeEvent(self, e):
        p = self.session.params.snapshot()
        cfg = read_config()
        cfg.update({
            "last_preset": p.preset_name,
            # legacy mode rewrites radius with a pixel count; keep the slider's percentage
            "steepness": self.s_steep["slider"].value(),
            "radius": self.s_radius["slider"].value(),
        })
        write_config(cfg)
        logger.debug("window closed")
        return super().closeEvent(e)

def run_app(session: FilterSession, output_path="output.jpg", argv=None):
    """Show the window and block until it closes; re-raises a fatal filter/save error."""
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(argv or [])
    w = MainWindow(session, output_path=output_path)
    w.show()
    code = app.exec()
    if w.error is not None:
        raise w.error
    return code

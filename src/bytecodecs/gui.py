import sys
from pathlib import Path
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from .auto_decoder import auto_decode
from .config import CONFIG_PATH, Settings, load_settings, resolve_history_path, save_settings
from .encoding import FIXED_SIZE_ENCODINGS, Encoding, decode_text, encode
from .formats import DATA_FORMATS, dump_bytes, load_bytes
from .history import log_event


class FileDropTextEdit(QtWidgets.QTextEdit):
    fileDropped = QtCore.pyqtSignal(str)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setAcceptDrops(True)
        self.setPlaceholderText("Type or paste input, or drop a file here")

    def dragEnterEvent(self, event: QtGui.QDragEnterEvent) -> None:  # type: ignore
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            super().dragEnterEvent(event)

    def dropEvent(self, event: QtGui.QDropEvent) -> None:  # type: ignore
        if event.mimeData().hasUrls():
            path = event.mimeData().urls()[0].toLocalFile()
            self.fileDropped.emit(path)
            event.acceptProposedAction()
        else:
            super().dropEvent(event)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, config_path: Path = CONFIG_PATH) -> None:
        super().__init__()
        self.setWindowTitle("bytecodecs")
        self.resize(800, 520)
        self.config_path = config_path
        self.settings: Settings = load_settings(config_path)
        self._dropped: Optional[bytes] = None
        self.setCentralWidget(self._build_codec_panel())

    def _build_codec_panel(self) -> QtWidgets.QWidget:
        widget = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(widget)

        self.input_edit = FileDropTextEdit()
        self.input_edit.fileDropped.connect(self._load_dropped_file)
        self.input_edit.textChanged.connect(self._forget_dropped_file)
        self.output_edit = QtWidgets.QTextEdit()
        self.output_edit.setReadOnly(True)

        self.encoding_combo = QtWidgets.QComboBox()
        self.encoding_combo.addItems([member.value for member in Encoding])
        self.encoding_combo.setCurrentText(self.settings.encoding.value)
        self.encoding_combo.currentTextChanged.connect(self._update_size_enabled)

        self.size_spin = QtWidgets.QSpinBox()
        self.size_spin.setRange(0, 4096)
        self.size_spin.setSpecialValueText("auto")

        self.input_format = QtWidgets.QComboBox()
        self.input_format.addItems(DATA_FORMATS)
        self.output_format = QtWidgets.QComboBox()
        self.output_format.addItems(DATA_FORMATS)

        self.history_check = QtWidgets.QCheckBox("Record history")
        self.history_check.setChecked(self.settings.history)
        self.history_check.toggled.connect(self._save_history_setting)

        self.encode_btn = QtWidgets.QPushButton("Encode")
        self.encode_btn.clicked.connect(lambda: self.run_operation("encode"))
        self.decode_btn = QtWidgets.QPushButton("Decode")
        self.decode_btn.clicked.connect(lambda: self.run_operation("decode"))
        self.auto_btn = QtWidgets.QPushButton("Auto detect")
        self.auto_btn.clicked.connect(lambda: self.run_operation("auto"))

        op_layout = QtWidgets.QHBoxLayout()
        op_layout.addWidget(QtWidgets.QLabel("Encoding"))
        op_layout.addWidget(self.encoding_combo)
        op_layout.addWidget(QtWidgets.QLabel("Size (bytes)"))
        op_layout.addWidget(self.size_spin)
        op_layout.addWidget(QtWidgets.QLabel("Input"))
        op_layout.addWidget(self.input_format)
        op_layout.addWidget(QtWidgets.QLabel("Output"))
        op_layout.addWidget(self.output_format)
        op_layout.addStretch(1)
        op_layout.addWidget(self.history_check)

        btn_layout = QtWidgets.QHBoxLayout()
        btn_layout.addWidget(self.encode_btn)
        btn_layout.addWidget(self.decode_btn)
        btn_layout.addWidget(self.auto_btn)

        layout.addLayout(op_layout)
        layout.addWidget(QtWidgets.QLabel("Input"))
        layout.addWidget(self.input_edit, 3)
        layout.addLayout(btn_layout)
        layout.addWidget(QtWidgets.QLabel("Output"))
        layout.addWidget(self.output_edit, 3)

        self._update_size_enabled(self.encoding_combo.currentText())
        return widget

    def _update_size_enabled(self, name: str) -> None:
        enabled = Encoding.parse(name) in FIXED_SIZE_ENCODINGS
        self.size_spin.setEnabled(enabled)
        if not enabled:
            self.size_spin.setValue(0)

    def _load_dropped_file(self, path: str) -> None:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:  # pragma: no cover - GUI feedback
            self.output_edit.setPlainText(f"Error: {exc}")
            return
        self.input_edit.setPlainText(dump_bytes(data, "utf8", self.settings.text_encoding or None))
        self._dropped = data

    def _forget_dropped_file(self) -> None:
        self._dropped = None

    def _save_history_setting(self, checked: bool) -> None:
        self.settings.history = checked
        try:
            save_settings(self.settings, self.config_path)
        except OSError as exc:  # pragma: no cover - GUI feedback
            self.output_edit.setPlainText(f"Could not save settings: {exc}")

    def _dispatch(self, mode: str, text: str) -> str:
        encoding = Encoding.parse(self.encoding_combo.currentText())
        text_encoding = self.settings.text_encoding or None
        if mode == "encode":
            if self._dropped is not None and self.input_format.currentText() == "utf8":
                data = self._dropped
            else:
                data = load_bytes(text, self.input_format.currentText())
            return encode(data, encoding).string
        if mode == "decode":
            data = decode_text(text, encoding, size=self.size_spin.value())
            return dump_bytes(data, self.output_format.currentText(), text_encoding)
        results = auto_decode(text)
        if not results:
            return "No encoding matched."
        return "\n".join(
            f"{name}: {dump_bytes(data, self.output_format.currentText(), text_encoding)}"
            for name, data in results
        )

    def run_operation(self, mode: str) -> None:
        text = self.input_edit.toPlainText()
        try:
            output = self._dispatch(mode, text)
        except ValueError as exc:
            output = f"Error: {exc}"
        self.output_edit.setPlainText(output)
        if self.settings.history:
            log_event(
                action=f"gui_{mode}",
                payload={"type": self.encoding_combo.currentText(), "input": text[:256]},
                path=resolve_history_path(self.settings),
            )


def run_gui() -> None:
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run_gui()

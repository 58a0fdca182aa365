"""Application entrypoint."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from clipboard import PyperclipClipboard
from config import JsonConfigStore, read_api_key
from errors import HotkeyRegistrationError
from hotkey import GlobalHotkeyAdapter, HotkeySubscription, describe_hotkey
from logging_setup import setup_logging
from models import StatusKind, StatusState
from status_indicator import StatusIndicator, status_tooltip
from transform_client import GeminiTransformClient
from transform_controller import TransformController

try:
    from PySide6.QtCore import QObject, QSize, QTimer, Signal
    from PySide6.QtGui import QAction, QBrush, QColor, QIcon, QPainter, QPixmap
    from PySide6.QtWidgets import QApplication, QMenu, QMessageBox, QSystemTrayIcon
except Exception as exc:  # pragma: no cover
    raise SystemExit(f"PySide6 is required to run the desktop app: {exc}")

logger = logging.getLogger(__name__)


def _create_icon(color: str = "#888888", size: int = 22) -> QIcon:
    """Generate a simple circular tray icon with the given color."""
    pixmap = QPixmap(QSize(size, size))
    pixmap.fill(QColor(0, 0, 0, 0))  # transparent background
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing, True)
    painter.setBrush(QBrush(QColor(color)))
    painter.setPen(QColor(color))
    painter.drawEllipse(2, 2, size - 4, size - 4)
    painter.end()
    return QIcon(pixmap)


ICON_COLORS = {
    StatusKind.IDLE: "#888888",        # grey
    StatusKind.PROCESSING: "#F5A623",  # amber
    StatusKind.DONE: "#2ECC71",        # green
    StatusKind.ERROR: "#FF4444",       # red
}


class UIBridge(QObject):
    invoke_signal = Signal(object)  # zero-arg callable, run on the UI thread


class QtScheduler:
    def call_later(self, delay_s: float, callback: Callable[[], None]) -> None:
        QTimer.singleShot(int(delay_s * 1000), callback)


class App:
    def __init__(self) -> None:
        self.app = QApplication(sys.argv)
        self.app.setQuitOnLastWindowClosed(False)
        self.config_store = JsonConfigStore()
        self.ui = UIBridge()
        self.ui.invoke_signal.connect(self._run_on_ui)

        self.hotkey = GlobalHotkeyAdapter(combination=self.config_store.get_hotkey())
        self.hotkey_label = describe_hotkey(self.hotkey.combination)
        self._subscription: Optional[HotkeySubscription] = None

        self.tray = QSystemTrayIcon()
        self._setup_menu()
        self.status = StatusIndicator(render=self._render_status, scheduler=QtScheduler())
        self.status.set_state(StatusState.idle())
        self.tray.show()

        client = GeminiTransformClient(
            api_key=read_api_key(),
            model=self.config_store.get_model(),
            endpoint=self.config_store.get_endpoint(),
            request_timeout_s=self.config_store.get_request_timeout_s(),
        )
        self.controller = TransformController(
            clipboard=PyperclipClipboard(),
            client=client,
            status=self.status,
            post_to_ui=self._post_to_ui,
        )
        logger.info("Transform endpoint: %s", client.endpoint)

    def _setup_menu(self) -> None:
        menu = QMenu()

        title_action = QAction("clipglot", menu)
        title_action.setEnabled(False)
        menu.addAction(title_action)
        menu.addSeparator()

        for line in (
            "1. Copy text",
            f"2. Press {self.hotkey_label}",
            "3. AI result → clipboard",
        ):
            usage_action = QAction(line, menu)
            usage_action.setEnabled(False)
            menu.addAction(usage_action)

        menu.addSeparator()
        quit_action = QAction("Quit", menu)
        quit_action.triggered.connect(self.quit)
        menu.addAction(quit_action)

        self.tray.setContextMenu(menu)

    # ------------------------------------------------------------------
    # Thread bridge (worker/listener threads → UI thread)
    # ------------------------------------------------------------------

    def _post_to_ui(self, task: Callable[[], None]) -> None:
        self.ui.invoke_signal.emit(task)

    def _run_on_ui(self, task: Callable[[], None]) -> None:
        task()

    def _render_status(self, state: StatusState) -> None:
        self.tray.setIcon(_create_icon(ICON_COLORS[state.kind]))
        self.tray.setToolTip(status_tooltip(state, self.hotkey_label))

    # ------------------------------------------------------------------
    # Hotkey handler (called from the pynput listener thread)
    # ------------------------------------------------------------------

    def _on_hotkey(self) -> None:
        logger.info("Hotkey pressed")
        self._post_to_ui(self.controller.handle_trigger)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def run(self) -> int:
        try:
            self._subscription = self.hotkey.register(self._on_hotkey)
        except HotkeyRegistrationError as exc:
            logger.critical("Hotkey registration failed: %s", exc)
            QMessageBox.critical(None, "clipglot", f"Could not register {self.hotkey_label}: {exc}")
            return 1
        logger.info("clipglot started. Copy text, then press %s", self.hotkey_label)
        try:
            return self.app.exec()
        finally:
            self._teardown()

    def quit(self) -> None:
        logger.info("clipglot shutting down...")
        self._teardown()
        self.app.quit()

    def _teardown(self) -> None:
        self.controller.close()
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None


def main() -> int:
    setup_logging()
    app = App()
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())

# core/qt_keys.py
from PySide6.QtCore import Qt

from rulerecall.app.keys import KeyDescriptor

_NAMED_KEYS = {
    int(Qt.Key_Backspace): "Backspace",
    int(Qt.Key_Return): "Enter",
    int(Qt.Key_Enter): "Enter",
    int(Qt.Key_Escape): "Escape",
    int(Qt.Key_Left): "ArrowLeft",
    int(Qt.Key_Right): "ArrowRight",
    int(Qt.Key_Up): "ArrowUp",
    int(Qt.Key_Down): "ArrowDown",
    int(Qt.Key_Home): "Home",
    int(Qt.Key_End): "End",
    int(Qt.Key_PageUp): "PageUp",
    int(Qt.Key_PageDown): "PageDown",
    int(Qt.Key_Delete): "Delete",
    int(Qt.Key_Tab): "Tab",
    int(Qt.Key_Backtab): "Tab",
    int(Qt.Key_Shift): "Shift",
    int(Qt.Key_CapsLock): "CapsLock",
    int(Qt.Key_Alt): "Alt",
    int(Qt.Key_Control): "Control",
    int(Qt.Key_Meta): "Meta",
}


def key_from_qt_event(ev) -> KeyDescriptor:
    """Translate a QKeyEvent into the DOM-style descriptor the verifier expects."""
    mods = ev.modifiers()
    flags = dict(
        ctrl=bool(mods & Qt.ControlModifier),
        meta=bool(mods & Qt.MetaModifier),
        alt=bool(mods & Qt.AltModifier),
        shift=bool(mods & Qt.ShiftModifier),
    )
    name = _NAMED_KEYS.get(int(ev.key()))
    if name is not None:
        return KeyDescriptor(name, **flags)
    t = ev.text()
    if t and t >= " ":
        return KeyDescriptor(t, **flags)
    # no usable text: control codes and keys Qt cannot name for us
    return KeyDescriptor("Unidentified", **flags)

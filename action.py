import cv2
import keyboard

JUMP_HOTKEYS = ("space", "up")

# cv2.waitKeyEx codes for the same keys inside the game window
JUMP_KEYCODES = {32, 2490368, 65362, 63232}
QUIT_KEYCODES = {ord("q"), 27}


def register_hotkeys(latch):
    """Global jump hotkeys. Returns False when the OS refuses the hook."""
    try:
        for key in JUMP_HOTKEYS:
            keyboard.add_hotkey(key, latch.trigger)
    except (ImportError, OSError) as e:
        # keyboard needs root on linux, the window key poll still works
        print(f"Global hotkeys unavailable ({e}), focus the game window to play")
        return False
    return True


def unregister_hotkeys():
    keyboard.unhook_all_hotkeys()


def on_mouse(event, x, y, flags, latch):
    if event == cv2.EVENT_LBUTTONDOWN:
        latch.trigger()


def bind_window(window, latch):
    cv2.setMouseCallback(window, on_mouse, latch)


def handle_key(code, latch, jump_keys=True):
    """
    Feed one polled key into the latch. Returns False if the player quit.

    jump_keys is off while the global hotkeys are hooked, they already see the
    same press.
    """
    if code in QUIT_KEYCODES:
        return False
    if jump_keys and code in JUMP_KEYCODES:
        latch.trigger()
    return True

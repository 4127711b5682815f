# showlog.py - log bar with timestamps, levels and auto-tag, plus an optional background file writer
import pygame, os, sys, time, datetime, threading, queue, traceback
from collections import deque
from typing import List, Optional
from helper import hex_to_rgb
import config as cfg

# ---------- state ----------
font = None
screen_ref = None
log_text = ""     # last text shown on the bar
lastmsg  = ""     # last full canonical line ("[LEVEL module] ...")
_history = deque(maxlen=int(getattr(cfg, "LOG_HISTORY_SIZE", 200)))

# Short tags (bar only)
SHORT_TAGS = {
    "device": "IO",
    "controller": "CTRL",
    "presenter": "VIEW",
    "auto_router": "AUTO",
    "live_object": "LIVE",
    "command_queue": "CMD",
    "menu_widget": "MENU",
    "ui": "UI",
    "__main__": "UI",
}


# minimum LOG_LEVEL for a level to reach the bar
_BAR_THRESHOLD = {"ERROR": 0, "WARN": 1, "INFO": 2}


def _allow_level_for_bar(level_name: str) -> bool:
    """Bar filter: LOG_LEVEL 0=errors, 1=+warnings, 2=+info; DEBUG/VERBOSE by flag."""
    lvl = (level_name or "INFO").upper()
    if lvl == "DEBUG":
        return bool(getattr(cfg, "DEBUG_LOG", False))
    if lvl == "VERBOSE":
        return bool(getattr(cfg, "VERBOSE_LOG", False))
    return int(getattr(cfg, "LOG_LEVEL", 2)) >= _BAR_THRESHOLD.get(lvl, 2)


# ---------------------------------------------------------------------
# Background file writer for non-blocking logging
# ---------------------------------------------------------------------
_log_queue = queue.Queue(maxsize=int(getattr(cfg, "LOG_QUEUE_SIZE", 512)))
_log_writer_started = False
_writer_lock = threading.Lock()


def _timestamp() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def _direct_write_file(line: str):
    path = getattr(cfg, "LOG_FILE", None)
    if not path:
        return
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"[{_timestamp()}] {line}\n")


def _log_writer_loop():
    """Daemon thread: append queued lines to LOG_FILE."""
    while True:
        line = _log_queue.get()
        try:
            _direct_write_file(line)
        except OSError as e:
            print(f"[showlog] writer failed: {e}", file=sys.stderr)
        finally:
            _log_queue.task_done()


def _start_log_writer():
    global _log_writer_started
    with _writer_lock:
        if _log_writer_started:
            return
        t = threading.Thread(target=_log_writer_loop, name="showlog-writer", daemon=True)
        t.start()
        _log_writer_started = True


def _write_file(line: str):
    """Enqueue log lines for background writing."""
    if not getattr(cfg, "LOG_FILE_ENABLED", False):
        return
    _start_log_writer()
    try:
        _log_queue.put_nowait(line)
    except queue.Full:
        # Drop oldest to keep throughput steady
        try:
            _log_queue.get_nowait()
            _log_queue.task_done()
        except queue.Empty:
            pass
        _log_queue.put_nowait(line)


def flush(timeout: float = 1.0):
    """Block until queued lines reach the file (or timeout)."""
    if not _log_writer_started:
        return
    deadline = time.time() + timeout
    while _log_queue.unfinished_tasks and time.time() < deadline:
        time.sleep(0.01)


# ---------- caller tagging ----------
def _caller_module() -> str:
    try:
        frame = sys._getframe(1)
        while frame:
            filename = frame.f_code.co_filename
            if os.path.basename(filename) != "showlog.py":
                return os.path.splitext(os.path.basename(filename))[0] or "main"
            frame = frame.f_back
    except ValueError:
        pass
    return "main"


def _short_tag(name: str) -> str:
    if not name:
        return "GEN"
    key = name.lower()
    return SHORT_TAGS.get(key, key[:5].upper())


def init(screen, font_name=None, font_size=None):
    """Attach the log bar to a pygame screen."""
    global font, screen_ref
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.SysFont(font_name or getattr(cfg, "LOG_FONT_NAME", "Courier"),
                               font_size or getattr(cfg, "LOG_FONT_SIZE", 14))
    screen_ref = screen


def log_process(level: str, msg) -> None:
    """
    Record a log message: canonical line to history + file, short text to the bar.
    Does NOT draw; rendering is handled by draw_bar().
    """
    global log_text, lastmsg

    if getattr(cfg, "LOG_OFF", False):
        return
    if msg is None:
        return
    raw = str(msg).strip()
    if not raw:
        return

    level = level.upper()
    module_name = _caller_module()
    file_line = f"[{level} {module_name}] {raw}"

    # avoid duplicates back-to-back
    if file_line != lastmsg:
        _history.append(file_line)
        if level != "DEBUG" or getattr(cfg, "DEBUG", False):
            _write_file(file_line)
        lastmsg = file_line

    if not _allow_level_for_bar(level):
        return
    log_text = f"[{_short_tag(module_name)}] {raw}"


def last() -> str:
    return log_text


def recent(count: Optional[int] = None) -> List[str]:
    """Latest canonical lines, oldest first."""
    lines = list(_history)
    if count is not None:
        lines = lines[-count:]
    return lines


def clear():
    """Forget bar text and history (used between tests)."""
    global log_text, lastmsg
    log_text = ""
    lastmsg = ""
    _history.clear()


def draw_bar(screen=None, fps_value=None):
    """
    Draw the bottom log bar with current log_text, clock and optional FPS.
    Called once per frame by the render pipeline.
    """
    global screen_ref
    if screen is not None:
        screen_ref = screen
    else:
        screen = screen_ref
    if not screen or not font:
        return

    log_bar_h = getattr(cfg, "LOG_BAR_HEIGHT", 20)
    rect = pygame.Rect(0, screen.get_height() - log_bar_h, screen.get_width(), log_bar_h)
    pygame.draw.rect(screen, hex_to_rgb(getattr(cfg, "LOG_BAR_COLOR", "#0A0A0A")), rect)

    # --- Left: log text ---
    text_color = hex_to_rgb(getattr(cfg, "LOG_TEXT_COLOR", "#FFFFFF"))
    text_surface = font.render(log_text, True, text_color)
    screen.blit(text_surface, (10, rect.top + 2))

    # --- Right: clock (+ FPS) ---
    overlay_text = time.strftime("%H:%M")
    if fps_value is not None:
        overlay_text = f"{overlay_text} | FPS: {int(round(fps_value)):03d}"
    overlay_surf = font.render(overlay_text, True, (180, 180, 180))
    overlay_rect = overlay_surf.get_rect()
    overlay_rect.bottom = rect.bottom - 2
    overlay_rect.right = rect.right - 10
    screen.blit(overlay_surf, overlay_rect)


# ---------- public wrappers ----------
def _format_exc_str(exc: Optional[BaseException] = None) -> str:
    """Traceback text for the given or currently handled exception ('' if none)."""
    if exc is not None:
        if exc.__traceback__ is None:
            return ""
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    exc_type, exc_val, exc_tb = sys.exc_info()
    if exc_val is None:
        return ""
    return "".join(traceback.format_exception(exc_type, exc_val, exc_tb))


def error(msg: Optional[str] = None, exc: Optional[BaseException] = None):
    """
    Log an ERROR. With exc= the traceback is appended to the file line.
    """
    full = msg if msg else ""
    tb = _format_exc_str(exc) if exc is not None else ""
    if tb:
        full = (full + ("\n" if full else "") + tb).rstrip()
    log_process("ERROR", full)


def warn(message):
    log_process("WARN", message)


def info(message):
    log_process("INFO", message)


def debug(message):
    """Extra-detailed debug messages (file/history; bar only with DEBUG_LOG)."""
    log_process("DEBUG", message)


def verbose(message):
    if not getattr(cfg, "VERBOSE_LOG", False):
        return
    log_process("VERBOSE", message)


cfg._notify_showlog_ready()

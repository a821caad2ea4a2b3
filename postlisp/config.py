from __future__ import annotations
import os
from typing import Tuple


# Defaults
_DEFAULT_PROMPT = 'postlisp> '
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765
_DEFAULT_CANVAS_SIZE = (500, 500)


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return raw if raw else default


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_prompt() -> str:
    return str_from_env('POSTLISP_PROMPT', _DEFAULT_PROMPT)


def get_repl_address() -> Tuple[str, int]:
    host = str_from_env('POSTLISP_REPL_HOST', _DEFAULT_REPL_HOST)
    port = int_from_env('POSTLISP_REPL_PORT', _DEFAULT_REPL_PORT)
    return host, port


def get_canvas_size() -> Tuple[int, int]:
    # WIDTHxHEIGHT, e.g. 640x480
    raw = os.environ.get('POSTLISP_CANVAS_SIZE')
    if not raw:
        return _DEFAULT_CANVAS_SIZE
    parts = raw.lower().split('x')
    if len(parts) != 2:
        return _DEFAULT_CANVAS_SIZE
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        return _DEFAULT_CANVAS_SIZE
    if width <= 0 or height <= 0:
        return _DEFAULT_CANVAS_SIZE
    return width, height

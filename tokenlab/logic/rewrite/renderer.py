#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/logic/rewrite/renderer.py

import os

from tokenlab.shared.logger import log


def _display_path(path: str, cwd: str) -> str:
    rel = os.path.relpath(path, cwd)
    return path if rel.startswith("..") else rel


def render_using(path: str, cwd: str) -> None:
    log("info", f"using file: {_display_path(path, cwd)}")


def render_result(path: str, cwd: str, changed: bool) -> None:
    """Print the outcome of one file rewrite."""
    if changed:
        log("success", f"updated {_display_path(path, cwd)}")
    else:
        log("info", f"unchanged {_display_path(path, cwd)}")


def render_summary(updated: int, total: int, skipped: int) -> None:
    message = f"{updated} of {total} file(s) updated"
    if skipped:
        message += f", {skipped} skipped"
    log("success" if not skipped else "warning", message)

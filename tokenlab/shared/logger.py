#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tokenlab/shared/logger.py

import argparse
import sys

from tokenlab.core import config as c


def log(level: str, message: str) -> None:
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class TokenlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Overrides the default error method: prints the full help text, then
        the prefixed error through our color-coded logger, and exits with 1.
        """
        self.print_help(sys.stderr)
        print(file=sys.stderr)
        log('error', f"error parsing arguments: {message}")
        sys.exit(c.EXIT_ERROR)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/shared/logger.py

import os
import sys
import argparse

from contrastlab.core import config as c


def _use_color(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def log(level: str, message: str) -> None:
    """Print `[level] message`; info and success go to stdout, the rest to stderr."""
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    if not _use_color(stream):
        print(f"[{level}] {message}", file=stream)
        return
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class ContrastlabArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Report argument errors through the color-coded logger with a pointer
        to the command's help, then exit with the CLI error code 2.
        """
        log('error', message)
        log('info', f"see '{self.prog} -h' for usage")
        sys.exit(2)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: contrastlab/subcommands/command_registry.py

from . import (
    adjust,
    convert,
    vision,
)

SUBCOMMANDS = {
    'adjust': adjust,
    'convert': convert,
    'vision': vision,
}

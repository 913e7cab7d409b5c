#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test package for mopsolver.

Makes the repo root importable so `pytest tests/` works from a plain checkout
(e.g., from envs import grid).
"""

import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# headless plotting during tests
os.environ.setdefault("MPLBACKEND", "Agg")

import warnings
warnings.filterwarnings("ignore", category=RuntimeWarning)

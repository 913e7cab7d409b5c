# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- solve : parse, print and solve a text maze (installed as `mopsolver`)
"""
__all__ = [
    "solve",
]

# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
seedscore: summarize per-seed scores from an experiment runner's result log.
"""

__version__ = "0.1.0"

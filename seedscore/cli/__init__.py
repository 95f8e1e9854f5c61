# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Command-line interface for seedscore."""

# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Structured JSON logging for seedscore."""

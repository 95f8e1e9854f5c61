# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Rendering of summaries and seed diagnostics."""

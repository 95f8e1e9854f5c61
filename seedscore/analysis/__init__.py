# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Result-log analysis for seedscore.

Subsystems:
  - models: constants, the running aggregation state, the final summary
  - parser: line classification and field extraction
  - aggregator: the single-pass scan that turns lines into a summary
  - reporting: rendering the summary and the seed diagnostics
"""

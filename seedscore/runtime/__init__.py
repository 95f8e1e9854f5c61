# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Process-level setup that runs before a command does its work."""

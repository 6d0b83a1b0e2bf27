"""Module: device_info.py

Author: Michael Economou
Date: 2026-10-03
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceInfo:
    """Best-effort description of the machine the shell runs on."""

    platform: str
    os_version: str = ""
    machine: str = ""
    model: str = ""
    is_physical_device: bool = False
    cpu_count: int | None = None
    total_memory: int | None = None  # bytes

"""Module: device_info.py

Author: Michael Economou
Date: 2026-10-04

Best-effort device information probe.

Only one platform branch applies on a given machine. Failures inside a
branch are logged and the affected fields keep their defaults; the probe
itself never raises for platform-specific errors.
"""

from __future__ import annotations

import platform
import subprocess
from pathlib import Path

import psutil

from dashshell.models.device_info import DeviceInfo
from dashshell.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

VIRTUAL_MACHINE_MARKERS = (
    "kvm",
    "qemu",
    "virtualbox",
    "vmware",
    "xen",
    "bochs",
    "parallels",
    "hyper-v",
    "virtual machine",
    "amazon ec2",
    "google compute engine",
)

DMI_DIR = Path("/sys/class/dmi/id")


def looks_virtual(*descriptions: str) -> bool:
    """Check DMI/vendor strings for hypervisor names."""
    text = " ".join(descriptions).lower()
    return any(marker in text for marker in VIRTUAL_MACHINE_MARKERS)


class DeviceInfoProbe:
    """Collects a DeviceInfo for the running platform."""

    def __init__(self, system: str | None = None, dmi_dir: Path = DMI_DIR):
        self._system = system or platform.system()
        self._dmi_dir = dmi_dir

    @property
    def system(self) -> str:
        return self._system

    def probe(self) -> DeviceInfo:
        fields = {
            "platform": self._system.lower(),
            "os_version": platform.release(),
            "machine": platform.machine(),
        }
        fields.update(self._probe_resources())

        if self._system == "Linux":
            fields.update(self._probe_linux())
        elif self._system == "Darwin":
            fields.update(self._probe_darwin())
        else:
            logger.debug("[DeviceInfoProbe] No device probe for %s", self._system)

        info = DeviceInfo(**fields)
        logger.info(
            "[DeviceInfoProbe] %s %s (%s), physical=%s",
            info.platform,
            info.os_version,
            info.model or "unknown model",
            info.is_physical_device,
        )
        return info

    def _probe_resources(self) -> dict:
        try:
            return {
                "cpu_count": psutil.cpu_count(logical=True),
                "total_memory": psutil.virtual_memory().total,
            }
        except (OSError, RuntimeError) as e:
            logger.warning("[DeviceInfoProbe] Resource probe failed: %s", e)
            return {}

    def _read_dmi(self, name: str) -> str:
        try:
            return (self._dmi_dir / name).read_text(encoding="utf-8").strip()
        except OSError:
            return ""

    def _probe_linux(self) -> dict:
        vendor = self._read_dmi("sys_vendor")
        product = self._read_dmi("product_name")
        if not vendor and not product:
            logger.debug("[DeviceInfoProbe] DMI information unavailable")
            return {}
        return {
            "model": " ".join(part for part in (vendor, product) if part),
            "is_physical_device": not looks_virtual(vendor, product),
        }

    def _probe_darwin(self) -> dict:
        fields: dict = {"os_version": platform.mac_ver()[0] or platform.release()}
        try:
            model = subprocess.run(
                ["sysctl", "-n", "hw.model"], capture_output=True, text=True, timeout=2, check=True
            ).stdout.strip()
            hypervisor = subprocess.run(
                ["sysctl", "-n", "kern.hv_vmm_present"],
                capture_output=True,
                text=True,
                timeout=2,
                check=True,
            ).stdout.strip()
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("[DeviceInfoProbe] sysctl probe failed: %s", e)
            return fields

        fields["model"] = model
        fields["is_physical_device"] = hypervisor != "1" and not looks_virtual(model)
        return fields

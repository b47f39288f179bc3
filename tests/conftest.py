# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures: a fake command runner and captured output of the real tools.
"""

import io
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

import pytest

from hwreport.utils.core.process import ProcessResult

DMIDECODE_SYSTEM = """\
# dmidecode 3.3
Getting SMBIOS data from sysfs.
SMBIOS 3.1.1 present.

Handle 0x000F, DMI type 1, 27 bytes
System Information
\tManufacturer: LENOVO
\tProduct Name: 20QDCTO1WW
\tVersion: ThinkPad X1 Carbon 7th
\tSerial Number: PF1ABCDE
\tUUID: 4c4c4544-0042-3510-8051-b4c04f4e3232
\tWake-up Type: Power Switch
\tSKU Number: LENOVO_MT_20QD_BU_Think_FM_ThinkPad X1 Carbon 7th
\tFamily: ThinkPad X1 Carbon 7th
"""

DMIDECODE_BASEBOARD = """\
# dmidecode 3.3
Getting SMBIOS data from sysfs.
SMBIOS 3.1.1 present.

Handle 0x0010, DMI type 2, 15 bytes
Base Board Information
\tManufacturer: LENOVO
\tProduct Name: 20QDCTO1WW
\tVersion: SDK0J40697 WIN
\tSerial Number: L1HF9AB01CD
"""

DMIDECODE_MEMORY = """\
# dmidecode 3.3
Handle 0x0003, DMI type 17, 40 bytes
Memory Device
\tTotal Width: 64 bits
\tData Width: 64 bits
\tSize: 8 GB
\tForm Factor: Row Of Chips
\tLocator: ChannelA-DIMM0
\tType: LPDDR3
\tType Detail: Synchronous Unbuffered (Unregistered)
\tSpeed: 2133 MT/s
\tManufacturer: Samsung
"""

DMIDECODE_BIOS = """\
# dmidecode 3.3
Handle 0x000D, DMI type 0, 26 bytes
BIOS Information
\tVendor: LENOVO
\tVersion: N2QET30W (1.24 )
\tRelease Date: 05/20/2021
\tAddress: 0xE0000
"""

LSHW_PROCESSOR = """\
  *-cpu
       description: CPU
       product: Intel(R) Core(TM) i7-8665U CPU @ 1.90GHz
       vendor: Intel Corp.
       physical id: 7
       bus info: cpu@0
       version: 6.142.12
       size: 3900MHz
       capacity: 4800MHz
"""

LSHW_NETWORK = """\
  *-network
       description: Wireless interface
       product: Cannon Point-LP CNVi [Wireless-AC]
       vendor: Intel Corporation
       physical id: 14.3
       logical name: wlp0s20f3
       version: 30
  *-network
       description: Ethernet interface
       product: Ethernet Connection (6) I219-LM
       vendor: Intel Corporation
       version: 30
"""

LSUSB = """\
Bus 002 Device 001: ID 1d6b:0003 Linux Foundation 3.0 root hub
Bus 001 Device 004: ID 8087:0aaa Intel Corp. Bluetooth 9460/9560 Jefferson Peak (JfP)
Bus 001 Device 003: ID 04f2:b67c Chicony Electronics Co., Ltd Integrated Camera [Lenovo]
Bus 001 Device 002: ID 1d6b:0002 Linux Foundation 2.0 root hub
Bus 001 Device 001: ID 1d6b:0002 Linux Foundation 2.0 root hub
"""

LSBLK_MODELS = """\
NAME      SIZE MODEL
sda      14.6G Cruzer Blade
nvme0n1 476.9G SAMSUNG MZVLB512HBJQ-000L7
"""

LSBLK_TYPES = """\
loop0   loop
sda     disk
nvme0n1 disk
sr0     rom
"""

LSPCI = """\
00:00.0 Host bridge: Intel Corporation Coffee Lake HOST and DRAM Controller (rev 0c)
00:02.0 VGA compatible controller: Intel Corporation UHD Graphics 620 (Whiskey Lake) (rev 02)
00:14.3 Network controller: Intel Corporation Cannon Point-LP CNVi [Wireless-AC] (rev 30)
00:1f.3 Audio device: Intel Corporation Cannon Point-LP High Definition Audio Controller (rev 30)
"""

IP_ADDR = """\
1: lo: <LOOPBACK,UP,LOWER_UP> mtu 65536 qdisc noqueue state UNKNOWN group default qlen 1000
    link/loopback 00:00:00:00:00:00 brd 00:00:00:00:00:00
    inet 127.0.0.1/8 scope host lo
       valid_lft forever preferred_lft forever
    inet6 ::1/128 scope host
       valid_lft forever preferred_lft forever
3: wlp0s20f3: <BROADCAST,MULTICAST,UP,LOWER_UP> mtu 1500 qdisc noqueue state UP group default qlen 1000
    link/ether 3c:58:c2:aa:bb:cc brd ff:ff:ff:ff:ff:ff
    inet 192.168.1.23/24 brd 192.168.1.255 scope global dynamic noprefixroute wlp0s20f3
    inet6 fe80::1c2d:3e4f:5a6b:7c8d/64 scope link noprefixroute
"""

UNAME = "Linux x1 5.15.0-91-generic #101-Ubuntu SMP Tue Nov 14 13:30:08 UTC 2023 x86_64 x86_64 x86_64 GNU/Linux\n"

UPTIME = "up 2 hours, 41 minutes\n"

SENSORS = """\
coretemp-isa-0000
Adapter: ISA adapter
Package id 0:  +48.0°C  (high = +100.0°C, crit = +100.0°C)
Core 0:        +46.0°C  (high = +100.0°C, crit = +100.0°C)
"""

SMARTCTL_INFO_SUPPORTED = """\
smartctl 7.2 2020-12-30 r5155 [x86_64-linux-5.15.0-91-generic] (local build)

=== START OF INFORMATION SECTION ===
Device Model:     SanDisk Cruzer Blade
SMART support is: Available - device has SMART capability.
SMART support is: Enabled
"""

SMARTCTL_INFO_NVME = """\
smartctl 7.2 2020-12-30 r5155 [x86_64-linux-5.15.0-91-generic] (local build)

=== START OF INFORMATION SECTION ===
Model Number:                       SAMSUNG MZVLB512HBJQ-000L7
Firmware Version:                   5M2QEXF7
"""

SMARTCTL_HEALTH = """\
smartctl 7.2 2020-12-30 r5155 [x86_64-linux-5.15.0-91-generic] (local build)

=== START OF READ SMART DATA SECTION ===
SMART overall-health self-assessment test result: PASSED
"""

Response = Union[str, ProcessResult, Callable[[], ProcessResult]]


class FakeRunner:
    """
    Stand-in for CommandRunner.

    Responses are keyed by the full argv tuple. A string response is
    returned as successful stdout; unknown commands exit 1 with no output.
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, ...], Response]] = None,
        missing: Iterable[str] = (),
    ):
        self.responses = dict(responses or {})
        self.missing = set(missing)
        self.calls: List[List[str]] = []
        self.envs: List[Optional[Dict[str, str]]] = []

    def is_available(self, command: str) -> bool:
        return command not in self.missing

    def run(self, command, env=None, timeout=None) -> ProcessResult:
        self.calls.append(list(command))
        self.envs.append(env)
        response = self.responses.get(tuple(command))
        if response is None:
            return ProcessResult(returncode=1, command=list(command))
        if callable(response):
            return response()
        if isinstance(response, ProcessResult):
            return response
        return ProcessResult(returncode=0, stdout=response, command=list(command))

    def commands_run(self, tool: str) -> List[List[str]]:
        return [call for call in self.calls if call[0] == tool]


@pytest.fixture
def host_responses() -> Dict[Tuple[str, ...], Response]:
    """Responses of every report command on a laptop with one SMART-capable disk."""
    return {
        ("dmidecode", "-t", "system"): DMIDECODE_SYSTEM,
        ("dmidecode", "-t", "baseboard"): DMIDECODE_BASEBOARD,
        ("dmidecode", "-t", "memory"): DMIDECODE_MEMORY,
        ("dmidecode", "-t", "bios"): DMIDECODE_BIOS,
        ("lshw", "-class", "processor"): LSHW_PROCESSOR,
        ("lshw", "-class", "network"): LSHW_NETWORK,
        ("lshw", "-class", "display"): "",
        ("lsusb",): LSUSB,
        ("lsblk", "-d", "-o", "NAME,SIZE,MODEL"): LSBLK_MODELS,
        ("lsblk", "-dn", "-o", "NAME,TYPE"): LSBLK_TYPES,
        ("lspci",): LSPCI,
        ("uname", "-a"): UNAME,
        ("ip", "addr", "show"): IP_ADDR,
        ("uptime", "-p"): UPTIME,
        ("sensors",): SENSORS,
        ("smartctl", "-i", "/dev/sda"): SMARTCTL_INFO_SUPPORTED,
        ("smartctl", "-H", "/dev/sda"): SMARTCTL_HEALTH,
        ("smartctl", "-i", "/dev/nvme0n1"): SMARTCTL_INFO_NVME,
    }


@pytest.fixture
def make_runner(host_responses):
    """Factory building a FakeRunner over the host responses plus overrides."""

    def _make(missing: Iterable[str] = (), responses: Optional[Dict] = None) -> FakeRunner:
        merged = dict(host_responses)
        merged.update(responses or {})
        return FakeRunner(responses=merged, missing=missing)

    return _make


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(autouse=True)
def all_dev_nodes_are_block_devices(monkeypatch):
    """Treat every /dev path as a block device so tests don't depend on the host."""
    monkeypatch.setattr("hwreport.utils.system.disk_health.is_block_device", lambda path: True)

"""Bridge pattern: remotes that work with any device."""

from __future__ import annotations

import copy

_U8_MAX = 255
_U16_MAX = 65535


class Device:
    """A device with power, volume and channel."""

    label = "device"

    def __init__(self) -> None:
        self.is_enabled = False
        self._volume = 30
        self._channel = 1

    def enable(self) -> None:
        self.is_enabled = True

    def disable(self) -> None:
        self.is_enabled = False

    @property
    def volume(self) -> int:
        """Volume in percent, capped at 100."""
        return self._volume

    @volume.setter
    def volume(self, percent: int) -> None:
        if not 0 <= percent <= _U8_MAX:
            raise ValueError(f"volume out of range: {percent}")
        self._volume = min(percent, 100)

    @property
    def channel(self) -> int:
        return self._channel

    @channel.setter
    def channel(self, channel: int) -> None:
        if not 0 <= channel <= _U16_MAX:
            raise ValueError(f"channel out of range: {channel}")
        self._channel = channel

    def status(self) -> str:
        """The status block as text."""
        state = "enabled" if self.is_enabled else "disabled"
        rule = "------------------------------------"
        return (
            f"{rule}\n"
            f"| I'm {self.label}.\n"
            f"| I'm {state}\n"
            f"| Current volume is {self.volume}%\n"
            f"| Current channel is {self.channel}\n"
            f"{rule}\n"
        )

    def print_status(self) -> str:
        """Print the status block and return it."""
        text = self.status()
        print(text)
        return text


class Radio(Device):
    label = "radio"


class Tv(Device):
    label = "TV set"


class BasicRemote:
    """Controls a device through its public operations."""

    def __init__(self, device: Device) -> None:
        self.device = device

    def power(self) -> None:
        print("Remote: power toggle")
        if self.device.is_enabled:
            self.device.disable()
        else:
            self.device.enable()

    def volume_down(self) -> None:
        print("Remote: volume down")
        self.device.volume = self.device.volume - 10

    def volume_up(self) -> None:
        print("Remote: volume up")
        self.device.volume = self.device.volume + 10

    def channel_down(self) -> None:
        print("Remote: channel down")
        self.device.channel = self.device.channel - 1

    def channel_up(self) -> None:
        print("Remote: channel up")
        self.device.channel = self.device.channel + 1


class AdvancedRemote(BasicRemote):
    """A remote that can also mute."""

    def mute(self) -> None:
        print("Remote: mute")
        self.device.volume = 0


def exercise_device(device: Device) -> tuple[Device, Device]:
    """Drive a copy with a basic remote and the device with an advanced one."""
    print("Tests with basic remote.")
    basic_remote = BasicRemote(copy.copy(device))
    basic_remote.power()
    basic_remote.device.print_status()

    print("Tests with advanced remote.")
    advanced_remote = AdvancedRemote(device)
    advanced_remote.power()
    advanced_remote.mute()
    advanced_remote.device.print_status()

    return basic_remote.device, advanced_remote.device


def demo() -> None:
    exercise_device(Tv())
    exercise_device(Radio())
"""Playback adjustment frames (EQU2, RVA2, RBUF, SEEK)."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import CHANNEL_TYPES, INTERPOLATION_METHODS
from ..utils import be_to_signed
from .base import Frame, FrameBody


@dataclass(frozen=True)
class EqualisationBand:
    # Frequency in units of 1/2 Hz, adjustment in units of 1/512 dB
    frequency: int
    adjustment: int

    @property
    def frequency_hz(self) -> float:
        return self.frequency / 2

    @property
    def adjustment_db(self) -> float:
        return self.adjustment / 512


@dataclass(frozen=True)
class EqualisationFrame(Frame):
    """EQU2: interpolation method, identification and adjustment points."""

    interpolation: int
    identification: str
    bands: Tuple[EqualisationBand, ...]

    title = "Equalisation Frame"

    @property
    def interpolation_description(self) -> str:
        return INTERPOLATION_METHODS.get(self.interpolation, "unknown")

    @staticmethod
    def from_body(body: FrameBody) -> "EqualisationFrame":
        interpolation = body.byte()
        identification = body.latin1()
        bands = []
        while body.remaining > 0:
            frequency = body.uint(2)
            adjustment = be_to_signed(body.read(2))
            bands.append(EqualisationBand(frequency, adjustment))
        return EqualisationFrame(body.header, interpolation, identification, tuple(bands))


@dataclass(frozen=True)
class VolumeAdjustment:
    channel: int
    adjustment: int  # 1/512 dB
    peak_bits: int
    peak: int

    @property
    def channel_description(self) -> str:
        return CHANNEL_TYPES.get(self.channel, "unknown")

    @property
    def adjustment_db(self) -> float:
        return self.adjustment / 512


@dataclass(frozen=True)
class RelativeVolumeFrame(Frame):
    """RVA2: per-channel volume adjustment and peak volume."""

    identification: str
    channels: Tuple[VolumeAdjustment, ...]

    title = "Relative Volume Adjustment Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "RelativeVolumeFrame":
        identification = body.latin1()
        channels = []
        while body.remaining > 0:
            channel = body.byte()
            adjustment = be_to_signed(body.read(2))
            peak_bits = body.byte()
            peak = body.uint((peak_bits + 7) // 8)
            channels.append(VolumeAdjustment(channel, adjustment, peak_bits, peak))
        return RelativeVolumeFrame(body.header, identification, tuple(channels))


@dataclass(frozen=True)
class RecommendedBufferFrame(Frame):
    """RBUF: buffer size, embedded info flag and optional next-tag offset."""

    buffer_size: int
    embedded_info: bool
    offset: Optional[int]

    title = "Recommended Buffer Size Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "RecommendedBufferFrame":
        buffer_size = body.uint(3)
        embedded_info = bool(body.byte() & 0x01)
        offset = body.uint(4) if body.remaining else None
        return RecommendedBufferFrame(body.header, buffer_size, embedded_info, offset)


@dataclass(frozen=True)
class SeekFrame(Frame):
    """SEEK: minimum offset from the end of this tag to the next tag."""

    offset: int

    title = "Seek Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "SeekFrame":
        return SeekFrame(body.header, body.uint(4))

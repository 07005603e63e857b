from __future__ import annotations

from dataclasses import dataclass

from .devices import DeviceService


@dataclass(slots=True)
class ServiceRegistry:
    """Centralised container for the services available to the UI."""

    devices: DeviceService | None = None

    async def close(self) -> None:
        if self.devices is not None:
            await self.devices.close()


__all__ = ["ServiceRegistry"]

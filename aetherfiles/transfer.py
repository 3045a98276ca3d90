"""Progress and notification texts for sending files over Bluetooth."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

TRANSFER_TITLE = "Bluetooth Transfer"
FINISHED_TITLE = "Finished sending item(s)"
NOTIFICATION_ICON = "bluetooth-active-symbolic"


def _new_notification_id() -> str:
    return f"bluetooth-share-{time.time_ns() // 1000}"


@dataclass
class ShareProgress:
    """Counts of a batch of files being sent to one device."""

    device_name: str
    total: int
    notification_id: str = field(default_factory=_new_notification_id)
    successful: int = 0
    failed: int = 0

    def __post_init__(self) -> None:
        if self.total < 1:
            raise ValueError("a share needs at least one file")

    @property
    def pending(self) -> int:
        return self.total - self.successful - self.failed

    @property
    def finished(self) -> bool:
        return self.pending <= 0

    def start_message(self) -> str:
        return f"Starting transfer to {self.device_name}..."

    def progress_message(self, status: Optional[str], transferred: int = 0,
                         size: int = 0) -> Optional[str]:
        """Text for a progress update, or None when the status warrants none."""
        if status == "active" or transferred > 0:
            percent = (transferred * 100) // size if size > 0 else 0
            return f"Sending item to {self.device_name}... ({percent}%)"
        if status == "queued":
            return f"Waiting for {self.device_name} to accept..."
        return None

    def record(self, success: bool) -> bool:
        """Count one finished file; returns True when the batch is complete."""
        if self.finished:
            raise RuntimeError("all files of this share are already accounted for")
        if success:
            self.successful += 1
        else:
            self.failed += 1
        return self.finished

    def summary(self) -> str:
        if self.failed == 0:
            return f"Successfully sent {self.successful} file(s) to {self.device_name}."
        return (f"Finished with errors: {self.successful} sent, "
                f"{self.failed} failed to {self.device_name}.")
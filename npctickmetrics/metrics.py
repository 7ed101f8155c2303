"""Runtime tick metrics with Prometheus text exposition."""

from __future__ import annotations

import threading
from collections.abc import Mapping


class Metrics:
    """Thread-safe holder of the latest tick statistics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.tick_count: int = 0
        self.tick_duration_last: float = 0.0
        self.active_npc_count: int = 0
        self.zone_active_counts: dict[str, int] = {}
        self.zone_sleeping_count: int = 0

    def record_tick(
        self,
        duration: float,
        active_count: int,
        zone_counts: Mapping[str, int] | None,
        sleeping_count: int,
    ) -> None:
        """Count one tick and replace the latest tick statistics."""
        with self._lock:
            self.tick_count += 1
            self.tick_duration_last = float(duration)
            self.active_npc_count = active_count
            self.zone_active_counts = dict(zone_counts or {})
            self.zone_sleeping_count = sleeping_count

    def prometheus_text(self) -> str:
        """Render the metrics in the Prometheus text exposition format."""
        with self._lock:
            lines = [
                "# HELP npc_tick_total Total number of ticks",
                "# TYPE npc_tick_total counter",
                f"npc_tick_total {self.tick_count}",
                "# HELP npc_tick_duration_seconds Last tick duration in seconds",
                "# TYPE npc_tick_duration_seconds gauge",
                f"npc_tick_duration_seconds {self.tick_duration_last:f}",
                "# HELP npc_active_count Active NPC count by zone",
                "# TYPE npc_active_count gauge",
            ]
            if not self.zone_active_counts:
                lines.append(f"npc_active_count {self.active_npc_count}")
            else:
                # Sorted by zone id so the output is stable.
                for zone in sorted(self.zone_active_counts):
                    label = zone or "global"
                    count = self.zone_active_counts[zone]
                    lines.append(f'npc_active_count{{zone="{label}"}} {count}')
            lines += [
                "# HELP npc_sleeping_count Total sleeping NPCs",
                "# TYPE npc_sleeping_count gauge",
                f"npc_sleeping_count {self.zone_sleeping_count}",
            ]
        return "\n".join(lines) + "\n"
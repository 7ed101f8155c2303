# npctickmetrics

Runtime metrics for an NPC simulation loop, exposed in the Prometheus text
exposition format.

A `Metrics` object, from the `npctickmetrics.metrics` module, holds the
statistics of the latest simulation tick:

- `tick_count`: the total number of ticks recorded,
- `tick_duration_last`: how long the last tick took, in seconds,
- `active_npc_count`: the overall number of active NPCs,
- `zone_active_counts`: the number of active NPCs per zone id,
- `zone_sleeping_count`: the number of NPCs in sleeping zones.

Updates and reads are guarded by a lock, so one thread can record ticks
while another renders the metrics text.

## Installation

```
pip install npctickmetrics
```

## Usage

```python
from npctickmetrics.metrics import Metrics

metrics = Metrics()
metrics.record_tick(0.032, 15, {"meadow": 10, "forest": 5}, 20)

print(metrics.prometheus_text(), end="")
```

Output:

```
# HELP npc_tick_total Total number of ticks
# TYPE npc_tick_total counter
npc_tick_total 1
# HELP npc_tick_duration_seconds Last tick duration in seconds
# TYPE npc_tick_duration_seconds gauge
npc_tick_duration_seconds 0.032000
# HELP npc_active_count Active NPC count by zone
# TYPE npc_active_count gauge
npc_active_count{zone="forest"} 5
npc_active_count{zone="meadow"} 10
# HELP npc_sleeping_count Total sleeping NPCs
# TYPE npc_sleeping_count gauge
npc_sleeping_count 20
```

`record_tick(duration, active_count, zone_counts, sleeping_count)` adds one
to the tick count and replaces all other values with the ones given. The
zone counts are copied; `None` is taken as no zones.

`prometheus_text()` returns the whole exposition text, ending in a newline.
The tick duration is written with six decimal places. Zones are listed in
sorted order, and a zone with an empty id is reported as `global`. When no
per-zone counts are recorded, a single unlabelled `npc_active_count` line
carries the overall active count instead.

## What it does not do

The package only records values and renders them as text. It does not run
an HTTP server or a `/metrics` endpoint, does not time ticks itself, and does
not keep any history beyond the tick count and the latest values.

## Running the tests

```
pip install -e ".[test]"
pytest
```
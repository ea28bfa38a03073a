from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduleResult

IDLE = "idle"
PREEMPTED = "preempted"
FINISHED = "finished"

_END_MARKS = {IDLE: " ", PREEMPTED: ">", FINISHED: "*"}
_COLORS = ["red", "green", "yellow", "blue", "magenta", "cyan"]


@dataclass
class GanttSegment:
    label: str
    start_time: int
    end_time: int
    kind: str

    @property
    def width(self) -> int:
        return max(1, self.end_time - self.start_time)


def gantt_segments(result: ScheduleResult) -> List[GanttSegment]:
    """
    Split a schedule into consecutive segments covering time 0 to the
    makespan. Gaps become idle segments; each slice is tagged with whether
    its process finished at the end of it or went back to the ready queue.
    """
    finishes = {(p.pid, p.completion_time) for p in result.processes}
    segments: List[GanttSegment] = []
    last_time = 0

    for sl in sorted(result.timeline, key=lambda s: s.start_time):
        if sl.start_time > last_time:
            segments.append(GanttSegment(IDLE, last_time, sl.start_time, IDLE))
        kind = FINISHED if (sl.pid, sl.end_time) in finishes else PREEMPTED
        segments.append(GanttSegment(sl.pid, sl.start_time, sl.end_time, kind))
        last_time = sl.end_time

    return segments


def time_marks(segments: List[GanttSegment]) -> str:
    if not segments:
        return ""
    marks = "0"
    for seg in segments:
        label = str(seg.end_time)
        marks += label.rjust(max(seg.width, len(label) + 1))
    return marks


def build_rich_gantt(result: ScheduleResult) -> tuple[Panel, str]:
    """
    Build a Rich Panel with the coloured chart and a string of time marks.

    The bottom row marks where a slice ends: ``*`` when the process
    finished, ``>`` when it was preempted.
    """
    segments = gantt_segments(result)
    if not segments:
        return Panel("No execution", title="Gantt Chart"), ""

    pid_to_color: Dict[str, str] = {}

    def pid_color(pid: str) -> str:
        if pid not in pid_to_color:
            pid_to_color[pid] = _COLORS[len(pid_to_color) % len(_COLORS)]
        return pid_to_color[pid]

    bar = Text()
    labels = Text()
    ends = Text()

    for seg in segments:
        width = seg.width
        if seg.kind == IDLE:
            bar.append("." * width, style="dim")
            labels.append(seg.label[:width].ljust(width), style="dim italic")
        else:
            bar.append(" " * width, style=f"on {pid_color(seg.label)}")
            labels.append(seg.label[:width].ljust(width), style="bold")
        ends.append(" " * (width - 1) + _END_MARKS[seg.kind])

    table = Table.grid(padding=(0, 0))
    table.add_row(bar)
    table.add_row(labels)
    table.add_row(ends)

    subtitle = "* finished  > preempted" if result.quantum is not None else "* finished"
    return Panel.fit(table, title="Gantt Chart", subtitle=subtitle), time_marks(segments)

"""Process Memory: resident, virtual and heap byte counts of the running server.

Invariants:
    - rss and vms are always present
    - heap is the data segment psutil reports (Linux/BSD `data`, Windows
      `private`); None on platforms that report neither (macOS)
"""

import psutil


def memory_usage() -> dict[str, int | None]:
    """Snapshot of this process's memory, in bytes."""
    info = psutil.Process().memory_info()
    heap = getattr(info, "data", None)
    if heap is None:
        heap = getattr(info, "private", None)
    return {"rss": info.rss, "vms": info.vms, "heap": heap}

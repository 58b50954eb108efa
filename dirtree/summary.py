"""Text blocks for per-root summaries and the multi-root grand total."""

from __future__ import annotations

from .tree_model.stats import Statistics

TOTAL_COLUMN_WIDTH = 16


def format_root_header(root: str) -> str:
    return f"\nDirectory: {root}"


def format_root_summary(stats: Statistics) -> str:
    """Summary block printed after one root's listing."""
    lines = [
        f"  # of files:        {stats.files}",
        f"  # of directories:  {stats.dirs}",
        f"  # of links:        {stats.links}",
        f"  # of pipes:        {stats.fifos}",
        f"  # of sockets:      {stats.socks}",
    ]
    if stats.others:
        lines.append(f"  # of others:       {stats.others}")
    lines.append(f"  total file size:   {stats.size} bytes")
    lines.append(f"  total blocks:      {stats.blocks}")
    return "\n".join(lines)


def format_grand_total(total: Statistics, root_count: int, verbose: bool) -> str:
    """Grand-total block; size and blocks are only reported in verbose mode."""
    width = TOTAL_COLUMN_WIDTH
    lines = [
        f"Analyzed {root_count} directories:",
        f"  total # of files:        {total.files:>{width}}",
        f"  total # of directories:  {total.dirs:>{width}}",
        f"  total # of links:        {total.links:>{width}}",
        f"  total # of pipes:        {total.fifos:>{width}}",
        f"  total # of sockets:      {total.socks:>{width}}",
    ]
    if total.others:
        lines.append(f"  total # of others:       {total.others:>{width}}")
    if verbose:
        lines.append(f"  total file size:         {total.size:>{width}}")
        lines.append(f"  total # of blocks:       {total.blocks:>{width}}")
    return "\n".join(lines)


__all__ = ["format_grand_total", "format_root_header", "format_root_summary"]

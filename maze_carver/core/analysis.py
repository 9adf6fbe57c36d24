from typing import Iterable, List
from maze_carver.core.events import WallRemoval

class MazeAnalyzer:
    @staticmethod
    def calculate_stats(rows: int, cols: int, removals: Iterable[WallRemoval]):
        """
        Treats the wall removals as undirected edges over rows*cols cells.
        The maze is perfect when every edge joins two in-bounds neighbours,
        no edge closes a cycle, and everything ends up in one component.
        """
        total = rows * cols
        parent: List[int] = list(range(total))

        def find(i):
            while parent[i] != i:
                parent[i] = parent[parent[i]]
                i = parent[i]
            return i

        degree = [0] * total
        passages = 0
        invalid = 0
        cycles = 0
        components = total

        for event in removals:
            passages += 1
            (r1, c1), (r2, c2) = event.current, event.previous
            if not (0 <= r1 < rows and 0 <= c1 < cols and 0 <= r2 < rows and 0 <= c2 < cols):
                invalid += 1
                continue
            if not event.is_adjacent():
                invalid += 1
                continue

            a = r1 * cols + c1
            b = r2 * cols + c2
            degree[a] += 1
            degree[b] += 1

            ra, rb = find(a), find(b)
            if ra == rb:
                cycles += 1
            else:
                parent[ra] = rb
                components -= 1

        dead_ends = sum(1 for d in degree if d == 1)
        corridors = sum(1 for d in degree if d == 2)
        junctions = sum(1 for d in degree if d >= 3)

        connected = components == 1
        return {
            "cells": total,
            "passages": passages,
            "invalid_passages": invalid,
            "cycles": cycles,
            "components": components,
            "connected": connected,
            "perfect": connected and invalid == 0 and cycles == 0 and passages == total - 1,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

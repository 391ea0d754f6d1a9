#!/usr/bin/env python3
"""
Reference battleships AI.

Speaks the tester protocol on stdin/stdout and never makes a bad shot:
cells around a sunk ship and diagonal to a hit are known to be water and
are skipped. Wounded ships are finished off before the scan continues.

Usage:
    python -m battleships tools/sample_ai.py
"""

import sys


class Hunter:
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.known = set()
        self.hits = set()
        self.open_hits = set()

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def around(self, cell, diagonal=True, straight=True):
        x, y = cell
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if not (dx or dy):
                    continue
                is_diagonal = dx and dy
                if (is_diagonal and diagonal) or (not is_diagonal and straight):
                    neighbour = (x + dx, y + dy)
                    if self.in_bounds(neighbour):
                        yield neighbour

    def ship_cells(self, cell):
        ship, frontier = {cell}, [cell]
        while frontier:
            current = frontier.pop()
            for neighbour in self.around(current, diagonal=False):
                if neighbour in self.hits and neighbour not in ship:
                    ship.add(neighbour)
                    frontier.append(neighbour)
        return ship

    def report(self, effect, cell):
        self.known.add(cell)
        if effect == "Miss":
            return
        self.hits.add(cell)
        self.known.update(self.around(cell, straight=False))
        if effect == "Wound":
            self.open_hits.add(cell)
            return
        for part in self.ship_cells(cell):
            self.open_hits.discard(part)
            self.known.update(self.around(part))

    def next_shot(self):
        for hit in sorted(self.open_hits):
            for neighbour in self.around(hit, diagonal=False):
                if neighbour not in self.known:
                    return neighbour
        for y in range(self.height):
            for x in range(self.width):
                if (x, y) not in self.known:
                    return x, y
        return 0, 0


def main():
    hunter = None
    for line in sys.stdin:
        parts = line.split()
        if not parts:
            continue
        if parts[0] == "Init":
            hunter = Hunter(int(parts[1]), int(parts[2]))
        else:
            hunter.report(parts[0], (int(parts[1]), int(parts[2])))
        x, y = hunter.next_shot()
        print(f"{x} {y}", flush=True)


if __name__ == "__main__":
    main()

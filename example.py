#!/usr/bin/env python3
"""
Example usage of the termlife package.
"""

from termlife import Grid, PatternLibrary


def main():
    """Run a glider across a small grid."""
    grid = Grid(10)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to_grid(grid, offset_x=1, offset_y=1)

        print("Initial state:")
        print(grid)
        print(f"Population: {grid.population}")
        print()

        for generation in range(1, 13):
            grid.next()
            print(f"Generation {generation}:")
            print(grid)
            print(f"Population: {grid.population}, tracked cells: {grid.tracked_count}")
            print()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Demo: Using relgraph as a Python library.

This shows how to use relgraph programmatically, not just as a CLI tool.
"""

from pathlib import Path

from relgraph.graph.builder import GraphBuilder
from relgraph.graph.models import QueryStatus
from relgraph.graph.query import GraphQuery


def main():
    data_file = Path(__file__).parent / "family.txt"

    # 1. Build the relationship graph
    print("Building relationship graph...")
    builder = GraphBuilder()
    store = builder.build_from_file(data_file)

    stats = builder.get_stats()
    print(f"  People: {stats['total_nodes']}")
    print(f"  Relationships: {stats['total_edges']}")

    # 2. Query the graph
    query = GraphQuery(store)

    print("\n--- Orphans ---")
    for name in query.orphans():
        print(f"  {name}")

    print("\n--- Alice's siblings ---")
    print(f"  {query.siblings('Alice').siblings}")

    print("\n--- Eleanor's descendants ---")
    result = query.descendants("Eleanor")
    for d in result.descendants:
        print(f"  {'  ' * d.depth}{d.generation} {d.name}")
    if result.status == QueryStatus.CYCLE_DETECTED:
        print("  Cycle found!")

    print("\n--- How is Daisy related to Fiona? ---")
    path = query.shortest_path("Daisy", "Fiona")
    for description in path.descriptions:
        print(f"  {description}")

    print("\n--- Alice's first cousins ---")
    print(f"  {query.cousins('Alice', 1, 0).cousins}")

    print("\n--- Daisy's first cousins once removed ---")
    print(f"  {query.cousins('Daisy', 1, 1).cousins}")


if __name__ == "__main__":
    main()

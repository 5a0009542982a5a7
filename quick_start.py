import argparse
import logging

import networkx as nx

from forest_filter.filtering import filter_hierarchy
from forest_filter.hierarchy.array_hierarchy import ArrayHierarchy
from forest_filter.hierarchy.io import (
    extract_branch,
    hierarchy_from_digraph,
    hierarchy_to_frame,
    render_forest,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Filter a sample forest by node id.")
    parser.add_argument(
        "--modulus",
        type=int,
        default=3,
        help="Drop every node whose id is divisible by this value.",
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.modulus < 1:
        parser.error("--modulus must be at least 1")
    return args


def main(argv=None):
    """
    A small, self-contained example of filtering a flat forest.
    """
    args = parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    print("--- Starting Filter Example ---")

    # 1. --- Build the forest ---
    hierarchy = ArrayHierarchy(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
        [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2],
    )
    print(f"\nStep 1: Built a forest with {hierarchy.size()} nodes:")
    print(render_forest(hierarchy))

    # 2. --- Filter ---
    filtered = filter_hierarchy(hierarchy, lambda node_id: node_id % args.modulus != 0)
    print(
        f"\nStep 2: Removed ids divisible by {args.modulus} and their branches; "
        f"{filtered.size()} nodes remain:"
    )
    print(render_forest(filtered))
    print(filtered.format_string())

    # 3. --- Tabulate ---
    print("\nStep 3: Filtered forest as a table:")
    print(hierarchy_to_frame(filtered).to_string())

    # 4. --- Inspect a single branch ---
    last_root = max(i for i in range(hierarchy.size()) if hierarchy.depth(i) == 0)
    print(f"\nStep 4: Branch rooted at node {hierarchy.node_id(last_root)}:")
    print(render_forest(extract_branch(hierarchy, last_root)))

    # 5. --- Same thing starting from a networkx forest ---
    G = nx.DiGraph()
    G.add_edges_from([(100, 101), (101, 102), (100, 103), (200, 201)])
    from_graph = filter_hierarchy(
        hierarchy_from_digraph(G), lambda node_id: node_id != 101
    )
    print("\nStep 5: Filtered a networkx forest (dropping 101):")
    print(render_forest(from_graph))

    print("\n--- Example Complete ---")


if __name__ == "__main__":
    main()

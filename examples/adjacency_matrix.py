"""Example pipeline: an undirected graph given as an adjacency matrix."""

from kale_graph import parse_source, print_graph

TEXT = """
a, b, c, d
0 0 1 1   // row a
0 2 1 0   // row b: one loop
1 1 0 0
1 0 0 4   // row d: two loops
"""


def main() -> None:
    graph = parse_source(TEXT)
    print(print_graph(graph), end="")


if __name__ == "__main__":
    main()

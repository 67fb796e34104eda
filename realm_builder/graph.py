"""
Weighted undirected graph with Prim's minimum spanning tree
"""


class Node:
    """Node in graph"""

    def __init__(self, index, data=None):
        self.index = index
        self.data = data
        self.links = {}  # Map<Node, Float>

    def __repr__(self):
        return f"Node({self.index})"

    def link(self, other, weight):
        """Link to another node"""
        self.links[other] = weight
        other.links[self] = weight


class Graph:
    """Graph over indexed nodes"""

    def __init__(self):
        self.nodes = []

    def add(self, data=None):
        """Add a node"""
        node = Node(len(self.nodes), data)
        self.nodes.append(node)
        return node

    @staticmethod
    def complete(items, weight):
        """Graph linking every pair of items with weight(a, b)"""
        graph = Graph()
        for item in items:
            graph.add(item)
        for i, a in enumerate(graph.nodes):
            for b in graph.nodes[i + 1:]:
                a.link(b, weight(a.data, b.data))
        return graph

    def minimum_spanning_tree(self, start=0):
        """Prim's algorithm from node `start`.

        Returns edges (from_index, to_index, weight) in the order they were
        added. Visited nodes are scanned in the order they joined the tree
        and neighbours in link order; the first strict minimum wins ties.
        """
        if len(self.nodes) == 0:
            return []

        visited = [self.nodes[start]]
        in_tree = {self.nodes[start]}
        edges = []

        while len(visited) < len(self.nodes):
            best = None
            best_weight = float("inf")
            for node in visited:
                for neighbour, weight in node.links.items():
                    if neighbour in in_tree:
                        continue
                    if weight < best_weight:
                        best_weight = weight
                        best = (node, neighbour)

            if best is None:
                # Disconnected remainder
                break

            visited.append(best[1])
            in_tree.add(best[1])
            edges.append((best[0].index, best[1].index, best_weight))

        return edges

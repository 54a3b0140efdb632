#!/usr/bin/env python3
"""Basic usage examples for dotgraph."""

import networkx as nx

from dotgraph import Edge, Graph, Node
from dotgraph.visualization import GraphBuilder


def main():
    """Demonstrate basic dotgraph usage."""

    # Example 1: Build a graph by hand
    graph = Graph.create("Deployment").set_rankdir("LR").set_fontname("Arial")

    web = Node("web", "Web server").set_shape("box")
    db = Node("db", "Database").set_shape("cylinder")
    graph.set_node(web).set_node(db)
    graph.link(Edge(web, db).set_label("SQL"))

    # Example 2: Group nodes in a bordered cluster
    cluster = Graph.create("cluster_cache").set_label("Cache tier").set_style("dashed")
    redis = Node("redis", "Redis")
    cluster.set_node(redis)
    graph.add_graph(cluster)
    graph.link(Edge(web, redis))

    print(graph)

    # Example 3: Render it (requires Graphviz)
    graph.export("svg", "deployment.svg")

    # Example 4: Convert a NetworkX graph
    network = nx.DiGraph(name="Pipeline")
    network.add_node("extract", shape="box")
    network.add_node("load", shape="box")
    network.add_edge("extract", "load", label="rows")

    pipeline = GraphBuilder().build_graph(
        network,
        subgraphs={"cluster_etl": {"nodes": ["extract", "load"], "label": "ETL"}},
    )
    pipeline.save("pipeline.dot")

    print("All examples completed!")


if __name__ == "__main__":
    main()

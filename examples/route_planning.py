"""Route planning example.

Builds a small weighted road network, compares Dijkstra and Bellman-Ford,
then adds a toll rebate (a negative edge) that only Bellman-Ford accepts.
"""

import graph_algos as ga

roads = ga.graph({
    "depot": [("north", 4), ("east", 2)],
    "east": [("north", 1), ("harbor", 7)],
    "north": [("harbor", 3)],
})

fastest = ga.dijkstra(roads, "depot")
print(f"Distance to harbor: {fastest.distance('harbor')}")
print(f"Route: {fastest.path_to('harbor')}")

# Both algorithms agree on graphs without negative weights
assert ga.bellman_ford(roads, "depot").distances == fastest.distances

# A rebate on the east -> harbor road makes it the cheapest way in
roads.add_edge("east", ("harbor", -2))

try:
    ga.dijkstra(roads, "depot")
except ga.NegativeWeightViolation as e:
    print(f"Dijkstra refused: {e}")

with_rebate = ga.bellman_ford(roads, "depot")
print(f"Route with rebate: {with_rebate.path_to('harbor')} (total {with_rebate.distance('harbor')})")

# Delivery steps must run in dependency order
steps = ga.graph({
    "load": ["drive"],
    "drive": ["unload"],
    "inspect": ["load", "unload"],
})
print(f"Step order: {ga.topological_sort(steps)}")

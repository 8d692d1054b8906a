"""Meeting room conflict example for densegraph.

Rooms that share a wall are connected. Removing a room under renovation
drops all of its connections while the remaining rooms keep theirs.
"""

import densegraph as dg

# -----------------------------------------------------------------------------
# Floor plan
# -----------------------------------------------------------------------------

floor = dg.DenseGraph[str](capacity=6)
floor.add_vertices(["Atlas", "Borealis", "Cirrus", "Delta", "Equinox"])

for first, second in [
    ("Atlas", "Borealis"),
    ("Borealis", "Cirrus"),
    ("Cirrus", "Delta"),
    ("Delta", "Equinox"),
    ("Atlas", "Equinox"),
    ("Borealis", "Delta"),
]:
    floor.add_edge(first, second)

print(floor.to_readable())
print(f"{floor.vertices_count} rooms, {floor.edges_count} shared walls")

# -----------------------------------------------------------------------------
# Renovation
# -----------------------------------------------------------------------------

degree = floor.degree("Borealis")
floor.remove_vertex("Borealis")
print(f"\nBorealis closed, {degree} shared walls no longer matter")
print(floor.to_readable())

# The freed slot is available for a new room.
floor.add_vertex("Fjord")
floor.add_edge("Fjord", "Atlas")
print(f"\nFjord neighbours: {floor.neighbours('Fjord')}")

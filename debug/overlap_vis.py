import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))


import drawforge
from drawforge import CircleInput, PolygonInput, RectangleInput

from plot_geometry import plot_resolution

store = drawforge.FeatureStore()
store.submit(RectangleInput((4.880, 52.360), (4.900, 52.375)))
store.submit(CircleInput.from_edge_point((4.905, 52.372), (4.912, 52.372)))

shapes = [
    PolygonInput(((4.890, 52.365), (4.910, 52.365), (4.910, 52.380), (4.890, 52.380))),
    RectangleInput((4.885, 52.362), (4.895, 52.370)),
]

for shape in shapes:
    existing = store.features
    candidate = drawforge.synthesize(shape)
    resolution = store.submit(shape)
    print(f"{shape.category.value}: {resolution.decision.value}")
    plot_resolution(existing, candidate, resolution, title=f"Drawing a {shape.category.value}")

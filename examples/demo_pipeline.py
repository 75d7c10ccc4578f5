# examples/demo_pipeline.py
from cgdt.pipeline import triangulate

if __name__ == "__main__":
    pts = [(0, 0), (100, 0), (90, 100), (0, 100), (50, 50), (20, 70), (75, 30)]

    _, ours = triangulate(pts, backend="internal")
    _, ref = triangulate(pts, backend="scipy")
    print("Triangles (internal):", sorted(tuple(sorted(t)) for t in ours))
    print("Triangles (scipy):   ", sorted(tuple(sorted(t)) for t in ref))
    print("Same:", {frozenset(t) for t in ours} == {frozenset(t) for t in ref})

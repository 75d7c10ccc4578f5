# examples/demo_delaunay.py
import logging
import sys

from cgdt.pipeline import build

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # файл з рядками "x<TAB>y"; за замовчуванням: examples/points.txt
    src = sys.argv[1] if len(sys.argv) > 1 else "examples/points.txt"
    result = build(src, svg_path="delaunay.svg")

    if not result.ok:
        print(f"FAILED ({result.error.name}): {result.message}")
        sys.exit(1)

    print("\n".join(result.log))
    print("Points:   ", len(result.points))
    print("Triangles:", len(result.triangles))
    print("Wrote delaunay.svg")

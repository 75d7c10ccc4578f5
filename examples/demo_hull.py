import logging

from cgdt.geom import Pt
from cgdt.hull import ConvexHull3D

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # куб + внутрішні точки
    raw = [
        (0,0,0), (10,0,0), (10,10,0), (0,10,0),
        (0,0,10), (10,0,10), (10,10,10), (0,10,10),
        (5,5,5), (2,8,3), (8,2,7)
    ]
    hull = ConvexHull3D([Pt(*p) for p in raw], check=True)

    report = hull.validate()
    print("VALIDATION:", report)

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off: можна глянути в MeshLab/ParaView.")
